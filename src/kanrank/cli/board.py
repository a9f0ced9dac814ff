"""Handlers for 'kanrank board' commands."""

import json
from pathlib import Path

from kanrank.cli._common import (
    column_summary,
    error,
    format_column_line,
    load_board_or_die,
    output_json,
    output_result,
    save,
)
from kanrank.model.backfill import backfill_board
from kanrank.model.importer import ImportFormatError, import_csv, import_json
from kanrank.siblings import rebalance


def board_summary(args) -> int:
    """Show board summary: title, columns, card counts."""
    board = load_board_or_die(args.file, args.json)
    columns = [column_summary(c) for c in board.visible_columns()]

    if args.json:
        output_json({"title": board.title, "max_rank_length": board.max_rank_length, "columns": columns})
    else:
        print(board.title)
        for c in columns:
            print(format_column_line(c, indent="  "))

    return 0


def board_reorder(args) -> int:
    """Rewrite every rank on the board with evenly spaced keys."""
    board = load_board_or_die(args.file, args.json)

    columns = board.visible_columns()
    rebalance(columns)
    cards = 0
    for col in columns:
        cards += len(rebalance(col.visible_cards()))

    save(board)

    output_result(
        {"columns": len(columns), "cards": cards},
        f"Reordered {len(columns)} columns and {cards} cards",
        args.json,
    )
    return 0


def board_backfill(args) -> int:
    """Rank records that have no rank or an out-of-order one."""
    board = load_board_or_die(args.file, args.json, legacy=True)

    changed = backfill_board(board)
    save(board)

    output_result({"changed": changed}, f"Backfilled {changed} ranks", args.json)
    return 0


def board_import(args) -> int:
    """Append lists and cards from a JSON or CSV export."""
    board = load_board_or_die(args.file, args.json)
    source = Path(args.source)
    fmt = args.format or ("csv" if source.suffix.lower() == ".csv" else "json")

    try:
        text = source.read_text(encoding="utf-8")
    except OSError as e:
        error(f"Can't read {source}: {e}", args.json)

    try:
        if fmt == "csv":
            counts = import_csv(board, text)
        else:
            try:
                payload = json.loads(text)
            except json.JSONDecodeError as e:
                raise ImportFormatError(f"Invalid JSON file: {e}") from e
            counts = import_json(board, payload)
    except ImportFormatError as e:
        error(str(e), args.json)

    save(board)

    output_result(
        counts,
        f"Imported {counts['columns']} columns and {counts['cards']} cards",
        args.json,
    )
    return 0
