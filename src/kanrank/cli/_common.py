"""Shared helpers for CLI command handlers."""

import json
import logging
import sys
from pathlib import Path

from kanrank.model.card import find_card as _find_card
from kanrank.model.column import find_column as _find_column
from kanrank.model.loader import BoardFileError, load_board
from kanrank.model.writer import save_board
from kanrank.models import Board, Card, Column


def configure_logging(verbosity: int) -> None:
    """Log to stderr: warnings by default, -v for info, -vv for debug."""
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity and verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
        level=level,
    )


def load_board_or_die(path: str, json_mode: bool, legacy: bool = False) -> Board:
    """Load board from file. Exit 1 with message if it can't be read."""
    try:
        return load_board(Path(path).resolve(), legacy=legacy)
    except BoardFileError as e:
        error(str(e), json_mode)


def find_column(board: Board, col_id: str, json_mode: bool) -> Column:
    """Lookup column by id. Exit 1 listing available columns if not found."""
    col = _find_column(board, col_id)
    if col is not None:
        return col
    available = [f"  {c.id}  {c.name}" for c in board.visible_columns()]
    msg = f"Column '{col_id}' not found. Available:\n" + "\n".join(available)
    error(msg, json_mode)


def find_card(board: Board, card_id: str, json_mode: bool) -> Card:
    """Lookup card by id. Exit 1 if not found."""
    card = _find_card(board, card_id)
    if card is not None:
        return card
    error(f"Card '{card_id}' not found.", json_mode)


def save(board: Board) -> Path:
    """Save board back to its file."""
    return save_board(board)


def output_json(data: dict | list) -> None:
    """Write JSON to stdout."""
    print(json.dumps(data, indent=2))


def output_result(data: dict, text: str, json_mode: bool) -> None:
    """Output mutation result as JSON or plain text."""
    if json_mode:
        output_json(data)
    else:
        print(text)


def error(message: str, json_mode: bool) -> None:
    """Print error to stderr and exit 1."""
    if json_mode:
        print(json.dumps({"error": message}), file=sys.stderr)
    else:
        print(f"error: {message}", file=sys.stderr)
    sys.exit(1)


def to_index(position: int | None, json_mode: bool) -> int | None:
    """Convert a 1-indexed command line position to a 0-based index."""
    if position is None:
        return None
    if position < 1:
        error(f"Position must be 1 or more, got {position}", json_mode)
    return position - 1


def card_summary(card: Card) -> dict:
    return {"id": card.id, "title": card.title, "rank": card.rank}


def column_summary(col: Column) -> dict:
    return {
        "id": col.id,
        "name": col.name,
        "rank": col.rank,
        "cards": len(col.visible_cards()),
    }


def format_column_line(c: dict, indent: str = "") -> str:
    """Format a column summary dict as a text line."""
    cards = "card" if c["cards"] == 1 else "cards"
    return f"{indent}{c['id']}  {c['name']:<16} {c['cards']} {cards}  [{c['rank']}]"
