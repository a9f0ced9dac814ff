"""Handlers for 'kanrank column' commands."""

from kanrank.cli._common import (
    column_summary,
    error,
    find_column,
    format_column_line,
    load_board_or_die,
    output_json,
    save,
    to_index,
)
from kanrank.model.column import archive_column, create_column, move_column, rename_column, reorder_columns
from kanrank.models import MoveError
from kanrank.rank import RankError


def column_list(args) -> int:
    """List all visible columns in rank order."""
    board = load_board_or_die(args.file, args.json)
    items = [column_summary(c) for c in board.visible_columns()]

    if args.json:
        output_json(items)
    else:
        for c in items:
            print(format_column_line(c))

    return 0


def column_add(args) -> int:
    """Create a new column."""
    board = load_board_or_die(args.file, args.json)

    try:
        col = create_column(board, args.name, position=to_index(args.position, args.json))
    except RankError as e:
        error(str(e), args.json)
    save(board)

    if args.json:
        output_json({"id": col.id, "name": col.name, "rank": col.rank})
    else:
        print(f'Created column "{col.name}" (id {col.id}, rank {col.rank})')

    return 0


def column_move(args) -> int:
    """Move a column to a new position."""
    board = load_board_or_die(args.file, args.json)
    col = find_column(board, args.id, args.json)

    try:
        move_column(board, col, to_index(args.position, args.json))
    except (MoveError, RankError) as e:
        error(str(e), args.json)
    save(board)

    if args.json:
        output_json({"id": col.id, "name": col.name, "position": args.position, "rank": col.rank})
    else:
        print(f'Moved column "{col.name}" to position {args.position} (rank {col.rank})')

    return 0


def column_reorder(args) -> int:
    """Put the visible columns in the given order with evenly spaced ranks."""
    board = load_board_or_die(args.file, args.json)

    try:
        reorder_columns(board, args.ids)
    except MoveError as e:
        error(str(e), args.json)
    save(board)

    items = [column_summary(c) for c in board.visible_columns()]
    if args.json:
        output_json(items)
    else:
        for c in items:
            print(format_column_line(c))

    return 0


def column_rename(args) -> int:
    """Rename a column."""
    board = load_board_or_die(args.file, args.json)
    col = find_column(board, args.id, args.json)

    old_name = col.name
    rename_column(board, col, args.new_name)
    save(board)

    if args.json:
        output_json({"id": col.id, "old_name": old_name, "new_name": args.new_name})
    else:
        print(f'Renamed column "{old_name}" to "{args.new_name}"')

    return 0


def column_archive(args) -> int:
    """Archive a column."""
    board = load_board_or_die(args.file, args.json)
    col = find_column(board, args.id, args.json)

    archive_column(board, col.id)
    save(board)

    if args.json:
        output_json({"id": col.id, "name": col.name})
    else:
        print(f'Archived column "{col.name}"')

    return 0
