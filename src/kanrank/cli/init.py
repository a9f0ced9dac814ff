"""Handler for 'kanrank init'."""

from pathlib import Path

from kanrank.cli._common import load_board_or_die, output_json
from kanrank.model.writer import new_board, save_board


def init_board(args) -> int:
    """Create a board file with the default columns unless one exists."""
    path = Path(args.file).resolve()

    if path.exists():
        board = load_board_or_die(str(path), args.json)
        columns = [c.name for c in board.visible_columns()]
        if args.json:
            output_json({"file": str(path), "columns": columns, "created": False})
        else:
            print(f"Board already initialized at {path}")
        return 0

    board = new_board(args.title or path.parent.name or "kanrank")
    save_board(board, path)

    columns = [c.name for c in board.visible_columns()]
    if args.json:
        output_json({"file": str(path), "columns": columns, "created": True})
    else:
        print(f"Initialized kanrank board at {path}")
        print(f"Columns: {', '.join(columns)}")

    return 0
