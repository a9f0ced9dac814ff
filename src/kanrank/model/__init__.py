"""Board model operations."""

from kanrank.model.backfill import backfill_board
from kanrank.model.card import (
    archive_card,
    create_card,
    find_card,
    find_card_column,
    move_card,
    move_card_to,
    reorder_column,
)
from kanrank.model.column import (
    archive_column,
    create_column,
    find_column,
    move_column,
    rename_column,
    reorder_columns,
)
from kanrank.model.importer import ImportFormatError, import_csv, import_json
from kanrank.model.loader import BoardFileError, load_board
from kanrank.model.writer import new_board, save_board

__all__ = [
    "BoardFileError",
    "ImportFormatError",
    "archive_card",
    "archive_column",
    "backfill_board",
    "create_card",
    "create_column",
    "find_card",
    "find_card_column",
    "find_column",
    "import_csv",
    "import_json",
    "load_board",
    "move_card",
    "move_card_to",
    "move_column",
    "new_board",
    "rename_column",
    "reorder_column",
    "reorder_columns",
    "save_board",
]
