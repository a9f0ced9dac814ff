"""CLI argument parser and dispatch for kanrank."""

import argparse
import os

from kanrank.cli.board import board_backfill, board_import, board_reorder, board_summary
from kanrank.cli.card import card_add, card_archive, card_list, card_move, card_reorder
from kanrank.cli.column import column_add, column_archive, column_list, column_move, column_rename, column_reorder
from kanrank.cli.init import init_board
from kanrank.cli.rank import rank_after, rank_before, rank_between, rank_spread
from kanrank.model.loader import DEFAULT_FILE


def build_parser() -> argparse.ArgumentParser:
    """Build the full CLI argument parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--file",
        default=os.environ.get("KANRANK_FILE", DEFAULT_FILE),
        help=f"Board file (default: $KANRANK_FILE or {DEFAULT_FILE})",
    )
    common.add_argument("--json", action="store_true", help="Machine-readable JSON output")
    common.add_argument("-v", "--verbose", action="count", default=0, help="Log to stderr (-vv for debug)")

    parser = argparse.ArgumentParser(
        prog="kanrank",
        description="Kanban board ordered by fractional rank keys",
        parents=[common],
    )

    nouns = parser.add_subparsers(dest="noun")

    # --- init ---
    init_p = nouns.add_parser("init", help="Create a board file", parents=[common])
    init_p.add_argument("--title", help="Board title (default: directory name)")
    init_p.set_defaults(func=init_board)

    # --- rank ---
    rank_p = nouns.add_parser("rank", help="Compute rank keys", parents=[common])
    rank_verbs = rank_p.add_subparsers(dest="verb")

    between_p = rank_verbs.add_parser("between", help="Key between two keys", parents=[common])
    between_p.add_argument("lower", help="Lower key, or - for none")
    between_p.add_argument("upper", help="Upper key, or - for none")
    between_p.set_defaults(func=rank_between)

    after_p = rank_verbs.add_parser("after", help="Key after a key", parents=[common])
    after_p.add_argument("prev", nargs="?", help="Previous key (omit for the first key)")
    after_p.set_defaults(func=rank_after)

    before_p = rank_verbs.add_parser("before", help="Key before a key", parents=[common])
    before_p.add_argument("next", help="Next key")
    before_p.set_defaults(func=rank_before)

    spread_p = rank_verbs.add_parser("spread", help="Evenly spaced keys", parents=[common])
    spread_p.add_argument("count", type=int, help="Number of keys")
    spread_p.set_defaults(func=rank_spread)

    # --- board ---
    board_p = nouns.add_parser("board", help="Board operations", parents=[common])
    board_verbs = board_p.add_subparsers(dest="verb")

    board_summary_p = board_verbs.add_parser("summary", help="Show board summary", parents=[common])
    board_summary_p.set_defaults(func=board_summary)

    board_reorder_p = board_verbs.add_parser("reorder", help="Respace every rank on the board", parents=[common])
    board_reorder_p.set_defaults(func=board_reorder)

    board_backfill_p = board_verbs.add_parser("backfill", help="Rank legacy records", parents=[common])
    board_backfill_p.set_defaults(func=board_backfill)

    board_import_p = board_verbs.add_parser("import", help="Import lists and cards", parents=[common])
    board_import_p.add_argument("source", help="JSON or CSV export file")
    board_import_p.add_argument("--format", choices=["json", "csv"], help="Input format (default: from extension)")
    board_import_p.set_defaults(func=board_import)

    # board with no verb = summary
    board_p.set_defaults(func=board_summary)

    # --- column ---
    col_p = nouns.add_parser("column", help="Column operations", parents=[common])
    col_verbs = col_p.add_subparsers(dest="verb")

    col_list_p = col_verbs.add_parser("list", help="List columns", parents=[common])
    col_list_p.set_defaults(func=column_list)

    col_add_p = col_verbs.add_parser("add", help="Create a column", parents=[common])
    col_add_p.add_argument("name", help="Column name")
    col_add_p.add_argument("--position", type=int, help="Position (1-indexed, default: last)")
    col_add_p.set_defaults(func=column_add)

    col_move_p = col_verbs.add_parser("move", help="Move a column", parents=[common])
    col_move_p.add_argument("id", help="Column ID")
    col_move_p.add_argument("--position", type=int, required=True, help="New position (1-indexed)")
    col_move_p.set_defaults(func=column_move)

    col_reorder_p = col_verbs.add_parser("reorder", help="Set the order of all columns", parents=[common])
    col_reorder_p.add_argument("ids", nargs="+", help="Every visible column ID, in the new order")
    col_reorder_p.set_defaults(func=column_reorder)

    col_rename_p = col_verbs.add_parser("rename", help="Rename a column", parents=[common])
    col_rename_p.add_argument("id", help="Column ID")
    col_rename_p.add_argument("new_name", help="New column name")
    col_rename_p.set_defaults(func=column_rename)

    col_archive_p = col_verbs.add_parser("archive", help="Archive a column", parents=[common])
    col_archive_p.add_argument("id", help="Column ID")
    col_archive_p.set_defaults(func=column_archive)

    # column with no verb = list
    col_p.set_defaults(func=column_list)

    # --- card ---
    card_p = nouns.add_parser("card", help="Card operations", parents=[common])
    card_verbs = card_p.add_subparsers(dest="verb")

    card_list_p = card_verbs.add_parser("list", help="List cards", parents=[common])
    card_list_p.add_argument("--column", dest="column", help="Filter by column ID")
    card_list_p.set_defaults(func=card_list)

    card_add_p = card_verbs.add_parser("add", help="Create a card", parents=[common])
    card_add_p.add_argument("title", help="Card title")
    card_add_p.add_argument("--body", default="", help="Card body text")
    card_add_p.add_argument("--column", dest="column", help="Target column ID")
    card_add_p.add_argument("--position", type=int, help="Position in column (1-indexed)")
    card_add_p.set_defaults(func=card_add)

    card_move_p = card_verbs.add_parser("move", help="Move a card", parents=[common])
    card_move_p.add_argument("id", help="Card ID")
    card_move_p.add_argument("--column", dest="column", required=True, help="Target column ID")
    card_move_p.add_argument("--before", help="Card that should sort just before it")
    card_move_p.add_argument("--after", help="Card that should sort just after it")
    card_move_p.add_argument("--position", type=int, help="Position in column (1-indexed)")
    card_move_p.set_defaults(func=card_move)

    card_reorder_p = card_verbs.add_parser("reorder", help="Set the order of a column's cards", parents=[common])
    card_reorder_p.add_argument("column", help="Column ID")
    card_reorder_p.add_argument("ids", nargs="+", help="Every visible card ID in the column, in the new order")
    card_reorder_p.set_defaults(func=card_reorder)

    card_archive_p = card_verbs.add_parser("archive", help="Archive a card", parents=[common])
    card_archive_p.add_argument("id", help="Card ID")
    card_archive_p.set_defaults(func=card_archive)

    # card with no verb = list
    card_p.set_defaults(func=card_list, column=None)

    return parser
