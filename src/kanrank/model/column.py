"""Column mutation operations for kanrank boards."""

import logging

from kanrank.models import Board, Column, MoveError, next_id
from kanrank.rank import evenly_spaced_keys
from kanrank.siblings import append_rank, fit_rank, needs_rebalance, neighbours_at, rebalance

logger = logging.getLogger(__name__)


def find_column(board: Board, column_id: str) -> Column | None:
    """Lookup column by id, archived columns included."""
    for col in board.columns:
        if col.id == column_id:
            return col
    return None


def settle_columns(board: Board) -> bool:
    """Rebalance the board's columns if their ranks are too long or collide."""
    visible = board.visible_columns()
    if not needs_rebalance(visible, board.max_rank_length):
        return False
    logger.info("rebalancing %d columns on board %r", len(visible), board.title)
    rebalance(visible)
    return True


def create_column(board: Board, name: str, position: int | None = None) -> Column:
    """Create a new column and add it to the board.

    Appends by default; position is a 0-based index among visible columns.
    Returns the created column.
    """
    settle_columns(board)
    visible = board.visible_columns()
    if position is None:
        rank = append_rank(visible)
    else:
        rank = fit_rank(visible, *neighbours_at(visible, position))

    col = Column(id=next_id(c.id for c in board.columns), name=name, rank=rank)
    board.columns.append(col)
    logger.debug("created column %s %r at rank %s", col.id, name, rank)
    settle_columns(board)
    return col


def move_column(board: Board, column: Column, position: int) -> None:
    """Move column to a 0-based position among the visible columns.

    Only the moved column's rank changes, unless the move forces a rebalance.
    """
    if column.archived:
        raise MoveError(f"Column '{column.id}' is archived")
    settle_columns(board)
    others = [c for c in board.visible_columns() if c is not column]
    before, after = neighbours_at(others, position)
    column.rank = fit_rank(others, before, after)
    logger.debug("moved column %s to rank %s", column.id, column.rank)
    settle_columns(board)


def reorder_columns(board: Board, column_ids: list[str]) -> None:
    """Give the visible columns new evenly spaced ranks in the order of column_ids."""
    visible = {c.id: c for c in board.visible_columns()}
    if sorted(column_ids) != sorted(visible):
        raise MoveError("Column order must name every visible column exactly once")
    if not column_ids:
        return
    for col_id, key in zip(column_ids, evenly_spaced_keys(len(column_ids))):
        visible[col_id].rank = key


def rename_column(board: Board, column: Column, new_name: str) -> None:
    """Rename a column."""
    column.name = new_name


def archive_column(board: Board, column_id: str) -> None:
    """Archive a column, keeping its rank in case it is restored."""
    col = find_column(board, column_id)
    if col is not None:
        col.archived = True
