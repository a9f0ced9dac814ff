"""Give legacy records valid, order-preserving ranks."""

import logging

from kanrank.models import Board
from kanrank.rank import is_valid_key, key_after

logger = logging.getLogger(__name__)


def _legacy_order(items) -> list:
    """Order by integer position where present, then by file order."""
    indexed = list(enumerate(items))
    indexed.sort(key=lambda pair: (pair[1].position is None, pair[1].position or 0, pair[0]))
    return [item for _, item in indexed]


def backfill_group(items) -> int:
    """Rank one sibling group in its legacy order. Returns how many ranks changed.

    A record keeps its rank when that rank is valid and sorts after the
    previous record's; otherwise it gets the key right after it.
    """
    changed = 0
    prev = None
    for item in _legacy_order(items):
        rank = item.rank
        if not (is_valid_key(rank) and (prev is None or rank > prev)):
            rank = key_after(prev)
            logger.debug("backfill %s: %r -> %s", item.id, item.rank, rank)
            item.rank = rank
            changed += 1
        item.position = None
        prev = rank
    return changed


def backfill_board(board: Board) -> int:
    """Backfill the columns of a board and the cards of every column."""
    changed = backfill_group(board.columns)
    for col in board.columns:
        changed += backfill_group(col.cards)
    if changed:
        logger.info("backfilled %d ranks on board %r", changed, board.title)
    return changed
