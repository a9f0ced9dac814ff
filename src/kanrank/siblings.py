"""Rank arithmetic over a sibling group (cards in a column, columns in a board).

Items are any objects with ``rank`` and ``id`` attributes. Functions here
never reorder the caller's sequence; they compute ranks or assign them.
"""

import logging

from kanrank.rank import InvalidArgumentError, InvalidRangeError, evenly_spaced_keys, key_between

logger = logging.getLogger(__name__)


def sort_key(item) -> tuple[str, str]:
    """Rank first, id breaks ties between equal ranks."""
    return (item.rank, str(item.id))


def sort_by_rank(items) -> list:
    """Return items in display order."""
    return sorted(items, key=sort_key)


def rank_between(before, after) -> str:
    """Rank for a record placed between two neighbours, either may be None."""
    lower = before.rank if before is not None else None
    upper = after.rank if after is not None else None
    return key_between(lower, upper)


def append_rank(items) -> str:
    """Rank that sorts after every item."""
    ordered = sort_by_rank(items)
    return rank_between(ordered[-1] if ordered else None, None)


def neighbours_at(items, position: int, moving=None) -> tuple:
    """Return the (before, after) items around a 0-based insert position.

    ``moving`` is left out of the group first, so a record can be placed
    relative to its own siblings. Positions past the end append.
    """
    if position < 0:
        raise InvalidArgumentError(f"position must not be negative, got {position}")
    ordered = [item for item in sort_by_rank(items) if item is not moving]
    position = min(position, len(ordered))
    before = ordered[position - 1] if position > 0 else None
    after = ordered[position] if position < len(ordered) else None
    return before, after


def needs_rebalance(items, max_length: int) -> bool:
    """True if any rank has grown past max_length or two ranks collide."""
    seen = set()
    for item in items:
        if len(item.rank) > max_length or item.rank in seen:
            return True
        seen.add(item.rank)
    return False


def rebalance(items) -> list[str]:
    """Rewrite every rank in the group with evenly spaced keys, keeping order."""
    ordered = sort_by_rank(items)
    if not ordered:
        return []
    keys = evenly_spaced_keys(len(ordered))
    for item, key in zip(ordered, keys):
        logger.debug("rank %s: %s -> %s", item.id, item.rank, key)
        item.rank = key
    return keys


def fit_rank(group, before, after) -> str:
    """Rank between two neighbours in group, respacing group when nothing fits.

    Hand-edited files can hold neighbours like "a" and "a0" with no key
    between them; rebalancing the group gives them room.
    """
    try:
        return rank_between(before, after)
    except InvalidRangeError:
        logger.info("no rank fits between neighbours, rebalancing %d items", len(group))
        rebalance(group)
        return rank_between(before, after)
