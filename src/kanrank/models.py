"""Data models for kanrank boards."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from kanrank.rank import FIRST_KEY
from kanrank.siblings import sort_by_rank

DEFAULT_MAX_RANK_LENGTH = 12


class MoveError(ValueError):
    """A move or insert names neighbours that don't fit the target group."""


@dataclass
class Card:
    """A card in a column."""

    id: str
    title: str
    body: str = ""
    rank: str = FIRST_KEY
    archived: bool = False
    # Legacy integer ordering, only set when loading boards for backfill
    position: int | None = field(default=None, compare=False)


@dataclass
class Column:
    """A column (list) on the board, holding its cards."""

    id: str
    name: str
    rank: str = FIRST_KEY
    cards: list[Card] = field(default_factory=list)
    archived: bool = False
    position: int | None = field(default=None, compare=False)

    def visible_cards(self) -> list[Card]:
        """Non-archived cards in rank order."""
        return sort_by_rank(c for c in self.cards if not c.archived)


@dataclass
class Board:
    """The full board state."""

    title: str = ""
    columns: list[Column] = field(default_factory=list)
    meta: dict[str, Any] = field(default_factory=dict)
    path: str = ""

    def visible_columns(self) -> list[Column]:
        """Non-archived columns in rank order."""
        return sort_by_rank(c for c in self.columns if not c.archived)

    def all_cards(self):
        """Yield every card on the board, archived ones included."""
        for col in self.columns:
            yield from col.cards

    @property
    def max_rank_length(self) -> int:
        value = self.meta.get("max_rank_length")
        if isinstance(value, int) and not isinstance(value, bool) and value > 0:
            return value
        return DEFAULT_MAX_RANK_LENGTH


def next_id(ids) -> str:
    """Generate the id after the highest numeric id in ids.

    Non-numeric ids are ignored; an empty collection starts at "1".
    """
    highest = 0
    for id_ in ids:
        try:
            highest = max(highest, int(id_))
        except ValueError:
            continue
    return str(highest + 1)
