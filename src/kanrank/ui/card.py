"""Card widgets for kanrank UI."""

from __future__ import annotations

import re

from rich.text import Text
from textual.widgets import Static

from kanrank.models import Card, Column


def widget_id(prefix: str, record_id: str) -> str:
    """DOM id for a record; hand-edited board files may use any characters in ids."""
    return f"{prefix}-" + re.sub(r"[^A-Za-z0-9_-]", "_", record_id)


def card_label(card: Card) -> Text:
    """Card title with its rank underneath, dimmed."""
    return Text.assemble(card.title or card.id, "\n", (card.rank, "dim"))


class CardWidget(Static, can_focus=True):
    """A single card in a column."""

    DEFAULT_CSS = """
    CardWidget {
        width: 100%;
        height: auto;
        padding: 0 1;
        margin-bottom: 1;
        background: $surface;
    }
    CardWidget:focus {
        background: $primary;
    }
    """

    def __init__(self, card: Card, column: Column):
        super().__init__(card_label(card), id=widget_id("card", card.id))
        self.card = card
        self.column = column
