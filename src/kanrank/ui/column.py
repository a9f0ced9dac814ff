"""Column widgets for kanrank UI."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Rule, Static

from kanrank.models import Column
from kanrank.ui.card import CardWidget, widget_id


class ColumnWidget(Vertical):
    """A single column on the board, cards in rank order."""

    DEFAULT_CSS = """
    ColumnWidget {
        width: 1fr;
        height: auto;
        min-height: 100%;
        min-width: 25;
        max-width: 30;
        padding: 0 1;
        border-right: tall $surface-lighten-1;
    }
    ColumnWidget > .column-title {
        width: 100%;
        text-align: center;
        text-style: bold;
    }
    ColumnWidget > Rule.-horizontal {
        margin: 0;
    }
    """

    def __init__(self, column: Column):
        super().__init__(id=widget_id("column", column.id))
        self.column = column

    def compose(self) -> ComposeResult:
        yield Static(self.column.name, classes="column-title")
        yield Rule()
        for card in self.column.visible_cards():
            yield CardWidget(card, self.column)
