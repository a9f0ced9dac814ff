"""Board screen showing kanban columns and cards."""

from __future__ import annotations

import logging

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import Footer, Static

from kanrank.model.card import archive_card, move_card_to, settle_cards
from kanrank.model.writer import save_board
from kanrank.models import Board, MoveError
from kanrank.rank import RankError
from kanrank.siblings import rebalance
from kanrank.ui.card import CardWidget, widget_id
from kanrank.ui.column import ColumnWidget

logger = logging.getLogger(__name__)


class BoardScreen(Screen):
    """Main board screen showing all visible columns.

    Keyboard moves go through the model one card at a time, so each move
    changes exactly one rank unless the column needs a rebalance.
    """

    DEFAULT_CSS = """
    #board-title {
        width: 100%;
        text-align: center;
        text-style: bold;
        background: $boost;
    }
    """

    BINDINGS = [
        ("ctrl+up", "move_card(0, -1)", "Up"),
        ("ctrl+down", "move_card(0, 1)", "Down"),
        ("ctrl+left", "move_card(-1, 0)", "Left"),
        ("ctrl+right", "move_card(1, 0)", "Right"),
        ("r", "rebalance", "Respace"),
        ("delete", "archive", "Archive"),
        ("ctrl+s", "save", "Save"),
    ]

    def __init__(self, board: Board):
        super().__init__()
        self.board = board

    def compose(self) -> ComposeResult:
        yield Static(self.board.title, id="board-title")
        with Horizontal(id="columns"):
            for column in self.board.visible_columns():
                yield ColumnWidget(column)
        yield Footer()

    def on_mount(self) -> None:
        self.call_after_refresh(self._focus_first_card)

    def _focus_first_card(self) -> None:
        cards = list(self.query(CardWidget))
        if cards:
            cards[0].focus()

    def _focused_card(self) -> CardWidget | None:
        widget = self.focused
        return widget if isinstance(widget, CardWidget) else None

    async def _redraw(self, card_id: str | None = None) -> None:
        await self.recompose()
        if card_id is not None:
            found = self.query(f"#{widget_id('card', card_id)}")
            if found:
                found.first().focus()
                return
        self._focus_first_card()

    async def action_move_card(self, dx: int, dy: int) -> None:
        """Move the focused card one column sideways or one row up/down."""
        widget = self._focused_card()
        if widget is None:
            return
        card, column = widget.card, widget.column
        columns = self.board.visible_columns()
        row = column.visible_cards().index(card)
        col_index = columns.index(column) + dx
        if not 0 <= col_index < len(columns):
            return
        if dy and not 0 <= row + dy < len(column.visible_cards()):
            return

        try:
            move_card_to(self.board, card.id, columns[col_index], position=row + dy)
        except (MoveError, RankError) as e:
            self.notify(str(e), severity="error")
            return
        logger.debug("card %s now at rank %s", card.id, card.rank)
        await self._redraw(card.id)

    async def action_rebalance(self) -> None:
        """Respace every card rank in the focused card's column."""
        widget = self._focused_card()
        if widget is None:
            return
        rebalance(widget.column.visible_cards())
        await self._redraw(widget.card.id)

    async def action_archive(self) -> None:
        """Archive the focused card."""
        widget = self._focused_card()
        if widget is None:
            return
        archive_card(self.board, widget.card.id)
        settle_cards(self.board, widget.column)
        await self._redraw()

    def action_save(self) -> None:
        save_board(self.board)
        self.notify("Saved")
