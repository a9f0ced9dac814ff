"""Main Textual application for kanrank."""

from __future__ import annotations

from pathlib import Path

from textual.app import App

from kanrank.model.loader import load_board
from kanrank.model.writer import new_board, save_board
from kanrank.models import Board
from kanrank.ui.board import BoardScreen


class KanrankApp(App):
    """Rank-ordered kanban board TUI."""

    TITLE = "kanrank"
    BINDINGS = [("ctrl+q", "quit", "Quit")]

    def __init__(self, path: Path):
        super().__init__()
        self.path = path
        self.board: Board | None = None

    def on_mount(self) -> None:
        if not self.path.exists():
            save_board(new_board(self.path.parent.name or "kanrank"), self.path)
        self.board = load_board(self.path)
        self.push_screen(BoardScreen(self.board))

    async def action_quit(self) -> None:
        """Save and quit."""
        if self.board:
            save_board(self.board)
        self.exit()
