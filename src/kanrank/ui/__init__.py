"""Textual UI for kanrank."""

from kanrank.ui.app import KanrankApp
from kanrank.ui.board import BoardScreen

__all__ = ["BoardScreen", "KanrankApp"]
