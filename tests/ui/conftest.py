"""Fixtures for UI tests."""

import pytest

from kanrank.model.card import create_card
from kanrank.model.column import find_column
from kanrank.model.writer import new_board, save_board


@pytest.fixture
def board_path(tmp_path):
    """Saved board with cards A and B in Backlog, Doing and Done empty."""
    path = tmp_path / "kanrank.yaml"
    board = new_board("UI Board")
    backlog = find_column(board, "1")
    create_card(board, "A", column=backlog)
    create_card(board, "B", column=backlog)
    save_board(board, path)
    return path
