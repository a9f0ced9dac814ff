"""Shared fixtures for CLI tests."""

import pytest
import yaml

from kanrank.model.card import create_card
from kanrank.model.column import find_column
from kanrank.model.writer import new_board, save_board


@pytest.fixture
def board_file(tmp_path):
    """A saved board (Backlog, Doing, Done) with two cards in Backlog."""
    path = tmp_path / "kanrank.yaml"
    board = new_board("Test Board")
    backlog = find_column(board, "1")
    create_card(board, "First card", "Description one.", column=backlog)
    create_card(board, "Second card", "Description two.", column=backlog)
    save_board(board, path)
    return path


@pytest.fixture
def cramped_file(tmp_path):
    """Board whose first column and first card pair have no rank between them."""
    path = tmp_path / "kanrank.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "title": "Cramped",
                "columns": [
                    {
                        "id": "1",
                        "name": "Todo",
                        "rank": "a",
                        "cards": [{"id": "1", "title": "A", "rank": "a"}, {"id": "2", "title": "B", "rank": "a0"}],
                    },
                    {"id": "2", "name": "Done", "rank": "a0"},
                ],
            }
        )
    )
    return path
