"""Shared fixtures for model tests."""

import pytest

from kanrank.models import Board, Card, Column


def make_board(meta=None) -> Board:
    """Board with Backlog (cards 1-3), Doing (card 4) and an empty Done."""
    backlog = Column(
        id="1",
        name="Backlog",
        rank="F",
        cards=[
            Card(id="1", title="A", rank="F"),
            Card(id="2", title="B", rank="U"),
            Card(id="3", title="C", rank="j"),
        ],
    )
    doing = Column(id="2", name="Doing", rank="U", cards=[Card(id="4", title="D", rank="n")])
    done = Column(id="3", name="Done", rank="j")
    return Board(title="Test Board", columns=[backlog, doing, done], meta=meta or {})


@pytest.fixture
def board():
    return make_board()
