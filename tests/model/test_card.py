"""Tests for card mutation operations."""

import pytest

from kanrank.model.card import (
    archive_card,
    create_card,
    find_card,
    find_card_column,
    move_card,
    move_card_to,
    reorder_column,
)
from kanrank.model.column import find_column
from kanrank.models import Board, Card, Column, MoveError


def _titles(column):
    return [c.title for c in column.visible_cards()]


def _ranks(column):
    return {c.id: c.rank for c in column.cards}


def test_find_card(board):
    assert find_card(board, "2").title == "B"
    assert find_card(board, "999") is None


def test_find_card_column(board):
    assert find_card_column(board, "1") is find_column(board, "1")
    assert find_card_column(board, "4") is find_column(board, "2")
    assert find_card_column(board, "999") is None


def test_create_card_appends_to_first_column(board):
    card = create_card(board, "New", "Body.")
    assert card.id == "5"
    assert card.body == "Body."
    assert card.rank == "r"
    assert _titles(find_column(board, "1")) == ["A", "B", "C", "New"]


def test_create_card_at_position(board):
    backlog = find_column(board, "1")
    first = create_card(board, "First", column=backlog, position=0)
    middle = create_card(board, "Middle", column=backlog, position=2)
    assert first.rank == "7"
    assert _titles(backlog) == ["First", "A", "Middle", "B", "C"]
    assert "F" < middle.rank < "U"


def test_create_card_in_given_column(board):
    done = find_column(board, "3")
    card = create_card(board, "Shipped", column=done)
    assert card.rank == "n"
    assert _titles(done) == ["Shipped"]


def test_create_card_archived_column(board):
    done = find_column(board, "3")
    done.archived = True
    with pytest.raises(MoveError):
        create_card(board, "Nope", column=done)


def test_create_card_no_columns():
    with pytest.raises(MoveError):
        create_card(Board(title="Empty"), "Nope")


def test_move_card_between_neighbours(board):
    backlog = find_column(board, "1")
    before = _ranks(backlog)
    move_card(board, "3", backlog, before_id="1", after_id="2")
    assert _titles(backlog) == ["A", "C", "B"]
    after = _ranks(backlog)
    assert after["3"] == "N"
    assert {k: v for k, v in after.items() if k != "3"} == {k: v for k, v in before.items() if k != "3"}


def test_move_card_only_before_neighbour(board):
    """A lone before_id means right after that card, not at the end."""
    backlog = find_column(board, "1")
    move_card(board, "3", backlog, before_id="1")
    assert _titles(backlog) == ["A", "C", "B"]


def test_move_card_only_after_neighbour(board):
    backlog = find_column(board, "1")
    move_card(board, "3", backlog, after_id="1")
    assert _titles(backlog) == ["C", "A", "B"]
    assert find_card(board, "3").rank == "7"


def test_move_card_cross_column_appends(board):
    backlog = find_column(board, "1")
    doing = find_column(board, "2")
    move_card(board, "1", doing)
    assert _titles(backlog) == ["B", "C"]
    assert _titles(doing) == ["D", "A"]
    assert find_card(board, "1").rank == "t"


def test_move_card_cross_column_between(board):
    doing = find_column(board, "2")
    move_card(board, "2", doing, after_id="4")
    assert _titles(doing) == ["B", "D"]
    assert find_card_column(board, "2") is doing


def test_move_card_neighbour_in_other_column(board):
    backlog = find_column(board, "1")
    with pytest.raises(MoveError, match="not in column"):
        move_card(board, "1", backlog, before_id="4")


def test_move_card_neighbours_out_of_order(board):
    backlog = find_column(board, "1")
    with pytest.raises(MoveError):
        move_card(board, "3", backlog, before_id="2", after_id="1")


def test_move_card_neighbours_not_adjacent(board):
    backlog = find_column(board, "1")
    before = _ranks(backlog)
    with pytest.raises(MoveError, match="not next to each other"):
        move_card(board, "4", backlog, before_id="1", after_id="3")
    assert _ranks(backlog) == before
    assert find_card_column(board, "4") is find_column(board, "2")


def _cramped_board():
    """Column whose cards "a" and "a0" have no key between them."""
    col = Column(id="1", name="Todo", cards=[Card(id="1", title="A", rank="a"), Card(id="2", title="B", rank="a0")])
    other = Column(id="2", name="Done", rank="z", cards=[Card(id="3", title="C", rank="n")])
    return Board(columns=[col, other]), col


def test_create_card_without_room_respaces_column():
    board, col = _cramped_board()
    card = create_card(board, "Mid", column=col, position=1)
    assert _titles(col) == ["A", "Mid", "B"]
    assert [c.rank for c in col.visible_cards()] == ["F", "U", "j"]


def test_move_card_without_room_respaces_column():
    board, col = _cramped_board()
    move_card(board, "3", col, before_id="1", after_id="2")
    assert _titles(col) == ["A", "C", "B"]
    assert len({c.rank for c in col.cards}) == 3


def test_move_card_own_neighbour(board):
    backlog = find_column(board, "1")
    with pytest.raises(MoveError):
        move_card(board, "1", backlog, before_id="1")


def test_move_card_unknown(board):
    with pytest.raises(MoveError):
        move_card(board, "999", find_column(board, "1"))


def test_move_card_to_archived_column(board):
    done = find_column(board, "3")
    done.archived = True
    with pytest.raises(MoveError):
        move_card(board, "1", done)


def test_move_card_to_position(board):
    backlog = find_column(board, "1")
    move_card_to(board, "1", backlog, position=2)
    assert _titles(backlog) == ["B", "C", "A"]
    move_card_to(board, "3", backlog, position=0)
    assert _titles(backlog) == ["C", "B", "A"]


def test_move_card_to_position_past_end(board):
    doing = find_column(board, "2")
    move_card_to(board, "2", doing, position=10)
    assert _titles(doing) == ["D", "B"]


def test_move_card_to_no_position_appends(board):
    backlog = find_column(board, "1")
    move_card_to(board, "1", backlog)
    assert _titles(backlog) == ["B", "C", "A"]


def test_long_rank_triggers_rebalance():
    col = Column(id="1", name="Todo", cards=[Card(id="1", title="A", rank="a"), Card(id="2", title="B", rank="b")])
    other = Column(id="2", name="Done", rank="z", cards=[Card(id="3", title="C", rank="n")])
    board = Board(columns=[col, other], meta={"max_rank_length": 1})

    move_card(board, "3", col, before_id="1", after_id="2")

    assert _titles(col) == ["A", "C", "B"]
    assert [c.rank for c in col.visible_cards()] == ["9", "R", "j"]


def test_duplicate_ranks_are_settled_before_insert():
    col = Column(id="1", name="Todo", cards=[Card(id="1", title="A", rank="n"), Card(id="2", title="B", rank="n")])
    board = Board(columns=[col])

    create_card(board, "C", column=col)

    assert _titles(col) == ["A", "B", "C"]
    assert len({c.rank for c in col.cards}) == 3


def test_reorder_column(board):
    backlog = find_column(board, "1")
    reorder_column(board, backlog, ["3", "1", "2"])
    assert _titles(backlog) == ["C", "A", "B"]
    assert [c.rank for c in backlog.visible_cards()] == ["9", "R", "j"]


def test_reorder_column_must_name_every_card(board):
    backlog = find_column(board, "1")
    with pytest.raises(MoveError):
        reorder_column(board, backlog, ["3", "1"])


def test_archive_card(board):
    backlog = find_column(board, "1")
    archive_card(board, "2")
    card = find_card(board, "2")
    assert card.archived
    assert card.rank == "U"
    assert _titles(backlog) == ["A", "C"]


def test_archived_cards_keep_ids_unique(board):
    archive_card(board, "4")
    card = create_card(board, "New")
    assert card.id == "5"
