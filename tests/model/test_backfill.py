"""Tests for legacy rank backfill."""

from kanrank.model.backfill import backfill_board, backfill_group
from kanrank.model.loader import board_from_dict
from kanrank.models import Card


def _card(id_, rank, position=None):
    return Card(id=id_, title=id_, rank=rank, position=position)


def test_backfill_missing_ranks():
    cards = [_card("a", None), _card("b", None), _card("c", None)]
    assert backfill_group(cards) == 3
    assert [c.rank for c in cards] == ["n", "o", "p"]


def test_backfill_keeps_valid_increasing_ranks():
    cards = [_card("a", "F"), _card("b", None), _card("c", "j")]
    assert backfill_group(cards) == 1
    assert [c.rank for c in cards] == ["F", "G", "j"]


def test_backfill_placeholder_ranks():
    """Records all stuck on the default rank get spread out in order."""
    cards = [_card("a", "n"), _card("b", "n"), _card("c", "n")]
    assert backfill_group(cards) == 2
    assert [c.rank for c in cards] == ["n", "o", "p"]


def test_backfill_follows_legacy_position():
    cards = [_card("a", None, position=2), _card("b", None, position=0), _card("c", None, position=1)]
    backfill_group(cards)
    ordered = sorted(cards, key=lambda c: c.rank)
    assert [c.id for c in ordered] == ["b", "c", "a"]
    assert all(c.position is None for c in cards)


def test_backfill_fixes_out_of_order_and_invalid():
    cards = [_card("a", "t"), _card("b", "5"), _card("c", "bad rank!")]
    backfill_group(cards)
    ordered = sorted(cards, key=lambda c: c.rank)
    assert [c.id for c in ordered] == ["a", "b", "c"]
    assert cards[0].rank == "t"


def test_backfill_board():
    board = board_from_dict(
        {
            "columns": [
                {"id": "1", "name": "A", "cards": [{"id": "1", "title": "x"}, {"id": "2", "title": "y", "rank": "F"}]},
                {"id": "2", "name": "B", "rank": "n"},
            ]
        },
        legacy=True,
    )
    changed = backfill_board(board)
    assert changed == 4
    assert [c.name for c in board.visible_columns()] == ["A", "B"]
    assert [c.title for c in board.columns[0].visible_cards()] == ["x", "y"]


def test_backfill_noop_on_ranked_board(board):
    assert backfill_board(board) == 0
