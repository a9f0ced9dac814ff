"""Tests for sibling group rank arithmetic."""

from dataclasses import dataclass

import pytest

from kanrank.rank import InvalidArgumentError
from kanrank.siblings import (
    append_rank,
    fit_rank,
    needs_rebalance,
    neighbours_at,
    rebalance,
    sort_by_rank,
)


@dataclass
class Item:
    id: str
    rank: str


def _group(*ranks):
    return [Item(str(i + 1), r) for i, r in enumerate(ranks)]


def test_sort_by_rank_breaks_ties_by_id():
    items = [Item("2", "b"), Item("1", "b"), Item("3", "a")]
    assert [i.id for i in sort_by_rank(items)] == ["3", "1", "2"]


def test_append_rank_empty_group():
    assert append_rank([]) == "n"


def test_append_rank_sorts_last():
    items = _group("n", "5", "t")
    assert append_rank(items) > "t"


def test_neighbours_at_middle():
    items = _group("a", "c", "e")
    before, after = neighbours_at(items, 1)
    assert (before.rank, after.rank) == ("a", "c")


def test_neighbours_at_ends():
    items = _group("a", "c")
    assert neighbours_at(items, 0) == (None, items[0])
    assert neighbours_at(items, 2) == (items[1], None)
    assert neighbours_at(items, 99) == (items[1], None)


def test_neighbours_at_skips_moving_item():
    items = _group("a", "c", "e")
    before, after = neighbours_at(items, 1, moving=items[0])
    assert (before.rank, after.rank) == ("c", "e")


def test_neighbours_at_rejects_negative():
    with pytest.raises(InvalidArgumentError):
        neighbours_at(_group("a"), -1)


def test_fit_rank_lands_between_neighbours():
    items = _group("1", "9")
    assert fit_rank(items, items[0], items[1]) == "5"
    assert fit_rank(items, None, items[0]) < "1"
    assert [i.rank for i in items] == ["1", "9"]


def test_fit_rank_respaces_group_without_room():
    items = _group("a", "a0", "b")
    rank = fit_rank(items, items[0], items[1])
    assert items[0].rank < rank < items[1].rank
    assert [i.rank for i in items] == ["9", "R", "j"]


def test_fit_rank_respaces_below_minimum_key():
    items = _group("0", "n")
    rank = fit_rank(items, None, items[0])
    assert rank < items[0].rank


def test_needs_rebalance_on_length():
    assert not needs_rebalance(_group("a", "aVVV"), max_length=4)
    assert needs_rebalance(_group("a", "aVVVV"), max_length=4)


def test_needs_rebalance_on_duplicates():
    assert needs_rebalance(_group("a", "a"), max_length=12)


def test_rebalance_keeps_order():
    items = _group("t", "a0V", "aVVVVVVV", "b")
    order = [i.id for i in sort_by_rank(items)]
    keys = rebalance(items)
    assert keys == sorted(keys)
    assert [i.id for i in sort_by_rank(items)] == order
    assert {len(i.rank) for i in items} == {1}


def test_rebalance_empty_group():
    assert rebalance([]) == []
