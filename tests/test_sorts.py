"""
In-place sorting routines: the textbook examples, edge cases and tie behaviour.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

import pytest
from hypothesis import given, settings, strategies as st

from algokit import SortOrder, insertion_sort, merge_sort, selection_sort, sort_all
from algokit.validate import is_stable


@dataclass(frozen=True)
class Rec:
    """Orders by `key` only; `tag` tells equal keys apart."""

    key: int
    tag: int

    def __lt__(self, other: "Rec") -> bool:
        return self.key < other.key

    def __gt__(self, other: "Rec") -> bool:
        return self.key > other.key


IN_PLACE = [insertion_sort, selection_sort, sort_all]
STABLE = [insertion_sort, sort_all]


@pytest.mark.parametrize("sort_fn", IN_PLACE)
def test_nondecreasing(sort_fn) -> None:
    array = [5, 2, 4, 6, 1, 3]
    assert sort_fn(array, SortOrder.NONDECREASING) is None
    assert array == [1, 2, 3, 4, 5, 6]


@pytest.mark.parametrize("sort_fn", IN_PLACE)
def test_nonincreasing(sort_fn) -> None:
    array = [5, 2, 4, 6, 1, 3]
    sort_fn(array, SortOrder.NONINCREASING)
    assert array == [6, 5, 4, 3, 2, 1]


@pytest.mark.parametrize("sort_fn", IN_PLACE)
def test_negative(sort_fn) -> None:
    array = [5, 0, -8, -6, -1, 1]
    sort_fn(array, SortOrder.NONDECREASING)
    assert array == [-8, -6, -1, 0, 1, 5]


@pytest.mark.parametrize("sort_fn", IN_PLACE)
@pytest.mark.parametrize("order", [SortOrder.ASCENDING, SortOrder.DESCENDING])
def test_no_elements(sort_fn, order) -> None:
    array: List[int] = []
    sort_fn(array, order)
    assert array == []


@pytest.mark.parametrize("sort_fn", IN_PLACE)
@pytest.mark.parametrize("order", [SortOrder.ASCENDING, SortOrder.DESCENDING])
def test_one_element(sort_fn, order) -> None:
    array = [1]
    sort_fn(array, order)
    assert array == [1]


@pytest.mark.parametrize("sort_fn", IN_PLACE)
def test_strings(sort_fn) -> None:
    words = ["pear", "apple", "fig", "banana"]
    sort_fn(words, SortOrder.NONDECREASING)
    assert words == ["apple", "banana", "fig", "pear"]


@pytest.mark.parametrize("sort_fn", IN_PLACE)
@pytest.mark.parametrize("items", [[2, 1], [7], []])
def test_rejects_non_policy_order(sort_fn, items) -> None:
    with pytest.raises(TypeError):
        sort_fn(items, "ascending")


def test_merge_sort_rejects_non_policy_order_on_trivial_range() -> None:
    with pytest.raises(TypeError):
        merge_sort([], 0, 0, "asc")
    with pytest.raises(TypeError):
        merge_sort([3, 2, 1], 2, 1, "asc")


@pytest.mark.parametrize("sort_fn", STABLE)
@pytest.mark.parametrize("order", [SortOrder.NONDECREASING, SortOrder.NONINCREASING])
@settings(deadline=None, max_examples=60)
@given(keys=st.lists(st.integers(min_value=0, max_value=5), max_size=60))
def test_stable_sorts_keep_tie_order(sort_fn, order, keys: List[int]) -> None:
    records = [Rec(k, i) for i, k in enumerate(keys)]
    out = list(records)
    sort_fn(out, order)

    expected = sorted(records, key=lambda r: r.key, reverse=order is SortOrder.NONINCREASING)
    assert out == expected
    assert is_stable(records, out, key=lambda r: r.key)


def test_selection_sort_long_distance_swap_reorders_ties() -> None:
    records = [Rec(2, 0), Rec(2, 1), Rec(1, 2)]
    selection_sort(records, SortOrder.NONDECREASING)
    # The 1 is swapped with the first 2, jumping it past its equal neighbour.
    assert records == [Rec(1, 2), Rec(2, 1), Rec(2, 0)]
    assert not is_stable([Rec(2, 0), Rec(2, 1), Rec(1, 2)], records, key=lambda r: r.key)


def test_selection_sort_keeps_running_best_on_ties() -> None:
    # Candidates equal to the running best at i-1 never replace it.
    records = [Rec(1, 0), Rec(1, 1), Rec(1, 2)]
    selection_sort(records, SortOrder.NONINCREASING)
    assert records == [Rec(1, 0), Rec(1, 1), Rec(1, 2)]


def test_insertion_sort_already_ordered_is_untouched() -> None:
    array = list(range(50))
    insertion_sort(array)
    assert array == list(range(50))
