"""
Merge sort recursion, the merge step, and index preconditions.
"""

from __future__ import annotations

import pytest

from algokit import SortOrder, merge, merge_sort, sort_all


def test_merge_sort_even_length() -> None:
    array = [5, 2, 4, 6, 1, 3]
    merge_sort(array, 0, len(array) - 1, SortOrder.NONDECREASING)
    assert array == [1, 2, 3, 4, 5, 6]


def test_merge_sort_odd_length() -> None:
    array = [5, 2, 7, 4, 6, 1, 3]
    merge_sort(array, 0, len(array) - 1, SortOrder.NONDECREASING)
    assert array == [1, 2, 3, 4, 5, 6, 7]


def test_merge_sort_nonincreasing() -> None:
    array = [5, 2, 4, 6, 1, 3]
    merge_sort(array, 0, len(array) - 1, SortOrder.NONINCREASING)
    assert array == [6, 5, 4, 3, 2, 1]


def test_merge_sort_subrange_only() -> None:
    array = [9, 5, 2, 4, 6, 1, 3, 0]
    merge_sort(array, 1, 6)
    assert array == [9, 1, 2, 3, 4, 5, 6, 0]


def test_empty_sequence_with_saturating_end() -> None:
    array: list = []
    merge_sort(array, 0, 0)
    assert array == []
    sort_all(array, SortOrder.NONINCREASING)
    assert array == []


def test_single_element_is_noop() -> None:
    array = [42]
    merge_sort(array, 0, 0)
    assert array == [42]


def test_begin_past_end_is_noop() -> None:
    array = [3, 2, 1]
    merge_sort(array, 2, 1)
    assert array == [3, 2, 1]


@pytest.mark.parametrize("begin,end", [(0, 3), (-1, 2), (0, 10)])
def test_out_of_bounds_range_raises(begin: int, end: int) -> None:
    array = [3, 2, 1]
    with pytest.raises(IndexError):
        merge_sort(array, begin, end)
    assert array == [3, 2, 1]


def test_empty_sequence_full_range_raises() -> None:
    # Without the saturating adjustment the end index points past the data.
    with pytest.raises(IndexError):
        merge_sort([], 0, 1)


@pytest.mark.parametrize("begin,end", [(0.0, 2), (0, "2"), (True, 2)])
def test_non_int_indices_raise(begin, end) -> None:
    with pytest.raises(TypeError):
        merge_sort([3, 2, 1], begin, end)


def test_merge_two_sorted_runs() -> None:
    array = [1, 4, 7, 2, 3, 9]
    merge(array, 0, 2, 5)
    assert array == [1, 2, 3, 4, 7, 9]


def test_merge_uneven_runs_copies_remainder() -> None:
    array = [0, 5, 1, 2, 3, 4, 6]
    merge(array, 0, 1, 6)
    assert array == [0, 1, 2, 3, 4, 5, 6]


def test_merge_nonincreasing_runs() -> None:
    array = [8, 3, 9, 1]
    merge(array, 0, 1, 3, SortOrder.NONINCREASING)
    assert array == [9, 8, 3, 1]


def test_merge_inside_larger_sequence() -> None:
    array = [100, 2, 5, 1, 3, -100]
    merge(array, 1, 2, 4)
    assert array == [100, 1, 2, 3, 5, -100]


@pytest.mark.parametrize("begin,middle,end", [(0, 3, 3), (2, 1, 3), (0, 1, 4), (-1, 0, 1)])
def test_merge_bad_indices_raise(begin: int, middle: int, end: int) -> None:
    with pytest.raises(IndexError):
        merge([1, 2, 3, 4], begin, middle, end)
