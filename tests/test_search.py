"""Linear search."""

from __future__ import annotations

from typing import List

from hypothesis import given, strategies as st

from algokit import linear_search
from algokit.validate import oracle_search


def test_linear_search_basic() -> None:
    assert linear_search([5, 2, 4, 6, 1, 3], 4) == 2


def test_linear_search_no_element() -> None:
    assert linear_search([5, 2, 4, 6, 1, 3], 9) is None


def test_linear_search_empty() -> None:
    assert linear_search([], 1) is None


def test_linear_search_returns_first_match() -> None:
    assert linear_search([7, 3, 7, 3], 3) == 1


def test_linear_search_found_at_zero_is_not_falsy_absence() -> None:
    result = linear_search([0, 1], 0)
    assert result == 0
    assert result is not None


def test_linear_search_does_not_mutate() -> None:
    items = [3, 1, 2]
    linear_search(items, 2)
    assert items == [3, 1, 2]


def test_linear_search_tuple_and_strings() -> None:
    assert linear_search(("a", "b", "c"), "c") == 2


@given(st.lists(st.integers(min_value=-5, max_value=5), max_size=40), st.integers(min_value=-6, max_value=6))
def test_property_matches_oracle(items: List[int], item: int) -> None:
    assert linear_search(items, item) == oracle_search(items, item)
