"""
Merge sort (in place, stable, recursive divide and conquer).

Public API (stable):
    merge_sort(items, begin, end, order=NONDECREASING) -> None   # `end` is INCLUSIVE
    merge(items, begin, middle, end, order=NONDECREASING) -> None
    sort_all(items, order=NONDECREASING) -> None
    sort(a, *, config=None) -> list

Conventions:
- Ranges are inclusive on both ends: [begin, end].
- A range with begin >= end holds at most one element and is already sorted.
  This also covers an empty sequence sorted as merge_sort(items, 0, 0), where
  0 is the saturating decrement of len(items).
- Indices are checked once before recursing; a non-trivial range that falls
  outside the sequence raises IndexError instead of reading past either end.
- The merge step copies each half into its own buffer and writes the winner of
  each front-to-front comparison back left to right. Ties take the left buffer,
  so the sort is stable.

Complexity: O(n log n) time, O(n) auxiliary space per merge level.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, MutableSequence, Optional

from algokit.algorithms._config import order_from_config
from algokit.ordering import SortOrder, T, less_for_order

__all__ = ["merge_sort", "merge", "sort_all", "sort"]


def merge_sort(
    items: MutableSequence[T],
    begin: int,
    end: int,
    order: SortOrder = SortOrder.NONDECREASING,
) -> None:
    """
    Sort items[begin..end] (inclusive) in place.

    Raises
    ------
    TypeError
        If `begin` or `end` is not an int, or `order` is not a SortOrder.
    IndexError
        If begin < end and the range is not inside `items`.
    """
    _check_index("begin", begin)
    _check_index("end", end)
    less = less_for_order(order)
    if begin >= end:
        return
    if begin < 0 or end >= len(items):
        raise IndexError(
            f"merge_sort range [{begin}, {end}] out of bounds for length {len(items)}"
        )
    _merge_sort_range(items, begin, end, less)


def merge(
    items: MutableSequence[T],
    begin: int,
    middle: int,
    end: int,
    order: SortOrder = SortOrder.NONDECREASING,
) -> None:
    """
    Merge the sorted runs items[begin..middle] and items[middle+1..end].

    Requires 0 <= begin <= middle < end < len(items); raises IndexError otherwise.
    """
    for name, value in (("begin", begin), ("middle", middle), ("end", end)):
        _check_index(name, value)
    if not (0 <= begin <= middle < end < len(items)):
        raise IndexError(
            f"merge requires 0 <= begin <= middle < end < len; "
            f"got begin={begin}, middle={middle}, end={end}, len={len(items)}"
        )
    _merge(items, begin, middle, end, less_for_order(order))


def sort_all(items: MutableSequence[T], order: SortOrder = SortOrder.NONDECREASING) -> None:
    """Sort the whole sequence in place; empty sequences are handled here."""
    merge_sort(items, 0, max(len(items) - 1, 0), order)


def sort(a: List[T], *, config: Optional[Dict[str, Any]] = None) -> List[T]:
    """Return a sorted copy of `a`; `config["order"]` selects the direction."""
    out = list(a)
    sort_all(out, order_from_config(config))
    return out


# ------------------------- helpers ------------------------- #


def _merge_sort_range(
    items: MutableSequence[T], begin: int, end: int, less: Callable[[T, T], bool]
) -> None:
    if begin < end:
        middle = (begin + end) // 2
        _merge_sort_range(items, begin, middle, less)
        _merge_sort_range(items, middle + 1, end, less)
        _merge(items, begin, middle, end, less)


def _merge(
    items: MutableSequence[T],
    begin: int,
    middle: int,
    end: int,
    less: Callable[[T, T], bool],
) -> None:
    left = list(items[begin : middle + 1])
    right = list(items[middle + 1 : end + 1])

    i = j = 0
    k = begin
    while i < len(left) and j < len(right):
        # Right wins only if it strictly comes first; ties keep the left element.
        if less(right[j], left[i]):
            items[k] = right[j]
            j += 1
        else:
            items[k] = left[i]
            i += 1
        k += 1

    # One buffer is exhausted; copy the rest of the other through.
    for value in left[i:]:
        items[k] = value
        k += 1
    for value in right[j:]:
        items[k] = value
        k += 1


def _check_index(name: str, value: Any) -> None:
    # bool is an int subclass but never a meaningful index here
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int; got {type(value).__name__}")
