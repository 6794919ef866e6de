"""
Ordering policy shared by every sorting routine.

A `SortOrder` picks the comparison direction; `less_for_order` turns it into
the strict "comes before" predicate the sorts use. The predicate is selected
once per call and reused for every comparison inside that call.

Public API (stable):
    SortOrder                      # NONDECREASING / NONINCREASING (+ ASCENDING / DESCENDING aliases)
    SortOrder.parse(value) -> SortOrder
    less_for_order(order) -> Callable[[T, T], bool]
    Comparable                     # protocol bound for orderable element types

Conventions:
- NONDECREASING: less(a, b) == (a < b)
- NONINCREASING: less(a, b) == (a > b)
- The predicate is strict, so equal elements never "come before" each other.
"""

from __future__ import annotations

import enum
import operator
from typing import Any, Callable, Protocol, TypeVar


class Comparable(Protocol):
    def __lt__(self, other: Any) -> bool: ...

    def __gt__(self, other: Any) -> bool: ...


T = TypeVar("T", bound=Comparable)

__all__ = ["Comparable", "T", "SortOrder", "less_for_order"]


class SortOrder(enum.Enum):
    NONDECREASING = "nondecreasing"
    NONINCREASING = "nonincreasing"

    # Aliases (same members)
    ASCENDING = "nondecreasing"
    DESCENDING = "nonincreasing"

    @classmethod
    def parse(cls, value: Any) -> "SortOrder":
        """
        Accept a SortOrder or a case-insensitive name.

        Recognised names: nondecreasing, ascending, asc,
        nonincreasing, descending, desc.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"order must be a SortOrder or a string; got {value!r}")
        key = value.strip().lower()
        try:
            return _ORDER_NAMES[key]
        except KeyError:
            raise ValueError(
                f"Unknown sort order: {value!r}. Supported: {sorted(_ORDER_NAMES)}"
            ) from None


_ORDER_NAMES = {
    "nondecreasing": SortOrder.NONDECREASING,
    "ascending": SortOrder.NONDECREASING,
    "asc": SortOrder.NONDECREASING,
    "nonincreasing": SortOrder.NONINCREASING,
    "descending": SortOrder.NONINCREASING,
    "desc": SortOrder.NONINCREASING,
}

_PREDICATES = {
    SortOrder.NONDECREASING: operator.lt,
    SortOrder.NONINCREASING: operator.gt,
}


def less_for_order(order: SortOrder) -> Callable[[T, T], bool]:
    """Return the strict predicate `less(a, b)` for `order`."""
    if not isinstance(order, SortOrder):
        raise TypeError(f"order must be a SortOrder; got {type(order).__name__}")
    return _PREDICATES[order]
