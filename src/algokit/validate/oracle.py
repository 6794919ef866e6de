"""
Reference oracles for every algorithm in the package.

- Sorting: Python's built-in `sorted()` (stable timsort), reversed for
  nonincreasing order.
- Search: `list.index`, mapped to None when absent.
- Binary addition: plain integer addition, re-encoded to n + 1 bits.

Public API (stable):
    ORACLE_NAME
    oracle_sort(a, order=NONDECREASING) -> list
    equals_oracle(a, out, order=NONDECREASING) -> bool
    oracle_search(a, item) -> int | None
    oracle_add(a, b) -> list[bool]

Conventions:
- Oracles never mutate their inputs and always return new lists.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from algokit.arith.binary_add import bits_to_int, int_to_bits
from algokit.ordering import SortOrder

ORACLE_NAME: str = "python_sorted_timsort"

__all__ = ["ORACLE_NAME", "oracle_sort", "equals_oracle", "oracle_search", "oracle_add"]


def oracle_sort(a: Sequence[Any], order: SortOrder = SortOrder.NONDECREASING) -> List[Any]:
    """Return a new list holding `a` sorted under `order`."""
    # reverse=True keeps ties in input order, same as a stable descending sort
    return sorted(a, reverse=SortOrder.parse(order) is SortOrder.NONINCREASING)


def equals_oracle(
    a: Sequence[Any], out: Sequence[Any], order: SortOrder = SortOrder.NONDECREASING
) -> bool:
    """True iff `out` equals `oracle_sort(a, order)` element-wise."""
    return list(out) == oracle_sort(a, order)


def oracle_search(a: Sequence[Any], item: Any) -> Optional[int]:
    try:
        return list(a).index(item)
    except ValueError:
        return None


def oracle_add(a: Sequence[bool], b: Sequence[bool]) -> List[bool]:
    """Sum of two equal-width big-endian bit sequences, as len(a) + 1 bits."""
    if len(a) != len(b):
        raise ValueError(f"operands must have the same length; got {len(a)} and {len(b)}")
    return int_to_bits(bits_to_int(a) + bits_to_int(b), len(a) + 1)
