"""
Selection sort (in place, not stable).

For each slot i-1 the remaining suffix is scanned for the extremum (minimum
when nondecreasing, maximum when nonincreasing). The scan starts from the
element already at i-1 as the running best, so a later candidate only wins if
it strictly comes before it; on ties the earliest candidate stays.

Complexity: O(n^2) comparisons regardless of input.
"""

from __future__ import annotations

from typing import Any, Dict, List, MutableSequence, Optional

from algokit.algorithms._config import order_from_config
from algokit.ordering import SortOrder, T, less_for_order

__all__ = ["selection_sort", "sort"]


def selection_sort(items: MutableSequence[T], order: SortOrder = SortOrder.NONDECREASING) -> None:
    less = less_for_order(order)
    n = len(items)
    for i in range(1, n):
        swap_index = i - 1
        for j in range(i, n):
            if less(items[j], items[swap_index]):
                swap_index = j
        items[swap_index], items[i - 1] = items[i - 1], items[swap_index]


def sort(a: List[T], *, config: Optional[Dict[str, Any]] = None) -> List[T]:
    """Return a sorted copy of `a`; `config["order"]` selects the direction."""
    out = list(a)
    selection_sort(out, order_from_config(config))
    return out
