"""
Insertion sort (in place, stable).

Each element is walked left by adjacent swaps while it strictly "comes before"
its left neighbour under the ordering predicate. Equal elements are never
swapped, so the relative order of ties is preserved.

Complexity: O(n^2) worst/average, O(n) on input that is already ordered.
"""

from __future__ import annotations

from typing import Any, Dict, List, MutableSequence, Optional

from algokit.algorithms._config import order_from_config
from algokit.ordering import SortOrder, T, less_for_order

__all__ = ["insertion_sort", "sort"]


def insertion_sort(items: MutableSequence[T], order: SortOrder = SortOrder.NONDECREASING) -> None:
    less = less_for_order(order)
    for i in range(1, len(items)):
        j = i
        while j > 0 and less(items[j], items[j - 1]):
            items[j - 1], items[j] = items[j], items[j - 1]
            j -= 1


def sort(a: List[T], *, config: Optional[Dict[str, Any]] = None) -> List[T]:
    """Return a sorted copy of `a`; `config["order"]` selects the direction."""
    out = list(a)
    insertion_sort(out, order_from_config(config))
    return out
