"""
Linear search over an unsorted sequence.

Public API (stable):
    linear_search(items: Sequence[T], item: T) -> int | None
"""

from __future__ import annotations

from typing import Optional, Sequence, TypeVar

T = TypeVar("T")

__all__ = ["linear_search"]


def linear_search(items: Sequence[T], item: T) -> Optional[int]:
    """
    Return the first index i with items[i] == item, scanning left to right.

    Returns None if no element matches. `items` is never mutated.
    """
    for i, value in enumerate(items):
        if value == item:
            return i
    return None
