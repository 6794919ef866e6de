"""
Sorting algorithms and their registry.

Every module listed in SORT_ALGORITHMS exposes:
    - an in-place routine taking (items, ..., order)
    - the runner API  sort(a, *, config=None) -> list  (never mutates `a`)

so callers can write:
    from algokit.algorithms import get_sort
    out = get_sort("merge_sort")([3, 1, 2], config={"order": "desc"})
"""

from __future__ import annotations

import importlib
from typing import Any, Callable, List

from .insertion_sort import insertion_sort
from .merge_sort import merge, merge_sort, sort_all
from .selection_sort import selection_sort

SORT_ALGORITHMS = ("insertion_sort", "selection_sort", "merge_sort")

__all__ = [
    "SORT_ALGORITHMS",
    "get_sort",
    "insertion_sort",
    "selection_sort",
    "merge_sort",
    "merge",
    "sort_all",
]


def get_sort(name: str) -> Callable[..., List[Any]]:
    """
    Return the `sort(a, *, config=None)` callable of `algokit.algorithms.<name>`.

    Raises
    ------
    ValueError
        If `name` is not a non-empty string.
    ImportError
        If no such algorithm module exists.
    AttributeError
        If the module does not define a callable `sort`.
    """
    if not name or not isinstance(name, str):
        raise ValueError("algorithm name must be a non-empty string")
    try:
        mod = importlib.import_module(f"algokit.algorithms.{name}")
    except Exception as e:
        raise ImportError(
            f"Could not import algorithm module 'algokit.algorithms.{name}': {e!r}"
        ) from e

    fn = getattr(mod, "sort", None)
    if not callable(fn):
        raise AttributeError(
            f"Algorithm module '{name}' must define a callable `sort(a, *, config=None)`"
        )
    return fn
