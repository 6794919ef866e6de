"""Search routines public API."""

from .linear import linear_search

__all__ = ["linear_search"]
