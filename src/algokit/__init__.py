"""
algokit: classic textbook algorithms with an ordering policy, oracles and a
YAML-driven verification sweep.

    from algokit import SortOrder, insertion_sort, merge_sort, linear_search, add_binary
"""

from .algorithms import insertion_sort, merge, merge_sort, selection_sort, sort_all
from .arith import add_binary, bits_to_int, int_to_bits
from .ordering import SortOrder, less_for_order
from .search import linear_search

__version__ = "0.1.0"

__all__ = [
    "SortOrder",
    "less_for_order",
    "insertion_sort",
    "selection_sort",
    "merge_sort",
    "merge",
    "sort_all",
    "linear_search",
    "add_binary",
    "bits_to_int",
    "int_to_bits",
    "__version__",
]
