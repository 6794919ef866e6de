"""
Validation utilities public API.

Re-exports:
    - Oracles:
        ORACLE_NAME
        oracle_sort
        equals_oracle
        oracle_search
        oracle_add

    - Property checks:
        is_ordered
        first_order_violation_index
        is_permutation
        permutation_counter_diff
        is_stable
        assert_no_mutation
"""

from .oracle import ORACLE_NAME, equals_oracle, oracle_add, oracle_search, oracle_sort
from .properties import (
    assert_no_mutation,
    first_order_violation_index,
    is_ordered,
    is_permutation,
    is_stable,
    permutation_counter_diff,
)

__all__ = [
    "ORACLE_NAME",
    "oracle_sort",
    "equals_oracle",
    "oracle_search",
    "oracle_add",
    "is_ordered",
    "first_order_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "is_stable",
    "assert_no_mutation",
]
