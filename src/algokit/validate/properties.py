"""
Property helpers for validating algorithm results.

Used by the tests and by the sweep harness.

Public API (stable):
    is_ordered(xs, order) -> bool
    first_order_violation_index(xs, order) -> int | None
    is_permutation(a, b) -> bool
    permutation_counter_diff(a, b) -> dict
    is_stable(before, after, key) -> bool
    assert_no_mutation(before, after) -> None

Notes
-----
- "Ordered" means no adjacent pair where the right element strictly comes
  before the left one under the ordering predicate, so runs of equal values
  are fine in either direction.
- Stability cannot be seen from bare values. `is_stable` expects records that
  carry a tie-breaker (e.g. (key, original_index) pairs) and compares the
  relative order of records with equal keys before and after.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from typing import Any, Callable, Dict, Hashable, List, Optional, Sequence

from algokit.ordering import SortOrder, less_for_order

__all__ = [
    "is_ordered",
    "first_order_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "is_stable",
    "assert_no_mutation",
]


def first_order_violation_index(
    xs: Sequence[Any], order: SortOrder = SortOrder.NONDECREASING
) -> Optional[int]:
    """
    Return the first i where xs[i + 1] strictly comes before xs[i], or None.

    Handy for messages:
        i = first_order_violation_index(out, order)
        assert i is None, f"out of order at i={i}: {out[i]} then {out[i + 1]}"
    """
    less = less_for_order(SortOrder.parse(order))
    for i in range(len(xs) - 1):
        if less(xs[i + 1], xs[i]):
            return i
    return None


def is_ordered(xs: Sequence[Any], order: SortOrder = SortOrder.NONDECREASING) -> bool:
    return first_order_violation_index(xs, order) is None


def is_permutation(a: Sequence[Hashable], b: Sequence[Hashable]) -> bool:
    """True iff `a` and `b` hold exactly the same multiset of values."""
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)


def permutation_counter_diff(
    a: Sequence[Hashable], b: Sequence[Hashable]
) -> Dict[Hashable, int]:
    """
    Return value -> (count in a - count in b) for every value whose counts differ.

    An empty dict means identical multiplicities.
    """
    diff = Counter(a)
    diff.subtract(Counter(b))
    return {k: d for k, d in diff.items() if d != 0}


def is_stable(
    before: Sequence[Any],
    after: Sequence[Any],
    key: Callable[[Any], Hashable],
) -> bool:
    """
    True iff records sharing a key appear in `after` in the same relative order
    as in `before`. Records are compared by identity of position, so they must
    be distinguishable (e.g. (key, tag) tuples with unique tags).
    """
    groups_before: Dict[Hashable, List[Any]] = defaultdict(list)
    groups_after: Dict[Hashable, List[Any]] = defaultdict(list)
    for rec in before:
        groups_before[key(rec)].append(rec)
    for rec in after:
        groups_after[key(rec)].append(rec)
    return groups_before == groups_after


def assert_no_mutation(before: Sequence[Any], after: Sequence[Any]) -> None:
    """
    Raise AssertionError naming the first differing index if the sequences differ.
    """
    if len(before) != len(after):
        raise AssertionError(
            f"Input mutated: length changed from {len(before)} to {len(after)}"
        )
    for i, (x, y) in enumerate(zip(before, after)):
        if x != y:
            raise AssertionError(f"Input mutated at index {i}: before={x}, after={y}")
