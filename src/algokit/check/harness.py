"""
Check harness: run one algorithm call and validate it against its oracle.

Each check works on copies prepared outside the call, so the caller's data is
never touched, and returns one flat record ready to be written as a JSON line.

Public API (stable):
    check_sort_call(...)   -> dict
    check_search_call(...) -> dict
    check_add_call(...)    -> dict

Record schema:
    {
        "algo": str,
        "order": str,                       # order name, or "-" for search/add
        "n": int,                           # input length (bit width for add)
        "status": "ok" | "mismatch" | "error",
        "error": str | None,                # repr of the exception, or what mismatched
        "violation_index": int | None,      # first out-of-order index for sorts
        "mutated": bool,                    # the call changed its input
    }
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Sequence

from algokit.arith.binary_add import add_binary
from algokit.log import get_logger
from algokit.ordering import SortOrder
from algokit.search.linear import linear_search
from algokit.validate.oracle import equals_oracle, oracle_add, oracle_search
from algokit.validate.properties import (
    assert_no_mutation,
    first_order_violation_index,
    permutation_counter_diff,
)

logger = get_logger(__name__)

__all__ = ["check_sort_call", "check_search_call", "check_add_call"]


def check_sort_call(
    *,
    algo_name: str,
    algo_fn: Callable[..., List[Any]],
    a: Sequence[Any],
    order: SortOrder,
    config: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Call `algo_fn(arg, config={**config, "order": order})` once and validate.

    Parameters
    ----------
    algo_name : str
        Logical algorithm name (for records/logs).
    algo_fn : Callable[..., list]
        Implements sort(a: list, *, config: dict | None) -> list.
    a : sequence
        Input values. A copy is passed to the algorithm.
    order : SortOrder
        Ordering policy to request and to validate against.
    config : dict | None
        Extra algorithm config; "order" is overridden by `order`.
    """
    order = SortOrder.parse(order)
    record = _new_record(algo_name, order.value, len(a))

    arg = list(a)
    call_config = dict(config or {})
    call_config["order"] = order.value
    try:
        out = list(algo_fn(arg, config=call_config))
    except Exception as e:
        logger.debug("%s raised on n=%d (%s): %r", algo_name, len(a), order.value, e)
        record["status"] = "error"
        record["error"] = repr(e)
        return record

    try:
        _validate_sort_output(record, a, arg, out, order)
    except Exception as e:
        # Output the checks cannot handle (e.g. unhashable items) is still a result.
        record["status"] = "error"
        record["error"] = f"could not validate output: {e!r}"

    if record["status"] != "ok":
        logger.warning("%s failed on n=%d (%s): %s", algo_name, len(a), order.value, record["error"])
    return record


def check_search_call(*, a: Sequence[Any], item: Any) -> Dict[str, Any]:
    """Validate `linear_search(a, item)` against `oracle_search`."""
    record = _new_record("linear_search", "-", len(a))
    arg = list(a)
    try:
        got = linear_search(arg, item)
    except Exception as e:
        record["status"] = "error"
        record["error"] = repr(e)
        return record

    mutation = _mutation_message(a, arg)
    record["mutated"] = mutation is not None
    expected = oracle_search(a, item)
    if got != expected:
        record["status"] = "mismatch"
        record["error"] = f"searched {item!r}: expected {expected!r}, got {got!r}"
    elif mutation is not None:
        record["status"] = "mismatch"
        record["error"] = mutation

    if record["status"] != "ok":
        logger.warning("linear_search failed on n=%d: %s", len(a), record["error"])
    return record


def check_add_call(*, a: Sequence[bool], b: Sequence[bool]) -> Dict[str, Any]:
    """Validate `add_binary(a, b)` against `oracle_add` (integer arithmetic)."""
    record = _new_record("binary_add", "-", len(a))
    try:
        got = add_binary(list(a), list(b))
    except Exception as e:
        record["status"] = "error"
        record["error"] = repr(e)
        return record

    expected = oracle_add(a, b)
    if got != expected:
        record["status"] = "mismatch"
        record["error"] = f"expected {_bitstr(expected)}, got {_bitstr(got)}"
        logger.warning("binary_add failed on width=%d: %s", len(a), record["error"])
    return record


# ------------------------- helpers ------------------------- #


def _validate_sort_output(
    record: Dict[str, Any],
    a: Sequence[Any],
    arg: List[Any],
    out: List[Any],
    order: SortOrder,
) -> None:
    mutation = _mutation_message(a, arg)
    record["mutated"] = mutation is not None

    diff = permutation_counter_diff(a, out)
    if diff:
        record["status"] = "mismatch"
        record["error"] = f"output is not a permutation of the input (count diff: {diff})"
        return

    record["violation_index"] = first_order_violation_index(out, order)
    if record["violation_index"] is not None:
        record["status"] = "mismatch"
        record["error"] = f"out of order at index {record['violation_index']}"
    elif not equals_oracle(a, out, order):
        record["status"] = "mismatch"
        record["error"] = "output differs from oracle"
    elif mutation is not None:
        record["status"] = "mismatch"
        record["error"] = mutation


def _mutation_message(before: Sequence[Any], after: Sequence[Any]) -> Optional[str]:
    try:
        assert_no_mutation(before, after)
    except AssertionError as e:
        return str(e)
    return None


def _new_record(algo: str, order: str, n: int) -> Dict[str, Any]:
    return {
        "algo": algo,
        "order": order,
        "n": int(n),
        "status": "ok",
        "error": None,
        "violation_index": None,
        "mutated": False,
    }


def _bitstr(bits: Sequence[bool]) -> str:
    return "".join("1" if b else "0" for b in bits)
