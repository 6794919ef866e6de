"""
Seeded dataset generators for the verification sweep and the tests.

Integer sequences (`make_dataset`):
- "random":        uniform ints over params["range"] = [lo, hi] (inclusive, required)
- "nearly_sorted": [0..n-1] degraded by ceil(swap_frac * n) random pair swaps
- "few_uniques":   at most min(k, n, span) distinct values spread over n slots
- "small_range":   uniform ints over [min_val, max_val] (default [0, 255])
- "sorted":        deterministic [0, 1, ..., n-1]
- "reversed":      deterministic [n-1, ..., 0]

Bit sequences (`make_bits`):
    uniformly random big-endian bits of a given width, for the binary adder.

Conventions:
- All ranges are inclusive on both ends.
- The caller owns and seeds the numpy Generator; deterministic distributions
  ignore it.
- Plain Python lists are returned so the algorithms stay NumPy-agnostic.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Tuple

import numpy as np

_FEW_UNIQUES_DEFAULT_RANGE = (0, 2**32 - 1)
_SMALL_RANGE_DEFAULT = (0, 255)

__all__ = ["SUPPORTED_DISTS", "make_dataset", "make_bits"]


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    """
    Generate `n` integers according to `spec` = {"dist": ..., "params": {...}}.

    Examples
    --------
    {"dist": "random", "params": {"range": [-100, 100]}}
    {"dist": "nearly_sorted", "params": {"swap_frac": 0.05}}
    {"dist": "few_uniques", "params": {"k": 4, "range": [0, 9]}}
    {"dist": "small_range", "params": {"max_val": 15}}
    {"dist": "reversed"}

    Raises
    ------
    ValueError
        On a negative/non-int `n`, a malformed spec, or invalid params.
    """
    _validate_count("n", n)
    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist")
    if dist not in _GENERATORS:
        raise ValueError(
            f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}"
        )
    params = spec.get("params") or {}
    if not isinstance(params, dict):
        raise ValueError(f"{dist}.params must be a dict")

    return _GENERATORS[dist](n, params, rng)


def make_bits(width: int, rng: np.random.Generator) -> List[bool]:
    """Return `width` uniformly random bits, most-significant first."""
    _validate_count("width", width)
    if width == 0:
        return []
    return [bool(b) for b in rng.integers(0, 2, size=width)]


# ------------------------- distributions ------------------------- #


def _gen_random(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    if "range" not in params:
        raise ValueError("random.params.range must be provided as [min, max] (inclusive)")
    lo, hi = _parse_range("random", params["range"])
    return _uniform(lo, hi, n, rng)


def _gen_nearly_sorted(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    swap_frac = _parse_swap_frac(params)
    out = list(range(n))
    num_swaps = int(np.ceil(swap_frac * n))
    if n == 0 or num_swaps == 0:
        return out
    # Pairs with i == j are no-ops, so effective swaps may be fewer.
    idxs = rng.integers(0, n, size=(num_swaps, 2))
    for i, j in idxs.tolist():
        out[i], out[j] = out[j], out[i]
    return out


def _gen_few_uniques(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    k = params.get("k")
    if isinstance(k, bool) or not isinstance(k, int) or k < 1:
        raise ValueError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
    lo, hi = (
        _parse_range("few_uniques", params["range"])
        if "range" in params
        else _FEW_UNIQUES_DEFAULT_RANGE
    )
    if n == 0:
        return []

    actual_k = min(k, n, hi - lo + 1)
    # Draw distinct values with the caller's rng (not `random`) to stay reproducible.
    values: List[int] = []
    seen = set()
    while len(values) < actual_k:
        for v in rng.integers(lo, hi + 1, size=2 * (actual_k - len(values))).tolist():
            if v not in seen:
                seen.add(v)
                values.append(v)
                if len(values) == actual_k:
                    break

    picks = rng.integers(0, actual_k, size=n)
    return [values[p] for p in picks.tolist()]


def _gen_small_range(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    if "range" in params:
        lo, hi = _parse_range("small_range", params["range"])
    else:
        lo = params.get("min_val", _SMALL_RANGE_DEFAULT[0])
        hi = params.get("max_val", _SMALL_RANGE_DEFAULT[1])
        if not _is_int_like(lo) or not _is_int_like(hi):
            raise ValueError("small_range.params.min_val/max_val must be integers")
        lo, hi = int(lo), int(hi)
        if lo > hi:
            raise ValueError(f"small_range invalid: min > max ({lo} > {hi})")
    return _uniform(lo, hi, n, rng)


def _gen_sorted(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    return list(range(n))


def _gen_reversed(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    return list(range(n - 1, -1, -1))


_GENERATORS: Dict[str, Callable[[int, Dict[str, Any], np.random.Generator], List[int]]] = {
    "random": _gen_random,
    "nearly_sorted": _gen_nearly_sorted,
    "few_uniques": _gen_few_uniques,
    "small_range": _gen_small_range,
    "sorted": _gen_sorted,
    "reversed": _gen_reversed,
}

SUPPORTED_DISTS = frozenset(_GENERATORS)


# ------------------------- helpers ------------------------- #


def _uniform(lo: int, hi: int, n: int, rng: np.random.Generator) -> List[int]:
    if n == 0:
        return []
    # Generator.integers is half-open [low, high)
    return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()


def _validate_count(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an int")
    if value < 0:
        raise ValueError(f"{name} must be nonnegative")


def _parse_range(dist: str, raw: Any) -> Tuple[int, int]:
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise ValueError(f"{dist}.params.range must be a 2-element list/tuple [min, max]")
    lo, hi = raw
    if not _is_int_like(lo) or not _is_int_like(hi):
        raise ValueError(f"{dist}.params.range values must be integers")
    lo, hi = int(lo), int(hi)
    if lo > hi:
        raise ValueError(f"{dist}.params.range invalid: min > max ({lo} > {hi})")
    return lo, hi


def _parse_swap_frac(params: Dict[str, Any]) -> float:
    raw = params.get("swap_frac", 0.05)
    try:
        x = float(raw)
    except (TypeError, ValueError) as e:
        raise ValueError(
            f"nearly_sorted.params.swap_frac must be a float in [0.0, 1.0]; got {raw!r}"
        ) from e
    if not 0.0 <= x <= 1.0:
        raise ValueError(f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {x}")
    return x


def _is_int_like(x: Any) -> bool:
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)
