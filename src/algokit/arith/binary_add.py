"""
Ripple-carry addition of fixed-width unsigned binary integers.

Bit sequences are big-endian: index 0 holds the most-significant bit. Values
are read with `bool()`, so [0, 1] and [False, True] mean the same number.

Public API (stable):
    add_binary(a, b) -> list[bool]                 # len(a) == len(b) == n; result has n + 1 bits
    bits_to_int(bits) -> int
    int_to_bits(value, width) -> list[bool]
"""

from __future__ import annotations

from typing import List, Sequence

__all__ = ["add_binary", "bits_to_int", "int_to_bits"]


def add_binary(a: Sequence[bool], b: Sequence[bool]) -> List[bool]:
    """
    Add two equal-width big-endian bit sequences.

    Raises
    ------
    ValueError
        If the operands have different lengths. Checked before any bit is added.
    """
    if len(a) != len(b):
        raise ValueError(
            f"operands must have the same length; got {len(a)} and {len(b)}"
        )

    # Built least-significant first, reversed once at the end.
    result: List[bool] = []
    carry = False
    for i in range(len(a) - 1, -1, -1):
        x, y = bool(a[i]), bool(b[i])
        result.append(x ^ y ^ carry)
        carry = (x and y) or (x and carry) or (y and carry)

    result.append(carry)
    result.reverse()
    return result


def bits_to_int(bits: Sequence[bool]) -> int:
    """Interpret `bits` as an unsigned big-endian integer (empty -> 0)."""
    value = 0
    for bit in bits:
        value = (value << 1) | int(bool(bit))
    return value


def int_to_bits(value: int, width: int) -> List[bool]:
    """
    Encode a non-negative `value` as exactly `width` big-endian bits.

    Raises ValueError if `value` is negative, `width` is negative, or `value`
    needs more than `width` bits.
    """
    if width < 0:
        raise ValueError(f"width must be nonnegative; got {width}")
    if value < 0:
        raise ValueError(f"value must be nonnegative; got {value}")
    if value.bit_length() > width:
        raise ValueError(f"value {value} does not fit in {width} bits")
    return [bool((value >> shift) & 1) for shift in range(width - 1, -1, -1)]
