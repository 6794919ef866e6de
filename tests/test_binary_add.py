"""Ripple-carry binary addition and the bit helpers."""

from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from algokit import add_binary, bits_to_int, int_to_bits


@pytest.mark.parametrize(
    "a,b,expected",
    [
        ([0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0, 0]),
        ([0, 0, 0, 1], [0, 0, 0, 0], [0, 0, 0, 0, 1]),
        ([0, 0, 0, 1], [0, 0, 0, 1], [0, 0, 0, 1, 0]),
        ([0, 0, 1, 1], [0, 1, 1, 1], [0, 1, 0, 1, 0]),
        ([0, 0, 0, 1], [1, 1, 1, 1], [1, 0, 0, 0, 0]),
    ],
)
def test_add_binary_table(a, b, expected) -> None:
    result = add_binary(a, b)
    assert result == [bool(x) for x in expected]
    assert all(isinstance(x, bool) for x in result)


def test_add_binary_bool_operands() -> None:
    a = [False, False, True, True]
    b = [False, True, True, True]
    assert add_binary(a, b) == [False, True, False, True, False]


def test_add_binary_empty_operands() -> None:
    assert add_binary([], []) == [False]


def test_add_binary_length_mismatch() -> None:
    with pytest.raises(ValueError, match="same length"):
        add_binary([1, 0], [1])


def test_add_binary_does_not_mutate() -> None:
    a, b = [1, 1], [0, 1]
    add_binary(a, b)
    assert (a, b) == ([1, 1], [0, 1])


@given(st.integers(min_value=0, max_value=64).flatmap(
    lambda w: st.tuples(
        st.just(w),
        st.integers(min_value=0, max_value=2**w - 1),
        st.integers(min_value=0, max_value=2**w - 1),
    )
))
def test_property_sum(args) -> None:
    width, x, y = args
    result = add_binary(int_to_bits(x, width), int_to_bits(y, width))
    assert len(result) == width + 1
    assert bits_to_int(result) == x + y


def test_bits_to_int() -> None:
    assert bits_to_int([]) == 0
    assert bits_to_int([1, 0, 1, 0]) == 10
    assert bits_to_int([True, True]) == 3


def test_int_to_bits() -> None:
    assert int_to_bits(10, 4) == [True, False, True, False]
    assert int_to_bits(1, 4) == [False, False, False, True]
    assert int_to_bits(0, 0) == []


@pytest.mark.parametrize("value,width", [(16, 4), (-1, 4), (1, -1)])
def test_int_to_bits_rejects(value: int, width: int) -> None:
    with pytest.raises(ValueError):
        int_to_bits(value, width)
