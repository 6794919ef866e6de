"""
Binary arithmetic public API.

Re-exports:
    add_binary
    bits_to_int
    int_to_bits
"""

from .binary_add import add_binary, bits_to_int, int_to_bits

__all__ = ["add_binary", "bits_to_int", "int_to_bits"]
