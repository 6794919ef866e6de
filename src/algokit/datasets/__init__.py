"""
Datasets package public API.

Re-export the generators so callers can write:
    from algokit.datasets import make_dataset, make_bits, SUPPORTED_DISTS
"""

from .generators import SUPPORTED_DISTS, make_bits, make_dataset

__all__ = ["make_dataset", "make_bits", "SUPPORTED_DISTS"]
