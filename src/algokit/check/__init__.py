"""
Verification sweep: per-call check harness and the YAML-driven runner.
"""

from .harness import check_add_call, check_search_call, check_sort_call

__all__ = ["check_sort_call", "check_search_call", "check_add_call"]
