"""
Shared handling of the per-call `config` dict accepted by `sort(a, *, config=None)`.

Recognised keys:
    "order": SortOrder or order name (default "nondecreasing")
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from algokit.ordering import SortOrder

__all__ = ["order_from_config"]


def order_from_config(config: Optional[Dict[str, Any]]) -> SortOrder:
    if config is None:
        return SortOrder.NONDECREASING
    if not isinstance(config, dict):
        raise ValueError("config must be a dict if provided")
    return SortOrder.parse(config.get("order", SortOrder.NONDECREASING))
