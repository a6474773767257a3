"""Loosely-typed list items.

Items are the transient, refetchable JSON objects returned by the backend
services.  They are kept as plain dicts; resource modules only know which
fields to read.
"""

from __future__ import annotations

from typing import Any, Dict

Item = Dict[str, Any]


def lookup(item: Any, path: str) -> Any:
    """Read a dotted *path* (``"warehouse.name"``) or return None."""
    current = item
    for key in path.split("."):
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current


def item_id(item: Any) -> Any:
    return lookup(item, "id")


def same_id(left: Any, right: Any) -> bool:
    """Identity match that tolerates ``1`` vs ``"1"`` from CLI input."""
    if left is None or right is None:
        return False
    return left == right or str(left) == str(right)
