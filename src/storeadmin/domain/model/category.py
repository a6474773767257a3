"""Category helpers."""

from __future__ import annotations

from storeadmin.domain.model.item import Item, lookup


def search_fields(category: Item) -> tuple:
    return (lookup(category, "name"), lookup(category, "skuCode"))


def is_root(category: Item) -> bool:
    """Main categories have no parent; only they can be picked as parents."""
    return lookup(category, "parentId") is None
