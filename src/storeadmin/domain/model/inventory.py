"""Inventory helpers: stock level labels derived from quantities.

Invariants of the derived label:
- ``availableQuantity <= 0`` is always out of stock;
- at or below ``reorderLevel`` is low stock;
- anything else is in stock.
"""

from __future__ import annotations

from typing import Any

from storeadmin.domain.model.item import Item, lookup

IN_STOCK = "In Stock"
LOW_STOCK = "Low Stock"
OUT_OF_STOCK = "Out of Stock"

STOCK_STATUSES = (IN_STOCK, LOW_STOCK, OUT_OF_STOCK)


def _number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return value


def available(item: Item) -> float:
    return _number(lookup(item, "availableQuantity"))


def reorder_level(item: Item) -> float:
    return _number(lookup(item, "reorderLevel"))


def stock_status(item: Item) -> str:
    if available(item) <= 0:
        return OUT_OF_STOCK
    if available(item) <= reorder_level(item):
        return LOW_STOCK
    return IN_STOCK


def display_name(item: Item) -> str:
    return lookup(item, "productName") or lookup(item, "productId") or ""


def search_fields(item: Item) -> tuple:
    return (display_name(item), lookup(item, "warehouse.name"), lookup(item, "sku"))


def unit_price(item: Item) -> float:
    return _number(lookup(item, "product.price")) or _number(lookup(item, "unitPrice"))
