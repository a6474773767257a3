"""Product helpers for the catalog as the product service returns it.

Products are plain dicts; this module knows which of their fields the
dashboard searches and how a product's ``status`` is shown.
"""

from __future__ import annotations

import re
import unicodedata

from storeadmin.domain.model.item import Item, lookup

IN_STOCK = "In Stock"
LOW_STOCK = "Low Stock"
OUT_OF_STOCK = "Out of Stock"

_STATUS_LABELS = {
    "active": IN_STOCK,
    "low_stock": LOW_STOCK,
    "inactive": OUT_OF_STOCK,
    "out_of_stock": OUT_OF_STOCK,
}


def search_fields(product: Item) -> tuple:
    return (lookup(product, "name"), lookup(product, "category.name"))


def status_label(product: Item) -> str:
    """Map the backend status to a stock label; unknown values read as in stock."""
    status = lookup(product, "status")
    if not status:
        return IN_STOCK
    return _STATUS_LABELS.get(str(status).lower(), IN_STOCK)


def main_category(product: Item, fallback: str = "Uncategorized") -> str:
    name = lookup(product, "category.name")
    if name:
        return name
    categories = lookup(product, "categories")
    if isinstance(categories, list) and categories:
        return lookup(categories[0], "name") or fallback
    return fallback


def generate_slug(name: str) -> str:
    """Lower-case ASCII slug: accents stripped, spaces collapsed to '-'."""
    text = unicodedata.normalize("NFD", name.lower())
    text = "".join(ch for ch in text if not unicodedata.combining(ch))
    text = text.replace("đ", "d")
    text = re.sub(r"[^a-z0-9\s]", "", text)
    return re.sub(r"\s+", "-", text)
