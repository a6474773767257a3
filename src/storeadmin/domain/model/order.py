"""Order helpers.

The order service speaks in upper-case workflow statuses; the dashboard
groups them into four display labels, and the status filter compares
against those labels.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from storeadmin.domain.model.item import Item, lookup

PROCESSING = "Processing"
SHIPPED = "Shipped"
DELIVERED = "Delivered"
CANCELED = "Canceled"

DISPLAY_STATUSES = (PROCESSING, SHIPPED, DELIVERED, CANCELED)

# Backend statuses still awaiting fulfilment, used by the sales report.
PENDING_STATUSES = ("PENDING", "PROCESSING")

_STATUS_LABELS = {
    "PENDING": PROCESSING,
    "PROCESSING": PROCESSING,
    "SHIPPED": SHIPPED,
    "DELIVERED": DELIVERED,
    "COMPLETED": DELIVERED,
    "CANCELLED": CANCELED,
    "CANCELED": CANCELED,
}


def search_fields(order: Item) -> tuple:
    return (
        lookup(order, "id"),
        lookup(order, "userId"),
        lookup(order, "shippingAddress"),
    )


def format_status(status: Any) -> str:
    if not status:
        return PROCESSING
    text = str(status)
    label = _STATUS_LABELS.get(text.upper())
    if label is not None:
        return label
    return text[:1].upper() + text[1:].lower()


def display_status(order: Item) -> str:
    return format_status(lookup(order, "status"))


def is_pending(order: Item) -> bool:
    return str(lookup(order, "status") or "").upper() in PENDING_STATUSES


def created_at(order: Item) -> datetime | None:
    return parse_timestamp(lookup(order, "createdAt"))


def product_count(order: Item) -> int:
    """Total units across the order's detail lines."""
    details = lookup(order, "orderDetails")
    if not isinstance(details, list):
        return 0
    return sum(int(lookup(d, "quantity") or 0) for d in details)


def payment_method(order: Item) -> str:
    return "Banking" if lookup(order, "paymentStatus") == "PAID" else "COD"


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO-8601 timestamp; naive values are taken as UTC."""
    if not isinstance(value, str) or not value:
        return None
    text = value[:-1] + "+00:00" if value.endswith("Z") else value
    try:
        moment = datetime.fromisoformat(text)
    except ValueError:
        return None
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment
