"""Request payload builders.

Each builder validates form input locally and raises ValidationError
before anything is sent, so a rejected form never reaches the network and
never touches list state.
"""

from __future__ import annotations

import random
from typing import Any

from storeadmin.domain.exceptions import ValidationError
from storeadmin.domain.model.image_url import valid_image_url
from storeadmin.domain.model.item import Item, lookup
from storeadmin.domain.model.product import generate_slug

DEFAULT_PRODUCT_STATUS = "ACTIVE"


def _number(value: Any, field_name: str) -> float:
    if value is None or value == "":
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{field_name} must be a number, got {value!r}") from exc


def product_payload(
    name: str,
    category_id: Any,
    categories: list[Item],
    *,
    base_price: Any = 0,
    discount: Any = 0,
    description: str = "",
    thumbnail_url: str = "",
    slug: str = "",
    status: str = DEFAULT_PRODUCT_STATUS,
    sku: str = "",
    product_code: str = "",
) -> dict:
    """Build the create-product body.

    The category must be one of *categories* (the list the form offered);
    its ``skuCode`` seeds the product code when none is given.
    """
    if not name or not name.strip():
        raise ValidationError("Product name is required")
    if category_id in (None, ""):
        raise ValidationError("Please select a category")

    selected = next(
        (c for c in categories if str(lookup(c, "id")) == str(category_id)), None
    )
    if selected is None:
        raise ValidationError("Invalid category selected")

    image = valid_image_url(thumbnail_url)
    code = sku or product_code or (
        f"{lookup(selected, 'skuCode') or 'PROD'}-{random.randrange(10000)}"
    )

    return {
        "name": name,
        "basePrice": _number(base_price, "Base price"),
        "discount": _number(discount, "Discount"),
        "description": description or "",
        "thumbnailUrl": image,
        "thumbnail_url": image,
        "slug": slug or generate_slug(name),
        "status": status or DEFAULT_PRODUCT_STATUS,
        "sku": sku or "",
        "product_code": code,
        "rating": 0.0,
        "category_id": lookup(selected, "id"),
    }


def category_payload(name: str, sku_code: str, parent_id: Any = None) -> dict:
    if not name or not name.strip():
        raise ValidationError("Category name is required")
    if not sku_code or not sku_code.strip():
        raise ValidationError("SKU code is required")
    return {
        "name": name,
        "skuCode": sku_code,
        "parentId": parent_id,
        "slug": "-".join(name.lower().split()),
    }


def customer_payload(
    username: str,
    email: str,
    *,
    first_name: str = "",
    last_name: str = "",
    phone_number: str | None = None,
    password: str | None = None,
) -> dict:
    if not username or not username.strip():
        raise ValidationError("Username is required")
    if not email or "@" not in email:
        raise ValidationError("A valid email address is required")
    return {
        "username": username,
        "email": email,
        "firstName": first_name,
        "lastName": last_name,
        "phoneNumber": phone_number,
        "password": password,
    }


def order_status_payload(status: str) -> dict:
    if not status or not status.strip():
        raise ValidationError("Order status is required")
    return {"status": status.strip().upper()}


def payment_status_payload(payment_status: str) -> dict:
    if not payment_status or not payment_status.strip():
        raise ValidationError("Payment status is required")
    return {"paymentStatus": payment_status.strip().upper()}


def inventory_quantity_payload(quantity: Any) -> dict:
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValidationError(f"Quantity must be an integer, got {quantity!r}")
    if quantity < 0:
        raise ValidationError("Quantity cannot be negative")
    return {"quantity": quantity}
