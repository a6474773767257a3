"""Customer (identity-service user) helpers."""

from __future__ import annotations

from storeadmin.domain.model.item import Item, lookup


def search_fields(user: Item) -> tuple:
    return (
        lookup(user, "firstName"),
        lookup(user, "lastName"),
        lookup(user, "email"),
        lookup(user, "username"),
        lookup(user, "phoneNumber"),
    )


def full_name(user: Item) -> str:
    parts = [lookup(user, "firstName"), lookup(user, "lastName")]
    return " ".join(p for p in parts if p) or (lookup(user, "username") or "")
