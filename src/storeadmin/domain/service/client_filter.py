"""Domain service: Client-Side Filter.

Applies a ``FilterState`` to the items of the page that is currently
loaded.  Nothing is sent to the server, so a term that would match rows on
another page yields nothing here; that is how the dashboard behaves.

Composition rules:
- text fields are OR-combined (case-insensitive substring match);
- the status filter and the date-range filter are each AND-combined with
  the text match.

Filtering never mutates the input list.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Iterable

from storeadmin.domain.model.value_objects import FilterState

DATE_RANGES = ("today", "week", "month")


@dataclass(frozen=True)
class FilterSpec:
    """Resource-specific field extractors."""

    search_fields: Callable[[Any], Iterable[Any]]
    status_of: Callable[[Any], str] | None = None
    date_of: Callable[[Any], datetime | None] | None = None


def matches_search(item: Any, term: str, spec: FilterSpec) -> bool:
    if not term:
        return True
    needle = term.lower()
    for value in spec.search_fields(item):
        if value is None:
            continue
        if needle in str(value).lower():
            return True
    return False


def matches_status(item: Any, status: str, spec: FilterSpec) -> bool:
    if spec.status_of is None:
        return True
    return spec.status_of(item).lower() == status.lower()


def matches_date_range(
    item: Any,
    date_range: str,
    spec: FilterSpec,
    now: datetime,
) -> bool:
    if spec.date_of is None or date_range not in DATE_RANGES:
        return True

    moment = spec.date_of(item)
    if moment is None:
        return False

    if date_range == "today":
        return moment.astimezone(now.tzinfo).date() == now.date()
    if date_range == "week":
        return moment >= now - timedelta(days=7)
    return moment >= now - timedelta(days=30)


def apply_filter(
    items: list,
    state: FilterState,
    spec: FilterSpec,
    now: datetime | None = None,
) -> list:
    """Return the derived, non-owned view of *items* matching *state*."""
    if now is None:
        now = datetime.now(timezone.utc)

    result = []
    for item in items:
        if not matches_search(item, state.search_term, spec):
            continue
        if state.has_status and not matches_status(item, state.status_filter, spec):
            continue
        if state.has_date_range and not matches_date_range(
            item, state.date_range_filter, spec, now
        ):
            continue
        result.append(item)
    return result
