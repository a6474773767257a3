"""Value Objects shared across the dashboard core.

``PageInfo`` is immutable and replaced wholesale after every fetch;
``FilterState`` is mutated directly by user input and only ever read by
the client-side filter.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from storeadmin.domain.exceptions import ValidationError

# Sentinel value the UI uses for "no status / no date range restriction".
ALL = "all"


@dataclass(frozen=True)
class PageInfo:
    """Canonical pagination descriptor.

    ``page`` is always 1-based, whatever convention the backend service
    uses on the wire.  ``total_pages`` may be 0 when it was derived from
    an empty payload.
    """

    page: int = 1
    page_size: int = 10
    total_pages: int = 1
    total_items: int = 0

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValidationError(f"Page must be >= 1, got {self.page}")
        if self.page_size < 1:
            raise ValidationError(f"Page size must be >= 1, got {self.page_size}")
        if self.total_pages < 0 or self.total_items < 0:
            raise ValidationError("Totals cannot be negative")

    # --- Navigation -----------------------------------------------------------

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    def with_page(self, page: int) -> PageInfo:
        return replace(self, page=page)

    def with_page_size(self, page_size: int) -> PageInfo:
        return replace(self, page_size=page_size)

    # --- Derivation -----------------------------------------------------------

    def derived_from_count(self, item_count: int) -> PageInfo:
        """Totals computed from the payload length instead of the server.

        Used when an envelope carries no pagination metadata: several
        endpoints return the whole collection regardless of the requested
        page size.
        """
        return replace(
            self,
            total_items=item_count,
            total_pages=math.ceil(item_count / self.page_size),
        )

    @property
    def first_item_number(self) -> int:
        """1-based index of the first row on this page (0 when empty)."""
        if self.total_items == 0:
            return 0
        return (self.page - 1) * self.page_size + 1

    @property
    def last_item_number(self) -> int:
        return min(self.page * self.page_size, self.total_items)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def initial(page_size: int) -> PageInfo:
        """Defaults a list starts with before its first fetch."""
        return PageInfo(page=1, page_size=page_size, total_pages=1, total_items=0)


@dataclass
class FilterState:
    """What the user typed into the search box and picked in the dropdowns.

    Never sent to the server; applied in memory to the loaded page only.
    ``None`` and ``"all"`` both mean "no restriction".
    """

    search_term: str = ""
    status_filter: str | None = None
    date_range_filter: str | None = None

    @property
    def has_status(self) -> bool:
        return bool(self.status_filter) and self.status_filter != ALL

    @property
    def has_date_range(self) -> bool:
        return bool(self.date_range_filter) and self.date_range_filter != ALL

    def clear(self) -> None:
        self.search_term = ""
        self.status_filter = None
        self.date_range_filter = None
