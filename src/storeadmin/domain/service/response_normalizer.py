"""Domain service: Response Normalizer.

Turns any backend envelope into the canonical ``(items, PageInfo)`` pair.
This is a pure function over its inputs: network calls and state writes
belong to the list controller.

Two pagination code paths coexist on purpose:

- *trust the server*: a Spring page object, or an envelope that carries
  a ``metadata`` block, supplies its own totals;
- *derive from the payload*: everything else gets
  ``total_items = len(items)`` and ``total_pages = ceil(len / page_size)``,
  because several endpoints return the full collection regardless of the
  requested page size.

Malformed or partial shapes degrade to empty items.  Nothing in here
raises.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from storeadmin.domain.model.envelope import (
    BareArray,
    Enveloped,
    EnvelopeShape,
    ResultList,
    SpringPage,
    detect_envelope,
)
from storeadmin.domain.model.value_objects import PageInfo

logger = logging.getLogger(__name__)

# Spring's own default when ``pageable.pageSize`` is missing.
SPRING_DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class NormalizedPage:
    items: list
    page_info: PageInfo
    shape: EnvelopeShape | None  # None when nothing matched

    @property
    def recognized(self) -> bool:
        return self.shape is not None


def normalize(
    raw: Any,
    previous: PageInfo,
    extra_shapes: tuple[EnvelopeShape, ...] = (),
) -> NormalizedPage:
    """Normalize a raw response body.

    Args:
        raw: The deserialized JSON body, of any type (``None`` included).
        previous: The last known ``PageInfo``; used as the base that
            server metadata is merged into, and returned unchanged when
            the body is unrecognized.
        extra_shapes: Resource-specific shapes tried after the built-in
            detection order.
    """
    envelope = detect_envelope(raw, extra_shapes)

    if isinstance(envelope, SpringPage):
        items = list(envelope.items)
        page_info = PageInfo(
            page=_page_from_zero_based(envelope.page_number),
            page_size=_positive(envelope.page_size, SPRING_DEFAULT_PAGE_SIZE),
            total_pages=_positive(envelope.total_pages, 1),
            total_items=_positive(envelope.total_elements, len(items)),
        )
        return NormalizedPage(items, page_info, EnvelopeShape.SPRING_PAGE)

    if isinstance(envelope, Enveloped):
        items = list(envelope.items)
        page_info = _merge_metadata(previous, envelope.metadata, len(items))
        return NormalizedPage(items, page_info, EnvelopeShape.ENVELOPED)

    if isinstance(envelope, BareArray):
        items = list(envelope.items)
        return NormalizedPage(
            items, previous.derived_from_count(len(items)), EnvelopeShape.BARE_ARRAY
        )

    if isinstance(envelope, ResultList):
        items = list(envelope.items)
        page_info = _merge_metadata(previous, envelope.metadata, len(items))
        return NormalizedPage(items, page_info, EnvelopeShape.RESULT_LIST)

    logger.debug("Response matched no known envelope: %r", type(raw).__name__)
    return NormalizedPage([], previous, None)


# --- Internal helpers ---------------------------------------------------------


def _merge_metadata(previous: PageInfo, metadata: dict | None, count: int) -> PageInfo:
    if metadata is None:
        return previous.derived_from_count(count)
    return PageInfo(
        page=_positive(metadata.get("page"), previous.page),
        page_size=_positive(metadata.get("pageSize"), previous.page_size),
        total_pages=_positive(metadata.get("totalPages"), 1),
        total_items=_positive(metadata.get("totalItems"), count),
    )


def _positive(value: Any, default: int) -> int:
    """Return *value* as an int when it is a positive whole number."""
    if isinstance(value, bool):
        return default
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, int) and value > 0:
        return value
    return default


def _page_from_zero_based(page_number: Any) -> int:
    if isinstance(page_number, bool):
        return 1
    if isinstance(page_number, float) and page_number.is_integer():
        page_number = int(page_number)
    if isinstance(page_number, int) and page_number >= 0:
        return page_number + 1
    return 1
