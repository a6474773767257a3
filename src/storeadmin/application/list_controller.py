"""Application service: List State Controller.

One generic controller drives every list page.  It owns the loaded
items, the ``PageInfo`` and the loading/error state for its resource, and
re-fetches whenever the page or the page size changes.

State machine::

    IDLE -> LOADING -> LOADED | ERRORED
    LOADED | ERRORED -> LOADING   (page change, page-size change, retry)

Failure policy:
- a failed fetch sets ``error`` and leaves the previous ``items`` in
  place (stale-but-visible);
- nothing is retried automatically; ``retry()`` is the manual action;
- a delete only touches local state after the server confirmed it;
- under ``EmptyPolicy.ERROR`` an empty page after the first steps back
  one page and loads it, keeping the "no more" message.

Concurrent loads are not serialized: whichever resolves last writes the
final state.  ``discard_stale=True`` tags each load with a sequence
number and drops results from superseded loads instead.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable

from storeadmin.application.resources import EmptyPolicy, ResourceConfig
from storeadmin.domain.exceptions import (
    ApiError,
    DomainException,
    InvalidResponseError,
)
from storeadmin.domain.model.item import item_id as id_of
from storeadmin.domain.model.item import same_id
from storeadmin.domain.model.value_objects import FilterState, PageInfo
from storeadmin.domain.repository.resource_gateway import ResourceGateway
from storeadmin.domain.service.client_filter import apply_filter
from storeadmin.domain.service.error_messages import get_error_message
from storeadmin.domain.service.response_normalizer import normalize

logger = logging.getLogger(__name__)

ErrorHook = Callable[[BaseException], Any]


class ListStatus(Enum):
    IDLE = "IDLE"
    LOADING = "LOADING"
    LOADED = "LOADED"
    ERRORED = "ERRORED"


class PageDirection(Enum):
    PREVIOUS = "previous"
    NEXT = "next"


class ListResourceController:

    def __init__(
        self,
        resource: ResourceConfig,
        gateway: ResourceGateway,
        *,
        page: int = 1,
        page_size: int | None = None,
        discard_stale: bool = False,
        on_error: ErrorHook | None = None,
    ) -> None:
        self.resource = resource
        self._gateway = gateway
        self._discard_stale = discard_stale
        self._on_error = on_error
        self._issued = 0

        self.items: list = []
        self.page_info = PageInfo.initial(
            page_size or resource.default_page_size
        ).with_page(page)
        self.filters = FilterState()
        self.status = ListStatus.IDLE
        self.error: str | None = None

    # --- Derived state --------------------------------------------------------

    @property
    def loading(self) -> bool:
        return self.status is ListStatus.LOADING

    @property
    def filtered_items(self) -> list:
        """Recomputed on every access; never cached."""
        return apply_filter(self.items, self.filters, self.resource.filter_spec)

    # --- Operations -----------------------------------------------------------

    async def load(self) -> None:
        """Fetch the current page and replace items and page info."""
        self._issued += 1
        ticket = self._issued
        requested = self.page_info

        self.status = ListStatus.LOADING
        self.error = None

        try:
            raw = await self._gateway.fetch_page(requested.page, requested.page_size)
        except DomainException as exc:
            if self._is_stale(ticket):
                return
            self._fail(exc, self.resource.failure_message("fetch"))
            self.status = ListStatus.ERRORED
            return

        if self._is_stale(ticket):
            logger.debug(
                "Dropping stale %s page %s response", self.resource.name, requested.page
            )
            return
        if self._apply(raw, requested):
            await self.load()
            if self.error is None:
                self.error = self.resource.exhausted_message

    async def retry(self) -> None:
        await self.load()

    async def change_page(self, direction: PageDirection | str) -> bool:
        """Move one page back or forward; returns False when guarded."""
        direction = PageDirection(direction)
        info = self.page_info

        if direction is PageDirection.PREVIOUS:
            if not info.has_previous:
                return False
            self.page_info = info.with_page(info.page - 1)
        else:
            if not info.has_next:
                return False
            self.page_info = info.with_page(info.page + 1)

        await self.load()
        return True

    async def go_to_page(self, page: int) -> bool:
        if page < 1 or page > max(self.page_info.total_pages, 1):
            return False
        if page == self.page_info.page:
            return False
        self.page_info = self.page_info.with_page(page)
        await self.load()
        return True

    async def set_page_size(self, page_size: int) -> None:
        """Change the page size; the list restarts from page 1."""
        self.page_info = self.page_info.with_page_size(page_size).with_page(1)
        await self.load()

    async def remove(self, target_id: Any) -> bool:
        """Delete an item remotely, then splice it out of ``items``."""
        try:
            await self._gateway.delete(target_id)
        except DomainException as exc:
            self._fail(exc, self.resource.failure_message("delete"))
            return False

        self.items = [item for item in self.items if not same_id(id_of(item), target_id)]
        return True

    def report_failure(self, error: BaseException, fallback: str) -> str:
        """Store a failure raised by a mutation against this list."""
        return self._fail(error, fallback)

    # --- Internal helpers -----------------------------------------------------

    def _apply(self, raw: Any, requested: PageInfo) -> bool:
        """Store a fetched page; returns True when the previous page must be loaded."""
        normalized = normalize(raw, requested, self.resource.extra_shapes)

        if not normalized.recognized and self.resource.unrecognized_message:
            message = self.resource.unrecognized_message
            self._fail(InvalidResponseError(message), message)
            self.status = ListStatus.ERRORED
            return False

        policy = self.resource.empty_policy
        if not normalized.items and policy is EmptyPolicy.ERROR_KEEP_ROWS:
            self.error = self.resource.empty_message
            self.status = ListStatus.ERRORED
            return False

        self.items = normalized.items
        self.page_info = normalized.page_info
        self.status = ListStatus.LOADED

        if self.items or policy is not EmptyPolicy.ERROR:
            return False

        if requested.page == 1:
            self.error = self.resource.empty_message
            self.status = ListStatus.ERRORED
            return False

        self.page_info = self.page_info.with_page(requested.page - 1)
        return True

    def _fail(self, error: BaseException, fallback: str) -> str:
        if isinstance(error, ApiError):
            message = get_error_message(error)
        else:
            message = str(error) or fallback

        self.error = message
        logger.error("%s: %s", fallback, message)

        if self._on_error is not None:
            self._on_error(error)
        return message

    def _is_stale(self, ticket: int) -> bool:
        return self._discard_stale and ticket != self._issued
