"""Abstract gateway to one remote list resource.

Defined in the domain layer so the controller never depends on the HTTP
client.  The concrete implementation lives in the infrastructure layer;
tests use an in-memory fake.

Every method returns the raw, deserialized response body.  Callers apply
normalization themselves.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ResourceGateway(ABC):

    @abstractmethod
    async def fetch_page(
        self,
        page: int,
        page_size: int,
        server_filter: str | None = None,
    ) -> Any:
        """Fetch one page of the list; *page* is 1-based."""

    @abstractmethod
    async def create(self, payload: dict) -> Any:
        """Create a new item."""

    @abstractmethod
    async def update(self, item_id: Any, payload: dict) -> Any:
        """Replace an existing item."""

    @abstractmethod
    async def patch(self, item_id: Any, action: str, payload: dict) -> Any:
        """Partial update through a sub-resource (``/{id}/{action}``)."""

    @abstractmethod
    async def delete(self, item_id: Any) -> Any:
        """Delete an item."""
