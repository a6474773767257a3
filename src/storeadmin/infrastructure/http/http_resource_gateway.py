"""HTTP implementation of ResourceGateway.

Paths and the page-number convention come from the resource's
configuration; resources that need a bearer token get it from the
injected credential provider on every call.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from storeadmin.application.resources import ResourceConfig
from storeadmin.domain.repository.resource_gateway import ResourceGateway
from storeadmin.infrastructure.http.api_client import ApiClient

CredentialProvider = Callable[[], Optional[str]]


class HttpResourceGateway(ResourceGateway):

    def __init__(
        self,
        client: ApiClient,
        resource: ResourceConfig,
        credentials: CredentialProvider | None = None,
    ) -> None:
        self._client = client
        self._resource = resource
        self._credentials = credentials

    # --- ResourceGateway interface --------------------------------------------

    async def fetch_page(
        self,
        page: int,
        page_size: int,
        server_filter: str | None = None,
    ) -> Any:
        params: dict[str, Any] = {
            "page": self._resource.wire_page(page),
            "size": page_size,
        }
        if server_filter:
            params["filter"] = server_filter
        return await self._client.request(
            "GET", self._resource.path, params=params, headers=self._auth_headers()
        )

    async def create(self, payload: dict) -> Any:
        return await self._client.request(
            "POST",
            self._resource.path,
            payload,
            headers=self._auth_headers(),
            require_image=self._resource.requires_image,
        )

    async def update(self, item_id: Any, payload: dict) -> Any:
        return await self._client.request(
            "PUT", self._item_path(item_id), payload, headers=self._auth_headers()
        )

    async def patch(self, item_id: Any, action: str, payload: dict) -> Any:
        return await self._client.request(
            "PATCH",
            f"{self._item_path(item_id)}/{action}",
            payload,
            headers=self._auth_headers(),
        )

    async def delete(self, item_id: Any) -> Any:
        return await self._client.request(
            "DELETE", self._item_path(item_id), headers=self._auth_headers()
        )

    # --- Helpers --------------------------------------------------------------

    def _item_path(self, item_id: Any) -> str:
        return f"{self._resource.path}/{item_id}"

    def _auth_headers(self) -> dict[str, str] | None:
        if not self._resource.requires_auth or self._credentials is None:
            return None
        token = self._credentials()
        if not token:
            return None
        return {"Authorization": f"Bearer {token}"}
