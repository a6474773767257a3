"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import httpx

from storeadmin.application.list_controller import ErrorHook, ListResourceController
from storeadmin.application.mutation_dispatcher import Confirm, MutationDispatcher
from storeadmin.application.resources import get_resource
from storeadmin.infrastructure.config import Settings
from storeadmin.infrastructure.http.api_client import ApiClient
from storeadmin.infrastructure.http.auth_redirect import AuthRedirectGuard, Navigator
from storeadmin.infrastructure.http.http_resource_gateway import HttpResourceGateway


class Session:
    """One HTTP client shared by every list opened during a session.

    Each list still gets its own controller and its own copy of the data;
    nothing is cached across lists.
    """

    def __init__(
        self,
        settings: Settings,
        navigator: Navigator | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        redirect_delay: float | None = None,
    ) -> None:
        self.settings = settings
        self.client = ApiClient(settings.base_url, settings.timeout, transport=transport)
        self._on_error: ErrorHook | None = None
        if navigator is not None:
            self._on_error = AuthRedirectGuard(navigator, delay=redirect_delay)

    async def __aenter__(self) -> Session:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.client.close()

    def gateway(self, resource_name: str) -> HttpResourceGateway:
        return HttpResourceGateway(
            self.client,
            get_resource(resource_name),
            credentials=self.settings.credentials,
        )

    def controller(
        self,
        resource_name: str,
        page: int = 1,
        page_size: int | None = None,
        discard_stale: bool = False,
    ) -> ListResourceController:
        return ListResourceController(
            get_resource(resource_name),
            self.gateway(resource_name),
            page=page,
            page_size=page_size,
            discard_stale=discard_stale,
            on_error=self._on_error,
        )

    def dispatcher(
        self,
        controller: ListResourceController,
        confirm: Confirm,
    ) -> MutationDispatcher:
        return MutationDispatcher(
            controller, self.gateway(controller.resource.name), confirm
        )
