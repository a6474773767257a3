"""Application service: Mutation Dispatcher.

Runs create / update / delete calls for one list and reconciles the
outcome with that list's controller:

- delete is gated by a confirmation callback and, on success, splices
  the item out of the loaded page (no re-fetch);
- create, update and partial updates re-fetch the whole page;
- a failure stores the normalized message on the controller and leaves
  ``items`` exactly as they were.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from storeadmin.application.list_controller import ListResourceController
from storeadmin.domain.exceptions import DomainException
from storeadmin.domain.repository.resource_gateway import ResourceGateway

Confirm = Callable[[str], bool]


@dataclass(frozen=True)
class MutationResult:
    ok: bool
    data: Any = None
    message: str | None = None
    cancelled: bool = False


class MutationDispatcher:

    def __init__(
        self,
        controller: ListResourceController,
        gateway: ResourceGateway,
        confirm: Confirm,
    ) -> None:
        self._controller = controller
        self._gateway = gateway
        self._confirm = confirm

    @property
    def resource(self):
        return self._controller.resource

    async def delete(self, item_id: Any) -> MutationResult:
        """Ask for confirmation, then delete; declining issues no request."""
        if not self._confirm(self.resource.delete_prompt):
            return MutationResult(ok=False, cancelled=True)

        if await self._controller.remove(item_id):
            return MutationResult(ok=True)
        return MutationResult(ok=False, message=self._controller.error)

    async def create(self, payload: dict) -> MutationResult:
        return await self._then_reload(
            "create", lambda: self._gateway.create(payload)
        )

    async def update(self, item_id: Any, payload: dict) -> MutationResult:
        return await self._then_reload(
            "update", lambda: self._gateway.update(item_id, payload)
        )

    async def patch(self, item_id: Any, action: str, payload: dict) -> MutationResult:
        return await self._then_reload(
            "update", lambda: self._gateway.patch(item_id, action, payload)
        )

    # --- Internal helpers -----------------------------------------------------

    async def _then_reload(self, action: str, call) -> MutationResult:
        try:
            data = await call()
        except DomainException as exc:
            message = self._controller.report_failure(
                exc, self.resource.failure_message(action)
            )
            return MutationResult(ok=False, message=message)

        await self._controller.load()
        return MutationResult(ok=True, data=data)
