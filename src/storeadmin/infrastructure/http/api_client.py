"""Async HTTP client for the backend services.

Thin wrapper over ``httpx.AsyncClient``: JSON headers, a fixed timeout,
uniform body pre-processing, and translation of transport failures and
non-2xx responses into domain exceptions.  It returns the parsed body
as-is; callers normalize it.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from storeadmin.domain.exceptions import HttpStatusError, NetworkError
from storeadmin.domain.model.image_url import PLACEHOLDER_IMAGE, format_image_url

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


def prepare_body(data: dict, require_image: bool = False) -> dict:
    """Normalise image URL fields and drop ``None`` values.

    Works on a copy.  ``thumbnailUrl`` is mirrored into ``thumbnail_url``
    because the product service reads the snake-case field.  When
    *require_image* is set and no image was supplied at all, the
    placeholder is used.
    """
    body = dict(data)

    if body.get("thumbnailUrl"):
        body["thumbnailUrl"] = format_image_url(body["thumbnailUrl"])
        if not body.get("thumbnail_url"):
            body["thumbnail_url"] = body["thumbnailUrl"]

    if body.get("thumbnail_url"):
        body["thumbnail_url"] = format_image_url(body["thumbnail_url"])
    elif require_image:
        body["thumbnail_url"] = PLACEHOLDER_IMAGE

    if body.get("imageUrl"):
        body["imageUrl"] = format_image_url(body["imageUrl"])

    return {key: value for key, value in body.items() if value is not None}


def _decode(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class ApiClient:

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=DEFAULT_HEADERS,
            timeout=timeout,
            transport=transport,
        )

    async def close(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> ApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def request(
        self,
        method: str,
        path: str,
        data: dict | None = None,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        require_image: bool = False,
    ) -> Any:
        """Send one request and return the parsed response body.

        Raises:
            NetworkError: no response was received (includes timeouts).
            HttpStatusError: the server answered with a non-2xx status.
        """
        body = prepare_body(data, require_image) if data is not None else None
        logger.debug("%s %s%s params=%s", method, self.base_url, path, params)

        try:
            response = await self.client.request(
                method, path, json=body, params=params, headers=headers
            )
        except httpx.HTTPError as exc:
            logger.error("No response from server for %s %s: %s", method, path, exc)
            raise NetworkError(str(exc) or type(exc).__name__) from exc

        payload = _decode(response)
        if response.is_error:
            logger.error(
                "API error response %s for %s %s: %r",
                response.status_code, method, path, payload,
            )
            raise HttpStatusError(response.status_code, payload)

        logger.debug("API response %s for %s %s", response.status_code, method, path)
        return payload
