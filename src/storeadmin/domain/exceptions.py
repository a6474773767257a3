"""Domain-level exceptions.

Every failure the dashboard core can report is a subclass of
DomainException so the CLI layer can catch them uniformly and display
user-friendly messages.
"""

from __future__ import annotations

from typing import Any


class DomainException(Exception):
    """Base class for all dashboard errors."""


class ValidationError(DomainException):
    """Local, pre-network validation failed (e.g. a required form field)."""


class InvalidResponseError(DomainException):
    """A response body was refused by the resource that requested it."""


class ApiError(DomainException):
    """Base class for failures at the HTTP boundary."""


class NetworkError(ApiError):
    """The request never reached the server or no response came back."""


class HttpStatusError(ApiError):
    """The server answered with a non-2xx status.

    ``body`` holds the decoded response body: parsed JSON when the server
    sent JSON, the raw text otherwise, or ``None`` for an empty body.
    """

    def __init__(self, status_code: int, body: Any = None, message: str = "") -> None:
        super().__init__(message or f"HTTP {status_code}")
        self.status_code = status_code
        self.body = body

    @property
    def is_auth_failure(self) -> bool:
        return self.status_code in (401, 403)
