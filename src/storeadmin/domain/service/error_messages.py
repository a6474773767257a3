"""Domain service: human-readable messages for failures.

Priority for an HTTP error response:
  1. a string body;
  2. the body's ``message`` field;
  3. the values of the body's ``errors`` object, comma-joined;
  4. a canned message keyed by status code.
"""

from __future__ import annotations

from storeadmin.domain.exceptions import HttpStatusError, NetworkError

GENERIC_MESSAGE = "An unexpected error occurred"
NETWORK_MESSAGE = "Network error: Unable to connect to the server"

STATUS_MESSAGES = {
    400: "Bad request: The server cannot process the request",
    401: "Unauthorized: Please log in to access this resource",
    403: "Forbidden: You don't have permission to access this resource",
    404: "Not found: The requested resource does not exist",
    500: "Internal server error: Please try again later",
}


def status_message(status_code: int) -> str:
    return STATUS_MESSAGES.get(status_code, f"Server error ({status_code})")


def get_error_message(error: BaseException) -> str:
    if isinstance(error, HttpStatusError):
        return _message_from_body(error.body) or status_message(error.status_code)

    if isinstance(error, NetworkError):
        return NETWORK_MESSAGE

    return str(error) or GENERIC_MESSAGE


def is_auth_error(error: BaseException) -> bool:
    return isinstance(error, HttpStatusError) and error.is_auth_failure


def _message_from_body(body: object) -> str:
    if isinstance(body, str):
        return body
    if not isinstance(body, dict):
        return ""
    if body.get("message"):
        return str(body["message"])
    errors = body.get("errors")
    if isinstance(errors, dict) and errors:
        return ", ".join(str(value) for value in errors.values())
    return ""
