"""Exception hierarchy for the Hetzner Cloud client.

Three failure classes surface to callers:

- ``ValidationError``: options rejected locally, before any request is sent.
- ``TransportError``: the request never produced a usable HTTP response
  (connection failure, timeout, body that is not JSON).
- ``APIError``: the API answered with a non-2xx status and an error body.
"""

from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from hcloud_client.clients.base import Response


class ErrorCode(str, Enum):
    """Error codes reported by the Hetzner Cloud API."""

    SERVICE_ERROR = "service_error"
    RATE_LIMIT_EXCEEDED = "rate_limit_exceeded"
    UNKNOWN_ERROR = "unknown_error"
    NOT_FOUND = "not_found"
    INVALID_INPUT = "invalid_input"
    FORBIDDEN = "forbidden"
    UNAUTHORIZED = "unauthorized"
    JSON_ERROR = "json_error"
    LOCKED = "locked"
    CONFLICT = "conflict"
    PROTECTED = "protected"
    MAINTENANCE = "maintenance"
    RESOURCE_LIMIT_EXCEEDED = "resource_limit_exceeded"
    RESOURCE_UNAVAILABLE = "resource_unavailable"
    UNIQUENESS_ERROR = "uniqueness_error"


class HCloudError(Exception):
    """Base class for all client errors."""

    pass


class ValidationError(HCloudError, ValueError):
    """Raised when request options fail local validation."""

    pass


class TransportError(HCloudError):
    """Raised when the HTTP exchange itself fails."""

    pass


class APIError(HCloudError):
    """Error reported by the API in a structured error body."""

    def __init__(
        self,
        code: str,
        message: str,
        *,
        details: Any = None,
        response: "Response | None" = None,
    ) -> None:
        super().__init__(f"{message} ({code})")
        self.code = code
        self.message = message
        self.details = details
        self.response = response

    @property
    def status_code(self) -> int | None:
        if self.response is None:
            return None
        return self.response.status_code


def is_error(exc: BaseException | None, code: ErrorCode | str) -> bool:
    """Check whether ``exc`` is an API error with the given code."""
    if not isinstance(exc, APIError):
        return False
    return exc.code == code
