"""
Failure types raised by the simulation backend client.

Network failures, backend rejections and not-found lookups are kept
distinct so views can choose between a dedicated empty state and an
error notification.
"""

from typing import Any, Optional


class ApiError(Exception):
    """Raised when the backend answers with a non-success status."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        detail: Any = None
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.detail = detail

    @property
    def has_detail(self) -> bool:
        """True when the backend supplied a structured `detail`."""
        return self.detail is not None


class ApiNotFoundError(ApiError):
    """Raised when the requested resource does not exist (HTTP 404)."""
    pass


class ApiTransportError(ApiError):
    """Raised when the backend cannot be reached at all."""
    pass


class ApiResponseError(ApiError):
    """Raised when a success response does not have the expected shape."""
    pass
