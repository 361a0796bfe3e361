"""
Translation of client failures into HTTP errors for the dashboard.
"""

from fastapi import HTTPException, status

from ..client import ApiError, ApiNotFoundError, ApiTransportError


def to_http_exception(error: ApiError) -> HTTPException:
    """
    Map a backend failure onto a dashboard response.

    Backend rejections (4xx) keep their status and message. Unreachable
    backends and backend-side failures become 502.
    """
    if isinstance(error, ApiNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=error.message)

    if isinstance(error, ApiTransportError):
        return HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Simulation backend unreachable: {error.message}"
        )

    if error.status_code is not None and 400 <= error.status_code < 500:
        return HTTPException(status_code=error.status_code, detail=error.message)

    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=error.message)
