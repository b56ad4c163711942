"""Exception handlers for the sample API.

Every handled error is returned as ``{"error": "<message>"}``.
"""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ResourceNotFoundError(Exception):
    """Raised when a user or order does not exist.

    Args:
        resource: The kind of resource ("User", "Order").
        resource_id: The identifier that was requested.
    """

    def __init__(self, resource: str, resource_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} '{resource_id}' not found.")


class UnauthorizedError(Exception):
    """Raised when a request lacks a valid bearer token."""

    def __init__(self, message: str = "Missing or invalid bearer token."):
        self.message = message
        super().__init__(message)


async def resource_not_found_handler(request: Request, exc: ResourceNotFoundError):
    """Return a 404 naming the missing resource."""
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": str(exc)},
    )


async def unauthorized_handler(request: Request, exc: UnauthorizedError):
    """Return a 401 with a bearer challenge."""
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"error": exc.message},
        headers={"WWW-Authenticate": "Bearer"},
    )


async def value_error_handler(request: Request, exc: ValueError):
    """Handle ValueError exceptions.

    ValueErrors indicate input that passed validation but failed a business
    rule, such as ordering for a user that does not exist.
    """
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": str(exc)},
    )


async def generic_exception_handler(request: Request, exc: Exception):
    """Handle any unhandled exceptions without exposing stack traces."""
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "An unexpected error occurred"},
    )
