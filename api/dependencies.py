"""Dependency injection providers for the sample API.

This module defines dependencies that can be injected into route handlers:
the shared ``SampleStore`` and the authenticated principal.
"""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from api.exceptions import UnauthorizedError
from api.store import SampleStore

# Global state, created when the app starts
_store: SampleStore | None = None

_bearer = HTTPBearer(auto_error=False)


def get_store() -> SampleStore:
    """Get the shared SampleStore instance.

    Returns:
        The shared SampleStore instance.

    Raises:
        RuntimeError: If the store hasn't been initialized yet.
    """
    if _store is None:
        raise RuntimeError("SampleStore not initialized. Call initialize_store() first.")
    return _store


def initialize_store() -> SampleStore:
    """Create a fresh, empty SampleStore.

    Called once when the app starts; tests call it to reset state.

    Returns:
        The newly created SampleStore instance.
    """
    global _store
    _store = SampleStore()
    return _store


def shutdown_store() -> None:
    """Drop the shared SampleStore."""
    global _store
    _store = None


# Type alias for dependency injection
SampleStoreDep = Annotated[SampleStore, Depends(get_store)]


def require_principal(
    store: SampleStoreDep,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_bearer)],
) -> str:
    """Return the principal behind the request's bearer token.

    Raises:
        UnauthorizedError: If the header is missing or the token unknown.
    """
    if credentials is None:
        raise UnauthorizedError()

    principal = store.principal_for(credentials.credentials)
    if principal is None:
        raise UnauthorizedError("Bearer token is not recognised.")
    return principal


PrincipalDep = Annotated[str, Depends(require_principal)]
