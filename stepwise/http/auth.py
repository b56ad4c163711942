"""Authentication providers for HTTP steps.

A provider mutates the outgoing ``httpx.Request`` right before it is sent.
Credentials may be static or resolved from the workflow context, so a step
can authenticate with the token returned by an earlier login step::

    class CreateUserStep(HttpStep):
        request_type = CreateUserRequest
        method = "POST"
        path = "/users"
        auth = BearerTokenAuth.from_context(
            lambda ctx: ctx.get("login", LoginResponse).token
        )
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Literal

import httpx

from stepwise.field_values import FieldValue, from_context, static

if TYPE_CHECKING:
    from stepwise.context import WorkflowContext


class AuthProvider(ABC):
    """Applies authentication to an outgoing HTTP request.

    Subclass this to create custom auth strategies.
    """

    @abstractmethod
    async def apply(self, request: httpx.Request, context: "WorkflowContext") -> None:
        """Add credentials to ``request`` in place.

        Args:
            request: The request about to be sent.
            context: The workflow context, for credentials captured earlier.
        """


class NoAuth(AuthProvider):
    """An auth provider that does nothing.

    Use for unauthenticated endpoints such as login or public endpoints.
    """

    async def apply(self, request: httpx.Request, context: "WorkflowContext") -> None:
        return None


class BearerTokenAuth(AuthProvider):
    """Sets ``Authorization: Bearer <token>`` on the request."""

    def __init__(self, token: FieldValue[str]) -> None:
        self._token = token

    @classmethod
    def with_static_token(cls, token: str) -> "BearerTokenAuth":
        """Authenticate every request with the same hardcoded token."""
        return cls(static(token))

    @classmethod
    def from_context(cls, selector: Callable[["WorkflowContext"], str]) -> "BearerTokenAuth":
        """Resolve the token from the workflow context on every request.

        Args:
            selector: Reads the token, e.g.
                ``lambda ctx: ctx.get("login", LoginResponse).token``.
        """
        return cls(from_context(selector))

    async def apply(self, request: httpx.Request, context: "WorkflowContext") -> None:
        token = self._token.resolve(context)
        request.headers["Authorization"] = f"Bearer {token}"


class ApiKeyAuth(AuthProvider):
    """Sends an API key as a request header or a query string parameter.

    Attributes:
        placement: Where the key goes ("header" or "query").
        name: The header or query parameter name.
    """

    def __init__(
        self,
        placement: Literal["header", "query"],
        name: str,
        value: FieldValue[str] | str,
    ) -> None:
        self.placement = placement
        self.name = name
        self._value = value if isinstance(value, FieldValue) else static(value)

    @classmethod
    def header(cls, header_name: str, value: FieldValue[str] | str) -> "ApiKeyAuth":
        """Send the key in a header, e.g. ``ApiKeyAuth.header("X-Api-Key", "s3cret")``."""
        return cls("header", header_name, value)

    @classmethod
    def query_param(cls, param_name: str, value: FieldValue[str] | str) -> "ApiKeyAuth":
        """Send the key as a query parameter, e.g. ``?api_key=s3cret``."""
        return cls("query", param_name, value)

    async def apply(self, request: httpx.Request, context: "WorkflowContext") -> None:
        value = str(self._value.resolve(context))

        if self.placement == "header":
            request.headers[self.name] = value
        else:
            request.url = request.url.copy_add_param(self.name, value)
