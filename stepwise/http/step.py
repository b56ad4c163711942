"""HTTP step definitions.

An ``HttpStep`` declares how one request type maps onto the wire: the HTTP
method, the path template and the authentication strategy. Step classes are
registered on an ``HttpTarget``, which instantiates each one once and reuses
it for every request of that type.

Example:
    class GetOrderStep(HttpStep):
        request_type = GetOrderRequest
        method = "GET"
        path = "/orders/{orderId}"
        auth = BearerTokenAuth.from_context(
            lambda ctx: ctx.get("login", LoginResponse).token
        )
"""

import inspect
from typing import Any, ClassVar, Literal

from stepwise.http.auth import AuthProvider, NoAuth
from stepwise.requests import WorkflowRequest, response_type_of

# HTTP methods a step may use
HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]

# Methods that never carry a request body
BODYLESS_METHODS = frozenset({"GET", "DELETE", "HEAD", "OPTIONS"})


class HttpStep:
    """Base class for HTTP step definitions.

    Subclasses set the class attributes below. Steps hold no per-request
    state and are shared across every execution of their request type.

    Attributes:
        request_type: The ``WorkflowRequest`` subclass this step executes.
        method: The HTTP method.
        path: Path template; ``{fieldName}`` placeholders are filled from
            the resolved request fields.
        auth: Authentication applied to every request.
    """

    request_type: ClassVar[type[WorkflowRequest[Any]]]
    method: ClassVar[HttpMethod]
    path: ClassVar[str]
    auth: ClassVar[AuthProvider] = NoAuth()

    @classmethod
    def is_concrete(cls) -> bool:
        """Return True if the class fully declares a step."""
        return (
            not inspect.isabstract(cls)
            and all(hasattr(cls, attr) for attr in ("request_type", "method", "path"))
        )

    @property
    def response_type(self) -> Any:
        """The response type declared by ``request_type``."""
        return response_type_of(self.request_type)

    @property
    def carries_body(self) -> bool:
        """Whether requests sent with this step's method carry a JSON body."""
        return self.method not in BODYLESS_METHODS

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.method} {self.path})"
