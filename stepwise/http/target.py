"""HTTP execution target.

``HttpTarget`` sends workflow requests to one base address over HTTP. For
each request it looks up the registered ``HttpStep``, resolves the request's
fields, fills path parameters, serializes the remaining fields as a JSON
body, applies the step's authentication and parses the response into the
request's declared response type.

Every call opens its own ``httpx.AsyncClient`` and closes it before
returning. Connections are never shared between steps, and redirects are
never followed: a step asserts the exact behavior of one endpoint.
"""

import logging
from types import ModuleType
from typing import Iterable, TypeVar

import httpx

from stepwise.context import WorkflowContext
from stepwise.exceptions import (
    RemoteStepFailedError,
    StepConnectionError,
    StepTimeoutError,
)
from stepwise.http._wire import build_body, join_url, parse_response, substitute_path
from stepwise.http.registry import StepRegistry
from stepwise.http.step import HttpStep
from stepwise.requests import WorkflowRequest
from stepwise.resolver import resolve_fields
from stepwise.target import Target

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT")


class HttpTarget(Target):
    """An execution target that sends requests over HTTP.

    Attributes:
        base_url: The base address every step path is appended to.
        timeout: Request timeout in seconds.
        headers: Headers sent with every request.
        steps: The registration table of step definitions.
    """

    def __init__(
        self,
        base_url: str,
        steps: Iterable[type[HttpStep] | HttpStep] = (),
        *,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the target.

        Args:
            base_url: The base address, e.g. ``http://localhost:8000``.
            steps: Step classes or instances to register up front.
            timeout: Request timeout in seconds.
            headers: Headers sent with every request.
            transport: Custom transport (e.g., ASGITransport for testing).
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.headers = dict(headers or {})
        self.steps = StepRegistry()
        self._transport = transport

        for step in steps:
            self.steps.register(step)

    def describe(self) -> str:
        return f"HttpTarget {self.base_url}"

    def register(self, step: type[HttpStep] | HttpStep) -> "HttpTarget":
        """Register a step definition; returns the target for chaining."""
        self.steps.register(step)
        return self

    def register_module(self, module: ModuleType) -> "HttpTarget":
        """Register every step class defined in ``module``."""
        self.steps.register_module(module)
        return self

    async def execute(
        self,
        request: WorkflowRequest[ResponseT],
        context: WorkflowContext,
    ) -> ResponseT:
        """Send ``request`` and return its parsed response.

        Args:
            request: The request to execute.
            context: The workflow context to resolve fields against.

        Returns:
            The response body validated into the request's response type.

        Raises:
            StepNotFoundError: If no step is registered for the request type.
            RemoteStepFailedError: If the server returns a non-2xx status.
            EmptyResponseBodyError: If a successful response has no body.
            ResponseValidationError: If the body does not fit the response type.
            StepConnectionError: If the connection fails.
            StepTimeoutError: If the request times out.
        """
        step = self.steps.resolve(type(request))
        fields = resolve_fields(request, context)

        path, consumed = substitute_path(step.path, fields)
        url = join_url(self.base_url, path)
        body = build_body(fields, consumed) if step.carries_body else None

        async with httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=False,
            transport=self._transport,
        ) as client:
            http_request = client.build_request(
                step.method,
                url,
                headers=self.headers,
                json=body,
            )
            await step.auth.apply(http_request, context)

            logger.debug(f"{request.step_name}: {step.method} {http_request.url}")
            response = await self._send(client, http_request, request.step_name, url)

        if not response.is_success:
            logger.warning(
                f"Step '{request.step_name}' failed: {step.method} {url} "
                f"returned {response.status_code}"
            )
            raise RemoteStepFailedError(
                step_name=request.step_name,
                url=url,
                status_code=response.status_code,
                body=response.text,
                location=response.headers.get("location"),
            )

        return parse_response(response, step.response_type, request.step_name, url)

    async def _send(
        self,
        client: httpx.AsyncClient,
        http_request: httpx.Request,
        step_name: str,
        url: str,
    ) -> httpx.Response:
        try:
            return await client.send(http_request)
        except httpx.ConnectError as e:
            raise StepConnectionError(step_name, url, cause=e) from e
        except httpx.TimeoutException as e:
            raise StepTimeoutError(step_name, url, timeout=self.timeout) from e
