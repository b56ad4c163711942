"""Exception hierarchy for the StepWise workflow engine.

This module defines all exceptions that can be raised while building and
executing a workflow. The hierarchy is designed to allow catching specific
error types or broader categories as needed.

Exception Hierarchy:
    StepWiseError (base)
    ├── WorkflowContextError - Context lookups and dispatch
    │   ├── UnknownTargetError - No target registered for a key
    │   ├── CaptureNotFoundError - Step has not been executed yet
    │   └── CaptureTypeMismatchError - Captured response has another type
    ├── StepDefinitionError - Step registration and lookup
    │   ├── StepNotFoundError - No step registered for a request type
    │   └── StepRegistrationError - Conflicting step for a request type
    └── HttpStepError - An HTTP step failed on the wire
        ├── RemoteStepFailedError - Non-success status code
        ├── EmptyResponseBodyError - Success status without a body
        ├── ResponseValidationError - Body does not fit the response type
        ├── StepConnectionError - Network/connection failures
        └── StepTimeoutError - Request timeout

Every error is terminal: nothing in the engine retries. A failed step aborts
the workflow that awaited it.

Example:
    Catching a failed remote step::

        try:
            await context.execute(GetOrderRequest())
        except RemoteStepFailedError as e:
            print(f"{e.step_name} returned {e.status_code}: {e.body}")

    Catching everything the engine raises::

        try:
            await context.execute(LoginRequest())
        except StepWiseError as e:
            print(f"Workflow aborted: {e}")
"""

from typing import Any


def _type_name(value: Any) -> str:
    return getattr(value, "__name__", repr(value))


class StepWiseError(Exception):
    """Base exception for all StepWise errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
        """
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation of the error."""
        return self.message


# =============================================================================
# Workflow context errors
# =============================================================================


class WorkflowContextError(StepWiseError):
    """A workflow context operation failed.

    Raised when the context cannot dispatch a request or cannot find the
    captured response a step refers to.
    """


class UnknownTargetError(WorkflowContextError):
    """No target is registered under the requested key.

    Attributes:
        target_key: The key the request asked for.
        available: The target keys registered on the context.
    """

    def __init__(self, target_key: str, available: list[str]) -> None:
        """Initialize the exception.

        Args:
            target_key: The key the request asked for.
            available: The target keys registered on the context.
        """
        self.target_key = target_key
        self.available = available
        super().__init__(
            f"No target registered for key '{target_key}'. "
            f"Available targets: [{', '.join(available)}]"
        )


class CaptureNotFoundError(WorkflowContextError):
    """No response has been captured for the requested step.

    Attributes:
        step_name: The step whose response was requested.
        available: The step names captured so far.
    """

    def __init__(self, step_name: str, available: list[str]) -> None:
        """Initialize the exception.

        Args:
            step_name: The step whose response was requested.
            available: The step names captured so far.
        """
        self.step_name = step_name
        self.available = available
        super().__init__(
            f"No captured response found for step '{step_name}'. "
            f"Ensure the step has been executed before referencing its output. "
            f"Available steps: [{', '.join(available)}]"
        )


class CaptureTypeMismatchError(WorkflowContextError):
    """The captured response is not an instance of the expected type.

    Attributes:
        step_name: The step whose response was requested.
        expected_type: The type the caller asked for.
        actual_type: The runtime type of the captured response.
    """

    def __init__(self, step_name: str, expected_type: type, actual_type: type) -> None:
        """Initialize the exception.

        Args:
            step_name: The step whose response was requested.
            expected_type: The type the caller asked for.
            actual_type: The runtime type of the captured response.
        """
        self.step_name = step_name
        self.expected_type = expected_type
        self.actual_type = actual_type
        super().__init__(
            f"Captured response for step '{step_name}' is of type "
            f"'{_type_name(actual_type)}', not '{_type_name(expected_type)}'."
        )


# =============================================================================
# Step definition errors
# =============================================================================


class StepDefinitionError(StepWiseError):
    """A step definition could not be registered or found."""


class StepNotFoundError(StepDefinitionError):
    """No step definition is registered for a request type.

    Attributes:
        request_type: The request class that was dispatched.
        response_type: The response type the request declares.
    """

    def __init__(self, request_type: type, response_type: Any) -> None:
        """Initialize the exception.

        Args:
            request_type: The request class that was dispatched.
            response_type: The response type the request declares.
        """
        self.request_type = request_type
        self.response_type = response_type
        request_name = _type_name(request_type)
        response_name = _type_name(response_type)
        super().__init__(
            f"No HttpStep for {request_name} -> {response_name} is registered. "
            f"Define a class that extends HttpStep with "
            f"request_type = {request_name} and register it on the target."
        )


class StepRegistrationError(StepDefinitionError):
    """Two different step definitions claim the same request type.

    Attributes:
        request_type: The request class both steps are bound to.
        existing: The step class registered first.
        duplicate: The step class that was rejected.
    """

    def __init__(self, request_type: type, existing: type, duplicate: type) -> None:
        """Initialize the exception.

        Args:
            request_type: The request class both steps are bound to.
            existing: The step class registered first.
            duplicate: The step class that was rejected.
        """
        self.request_type = request_type
        self.existing = existing
        self.duplicate = duplicate
        super().__init__(
            f"Cannot register {duplicate.__name__} for {request_type.__name__}: "
            f"{existing.__name__} is already registered for that request type."
        )


# =============================================================================
# HTTP step errors
# =============================================================================


class HttpStepError(StepWiseError):
    """An HTTP step failed while talking to the remote service.

    Attributes:
        message: Human-readable error description.
        step_name: The step that failed.
        url: The URL the step was sent to.
    """

    def __init__(self, message: str, step_name: str, url: str) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            step_name: The step that failed.
            url: The URL the step was sent to.
        """
        self.step_name = step_name
        self.url = url
        super().__init__(message)


class RemoteStepFailedError(HttpStepError):
    """The remote service returned a non-success status code.

    Redirects are reported here too since steps never follow them.

    Attributes:
        status_code: HTTP status code from the server.
        body: Raw response body text.
        location: The Location header, if the server sent one.
    """

    def __init__(
        self,
        step_name: str,
        url: str,
        status_code: int,
        body: str,
        location: str | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            step_name: The step that failed.
            url: The URL the step was sent to.
            status_code: HTTP status code from the server.
            body: Raw response body text.
            location: The Location header, if the server sent one.
        """
        self.status_code = status_code
        self.body = body
        self.location = location
        location_hint = f" Redirect location: {location}." if location else ""
        super().__init__(
            f"Step '{step_name}' failed with status {status_code}. "
            f"URL: {url}.{location_hint} Body: {body}",
            step_name=step_name,
            url=url,
        )


class EmptyResponseBodyError(HttpStepError):
    """The remote service returned a success status but no usable body."""

    def __init__(self, step_name: str, url: str) -> None:
        """Initialize the exception.

        Args:
            step_name: The step that failed.
            url: The URL the step was sent to.
        """
        super().__init__(
            f"Step '{step_name}' returned an empty response body. URL: {url}.",
            step_name=step_name,
            url=url,
        )


class ResponseValidationError(HttpStepError):
    """The response body does not fit the declared response type.

    Attributes:
        errors: Validation errors reported by pydantic.
    """

    def __init__(
        self,
        step_name: str,
        url: str,
        response_type: Any,
        errors: list[dict[str, Any]],
    ) -> None:
        """Initialize the exception.

        Args:
            step_name: The step that failed.
            url: The URL the step was sent to.
            response_type: The response type the body was parsed into.
            errors: Validation errors reported by pydantic.
        """
        self.errors = errors
        messages = "; ".join(
            f"{'.'.join(str(part) for part in err.get('loc', ())) or 'body'}: "
            f"{err.get('msg', 'invalid')}"
            for err in errors
        )
        super().__init__(
            f"Step '{step_name}' returned a body that is not a valid "
            f"{_type_name(response_type)}. URL: {url}. Errors: {messages}",
            step_name=step_name,
            url=url,
        )


class StepConnectionError(HttpStepError):
    """Failed to connect to the remote service.

    Attributes:
        cause: The underlying transport exception.
    """

    def __init__(self, step_name: str, url: str, cause: Exception | None = None) -> None:
        """Initialize the exception.

        Args:
            step_name: The step that failed.
            url: The URL that failed to connect.
            cause: The underlying transport exception.
        """
        self.cause = cause
        super().__init__(
            f"Step '{step_name}' failed to connect to {url}",
            step_name=step_name,
            url=url,
        )


class StepTimeoutError(HttpStepError):
    """The request to the remote service timed out.

    Attributes:
        timeout: The timeout value in seconds.
    """

    def __init__(self, step_name: str, url: str, timeout: float | None = None) -> None:
        """Initialize the exception.

        Args:
            step_name: The step that failed.
            url: The URL that timed out.
            timeout: The timeout value in seconds.
        """
        self.timeout = timeout
        super().__init__(
            f"Step '{step_name}' timed out after {timeout}s. URL: {url}",
            step_name=step_name,
            url=url,
        )
