"""Workflow context: shared state for one workflow execution.

The context holds the named targets a workflow can talk to, the captured
response of every executed step (keyed by step name), and the items built
with ``build`` but not yet consumed.

A context belongs to one workflow. Steps are awaited one after the other;
nothing here is safe to drive from several coroutines at once, and separate
workflows use separate contexts.
"""

import logging
from typing import Any, TypeVar

from stepwise.exceptions import (
    CaptureNotFoundError,
    CaptureTypeMismatchError,
    UnknownTargetError,
)
from stepwise.requests import BuildableRequest, WorkflowRequest
from stepwise.resolver import resolve_fields
from stepwise.target import Target

logger = logging.getLogger(__name__)

T = TypeVar("T")
ResponseT = TypeVar("ResponseT")


class WorkflowContext:
    """Carries shared state across all steps in a workflow execution.

    Example:
        context = WorkflowContext().register_target(
            "sample-api", HttpTarget("http://localhost:8000", steps=[LoginStep])
        )
        login = await context.execute(LoginRequest())
        token = context.get("login", LoginResponse).token
    """

    def __init__(self) -> None:
        self._targets: dict[str, Target] = {}
        self._captures: dict[str, Any] = {}
        self._accumulated: dict[type[BuildableRequest], list[dict[str, Any]]] = {}

    @property
    def target_keys(self) -> list[str]:
        """Keys of all registered targets, in registration order."""
        return list(self._targets)

    @property
    def step_names(self) -> list[str]:
        """Names of all steps with a captured response."""
        return list(self._captures)

    def register_target(self, key: str, target: Target) -> "WorkflowContext":
        """Register a named target, replacing any target with the same key.

        Args:
            key: The key requests use in their ``target_key`` field.
            target: The target that executes those requests.

        Returns:
            The context itself, for chaining.
        """
        self._targets[key] = target
        logger.debug(f"Registered target '{key}': {target!r}")
        return self

    async def execute(self, request: WorkflowRequest[ResponseT]) -> ResponseT:
        """Execute a request against its target and capture the response.

        The response is stored under ``request.step_name``, replacing any
        earlier capture with that name. If the target raises, nothing is
        captured, items drained while resolving the request are restored
        and the error propagates.

        Args:
            request: The request to execute.

        Returns:
            The typed response returned by the target.

        Raises:
            UnknownTargetError: If no target is registered for
                ``request.target_key``.
        """
        target = self._targets.get(request.target_key)
        if target is None:
            raise UnknownTargetError(request.target_key, self.target_keys)

        logger.info(f"Executing step '{request.step_name}' on target '{request.target_key}'")
        pending = {item_type: list(items) for item_type, items in self._accumulated.items()}
        try:
            response = await target.execute(request, self)
        except BaseException:
            self._accumulated = pending
            raise

        if request.step_name in self._captures:
            logger.debug(f"Overwriting captured response for step '{request.step_name}'")
        self._captures[request.step_name] = response
        logger.info(f"Captured {type(response).__name__} for step '{request.step_name}'")
        return response

    async def build(self, item: BuildableRequest) -> None:
        """Resolve a buildable item and add it to the accumulated list.

        Items are grouped by their class. Nothing is sent anywhere; a later
        request consumes them through ``drain``.

        Args:
            item: The item to resolve and accumulate.
        """
        resolved = resolve_fields(item, self)
        self._accumulated.setdefault(type(item), []).append(resolved)
        logger.debug(
            f"Accumulated {type(item).__name__} "
            f"({len(self._accumulated[type(item)])} pending)"
        )

    def drain(self, item_type: type[BuildableRequest]) -> list[dict[str, Any]]:
        """Return and remove all accumulated items of ``item_type``.

        Args:
            item_type: The ``BuildableRequest`` subclass to drain.

        Returns:
            The resolved field maps in build order, or an empty list if
            none were built since the last drain.
        """
        return self._accumulated.pop(item_type, [])

    def get(self, step_name: str, expected_type: type[T]) -> T:
        """Return the captured response of a previous step.

        Args:
            step_name: The step whose response to read.
            expected_type: The type the response must be an instance of.
                Pass ``object`` to accept any capture.

        Returns:
            The captured response.

        Raises:
            CaptureNotFoundError: If the step has not been executed.
            CaptureTypeMismatchError: If the capture is not an instance of
                ``expected_type``.
        """
        if step_name not in self._captures:
            raise CaptureNotFoundError(step_name, self.step_names)

        value = self._captures[step_name]
        if not isinstance(value, expected_type):
            raise CaptureTypeMismatchError(step_name, expected_type, type(value))

        return value

    def has_capture(self, step_name: str) -> bool:
        """Return True if a response has been captured for ``step_name``."""
        return step_name in self._captures
