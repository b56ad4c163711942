"""Execution target interface.

A target is a combination of location and protocol. Each target knows how
to execute requests against one endpoint using one transport. ``HttpTarget``
in ``stepwise.http`` is the implementation shipped with the engine.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from stepwise.context import WorkflowContext
    from stepwise.requests import WorkflowRequest

ResponseT = TypeVar("ResponseT")


class Target(ABC):
    """Base class for execution targets."""

    @abstractmethod
    async def execute(
        self,
        request: "WorkflowRequest[ResponseT]",
        context: "WorkflowContext",
    ) -> ResponseT:
        """Execute ``request`` and return its typed response.

        Implementations resolve the request's fields against ``context``,
        perform the remote call and parse the response. They must not store
        the response; the context captures it.

        Args:
            request: The request to execute.
            context: The workflow context the request runs in.

        Returns:
            The parsed response.
        """

    def describe(self) -> str:
        """Return a short description used in log messages."""
        return type(self).__name__

    def __repr__(self) -> str:
        return f"<{self.describe()}>"
