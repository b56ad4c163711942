"""Registration table mapping request types to HTTP step definitions.

Each request type has at most one step. Steps are registered explicitly,
one by one or by scanning a module for step classes, and instantiated once.
"""

import inspect
import logging
from types import ModuleType

from stepwise.exceptions import StepNotFoundError, StepRegistrationError
from stepwise.http.step import HttpStep
from stepwise.requests import response_type_of

logger = logging.getLogger(__name__)


class StepRegistry:
    """Resolves the ``HttpStep`` for a request's runtime type."""

    def __init__(self) -> None:
        self._steps: dict[type, HttpStep] = {}

    def __len__(self) -> int:
        return len(self._steps)

    def __contains__(self, request_type: object) -> bool:
        return request_type in self._steps

    def register(self, step: type[HttpStep] | HttpStep) -> HttpStep:
        """Register a step class or instance for its request type.

        Registering the same step class twice is a no-op.

        Args:
            step: An ``HttpStep`` subclass (instantiated here) or instance.

        Returns:
            The registered step instance.

        Raises:
            TypeError: If ``step`` does not declare a complete step.
            StepRegistrationError: If a different step is already registered
                for the same request type.
        """
        step_class = step if isinstance(step, type) else type(step)
        if not issubclass(step_class, HttpStep) or not step_class.is_concrete():
            raise TypeError(
                f"{step_class.__name__} is not a concrete HttpStep; it must set "
                f"request_type, method and path"
            )

        request_type = step_class.request_type
        existing = self._steps.get(request_type)
        if existing is not None:
            if type(existing) is step_class:
                return existing
            raise StepRegistrationError(request_type, type(existing), step_class)

        instance = step_class() if isinstance(step, type) else step
        self._steps[request_type] = instance
        logger.debug(f"Registered {instance!r} for {request_type.__name__}")
        return instance

    def register_module(self, module: ModuleType) -> list[HttpStep]:
        """Register every concrete step class defined in ``module``.

        Classes are registered in the order they are defined. Step classes
        imported into the module from elsewhere are skipped.

        Args:
            module: The module to scan.

        Returns:
            The registered step instances.
        """
        registered = []
        for value in vars(module).values():
            if (
                inspect.isclass(value)
                and issubclass(value, HttpStep)
                and value.__module__ == module.__name__
                and value.is_concrete()
            ):
                registered.append(self.register(value))
        return registered

    def resolve(self, request_type: type) -> HttpStep:
        """Return the step registered for ``request_type``.

        Args:
            request_type: The runtime type of the request being executed.

        Returns:
            The cached step instance.

        Raises:
            StepNotFoundError: If no step is registered for the type.
        """
        step = self._steps.get(request_type)
        if step is None:
            raise StepNotFoundError(request_type, response_type_of(request_type))
        return step
