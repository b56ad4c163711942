"""Deferred field values for workflow requests.

A field on a request may hold a ``FieldValue`` instead of a plain value. The
engine resolves it against the shared ``WorkflowContext`` right before the
request is sent, so a step can refer to data that only exists once earlier
steps have run.

Three variants are provided, each created through a factory function:

- ``static(value)``: always resolves to the same value.
- ``generated(producer)``: calls ``producer()`` on every resolve.
- ``from_context(selector)``: calls ``selector(context)`` on every resolve,
  typically to read a previous step's captured response.

Example:
    Declaring request defaults::

        class CreateOrderRequest(WorkflowRequest[OrderResponse]):
            step_name: str = "createOrder"
            target_key: str = "sample-api"

            user_id: FieldValue[str] = from_context(
                lambda ctx: ctx.get("createUser", UserResponse).id
            )
            product_name: FieldValue[str] = static("Widget")
            reference: FieldValue[str] = generated(lambda: uuid4().hex)
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from pydantic_core import core_schema

if TYPE_CHECKING:
    from stepwise.context import WorkflowContext


T = TypeVar("T")


class FieldValue(ABC, Generic[T]):
    """A request field value that is resolved at execution time.

    Field values are immutable. Copying a request, or pydantic copying a
    field default for a new instance, shares the same field value object.
    """

    @abstractmethod
    def resolve(self, context: "WorkflowContext") -> T:
        """Produce the value for the current point in the workflow.

        Args:
            context: The workflow context the request is executed in.

        Returns:
            The resolved plain value.
        """

    def __copy__(self) -> "FieldValue[T]":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "FieldValue[T]":
        return self

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        """Validate ``FieldValue[...]`` annotations with an isinstance check."""
        return core_schema.is_instance_schema(cls)


class StaticValue(FieldValue[T]):
    """A field value that always returns the value it was built with."""

    def __init__(self, value: T) -> None:
        self._value = value

    def resolve(self, context: "WorkflowContext") -> T:
        return self._value

    def __repr__(self) -> str:
        return f"static({self._value!r})"


class GeneratedValue(FieldValue[T]):
    """A field value that invokes a producer each time it is resolved.

    Use it for data that must differ between runs, such as random emails or
    unique identifiers. The producer must not touch the workflow context.
    """

    def __init__(self, producer: Callable[[], T]) -> None:
        self._producer = producer

    def resolve(self, context: "WorkflowContext") -> T:
        return self._producer()

    def __repr__(self) -> str:
        return f"generated({self._producer!r})"


class DerivedValue(FieldValue[T]):
    """A field value computed from the workflow context.

    The selector usually reads a previous step's captured response with
    ``context.get(step_name, ResponseType)``; that lookup raises
    ``CaptureNotFoundError`` or ``CaptureTypeMismatchError`` when the step
    has not run or captured something else.
    """

    def __init__(self, selector: Callable[["WorkflowContext"], T]) -> None:
        self._selector = selector

    def resolve(self, context: "WorkflowContext") -> T:
        return self._selector(context)

    def __repr__(self) -> str:
        return f"from_context({self._selector!r})"


def static(value: T) -> FieldValue[T]:
    """Create a field value that always resolves to ``value``."""
    return StaticValue(value)


def generated(producer: Callable[[], T]) -> FieldValue[T]:
    """Create a field value that calls ``producer`` on every resolve.

    Args:
        producer: Zero-argument callable producing a fresh value.

    Returns:
        A ``GeneratedValue`` wrapping the producer.
    """
    return GeneratedValue(producer)


def from_context(selector: Callable[["WorkflowContext"], T]) -> FieldValue[T]:
    """Create a field value resolved by looking into the workflow context.

    Use this in request defaults to reference the response of a previous
    step. In test bodies, prefer passing the previous step's return value
    directly with ``static``.

    Args:
        selector: Callable receiving the context and returning the value.

    Returns:
        A ``DerivedValue`` wrapping the selector.
    """
    return DerivedValue(selector)
