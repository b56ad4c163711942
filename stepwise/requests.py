"""Base models for workflow requests, buildable items and responses.

A workflow request is an immutable pydantic model describing one step: the
name its response is captured under, the target it is sent to, and a set of
payload fields. Payload fields hold either a ``FieldValue`` (resolved at
execution time) or a plain value.

Requests are values. Overriding a field produces a new request and leaves the
original untouched::

    default_order = CreateOrderRequest()
    bulk_order = CreateOrderRequest(quantity=static(50))
    # or: default_order.model_copy(update={"quantity": static(50)})
"""

from functools import lru_cache
from typing import Any, ClassVar, Generic, Iterator, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

ResponseT = TypeVar("ResponseT")


class CamelModel(BaseModel):
    """Base class for response shapes exchanged as camelCase JSON.

    Attributes are declared in snake_case and populated from camelCase keys
    (``userId`` -> ``user_id``). Either form is accepted on input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class WorkflowRequest(BaseModel, Generic[ResponseT]):
    """Base model for all workflow requests.

    ``ResponseT`` is the type returned by executing the request. Subclasses
    set defaults for the two envelope fields and declare payload fields.

    Args:
        step_name: Name the response is captured under in the context.
        target_key: Key of the registered target that executes the request.

    Example:
        class LoginRequest(WorkflowRequest[LoginResponse]):
            step_name: str = "login"
            target_key: str = "sample-api"

            username: FieldValue[str] = static("alice")
            password: FieldValue[str] = static("secret")
    """

    model_config = ConfigDict(frozen=True)

    envelope_fields: ClassVar[frozenset[str]] = frozenset({"step_name", "target_key"})

    step_name: str
    target_key: str

    def iter_fields(self) -> Iterator[tuple[str, Any]]:
        """Yield ``(name, value)`` for each payload field in declaration order.

        The envelope fields (``step_name``, ``target_key``) are skipped.
        Values are returned as stored; ``FieldValue`` objects are not
        resolved here.
        """
        for name in type(self).model_fields:
            if name not in self.envelope_fields:
                yield name, getattr(self, name)


class BuildableRequest(BaseModel):
    """A pure data record that accumulates into the context without a call.

    Use ``await context.build(item)`` to add instances, then read them back
    with ``context.drain(ItemType)``, usually from a ``from_context`` default
    on the request that submits them.
    """

    model_config = ConfigDict(frozen=True)

    def iter_fields(self) -> Iterator[tuple[str, Any]]:
        """Yield ``(name, value)`` for every field in declaration order."""
        for name in type(self).model_fields:
            yield name, getattr(self, name)


@lru_cache(maxsize=None)
def response_type_of(request_type: type[WorkflowRequest[Any]]) -> Any:
    """Return the response type a request class was parametrized with.

    Walks the class hierarchy looking for the ``WorkflowRequest[X]``
    parametrization pydantic created for the request class.

    Args:
        request_type: A concrete ``WorkflowRequest`` subclass.

    Returns:
        The ``ResponseT`` argument, or ``Any`` if the class was never
        parametrized.
    """
    for base in request_type.__mro__:
        metadata = getattr(base, "__pydantic_generic_metadata__", None)
        if not metadata:
            continue
        if metadata.get("origin") is WorkflowRequest and metadata.get("args"):
            return metadata["args"][0]
    return Any
