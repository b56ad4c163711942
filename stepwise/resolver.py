"""Field resolution for workflow requests and buildable items.

Turns a request (or a buildable item) into a plain ordered dictionary of
field name -> resolved value, evaluating every ``FieldValue`` exactly once.
"""

import logging
from typing import TYPE_CHECKING, Any, Iterator, Protocol

from stepwise.field_values import FieldValue

if TYPE_CHECKING:
    from stepwise.context import WorkflowContext

logger = logging.getLogger(__name__)


class HasFields(Protocol):
    """Anything that can enumerate its own payload fields."""

    def iter_fields(self) -> Iterator[tuple[str, Any]]: ...


def resolve_fields(item: HasFields, context: "WorkflowContext") -> dict[str, Any]:
    """Resolve every payload field of ``item`` against ``context``.

    ``None`` fields stay ``None``, ``FieldValue`` fields are resolved, and
    any other value is passed through unchanged. The result keeps the
    declaration order of the fields.

    Args:
        item: A ``WorkflowRequest`` or ``BuildableRequest`` instance.
        context: The workflow context to resolve against.

    Returns:
        Mapping of field name to resolved value.

    Raises:
        CaptureNotFoundError: If a derived field references a step that
            has not been executed.
        CaptureTypeMismatchError: If a derived field reads a capture under
            the wrong type.
    """
    resolved: dict[str, Any] = {}

    for name, value in item.iter_fields():
        if value is None:
            resolved[name] = None
        elif isinstance(value, FieldValue):
            resolved[name] = value.resolve(context)
        else:
            resolved[name] = value

    logger.debug(f"Resolved {len(resolved)} field(s) for {type(item).__name__}")
    return resolved
