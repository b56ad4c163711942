"""Wire-format helpers for the HTTP target.

Converts resolved request fields into a URL and a JSON body, and turns a
response body back into the declared response type.

This is an internal module and should not be imported directly by users.
"""

import re
from functools import lru_cache
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel
from pydantic_core import to_jsonable_python

from stepwise.exceptions import EmptyResponseBodyError, ResponseValidationError


def substitute_path(path: str, fields: dict[str, Any]) -> tuple[str, set[str]]:
    """Fill ``{placeholder}`` segments of a path template from resolved fields.

    A field matches a placeholder named after either its python name
    (``order_id``) or its camelCase wire name (``orderId``), ignoring case.
    Values are URL-escaped; ``None`` becomes an empty segment.

    Args:
        path: The step's path template.
        fields: Resolved request fields.

    Returns:
        The substituted path and the names of the fields it consumed.
    """
    consumed: set[str] = set()

    for name, value in fields.items():
        escaped = quote("" if value is None else str(value), safe="")
        for placeholder in dict.fromkeys((name, to_camel(name))):
            pattern = re.compile(re.escape(f"{{{placeholder}}}"), re.IGNORECASE)
            if pattern.search(path):
                path = pattern.sub(lambda _: escaped, path)
                consumed.add(name)

    return path, consumed


def join_url(base_url: str, path: str) -> str:
    """Join a base address and a path with exactly one separator."""
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


def to_wire(value: Any) -> Any:
    """Convert a resolved value into JSON-ready data.

    Dictionary keys are camelCased and ``None`` entries dropped, at every
    nesting level. Pydantic models are dumped by alias first.
    """
    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json", by_alias=True, exclude_none=True)

    if isinstance(value, dict):
        return {
            to_camel(key) if isinstance(key, str) else key: to_wire(item)
            for key, item in value.items()
            if item is not None
        }
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_wire(item) for item in value]

    return to_jsonable_python(value)


def build_body(fields: dict[str, Any], consumed: set[str]) -> dict[str, Any] | None:
    """Build the JSON body from the fields not consumed by the path.

    Returns:
        The body object, or None if no field is left to send.
    """
    remaining = {name: value for name, value in fields.items() if name not in consumed}
    if not remaining:
        return None
    return to_wire(remaining)


@lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


def parse_response(
    response: httpx.Response,
    response_type: Any,
    step_name: str,
    url: str,
) -> Any:
    """Deserialize a successful response into ``response_type``.

    Args:
        response: The HTTP response with a 2xx status.
        response_type: The type declared by the request.
        step_name: The step being executed, for error messages.
        url: The URL the step was sent to, for error messages.

    Returns:
        The validated response object.

    Raises:
        EmptyResponseBodyError: If the body is empty, JSON ``null`` or not
            JSON at all.
        ResponseValidationError: If the JSON does not fit ``response_type``.
    """
    if not response.content.strip():
        raise EmptyResponseBodyError(step_name, url)

    try:
        payload = response.json()
    except ValueError as e:
        raise EmptyResponseBodyError(step_name, url) from e

    if payload is None:
        raise EmptyResponseBodyError(step_name, url)

    try:
        return _adapter(response_type).validate_python(payload)
    except PydanticValidationError as e:
        raise ResponseValidationError(step_name, url, response_type, e.errors()) from e
