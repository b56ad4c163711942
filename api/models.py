"""Request and response models for the sample API.

All models exchange camelCase JSON (``firstName``) while exposing snake_case
attributes (``first_name``) in Python.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base model for sample API payloads serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Auth


class LoginRequest(ApiModel):
    """Credentials posted to ``/auth/login``.

    Any non-blank username and password pair is accepted.
    """

    username: str
    password: str


class LoginResponse(ApiModel):
    """Issued bearer token.

    Attributes:
        token: Opaque bearer token for subsequent requests.
        user_id: Identifier of the logged-in principal.
    """

    token: str
    user_id: str


# Users


class CreateUserRequest(ApiModel):
    """Request model for creating a user."""

    email: str
    first_name: str
    last_name: str
    role: str = "user"


class UserResponse(ApiModel):
    """A stored user."""

    id: str
    email: str
    first_name: str
    last_name: str
    role: str


# Orders


class OrderItem(ApiModel):
    """A line item on an order."""

    product_name: str
    quantity: int = Field(gt=0)
    unit_price: float = Field(ge=0)


class CreateOrderRequest(ApiModel):
    """Request model for placing an order.

    Attributes:
        user_id: The user placing the order; must exist.
        items: One or more line items.
    """

    user_id: str
    items: list[OrderItem] = Field(min_length=1)


class OrderResponse(ApiModel):
    """A stored order."""

    id: str
    user_id: str
    items: list[OrderItem]
    status: str


class ErrorResponse(BaseModel):
    """Body returned for every handled error."""

    error: str
