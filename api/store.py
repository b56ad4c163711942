"""In-memory storage for the sample API.

Holds issued tokens, users and orders for the lifetime of the process.
"""

import secrets
import threading
from uuid import uuid4

from api.models import (
    CreateOrderRequest,
    CreateUserRequest,
    LoginResponse,
    OrderResponse,
    UserResponse,
)


class SampleStore:
    """Thread-safe in-memory store for tokens, users and orders."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.tokens: dict[str, str] = {}
        self.users: dict[str, UserResponse] = {}
        self.orders: dict[str, OrderResponse] = {}

    def issue_token(self) -> LoginResponse:
        """Create a principal and a bearer token for it."""
        user_id = str(uuid4())
        token = secrets.token_urlsafe(32)
        with self._lock:
            self.tokens[token] = user_id
        return LoginResponse(token=token, user_id=user_id)

    def principal_for(self, token: str) -> str | None:
        """Return the principal a token was issued to, or None."""
        with self._lock:
            return self.tokens.get(token)

    def create_user(self, request: CreateUserRequest) -> UserResponse:
        user = UserResponse(
            id=str(uuid4()),
            email=request.email,
            first_name=request.first_name,
            last_name=request.last_name,
            role=request.role,
        )
        with self._lock:
            self.users[user.id] = user
        return user

    def get_user(self, user_id: str) -> UserResponse | None:
        with self._lock:
            return self.users.get(user_id)

    def create_order(self, request: CreateOrderRequest) -> OrderResponse:
        """Store a new pending order.

        Raises:
            ValueError: If the ordering user does not exist.
        """
        with self._lock:
            if request.user_id not in self.users:
                raise ValueError(f"User '{request.user_id}' does not exist.")
            order = OrderResponse(
                id=str(uuid4()),
                user_id=request.user_id,
                items=list(request.items),
                status="pending",
            )
            self.orders[order.id] = order
        return order

    def get_order(self, order_id: str) -> OrderResponse | None:
        with self._lock:
            return self.orders.get(order_id)
