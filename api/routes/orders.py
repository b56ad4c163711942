"""Order endpoints."""

from fastapi import APIRouter, status

from api.dependencies import PrincipalDep, SampleStoreDep
from api.exceptions import ResourceNotFoundError
from api.models import CreateOrderRequest, OrderResponse

router = APIRouter(
    prefix="/orders",
    tags=["orders"],
)


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
async def create_order(request: CreateOrderRequest, store: SampleStoreDep, principal: PrincipalDep):
    """Place an order for an existing user.

    New orders always start in the "pending" status.

    Args:
        request: The ordering user and the line items.
        store: The SampleStore instance (injected by FastAPI).
        principal: The authenticated caller (injected by FastAPI).

    Returns:
        The stored order.

    Raises:
        ValueError: If the user does not exist (mapped to HTTP 400).
    """
    return store.create_order(request)


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str, store: SampleStoreDep, principal: PrincipalDep):
    """Get an order by id.

    Raises:
        ResourceNotFoundError: If no order has that id.
    """
    order = store.get_order(order_id)
    if order is None:
        raise ResourceNotFoundError("Order", order_id)
    return order
