"""End-to-end workflows against the sample API.

These tests drive the sample requests and steps through a WorkflowContext.
By default the in-process app is reached through ASGITransport; with
``STEPWISE_SAMPLE_API_URL`` set they run against a live server instead.

To run these tests:
    pytest tests/workflows -v
"""

import pytest

from stepwise import CaptureNotFoundError, RemoteStepFailedError, WorkflowContext, static
from tests.fixtures.sample_workflows.requests import (
    AddOrderItem,
    CreateOrderRequest,
    CreateUserRequest,
    GetOrderRequest,
    GetUserRequest,
    LoginRequest,
    LoginResponse,
    OrderResponse,
    UserResponse,
)


async def login_and_create_user(context: WorkflowContext) -> UserResponse:
    await context.execute(LoginRequest())
    return await context.execute(CreateUserRequest())


# =============================================================================
# Happy paths
# =============================================================================


class TestOrderWorkflow:
    """Login, create a user, then place and read back orders."""

    async def test_create_order_with_default_item(self, workflow_context: WorkflowContext):
        user = await login_and_create_user(workflow_context)
        await workflow_context.build(AddOrderItem())

        order = await workflow_context.execute(CreateOrderRequest())

        assert order.status == "pending"
        assert order.user_id == user.id
        assert len(order.items) == 1
        assert order.items[0].product_name == "Widget"
        assert order.items[0].quantity == 1
        assert order.items[0].unit_price == pytest.approx(9.99)

    async def test_create_order_keeps_item_order(self, workflow_context: WorkflowContext):
        await login_and_create_user(workflow_context)
        await workflow_context.build(
            AddOrderItem(product_name=static("Gadget"), quantity=static(3), unit_price=static(4.5))
        )
        await workflow_context.build(AddOrderItem(product_name=static("Gizmo")))

        order = await workflow_context.execute(CreateOrderRequest())

        assert [item.product_name for item in order.items] == ["Gadget", "Gizmo"]
        assert order.items[0].quantity == 3
        assert order.items[0].unit_price == pytest.approx(4.5)

    async def test_create_order_drains_items(self, workflow_context: WorkflowContext):
        await login_and_create_user(workflow_context)
        await workflow_context.build(AddOrderItem())

        await workflow_context.execute(CreateOrderRequest())

        assert workflow_context.drain(AddOrderItem) == []

    async def test_get_order_returns_created_order(self, workflow_context: WorkflowContext):
        await login_and_create_user(workflow_context)
        await workflow_context.build(AddOrderItem())
        created = await workflow_context.execute(CreateOrderRequest())

        fetched = await workflow_context.execute(GetOrderRequest())

        assert fetched == created
        assert workflow_context.get("getOrder", OrderResponse) is fetched

    async def test_get_user_returns_created_user(self, workflow_context: WorkflowContext):
        created = await login_and_create_user(workflow_context)

        fetched = await workflow_context.execute(GetUserRequest())

        assert fetched == created
        assert fetched.first_name == "Test"
        assert fetched.last_name == "User"

    async def test_each_step_is_captured(self, workflow_context: WorkflowContext):
        await login_and_create_user(workflow_context)

        assert workflow_context.step_names == ["login", "createUser"]
        assert workflow_context.get("login", LoginResponse).token


# =============================================================================
# Failures
# =============================================================================


class TestOrderWorkflowFailures:
    """Missing prerequisites and server-side rejections."""

    async def test_create_order_without_user(self, workflow_context: WorkflowContext):
        await workflow_context.execute(LoginRequest())
        await workflow_context.build(AddOrderItem())

        with pytest.raises(CaptureNotFoundError) as exc_info:
            await workflow_context.execute(CreateOrderRequest())

        assert exc_info.value.step_name == "createUser"
        assert "createUser" in str(exc_info.value)
        assert not workflow_context.has_capture("createOrder")
        assert len(workflow_context.drain(AddOrderItem)) == 1

    async def test_create_user_without_login(self, workflow_context: WorkflowContext):
        with pytest.raises(CaptureNotFoundError) as exc_info:
            await workflow_context.execute(CreateUserRequest())

        assert exc_info.value.step_name == "login"

    async def test_order_for_unknown_user_is_rejected(self, workflow_context: WorkflowContext):
        await workflow_context.execute(LoginRequest())
        await workflow_context.build(AddOrderItem())

        with pytest.raises(RemoteStepFailedError) as exc_info:
            await workflow_context.execute(CreateOrderRequest(user_id=static("missing-user")))

        assert exc_info.value.status_code == 400
        assert "missing-user" in exc_info.value.body
        assert not workflow_context.has_capture("createOrder")
        assert len(workflow_context.drain(AddOrderItem)) == 1

    async def test_unknown_order_is_not_found(self, workflow_context: WorkflowContext):
        await workflow_context.execute(LoginRequest())

        with pytest.raises(RemoteStepFailedError) as exc_info:
            await workflow_context.execute(GetOrderRequest(order_id=static("no-such-order")))

        assert exc_info.value.status_code == 404
        assert exc_info.value.step_name == "getOrder"
        assert exc_info.value.url.endswith("/orders/no-such-order")
        assert not workflow_context.has_capture("getOrder")

    async def test_unknown_user_is_not_found(self, workflow_context: WorkflowContext):
        await workflow_context.execute(LoginRequest())

        with pytest.raises(RemoteStepFailedError) as exc_info:
            await workflow_context.execute(GetUserRequest(user_id=static("nobody")))

        assert exc_info.value.status_code == 404
        assert "User 'nobody' not found." in exc_info.value.body
