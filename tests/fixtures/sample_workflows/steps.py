"""HTTP steps binding the sample requests to the sample API."""

from stepwise.http import BearerTokenAuth, HttpStep, NoAuth
from tests.fixtures.sample_workflows.requests import (
    CreateOrderRequest,
    CreateUserRequest,
    GetOrderRequest,
    GetUserRequest,
    LoginRequest,
    LoginResponse,
)

login_token = BearerTokenAuth.from_context(lambda ctx: ctx.get("login", LoginResponse).token)


class LoginStep(HttpStep):
    request_type = LoginRequest
    method = "POST"
    path = "/auth/login"
    auth = NoAuth()


class CreateUserStep(HttpStep):
    request_type = CreateUserRequest
    method = "POST"
    path = "/users"
    auth = login_token


class GetUserStep(HttpStep):
    request_type = GetUserRequest
    method = "GET"
    path = "/users/{userId}"
    auth = login_token


class CreateOrderStep(HttpStep):
    request_type = CreateOrderRequest
    method = "POST"
    path = "/orders"
    auth = login_token


class GetOrderStep(HttpStep):
    request_type = GetOrderRequest
    method = "GET"
    path = "/orders/{orderId}"
    auth = login_token
