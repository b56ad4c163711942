"""Unit tests for HTTP auth providers (stepwise/http/auth.py)."""

import httpx
import pytest

from stepwise import CaptureNotFoundError, WorkflowContext, from_context
from stepwise.http import ApiKeyAuth, BearerTokenAuth, NoAuth


@pytest.fixture
def outgoing() -> httpx.Request:
    return httpx.Request("GET", "http://api.test/orders?page=2")


@pytest.fixture
def logged_in_context() -> WorkflowContext:
    context = WorkflowContext()
    context._captures["login"] = {"token": "t1"}
    return context


class TestNoAuth:
    async def test_leaves_request_untouched(self, outgoing: httpx.Request) -> None:
        headers_before = dict(outgoing.headers)

        await NoAuth().apply(outgoing, WorkflowContext())

        assert dict(outgoing.headers) == headers_before
        assert str(outgoing.url) == "http://api.test/orders?page=2"


class TestBearerTokenAuth:
    async def test_static_token(self, outgoing: httpx.Request) -> None:
        await BearerTokenAuth.with_static_token("abc").apply(outgoing, WorkflowContext())
        assert outgoing.headers["Authorization"] == "Bearer abc"

    async def test_token_from_context(
        self, outgoing: httpx.Request, logged_in_context: WorkflowContext
    ) -> None:
        auth = BearerTokenAuth.from_context(lambda ctx: ctx.get("login", dict)["token"])

        await auth.apply(outgoing, logged_in_context)

        assert outgoing.headers["Authorization"] == "Bearer t1"

    async def test_token_from_missing_step_fails(self, outgoing: httpx.Request) -> None:
        auth = BearerTokenAuth.from_context(lambda ctx: ctx.get("login", dict)["token"])

        with pytest.raises(CaptureNotFoundError):
            await auth.apply(outgoing, WorkflowContext())


class TestApiKeyAuth:
    async def test_header_placement(self, outgoing: httpx.Request) -> None:
        await ApiKeyAuth.header("X-Api-Key", "s3cret").apply(outgoing, WorkflowContext())

        assert outgoing.headers["X-Api-Key"] == "s3cret"
        assert "api_key" not in outgoing.url.params

    async def test_query_param_placement_keeps_existing_params(
        self, outgoing: httpx.Request
    ) -> None:
        await ApiKeyAuth.query_param("api_key", "s3 cret").apply(outgoing, WorkflowContext())

        assert outgoing.url.params["api_key"] == "s3 cret"
        assert outgoing.url.params["page"] == "2"
        assert "X-Api-Key" not in outgoing.headers

    async def test_value_from_context(
        self, outgoing: httpx.Request, logged_in_context: WorkflowContext
    ) -> None:
        auth = ApiKeyAuth.header(
            "X-Api-Key", from_context(lambda ctx: ctx.get("login", dict)["token"])
        )

        await auth.apply(outgoing, logged_in_context)

        assert outgoing.headers["X-Api-Key"] == "t1"

    async def test_non_string_value_is_stringified(self, outgoing: httpx.Request) -> None:
        context = WorkflowContext()
        context._captures["account"] = {"key": 4242}
        key = from_context(lambda ctx: ctx.get("account", dict)["key"])

        await ApiKeyAuth.header("X-Api-Key", key).apply(outgoing, context)
        await ApiKeyAuth.query_param("api_key", key).apply(outgoing, context)

        assert outgoing.headers["X-Api-Key"] == "4242"
        assert outgoing.url.params["api_key"] == "4242"
