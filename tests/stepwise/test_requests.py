"""Unit tests for request and buildable item base models.

Covers payload field enumeration, clone-with-override semantics, the
response type lookup and the camelCase response base model.
"""

from typing import Any

import pytest
from pydantic import ValidationError

from stepwise import (
    BuildableRequest,
    CamelModel,
    FieldValue,
    WorkflowRequest,
    response_type_of,
    static,
)


class ProfileResponse(CamelModel):
    user_id: str
    display_name: str | None = None


class ProfileRequest(WorkflowRequest[ProfileResponse]):
    step_name: str = "test"
    target_key: str = "test-api"

    name: FieldValue[str] = static("Alice")
    count: FieldValue[int] = static(42)
    note: str | None = None


class LineItem(BuildableRequest):
    product: FieldValue[str] = static("Widget")
    quantity: int = 1


# =============================================================================
# Field enumeration
# =============================================================================


class TestIterFields:
    """Tests for iter_fields on requests and buildable items."""

    def test_excludes_envelope_fields(self) -> None:
        names = [name for name, _ in ProfileRequest().iter_fields()]

        assert "step_name" not in names
        assert "target_key" not in names

    def test_preserves_declaration_order(self) -> None:
        names = [name for name, _ in ProfileRequest().iter_fields()]
        assert names == ["name", "count", "note"]

    def test_yields_unresolved_values(self) -> None:
        fields = dict(ProfileRequest().iter_fields())

        assert isinstance(fields["name"], FieldValue)
        assert fields["note"] is None

    def test_buildable_yields_every_field(self) -> None:
        assert [name for name, _ in LineItem().iter_fields()] == ["product", "quantity"]


# =============================================================================
# Immutability and overrides
# =============================================================================


class TestOverrides:
    """Requests are values: overrides produce new requests."""

    def test_constructor_override_leaves_default_untouched(self) -> None:
        default = ProfileRequest()
        bob = ProfileRequest(name=static("Bob"))

        assert dict(bob.iter_fields())["name"] is not dict(default.iter_fields())["name"]
        assert bob != default

    def test_model_copy_override_does_not_mutate_original(self) -> None:
        original = ProfileRequest()
        original_name = dict(original.iter_fields())["name"]

        clone = original.model_copy(update={"name": static("Bob")})

        assert dict(original.iter_fields())["name"] is original_name
        assert dict(clone.iter_fields())["name"] is not original_name

    def test_requests_are_frozen(self) -> None:
        request = ProfileRequest()
        with pytest.raises(ValidationError):
            request.name = static("Bob")

    def test_step_name_can_be_overridden_per_instance(self) -> None:
        assert ProfileRequest(step_name="second").step_name == "second"

    def test_field_value_annotation_rejects_plain_values(self) -> None:
        with pytest.raises(ValidationError):
            ProfileRequest(name="Bob")


# =============================================================================
# Response types
# =============================================================================


class TestResponseTypeOf:
    """Tests for response_type_of."""

    def test_returns_parametrized_response_type(self) -> None:
        assert response_type_of(ProfileRequest) is ProfileResponse

    def test_inherited_through_subclasses(self) -> None:
        class RenamedRequest(ProfileRequest):
            step_name: str = "renamed"

        assert response_type_of(RenamedRequest) is ProfileResponse

    def test_unparametrized_request_returns_any(self) -> None:
        class LooseRequest(WorkflowRequest):
            step_name: str = "loose"
            target_key: str = "api"

        assert response_type_of(LooseRequest) is Any


class TestCamelModel:
    """Tests for the camelCase response base model."""

    def test_reads_camel_case_keys(self) -> None:
        response = ProfileResponse.model_validate({"userId": "u1", "displayName": "Al"})

        assert response.user_id == "u1"
        assert response.display_name == "Al"

    def test_accepts_field_names(self) -> None:
        assert ProfileResponse(user_id="u1").user_id == "u1"
