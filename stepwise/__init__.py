"""StepWise: declarative multi-step workflows against remote services.

A workflow is an ordered script of awaited steps. Each step is a typed,
immutable request whose fields may be static, generated per run, or derived
from the response of an earlier step. The ``WorkflowContext`` resolves those
fields at execution time, sends the request to a named target and captures
the typed response under the request's step name.

Example:
    Running a two-step workflow::

        from stepwise import WorkflowContext
        from stepwise.http import HttpTarget

        context = WorkflowContext().register_target(
            "sample-api",
            HttpTarget("http://localhost:8000", steps=[LoginStep, CreateUserStep]),
        )

        await context.execute(LoginRequest())
        user = await context.execute(CreateUserRequest())

Exports:
    WorkflowContext: Shared state for one workflow execution.
    WorkflowRequest: Base model for requests sent to a target.
    BuildableRequest: Base model for items accumulated without a call.
    CamelModel: Base model for camelCase JSON response shapes.
    Target: Interface implemented by execution targets.
    FieldValue: Deferred field value; create with static, generated,
        or from_context.

    Exceptions:
        StepWiseError: Base exception for all engine errors.
        UnknownTargetError: No target registered for a request's key.
        CaptureNotFoundError: Referenced step has not been executed.
        CaptureTypeMismatchError: Captured response has another type.
        StepNotFoundError: No step definition for a request type.
        RemoteStepFailedError: Remote call returned a non-success status.
        EmptyResponseBodyError: Successful call returned no body.
"""

from stepwise.context import WorkflowContext
from stepwise.exceptions import (
    CaptureNotFoundError,
    CaptureTypeMismatchError,
    EmptyResponseBodyError,
    HttpStepError,
    RemoteStepFailedError,
    ResponseValidationError,
    StepConnectionError,
    StepDefinitionError,
    StepNotFoundError,
    StepRegistrationError,
    StepTimeoutError,
    StepWiseError,
    UnknownTargetError,
    WorkflowContextError,
)
from stepwise.field_values import (
    DerivedValue,
    FieldValue,
    GeneratedValue,
    StaticValue,
    from_context,
    generated,
    static,
)
from stepwise.requests import BuildableRequest, CamelModel, WorkflowRequest, response_type_of
from stepwise.resolver import resolve_fields
from stepwise.target import Target

__all__ = [
    # Workflow state
    "WorkflowContext",
    "Target",
    # Requests
    "WorkflowRequest",
    "BuildableRequest",
    "CamelModel",
    "response_type_of",
    "resolve_fields",
    # Field values
    "FieldValue",
    "StaticValue",
    "GeneratedValue",
    "DerivedValue",
    "static",
    "generated",
    "from_context",
    # Exceptions
    "StepWiseError",
    "WorkflowContextError",
    "UnknownTargetError",
    "CaptureNotFoundError",
    "CaptureTypeMismatchError",
    "StepDefinitionError",
    "StepNotFoundError",
    "StepRegistrationError",
    "HttpStepError",
    "RemoteStepFailedError",
    "EmptyResponseBodyError",
    "ResponseValidationError",
    "StepConnectionError",
    "StepTimeoutError",
]
