"""HTTP binding for StepWise workflows.

Exports:
    HttpTarget: Target that sends requests to one base address over HTTP.
    HttpStep: Base class declaring method, path and auth for a request type.
    StepRegistry: Registration table of step definitions.

    Auth providers:
        AuthProvider: Base class for custom strategies.
        NoAuth: No authentication.
        BearerTokenAuth: ``Authorization: Bearer`` token, static or from context.
        ApiKeyAuth: API key as a header or a query parameter.
"""

from stepwise.http.auth import ApiKeyAuth, AuthProvider, BearerTokenAuth, NoAuth
from stepwise.http.registry import StepRegistry
from stepwise.http.step import BODYLESS_METHODS, HttpMethod, HttpStep
from stepwise.http.target import HttpTarget

__all__ = [
    "HttpTarget",
    "HttpStep",
    "HttpMethod",
    "BODYLESS_METHODS",
    "StepRegistry",
    # Auth
    "AuthProvider",
    "NoAuth",
    "BearerTokenAuth",
    "ApiKeyAuth",
]
