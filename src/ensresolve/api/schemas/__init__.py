"""API schema definitions."""

from ensresolve.api.schemas.base import APIBaseSchema, APIError, ErrorDetail
from ensresolve.api.schemas.responses import (
    ClassificationResponse,
    HealthResponse,
    ProviderAttemptResponse,
    ResolveResponse,
    ValidationResponse,
)

__all__ = [
    # Base
    "APIBaseSchema",
    "APIError",
    "ErrorDetail",
    # Responses
    "ClassificationResponse",
    "HealthResponse",
    "ProviderAttemptResponse",
    "ResolveResponse",
    "ValidationResponse",
]
