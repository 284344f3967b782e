"""Response schemas for API endpoints."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from ensresolve.api.schemas.base import APIBaseSchema
from ensresolve.core.types import L2Network, ProviderName, RequestKind, ResolutionStatus


class ClassificationResponse(APIBaseSchema):
    """Classified shape of an identifier."""

    identifier: str
    base_label: str
    request_kind: RequestKind
    symbol: str
    is_l2_subdomain: bool
    l2_network: L2Network | None = None
    eth_name: str | None = None


class ValidationResponse(APIBaseSchema):
    """Result of a format check."""

    identifier: str
    valid: bool


class ProviderAttemptResponse(APIBaseSchema):
    """Result from a single provider call."""

    source: ProviderName
    status: ResolutionStatus
    duration_ms: float
    error_message: str | None = None


class ResolveResponse(APIBaseSchema):
    """Outcome of resolving an identifier."""

    identifier: str
    address: str
    source_provider: ProviderName
    destination_url: str | None = None
    classification: ClassificationResponse
    attempts: list[ProviderAttemptResponse] = Field(default_factory=list)
    total_duration_ms: float


class HealthResponse(APIBaseSchema):
    """Health check response."""

    status: Literal["healthy", "degraded", "unhealthy"]
    version: str
    services: dict[str, Literal["up", "down", "unknown"]]
