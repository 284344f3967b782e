"""Health check endpoints."""

from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Request

from ensresolve import __version__
from ensresolve.api.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    operation_id="getHealth",
    summary="Health check",
    description="Check the health status of the API and its resolvers.",
)
async def health_check(request: Request) -> HealthResponse:
    """Check API health status."""
    services: dict[str, Literal["up", "down", "unknown"]] = {}
    overall_status: Literal["healthy", "degraded", "unhealthy"] = "healthy"

    registry = getattr(request.app.state, "resolver_registry", None)
    if registry is None:
        services["resolvers"] = "down"
        overall_status = "unhealthy"
    else:
        # Upstreams are not probed; report whether each adapter is enabled
        for resolver in registry.resolvers:
            services[resolver.source_name.value] = "up" if resolver.is_enabled else "down"
        if not all(resolver.is_enabled for resolver in registry.resolvers):
            overall_status = "degraded"

    return HealthResponse(
        status=overall_status,
        version=__version__,
        services=services,
    )


@router.get(
    "/ready",
    operation_id="getReady",
    summary="Readiness check",
    description="Check if the API is ready to serve traffic.",
)
async def readiness_check(request: Request) -> dict[str, bool]:
    """Check if API is ready to serve traffic."""
    resolver_registry = getattr(request.app.state, "resolver_registry", None)

    return {"ready": resolver_registry is not None}
