"""FastAPI dependency injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from ensresolve.config import EnsResolveSettings, get_settings
from ensresolve.resolution.orchestrator import ResolutionOrchestrator
from ensresolve.resolution.registry import ResolverRegistry


async def get_resolver_registry(request: Request) -> ResolverRegistry:
    """Get resolver registry from app state."""
    return request.app.state.resolver_registry


async def get_orchestrator(
    registry: ResolverRegistry = Depends(get_resolver_registry),
) -> ResolutionOrchestrator:
    """Get an orchestrator routing across the registered adapters."""
    return registry.get_orchestrator()


# Type aliases for cleaner dependency injection
Settings = Annotated[EnsResolveSettings, Depends(get_settings)]
Orchestrator = Annotated[ResolutionOrchestrator, Depends(get_orchestrator)]
