"""Resolution layer for querying naming-service APIs."""

from ensresolve.resolution.base import AbstractResolver, ResolverConfig
from ensresolve.resolution.chain import ChainResolver, FallbackConfig
from ensresolve.resolution.ensdata import EnsDataResolver
from ensresolve.resolution.fusion import FusionResolver
from ensresolve.resolution.orchestrator import ResolutionOrchestrator
from ensresolve.resolution.registry import ResolverRegistry

__all__ = [
    # Base
    "AbstractResolver",
    "ResolverConfig",
    # Adapters
    "EnsDataResolver",
    "FusionResolver",
    # Chain
    "ChainResolver",
    "FallbackConfig",
    # Routing
    "ResolutionOrchestrator",
    "ResolverRegistry",
]
