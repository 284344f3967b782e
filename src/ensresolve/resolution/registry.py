"""Resolver registry for creating configured provider adapters."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ensresolve.core.types import ProviderName, ProviderOrder
from ensresolve.resolution.base import AbstractResolver, ResolverConfig
from ensresolve.resolution.chain import FallbackConfig
from ensresolve.resolution.ensdata import EnsDataResolver
from ensresolve.resolution.fusion import FusionResolver
from ensresolve.resolution.orchestrator import ResolutionOrchestrator

if TYPE_CHECKING:
    from ensresolve.config import EnsResolveSettings


class ResolverRegistry:
    """
    Factory for provider adapters and the orchestrator that routes between them.

    Adapters hold configuration only; HTTP clients are created per call.
    """

    def __init__(
        self,
        fusion: AbstractResolver | None = None,
        ensdata: AbstractResolver | None = None,
        *,
        provider_order: ProviderOrder = ProviderOrder.FUSION_FIRST,
    ) -> None:
        self.fusion = fusion or FusionResolver()
        self.ensdata = ensdata or EnsDataResolver()
        self.provider_order = provider_order

    def get(self, name: ProviderName) -> AbstractResolver:
        """Get the adapter for a provider."""
        if name == ProviderName.FUSION:
            return self.fusion
        elif name == ProviderName.ENSDATA:
            return self.ensdata
        else:
            raise ValueError(f"Unsupported provider: {name}")

    @property
    def resolvers(self) -> list[AbstractResolver]:
        return [self.fusion, self.ensdata]

    def get_orchestrator(
        self,
        config: FallbackConfig | None = None,
    ) -> ResolutionOrchestrator:
        """Get an orchestrator routing across the registered adapters."""
        return ResolutionOrchestrator(
            self.fusion,
            self.ensdata,
            provider_order=self.provider_order,
            fallback_config=config,
        )

    @classmethod
    def from_settings(cls, settings: "EnsResolveSettings") -> "ResolverRegistry":
        """Create a registry with adapters configured from settings."""
        fusion = FusionResolver(
            ResolverConfig(
                base_url=settings.fusion_base_url,
                connect_timeout=settings.fusion_connect_timeout,
                total_timeout=settings.fusion_total_timeout,
            ),
            network=settings.fusion_network,
        )
        ensdata = EnsDataResolver(
            ResolverConfig(
                base_url=settings.ensdata_base_url,
                connect_timeout=settings.ensdata_connect_timeout,
                total_timeout=settings.ensdata_total_timeout,
            )
        )
        return cls(fusion, ensdata, provider_order=settings.provider_order)
