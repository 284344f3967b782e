"""Integration test fixtures for the HTTP API."""

from __future__ import annotations

from typing import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient

from ensresolve.core.types import ProviderName
from ensresolve.resolution.registry import ResolverRegistry

ETH_ADDRESS = "0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045"
BTC_ADDRESS = "bc1qar0srrr7xfkvy5l643lydnw9re59gtzzwf5mdq"


# ============================================================================
# Resolver Fixtures
# ============================================================================


@pytest.fixture
def fusion_stub(stub_resolver):
    """Fusion double answering a text record and a chain address."""
    return stub_resolver(
        ProviderName.FUSION,
        answers={
            "vitalik.eth:x": "@VitalikButerin",
            "onshow.eth:btc": BTC_ADDRESS,
        },
    )


@pytest.fixture
def ensdata_stub(stub_resolver):
    """ENSData double answering every address lookup."""
    return stub_resolver(
        ProviderName.ENSDATA,
        answers={
            "vitalik.eth": ETH_ADDRESS,
            "jesse.base.eth": ETH_ADDRESS,
        },
    )


@pytest.fixture
def resolver_registry(fusion_stub, ensdata_stub) -> ResolverRegistry:
    return ResolverRegistry(fusion=fusion_stub, ensdata=ensdata_stub)


# ============================================================================
# FastAPI Test Client Fixtures
# ============================================================================


@pytest.fixture
async def test_app(resolver_registry: ResolverRegistry):
    """Create test FastAPI application with stubbed resolvers."""
    from ensresolve.api.app import create_app
    from ensresolve.api.dependencies import get_resolver_registry

    app = create_app(cors_origins=["*"])

    # Store in app state (for routes that access state directly)
    app.state.resolver_registry = resolver_registry

    def override_resolver_registry():
        return resolver_registry

    app.dependency_overrides[get_resolver_registry] = override_resolver_registry

    yield app

    app.dependency_overrides.clear()


@pytest.fixture
async def test_client(test_app) -> AsyncIterator[AsyncClient]:
    """Create async HTTP test client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
