"""Unit test fixtures with HTTP mocking."""

from __future__ import annotations

from typing import Any, Callable

import pytest
import respx
from httpx import Response

from ensresolve.resolution.base import ResolverConfig

# ============================================================================
# HTTP Mocking Fixtures
# ============================================================================


@pytest.fixture
def respx_mock():
    """Provide a respx mock router for HTTP mocking.

    Use this when you need fine-grained control over mocked responses.
    The mock is automatically started and stopped by respx.
    """
    with respx.mock(assert_all_called=False) as router:
        yield router


# ============================================================================
# Resolver Configuration Fixtures
# ============================================================================


@pytest.fixture
def resolver_config() -> ResolverConfig:
    """Create a resolver config for testing."""
    return ResolverConfig(
        connect_timeout=1.0,
        total_timeout=2.0,
        enabled=True,
    )


@pytest.fixture
def resolver_config_custom_url() -> ResolverConfig:
    """Create a resolver config pointing at a self-hosted deployment."""
    return ResolverConfig(base_url="https://resolver.internal.test")


@pytest.fixture
def resolver_config_disabled() -> ResolverConfig:
    """Create a disabled resolver config."""
    return ResolverConfig(enabled=False)


# ============================================================================
# Mock Response Helpers
# ============================================================================


@pytest.fixture
def json_response() -> Callable[..., Response]:
    """Factory fixture for mock JSON responses."""

    def _make(data: Any, status_code: int = 200) -> Response:
        return Response(
            status_code=status_code,
            json=data,
            headers={"Content-Type": "application/json"},
        )

    return _make
