"""Shared test fixtures for all tests."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, ClassVar

import pytest

from ensresolve.config import EnsResolveSettings
from ensresolve.core.models import ClassifiedQuery, ResolutionResult
from ensresolve.core.types import ProviderName, ResolutionStatus
from ensresolve.resolution.base import AbstractResolver, ResolverConfig

# ============================================================================
# Stub Resolver for Testing
# ============================================================================


class StubResolver(AbstractResolver):
    """Resolver double that answers from a table and records every call."""

    SOURCE_NAME: ClassVar[ProviderName] = ProviderName.FUSION
    BASE_URL: ClassVar[str] = "https://example.com"

    def __init__(
        self,
        source_name: ProviderName,
        *,
        address: str | None = None,
        status: ResolutionStatus = ResolutionStatus.EMPTY,
        answers: dict[str, str] | None = None,
        delay: float = 0.0,
        enabled: bool = True,
        events: list[tuple[str, ProviderName]] | None = None,
    ) -> None:
        super().__init__(ResolverConfig(enabled=enabled))
        self._source_name = source_name
        self._address = address
        self._status = status
        self._answers = answers or {}
        self._delay = delay
        self._events = events
        self.calls: list[str] = []
        self.deadlines: list[float | None] = []

    @property
    def source_name(self) -> ProviderName:
        return self._source_name

    def request_path(self, query: ClassifiedQuery) -> str:
        return f"/{query.identifier}"

    def _parse_payload(self, payload: Any, query: ClassifiedQuery, start: float) -> ResolutionResult:
        raise NotImplementedError

    async def resolve(
        self,
        query: ClassifiedQuery,
        deadline: float | None = None,
    ) -> ResolutionResult:
        self.calls.append(query.identifier)
        self.deadlines.append(deadline)
        if self._events is not None:
            self._events.append(("start", self._source_name))

        if self._delay:
            await asyncio.sleep(self._delay)

        if self._events is not None:
            self._events.append(("end", self._source_name))

        address = self._answers.get(query.identifier, self._address)
        if address is not None:
            return ResolutionResult(
                status=ResolutionStatus.SUCCESS,
                source=self._source_name,
                address=address,
            )
        return ResolutionResult(
            status=self._status,
            source=self._source_name,
            error_message="stubbed failure" if self._status != ResolutionStatus.EMPTY else None,
        )


@pytest.fixture
def stub_resolver() -> Callable[..., StubResolver]:
    """Factory fixture creating stub resolvers."""

    def _make(source_name: ProviderName, **kwargs: Any) -> StubResolver:
        return StubResolver(source_name, **kwargs)

    return _make


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def mock_settings() -> EnsResolveSettings:
    """Create settings for testing, ignoring any local .env file."""
    return EnsResolveSettings(
        _env_file=None,
        fusion_base_url="https://fusion.test",
        ensdata_base_url="https://ensdata.test",
        fusion_connect_timeout=1.0,
        fusion_total_timeout=2.0,
        ensdata_connect_timeout=1.5,
        ensdata_total_timeout=2.5,
    )


# ============================================================================
# Identifier Fixtures
# ============================================================================

ETH_ADDRESS = "0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045"
BTC_ADDRESS = "bc1qar0srrr7xfkvy5l643lydnw9re59gtzzwf5mdq"


@pytest.fixture
def eth_address() -> str:
    return ETH_ADDRESS


@pytest.fixture
def btc_address() -> str:
    return BTC_ADDRESS


@pytest.fixture
def valid_identifiers() -> list[str]:
    """Identifiers every recognized syntax family should accept."""
    return [
        "vitalik.eth",
        "jesse.base.eth",
        "fred.uni.eth",
        "onshow.eth:btc",
        "onshow.eth:sol",
        "onshow.eth:doge",
        "apu-pond.eth",
        "1\ufe0f\u20e3" * 3 + ".eth",
        "bob.x",
        "alice.github",
        "satoshi.btc",
        "vitalik.eth:url",
    ]


@pytest.fixture
def invalid_identifiers() -> list[str]:
    """Identifiers that must be rejected."""
    return [
        "",
        "invalid",
        ".eth",
        "ses.",
        "ses..eth",
        " ses.eth ",
        "vitalik.eth:",
        "vitalik.eth:btc:sol",
        "vitalik.eth:nope",
        "foo.unknown",
    ]
