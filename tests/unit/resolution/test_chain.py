"""Tests for chain resolver."""

from __future__ import annotations

import asyncio
from typing import Callable
from unittest.mock import AsyncMock

import pytest

from ensresolve.core.models import ClassifiedQuery, ResolutionResult
from ensresolve.core.types import ProviderName, ResolutionStatus
from ensresolve.detection import classify
from ensresolve.resolution.chain import ChainResolver, FallbackConfig

ADDRESS = "0x1234567890abcdef1234567890abcdef12345678"


@pytest.fixture
def query() -> ClassifiedQuery:
    return classify("vitalik.eth")


# ============================================================================
# FallbackConfig Tests
# ============================================================================


class TestFallbackConfig:
    """Tests for FallbackConfig dataclass."""

    def test_default_values(self):
        """Default config should not cap the chain beyond provider timeouts."""
        config = FallbackConfig()
        assert config.total_timeout is None

    def test_custom_values(self):
        """Custom values should be set correctly."""
        config = FallbackConfig(total_timeout=7.5)
        assert config.total_timeout == 7.5


# ============================================================================
# Sequential Fallback Tests
# ============================================================================


class TestChainResolverFallback:
    """Tests for first-success and fallback behavior."""

    async def test_first_success_stops_chain(self, stub_resolver: Callable, query: ClassifiedQuery):
        """A successful first resolver should prevent the fallback call."""
        first = stub_resolver(ProviderName.FUSION, address=ADDRESS)
        second = stub_resolver(ProviderName.ENSDATA, address="0xother")

        outcome = await ChainResolver([first, second]).resolve(query)

        assert outcome.found is True
        assert outcome.address == ADDRESS
        assert outcome.source_provider == ProviderName.FUSION
        assert second.calls == []
        assert len(outcome.attempts) == 1

    @pytest.mark.parametrize(
        "first_status",
        [
            ResolutionStatus.EMPTY,
            ResolutionStatus.TRANSPORT_ERROR,
            ResolutionStatus.PARSE_ERROR,
        ],
    )
    async def test_fallback_on_failure(
        self,
        stub_resolver: Callable,
        query: ClassifiedQuery,
        first_status: ResolutionStatus,
    ):
        """Any non-success from the first resolver should trigger the fallback."""
        first = stub_resolver(ProviderName.FUSION, status=first_status)
        second = stub_resolver(ProviderName.ENSDATA, address="0xABC")

        outcome = await ChainResolver([first, second]).resolve(query)

        assert outcome.address == "0xABC"
        assert outcome.source_provider == ProviderName.ENSDATA
        assert outcome.sources_tried == [ProviderName.FUSION, ProviderName.ENSDATA]
        assert outcome.attempts[0].status == first_status
        assert outcome.attempts[1].status == ResolutionStatus.SUCCESS

    async def test_all_fail(self, stub_resolver: Callable, query: ClassifiedQuery):
        """When every resolver fails the outcome should be empty."""
        first = stub_resolver(ProviderName.FUSION, status=ResolutionStatus.TRANSPORT_ERROR)
        second = stub_resolver(ProviderName.ENSDATA, status=ResolutionStatus.EMPTY)

        outcome = await ChainResolver([first, second]).resolve(query)

        assert outcome.found is False
        assert outcome.address is None
        assert outcome.source_provider is None
        assert outcome.query == query
        assert len(outcome.attempts) == 2

    async def test_sequential_not_racing(self, stub_resolver: Callable, query: ClassifiedQuery):
        """The fallback should start only after the first call has finished."""
        events: list[tuple[str, ProviderName]] = []
        first = stub_resolver(
            ProviderName.FUSION,
            status=ResolutionStatus.EMPTY,
            delay=0.01,
            events=events,
        )
        second = stub_resolver(ProviderName.ENSDATA, address=ADDRESS, events=events)

        await ChainResolver([first, second]).resolve(query)

        assert events == [
            ("start", ProviderName.FUSION),
            ("end", ProviderName.FUSION),
            ("start", ProviderName.ENSDATA),
            ("end", ProviderName.ENSDATA),
        ]

    async def test_disabled_resolvers_skipped(self, stub_resolver: Callable, query: ClassifiedQuery):
        """Disabled resolvers should not be called."""
        disabled = stub_resolver(ProviderName.FUSION, address="0xnope", enabled=False)
        enabled = stub_resolver(ProviderName.ENSDATA, address=ADDRESS)

        outcome = await ChainResolver([disabled, enabled]).resolve(query)

        assert disabled.calls == []
        assert outcome.source_provider == ProviderName.ENSDATA

    async def test_no_resolvers(self, query: ClassifiedQuery):
        """An empty chain should return an empty outcome."""
        outcome = await ChainResolver([]).resolve(query)

        assert outcome.found is False
        assert outcome.attempts == ()

    async def test_raising_resolver_absorbed(self, stub_resolver: Callable, query: ClassifiedQuery):
        """A resolver that raises should count as a transport error and fall back."""
        broken = stub_resolver(ProviderName.FUSION)
        broken.resolve = AsyncMock(side_effect=RuntimeError("boom"))
        fallback = stub_resolver(ProviderName.ENSDATA, address=ADDRESS)

        outcome = await ChainResolver([broken, fallback]).resolve(query)

        broken.resolve.assert_awaited_once()
        assert outcome.address == ADDRESS
        assert outcome.attempts[0].status == ResolutionStatus.TRANSPORT_ERROR
        assert outcome.attempts[0].error_message == "boom"


# ============================================================================
# Deadline and Cancellation Tests
# ============================================================================


class TestChainResolverAbort:
    """Tests for caller deadlines and cancellation."""

    async def test_deadline_aborts_without_fallback(self, stub_resolver: Callable, query: ClassifiedQuery):
        """A passed deadline should abort the in-flight call and skip the fallback."""
        slow = stub_resolver(ProviderName.FUSION, address=ADDRESS, delay=10)
        fallback = stub_resolver(ProviderName.ENSDATA, address="0xABC")
        deadline = asyncio.get_running_loop().time() + 0.05

        outcome = await ChainResolver([slow, fallback]).resolve(query, deadline=deadline)

        assert outcome.found is False
        assert slow.calls == ["vitalik.eth"]
        assert fallback.calls == []

    async def test_total_timeout(self, stub_resolver: Callable, query: ClassifiedQuery):
        """FallbackConfig.total_timeout should bound the whole chain."""
        slow = stub_resolver(ProviderName.FUSION, address=ADDRESS, delay=10)
        fallback = stub_resolver(ProviderName.ENSDATA, address="0xABC")

        chain = ChainResolver([slow, fallback], FallbackConfig(total_timeout=0.05))
        outcome = await chain.resolve(query)

        assert outcome.found is False
        assert fallback.calls == []

    async def test_cancel_event_aborts(self, stub_resolver: Callable, query: ClassifiedQuery):
        """Setting the cancel event should return the empty outcome immediately."""
        slow = stub_resolver(ProviderName.FUSION, address=ADDRESS, delay=10)
        fallback = stub_resolver(ProviderName.ENSDATA, address="0xABC")
        cancel_event = asyncio.Event()
        asyncio.get_running_loop().call_later(0.05, cancel_event.set)

        outcome = await asyncio.wait_for(
            ChainResolver([slow, fallback]).resolve(query, cancel_event=cancel_event),
            timeout=2,
        )

        assert outcome.found is False
        assert slow.calls == ["vitalik.eth"]
        assert fallback.calls == []

    async def test_cancel_event_already_set(self, stub_resolver: Callable, query: ClassifiedQuery):
        """A pre-set cancel event should skip every call."""
        first = stub_resolver(ProviderName.FUSION, address=ADDRESS)
        cancel_event = asyncio.Event()
        cancel_event.set()

        outcome = await ChainResolver([first]).resolve(query, cancel_event=cancel_event)

        assert outcome.found is False
        assert first.calls == []

    async def test_cancel_event_unused(self, stub_resolver: Callable, query: ClassifiedQuery):
        """An unset cancel event should not affect a normal resolution."""
        first = stub_resolver(ProviderName.FUSION, status=ResolutionStatus.EMPTY)
        second = stub_resolver(ProviderName.ENSDATA, address=ADDRESS)

        outcome = await ChainResolver([first, second]).resolve(
            query, cancel_event=asyncio.Event()
        )

        assert outcome.address == ADDRESS
        assert outcome.sources_tried == [ProviderName.FUSION, ProviderName.ENSDATA]

    async def test_generous_deadline(self, stub_resolver: Callable, query: ClassifiedQuery):
        """A deadline that is not reached should not change the outcome."""
        first = stub_resolver(ProviderName.FUSION, address=ADDRESS)
        deadline = asyncio.get_running_loop().time() + 30

        outcome = await ChainResolver([first]).resolve(query, deadline=deadline)

        assert outcome.address == ADDRESS

    async def test_deadline_forwarded_to_resolvers(self, stub_resolver: Callable, query: ClassifiedQuery):
        """Each resolver should receive the caller deadline."""
        first = stub_resolver(ProviderName.FUSION, status=ResolutionStatus.EMPTY)
        second = stub_resolver(ProviderName.ENSDATA, address=ADDRESS)
        deadline = asyncio.get_running_loop().time() + 30

        await ChainResolver([first, second]).resolve(query, deadline=deadline)

        assert first.deadlines == [deadline]
        assert second.deadlines == [deadline]

    async def test_total_timeout_tightens_forwarded_deadline(self, stub_resolver: Callable, query: ClassifiedQuery):
        """The chain-wide cap should win over a later caller deadline."""
        first = stub_resolver(ProviderName.FUSION, address=ADDRESS)
        deadline = asyncio.get_running_loop().time() + 30

        chain = ChainResolver([first], FallbackConfig(total_timeout=5))
        await chain.resolve(query, deadline=deadline)

        assert first.deadlines[0] is not None
        assert first.deadlines[0] < deadline

    async def test_resolver_timing_out_at_deadline_skips_fallback(
        self, stub_resolver: Callable, query: ClassifiedQuery
    ):
        """A resolver that absorbs the deadline itself should still end the chain."""
        absorbing = stub_resolver(ProviderName.FUSION)

        async def _absorb(query: ClassifiedQuery, deadline: float | None = None) -> ResolutionResult:
            await asyncio.sleep(deadline - asyncio.get_running_loop().time() + 0.01)
            return ResolutionResult(
                status=ResolutionStatus.TRANSPORT_ERROR,
                source=ProviderName.FUSION,
                error_message="Request timed out",
            )

        absorbing.resolve = _absorb
        fallback = stub_resolver(ProviderName.ENSDATA, address=ADDRESS)
        deadline = asyncio.get_running_loop().time() + 0.05

        outcome = await ChainResolver([absorbing, fallback]).resolve(query, deadline=deadline)

        assert outcome.found is False
        assert fallback.calls == []
