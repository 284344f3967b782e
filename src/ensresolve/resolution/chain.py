"""Chain resolver for sequential fallback resolution."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from ensresolve.core.models import ClassifiedQuery, ResolutionOutcome, ResolutionResult
from ensresolve.core.types import ResolutionStatus
from ensresolve.resolution.base import AbstractResolver

logger = logging.getLogger(__name__)


@dataclass
class FallbackConfig:
    """Configuration for fallback resolution."""

    # Optional cap for the entire chain (seconds); per-provider timeouts still apply
    total_timeout: float | None = None


class ChainResolver:
    """
    Runs resolvers one after another until one yields an address.

    Features:
    - Strictly sequential: a fallback starts only after the previous call ends
    - Stops on first success
    - Caller deadline and cancellation abort the in-flight call and skip the
      remaining hops
    """

    def __init__(
        self,
        resolvers: list[AbstractResolver],
        config: FallbackConfig | None = None,
    ) -> None:
        self._resolvers = list(resolvers)
        self.config = config or FallbackConfig()

    @property
    def resolvers(self) -> list[AbstractResolver]:
        return list(self._resolvers)

    async def resolve(
        self,
        query: ClassifiedQuery,
        *,
        deadline: float | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> ResolutionOutcome:
        """Resolve using resolvers in order with fallback."""
        active_resolvers = [r for r in self._resolvers if r.is_enabled]

        if not active_resolvers:
            logger.warning(f"No enabled resolvers for {query.identifier}")
            return ResolutionOutcome.empty(query)

        if cancel_event is not None and cancel_event.is_set():
            return ResolutionOutcome.empty(query)

        attempts: list[ResolutionResult] = []
        winner: ResolutionResult | None = None

        effective_deadline = self._deadline_for(deadline)

        try:
            async with asyncio.timeout_at(effective_deadline):
                if cancel_event is None:
                    winner = await self._run_sequential(
                        active_resolvers, query, attempts, effective_deadline
                    )
                else:
                    winner = await self._run_cancellable(
                        active_resolvers, query, attempts, cancel_event, effective_deadline
                    )
        except TimeoutError:
            logger.warning(f"Resolution of {query.identifier} aborted at deadline")
            return ResolutionOutcome.empty(query, tuple(attempts))

        if winner is None:
            return ResolutionOutcome.empty(query, tuple(attempts))

        return ResolutionOutcome.from_result(winner, query, tuple(attempts))

    def _deadline_for(self, deadline: float | None) -> float | None:
        """Combine the chain-wide timeout with a caller deadline."""
        if self.config.total_timeout is None:
            return deadline
        own_deadline = asyncio.get_running_loop().time() + self.config.total_timeout
        if deadline is None:
            return own_deadline
        return min(own_deadline, deadline)

    async def _try_resolver(
        self,
        resolver: AbstractResolver,
        query: ClassifiedQuery,
        deadline: float | None = None,
    ) -> ResolutionResult:
        """Try a single resolver with error handling."""
        try:
            return await resolver.resolve(query, deadline)
        except Exception as e:
            logger.exception(f"Resolver {resolver.source_name} failed: {e}")
            return ResolutionResult(
                status=ResolutionStatus.TRANSPORT_ERROR,
                source=resolver.source_name,
                error_message=str(e),
            )

    async def _run_sequential(
        self,
        resolvers: list[AbstractResolver],
        query: ClassifiedQuery,
        attempts: list[ResolutionResult],
        deadline: float | None = None,
    ) -> ResolutionResult | None:
        """Run resolvers sequentially, stopping on first success."""
        loop = asyncio.get_running_loop()
        for index, resolver in enumerate(resolvers):
            result = await self._try_resolver(resolver, query, deadline)
            attempts.append(result)

            if result.success:
                return result

            # An adapter that hit the shared deadline ends the chain
            if deadline is not None and loop.time() >= deadline:
                raise TimeoutError

            if index + 1 < len(resolvers):
                logger.info(
                    f"{resolver.source_name} returned {result.status} for "
                    f"{query.identifier}, falling back to {resolvers[index + 1].source_name}"
                )

        return None

    async def _run_cancellable(
        self,
        resolvers: list[AbstractResolver],
        query: ClassifiedQuery,
        attempts: list[ResolutionResult],
        cancel_event: asyncio.Event,
        deadline: float | None = None,
    ) -> ResolutionResult | None:
        """Run the sequential chain, abandoning it when ``cancel_event`` is set."""
        run = asyncio.ensure_future(
            self._run_sequential(resolvers, query, attempts, deadline)
        )
        cancelled = asyncio.ensure_future(cancel_event.wait())

        try:
            done, _ = await asyncio.wait(
                {run, cancelled},
                return_when=asyncio.FIRST_COMPLETED,
            )
        finally:
            for task in (run, cancelled):
                if not task.done():
                    task.cancel()
            await asyncio.gather(run, cancelled, return_exceptions=True)

        if run in done:
            return run.result()

        logger.info(f"Resolution of {query.identifier} cancelled by caller")
        return None
