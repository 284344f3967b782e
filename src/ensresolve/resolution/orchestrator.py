"""Routing of classified identifiers to provider adapters."""

from __future__ import annotations

import asyncio
import logging

from ensresolve.core.exceptions import ValidationError
from ensresolve.core.models import ClassifiedQuery, ResolutionOutcome
from ensresolve.core.symbols import ETH_SUFFIX
from ensresolve.core.types import ProviderOrder, RequestKind
from ensresolve.detection.classifier import IdentifierClassifier
from ensresolve.detection.validator import FormatValidator
from ensresolve.resolution.base import AbstractResolver
from ensresolve.resolution.chain import ChainResolver, FallbackConfig

logger = logging.getLogger(__name__)


class ResolutionOrchestrator:
    """
    Validates, classifies and routes an identifier to the right providers.

    Routing:
    - Text records go to the Fusion-style provider only
    - ``eth`` lookups on an L2 subdomain go to the flat-address provider only
    - Everything else tries both providers in ``provider_order``

    Holds no per-call state, so a single instance can serve concurrent calls.
    """

    def __init__(
        self,
        fusion: AbstractResolver,
        ensdata: AbstractResolver,
        *,
        provider_order: ProviderOrder = ProviderOrder.FUSION_FIRST,
        fallback_config: FallbackConfig | None = None,
        validator: FormatValidator | None = None,
        classifier: IdentifierClassifier | None = None,
    ) -> None:
        self.fusion = fusion
        self.ensdata = ensdata
        self.provider_order = provider_order
        self.fallback_config = fallback_config or FallbackConfig()
        self._validator = validator or FormatValidator()
        self._classifier = classifier or IdentifierClassifier()

    def route(self, query: ClassifiedQuery) -> list[AbstractResolver]:
        """Providers to try for ``query``, in call order."""
        if query.kind == RequestKind.TEXT_RECORD:
            return [self.fusion]

        if query.symbol == ETH_SUFFIX and query.is_l2_subdomain:
            return [self.ensdata]

        if self.provider_order == ProviderOrder.ENSDATA_FIRST:
            return [self.ensdata, self.fusion]
        return [self.fusion, self.ensdata]

    def classify(self, text: str) -> ClassifiedQuery | None:
        """Validate and classify ``text``; ``None`` when it is not resolvable."""
        if not self._validator.is_valid(text):
            logger.debug(f"Rejected identifier {text!r}: invalid format")
            return None

        try:
            return self._classifier.classify(text)
        except ValidationError as e:
            logger.debug(f"Rejected identifier {text!r}: {e.message}")
            return None

    async def resolve(
        self,
        text: str,
        *,
        deadline: float | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> ResolutionOutcome:
        """
        Resolve a raw identifier to an address or text record value.

        Args:
            text: Raw identifier, e.g. ``vitalik.eth`` or ``onshow.eth:btc``
            deadline: Absolute event-loop time after which to give up
            cancel_event: Set by the caller to abandon the lookup

        Returns:
            ResolutionOutcome; empty when the identifier is invalid or no
            provider yields a value
        """
        query = self.classify(text)
        if query is None:
            return ResolutionOutcome.empty()

        return await self.resolve_query(query, deadline=deadline, cancel_event=cancel_event)

    async def resolve_query(
        self,
        query: ClassifiedQuery,
        *,
        deadline: float | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> ResolutionOutcome:
        """Resolve an already classified query."""
        chain = ChainResolver(self.route(query), self.fallback_config)
        outcome = await chain.resolve(query, deadline=deadline, cancel_event=cancel_event)

        if outcome.found:
            logger.info(f"Resolved {query.identifier} via {outcome.source_provider}")
        else:
            logger.info(
                f"No value for {query.identifier} "
                f"(tried: {', '.join(outcome.sources_tried) or 'none'})"
            )
        return outcome
