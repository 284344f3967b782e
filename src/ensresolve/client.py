"""Main library client for standalone usage."""

from __future__ import annotations

import asyncio
import logging

from ensresolve.config import EnsResolveSettings
from ensresolve.core.models import ClassifiedQuery, ResolutionOutcome
from ensresolve.core.types import DefaultBrowserAction
from ensresolve.detection.classifier import IdentifierClassifier
from ensresolve.detection.validator import FormatValidator
from ensresolve.mapping.destination import destination_url
from ensresolve.mapping.explorer import explorer_url
from ensresolve.mapping.text_records import text_record_url
from ensresolve.resolution.chain import FallbackConfig
from ensresolve.resolution.orchestrator import ResolutionOrchestrator
from ensresolve.resolution.registry import ResolverRegistry

logger = logging.getLogger(__name__)

# Text record consulted first for each non-explorer browser action
_ACTION_RECORD_KINDS: dict[DefaultBrowserAction, str] = {
    DefaultBrowserAction.URL: "url",
    DefaultBrowserAction.GITHUB: "github",
    DefaultBrowserAction.X: "x",
}


class EnsResolveClient:
    """
    Main client for the ensresolve library.

    Provides validation, classification, resolution and URL mapping for
    naming-service identifiers without requiring the web server.

    Usage:
        client = EnsResolveClient()

        # Resolve an address
        outcome = await client.resolve("vitalik.eth")

        # Resolve a chain address or text record
        outcome = await client.resolve("onshow.eth:btc")

        # Get the URL a name should open
        url = await client.open_url("vitalik.eth")

    Settings are loaded from environment variables or can be passed explicitly.
    """

    def __init__(
        self,
        settings: EnsResolveSettings | None = None,
        *,
        registry: ResolverRegistry | None = None,
        fallback_config: FallbackConfig | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            settings: Application settings. If not provided, loaded from environment.
            registry: Preconfigured adapters. Built from settings if not provided.
            fallback_config: Chain-wide timeout configuration.
        """
        self._settings = settings or EnsResolveSettings()
        self._registry = registry or ResolverRegistry.from_settings(self._settings)
        self._validator = FormatValidator()
        self._classifier = IdentifierClassifier()
        self._orchestrator: ResolutionOrchestrator = self._registry.get_orchestrator(
            fallback_config
        )

    @property
    def settings(self) -> EnsResolveSettings:
        return self._settings

    @property
    def orchestrator(self) -> ResolutionOrchestrator:
        return self._orchestrator

    def is_valid(self, text: object) -> bool:
        """Check whether ``text`` matches a recognized identifier syntax."""
        return self._validator.is_valid(text)

    def classify(self, text: str) -> ClassifiedQuery:
        """
        Classify an identifier.

        Raises:
            InvalidFormatError: If the identifier has no usable suffix
            UnrecognizedSuffixError: If the suffix is neither a chain nor a record kind
        """
        return self._classifier.classify(text)

    async def resolve(
        self,
        text: str,
        *,
        deadline: float | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> ResolutionOutcome:
        """
        Resolve an identifier to an address or text record value.

        Args:
            text: Identifier such as ``vitalik.eth`` or ``onshow.eth:btc``
            deadline: Absolute event-loop time after which the lookup is abandoned
            cancel_event: Event the caller sets to abandon the lookup

        Returns:
            Outcome with the winning provider, or an empty outcome
        """
        return await self._orchestrator.resolve(
            text, deadline=deadline, cancel_event=cancel_event
        )

    def explorer_url(self, query: ClassifiedQuery, address: str) -> str:
        """Block explorer URL honoring the configured L2 detection toggle."""
        return explorer_url(
            query,
            address,
            l2_detection_enabled=self._settings.l2_detection_enabled,
        )

    def text_record_url(self, kind: str, value: str) -> str | None:
        """URL form of a text record value."""
        return text_record_url(kind, value)

    def destination_url(self, outcome: ResolutionOutcome) -> str | None:
        """URL to open for a resolved outcome, or None when there is none."""
        if not outcome.found or outcome.query is None:
            return None
        return destination_url(
            outcome.query,
            outcome.address,
            l2_detection_enabled=self._settings.l2_detection_enabled,
        )

    async def open_url(
        self,
        text: str,
        *,
        action: DefaultBrowserAction | None = None,
        deadline: float | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> str | None:
        """
        Resolve an identifier and return the URL the caller should open.

        For a plain ``.eth`` name the preferred browser action decides the
        destination: ``url``, ``github`` and ``x`` look up the matching text
        record first and fall back to the explorer when it is missing.

        Args:
            text: Identifier to open
            action: Preferred browser action (defaults to settings)
            deadline: Absolute event-loop time bounding all lookups
            cancel_event: Event the caller sets to abandon the lookups

        Returns:
            Destination URL, or None if nothing resolved
        """
        action = action or self._settings.default_browser_action
        query = self._orchestrator.classify(text)
        if query is None:
            return None

        record_kind = _ACTION_RECORD_KINDS.get(action)
        if record_kind and query.is_plain_eth_lookup and not query.is_l2_subdomain:
            record_outcome = await self.resolve(
                f"{query.eth_name}:{record_kind}",
                deadline=deadline,
                cancel_event=cancel_event,
            )
            url = self.destination_url(record_outcome)
            if url:
                return url
            logger.info(
                f"No {record_kind} record for {query.eth_name}, opening explorer instead"
            )

        outcome = await self._orchestrator.resolve_query(
            query, deadline=deadline, cancel_event=cancel_event
        )
        return self.destination_url(outcome)


# Convenience functions for one-off resolutions
async def resolve(
    text: str,
    *,
    settings: EnsResolveSettings | None = None,
) -> ResolutionOutcome:
    """
    Resolve an identifier (convenience function).

    For multiple resolutions, reuse an EnsResolveClient.
    """
    return await EnsResolveClient(settings).resolve(text)


async def open_url(
    text: str,
    *,
    settings: EnsResolveSettings | None = None,
) -> str | None:
    """Resolve an identifier to the URL it should open (convenience function)."""
    return await EnsResolveClient(settings).open_url(text)
