"""Fusion API resolver implementation."""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from ensresolve.core.models import ClassifiedQuery, ResolutionResult
from ensresolve.core.types import ProviderName, RequestKind, ResolutionStatus
from ensresolve.resolution.base import AbstractResolver, ResolverConfig

logger = logging.getLogger(__name__)


class FusionResolver(AbstractResolver):
    """
    Fusion API resolver (chain addresses and text records).

    Response shape::

        {"success": true, "data": {"address": "0x..."}}

    Text record lookups may carry the record under ``data.value`` instead.
    """

    SOURCE_NAME: ClassVar[ProviderName] = ProviderName.FUSION
    BASE_URL: ClassVar[str] = "https://api.fusionens.com"

    # Fields read from ``data`` per request kind, in order
    ADDRESS_FIELDS: ClassVar[tuple[str, ...]] = ("address",)
    TEXT_RECORD_FIELDS: ClassVar[tuple[str, ...]] = ("value", "address")

    def __init__(
        self,
        config: ResolverConfig | None = None,
        network: str | None = "mainnet",
    ) -> None:
        super().__init__(config)
        self.network = network

    def request_path(self, query: ClassifiedQuery) -> str:
        return f"/resolve/{query.identifier}"

    def request_params(self, query: ClassifiedQuery) -> dict[str, str]:
        if self.network:
            return {"network": self.network}
        return {}

    def _parse_payload(
        self,
        payload: Any,
        query: ClassifiedQuery,
        start: float,
    ) -> ResolutionResult:
        if not isinstance(payload, dict):
            return self._result(
                ResolutionStatus.PARSE_ERROR,
                start,
                error_message=f"Expected JSON object, got {type(payload).__name__}",
            )

        success = payload.get("success")
        if not isinstance(success, bool):
            return self._result(
                ResolutionStatus.PARSE_ERROR,
                start,
                error_message="Missing boolean 'success' field",
            )

        if not success:
            logger.debug(f"Fusion returned success=false for {query.identifier}")
            return self._result(ResolutionStatus.EMPTY, start)

        data = payload.get("data")
        if not isinstance(data, dict):
            return self._result(ResolutionStatus.EMPTY, start)

        fields = (
            self.TEXT_RECORD_FIELDS
            if query.kind == RequestKind.TEXT_RECORD
            else self.ADDRESS_FIELDS
        )
        address = self._first_string(data, fields)
        if address is None:
            logger.debug(f"Fusion response for {query.identifier} has no usable value")
            return self._result(ResolutionStatus.EMPTY, start)

        return self._result(ResolutionStatus.SUCCESS, start, address=address)
