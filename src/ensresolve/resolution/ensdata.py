"""ENSData resolver implementation."""

from __future__ import annotations

from typing import Any, ClassVar

from ensresolve.core.models import ClassifiedQuery, ResolutionResult
from ensresolve.core.types import ProviderName, ResolutionStatus
from ensresolve.resolution.base import AbstractResolver


class EnsDataResolver(AbstractResolver):
    """
    ENSData API resolver (flat address responses).

    Understands Base and other L2 subdomains. Response shape::

        {"address": "0x...", ...}

    Older deployments answer with ``{"result": "0x..."}``.
    """

    SOURCE_NAME: ClassVar[ProviderName] = ProviderName.ENSDATA
    BASE_URL: ClassVar[str] = "https://api.ensdata.net"

    ADDRESS_FIELDS: ClassVar[tuple[str, ...]] = ("address", "result")

    def request_path(self, query: ClassifiedQuery) -> str:
        return f"/{query.identifier}"

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

        address = self._first_string(payload, self.ADDRESS_FIELDS)
        if address is None:
            return self._result(ResolutionStatus.EMPTY, start)

        return self._result(ResolutionStatus.SUCCESS, start, address=address)
