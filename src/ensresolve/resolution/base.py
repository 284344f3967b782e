"""Abstract base resolver with HTTP client management and failure normalization."""

from __future__ import annotations

import asyncio
import logging
import time
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, ClassVar

import httpx
from pydantic import BaseModel, Field

from ensresolve.core.exceptions import ProviderUnavailableError
from ensresolve.core.models import ClassifiedQuery, ResolutionResult
from ensresolve.core.types import ProviderName, ResolutionStatus

logger = logging.getLogger(__name__)


class ResolverConfig(BaseModel):
    """Configuration for a resolver."""

    base_url: str | None = None
    connect_timeout: float = Field(default=3.0, gt=0)
    total_timeout: float = Field(default=5.0, gt=0)
    enabled: bool = True


class AbstractResolver(ABC):
    """
    Abstract base class for provider adapters.

    Provides:
    - A fresh HTTP client per call, bounded by connect and total timeouts
    - Translation of every transport and decoding failure into a
      :class:`ResolutionResult` status instead of an exception

    Subclasses describe where to send the request and how to read the
    upstream JSON shape.
    """

    # Class-level configuration (to be overridden by subclasses)
    SOURCE_NAME: ClassVar[ProviderName]
    BASE_URL: ClassVar[str]

    def __init__(self, config: ResolverConfig | None = None) -> None:
        self.config = config or ResolverConfig()

    @property
    def source_name(self) -> ProviderName:
        """The provider this resolver talks to."""
        return self.SOURCE_NAME

    @property
    def base_url(self) -> str:
        return self.config.base_url or self.BASE_URL

    @property
    def is_enabled(self) -> bool:
        """Whether this resolver is enabled."""
        return self.config.enabled

    @asynccontextmanager
    async def _get_client(self) -> AsyncIterator[httpx.AsyncClient]:
        """Create a short-lived HTTP client for a single call."""
        async with httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(
                self.config.total_timeout,
                connect=self.config.connect_timeout,
            ),
            headers=self._get_default_headers(),
            follow_redirects=True,
        ) as client:
            try:
                yield client
            except httpx.HTTPError as e:
                raise ProviderUnavailableError(
                    message=f"HTTP error: {e!r}",
                    source=self.source_name.value,
                ) from e

    def _get_default_headers(self) -> dict[str, str]:
        """Get default headers for requests."""
        return {
            "User-Agent": "ensresolve/1.0",
            "Accept": "application/json",
        }

    async def _make_request(
        self,
        method: str,
        url: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """Make an HTTP request through a per-call client."""
        async with self._get_client() as client:
            return await client.request(method, url, **kwargs)

    def _deadline_for(self, deadline: float | None) -> float:
        """Combine the configured total timeout with a caller deadline."""
        own_deadline = asyncio.get_running_loop().time() + self.config.total_timeout
        if deadline is None:
            return own_deadline
        return min(own_deadline, deadline)

    async def resolve(
        self,
        query: ClassifiedQuery,
        deadline: float | None = None,
    ) -> ResolutionResult:
        """
        Resolve a classified query against this provider.

        Args:
            query: The classified identifier
            deadline: Optional absolute event-loop time bounding the call

        Returns:
            ResolutionResult; never raises for upstream or transport failures
        """
        start = time.monotonic()
        identifier = query.identifier

        try:
            async with asyncio.timeout_at(self._deadline_for(deadline)):
                response = await self._make_request(
                    "GET",
                    self.request_path(query),
                    params=self.request_params(query),
                )
        except TimeoutError:
            logger.warning(f"{self.source_name} timed out resolving {identifier}")
            return self._result(
                ResolutionStatus.TRANSPORT_ERROR,
                start,
                error_message="Request timed out",
            )
        except ProviderUnavailableError as e:
            logger.warning(f"{self.source_name} unavailable for {identifier}: {e.message}")
            return self._result(
                ResolutionStatus.TRANSPORT_ERROR,
                start,
                error_message=e.message,
            )
        except Exception as e:
            logger.exception(f"{self.source_name} request failed for {identifier}: {e}")
            return self._result(
                ResolutionStatus.TRANSPORT_ERROR,
                start,
                error_message=str(e),
            )

        if response.status_code == 404:
            logger.debug(f"{self.source_name} has no record for {identifier}")
            return self._result(ResolutionStatus.EMPTY, start)

        if not response.is_success:
            logger.warning(
                f"{self.source_name} returned HTTP {response.status_code} for {identifier}"
            )
            return self._result(
                ResolutionStatus.TRANSPORT_ERROR,
                start,
                error_message=f"HTTP {response.status_code}",
            )

        try:
            payload = response.json()
        except ValueError as e:
            logger.warning(f"{self.source_name} sent malformed JSON for {identifier}")
            return self._result(
                ResolutionStatus.PARSE_ERROR,
                start,
                error_message=f"Malformed JSON: {e}",
            )

        try:
            return self._parse_payload(payload, query, start)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.warning(f"{self.source_name} payload for {identifier} not understood: {e}")
            return self._result(
                ResolutionStatus.PARSE_ERROR,
                start,
                error_message=str(e),
            )

    def _result(
        self,
        status: ResolutionStatus,
        start: float,
        *,
        address: str | None = None,
        error_message: str | None = None,
    ) -> ResolutionResult:
        return ResolutionResult(
            status=status,
            source=self.source_name,
            address=address,
            error_message=error_message,
            duration_ms=(time.monotonic() - start) * 1000,
        )

    @staticmethod
    def _first_string(data: dict[str, Any], fields: tuple[str, ...]) -> str | None:
        """Return the first non-blank string found under ``fields``."""
        for field in fields:
            value = data.get(field)
            if isinstance(value, str) and value.strip():
                return value.strip()
        return None

    # Abstract methods
    @abstractmethod
    def request_path(self, query: ClassifiedQuery) -> str:
        """Path (relative to the base URL) for resolving ``query``."""
        ...

    def request_params(self, query: ClassifiedQuery) -> dict[str, str]:
        """Query-string parameters for resolving ``query``."""
        return {}

    @abstractmethod
    def _parse_payload(
        self,
        payload: Any,
        query: ClassifiedQuery,
        start: float,
    ) -> ResolutionResult:
        """
        Decode the upstream JSON payload.

        Args:
            payload: Decoded JSON body
            query: The classified identifier
            start: Monotonic start time of the call

        Returns:
            SUCCESS, EMPTY or PARSE_ERROR result
        """
        ...
