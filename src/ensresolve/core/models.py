"""Domain models for classified queries and resolution outcomes."""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .symbols import ETH_SUFFIX
from .types import L2Network, ProviderName, RequestKind, ResolutionStatus


class ClassifiedQuery(BaseModel):
    """Canonical shape of an identifier after classification."""

    model_config = ConfigDict(frozen=True)

    identifier: str = Field(..., description="Raw identifier as supplied by the caller")
    base_label: str = Field(..., description="Name portion before the chain/record suffix")
    kind: RequestKind = Field(..., description="Address lookup or text record lookup")
    symbol: str = Field(..., description="Chain symbol or text record kind")
    l2_network: L2Network | None = Field(
        default=None, description="L2 network for *.base.eth style subdomains"
    )
    has_eth_base: bool = Field(
        default=True, description="Whether the identifier is rooted in a .eth name"
    )

    @property
    def is_l2_subdomain(self) -> bool:
        return self.l2_network is not None

    @property
    def chain_symbol(self) -> str | None:
        return self.symbol if self.kind == RequestKind.ADDRESS_CHAIN else None

    @property
    def record_kind(self) -> str | None:
        return self.symbol if self.kind == RequestKind.TEXT_RECORD else None

    @property
    def eth_name(self) -> str | None:
        """The ``.eth`` name this query is rooted in, if it has one."""
        if not self.has_eth_base:
            return None
        return f"{self.base_label}.{ETH_SUFFIX}"

    @property
    def is_plain_eth_lookup(self) -> bool:
        return self.kind == RequestKind.ADDRESS_CHAIN and self.symbol == ETH_SUFFIX


class ResolutionResult(BaseModel):
    """Result of a single provider call."""

    model_config = ConfigDict(frozen=True)

    status: ResolutionStatus
    source: ProviderName
    address: str | None = None
    error_message: str | None = None
    duration_ms: float = 0.0

    @model_validator(mode="after")
    def validate_address(self) -> Self:
        """A successful result always carries a non-empty address."""
        if self.status == ResolutionStatus.SUCCESS and not self.address:
            raise ValueError("Successful resolution requires a non-empty address")
        return self

    @property
    def success(self) -> bool:
        return self.status == ResolutionStatus.SUCCESS


class ResolutionOutcome(BaseModel):
    """Outcome of orchestrating one or more provider calls."""

    model_config = ConfigDict(frozen=True)

    address: str | None = None
    source_provider: ProviderName | None = None
    query: ClassifiedQuery | None = None
    attempts: tuple[ResolutionResult, ...] = Field(default_factory=tuple)

    @property
    def found(self) -> bool:
        return bool(self.address)

    @property
    def sources_tried(self) -> list[ProviderName]:
        return [attempt.source for attempt in self.attempts]

    @classmethod
    def empty(
        cls,
        query: ClassifiedQuery | None = None,
        attempts: tuple[ResolutionResult, ...] = (),
    ) -> ResolutionOutcome:
        return cls(query=query, attempts=attempts)

    @classmethod
    def from_result(
        cls,
        result: ResolutionResult,
        query: ClassifiedQuery | None = None,
        attempts: tuple[ResolutionResult, ...] = (),
    ) -> ResolutionOutcome:
        return cls(
            address=result.address,
            source_provider=result.source,
            query=query,
            attempts=attempts,
        )
