"""Core enums and type definitions."""

from enum import StrEnum


class RequestKind(StrEnum):
    """What a classified identifier asks the providers for."""

    ADDRESS_CHAIN = "address_chain"  # Chain address record (eth, btc, sol, ...)
    TEXT_RECORD = "text_record"  # Metadata text record (x, url, github, ...)


class L2Network(StrEnum):
    """L2 networks recognized through ``<name>.<network>.eth`` subdomains."""

    BASE = "base"
    POLYGON = "polygon"
    ARBITRUM = "arbitrum"
    OPTIMISM = "optimism"

    @property
    def display_name(self) -> str:
        return {
            L2Network.BASE: "Base",
            L2Network.POLYGON: "Polygon",
            L2Network.ARBITRUM: "Arbitrum",
            L2Network.OPTIMISM: "Optimism",
        }[self]

    @property
    def explorer_name(self) -> str:
        return {
            L2Network.BASE: "BaseScan",
            L2Network.POLYGON: "PolygonScan",
            L2Network.ARBITRUM: "Arbiscan",
            L2Network.OPTIMISM: "Optimistic Etherscan",
        }[self]


class ProviderName(StrEnum):
    """Known upstream resolution APIs."""

    FUSION = "fusion"  # {"success": bool, "data": {"address": ...}}
    ENSDATA = "ensdata"  # {"address": ...} or legacy {"result": ...}


class ProviderOrder(StrEnum):
    """Order in which providers are tried for fallback-eligible lookups."""

    FUSION_FIRST = "fusion_first"
    ENSDATA_FIRST = "ensdata_first"


class ResolutionStatus(StrEnum):
    """Status of a single provider call."""

    SUCCESS = "success"
    EMPTY = "empty"
    TRANSPORT_ERROR = "transport_error"
    PARSE_ERROR = "parse_error"


class DefaultBrowserAction(StrEnum):
    """Destination a caller prefers when a plain name is opened."""

    URL = "url"
    GITHUB = "github"
    X = "x"
    ETHERSCAN = "etherscan"

    @property
    def display_name(self) -> str:
        return {
            DefaultBrowserAction.URL: "Open Website",
            DefaultBrowserAction.GITHUB: "Open GitHub",
            DefaultBrowserAction.X: "Open X/Twitter",
            DefaultBrowserAction.ETHERSCAN: "Open Etherscan",
        }[self]
