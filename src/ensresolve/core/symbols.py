"""Versioned symbol tables shared by the validator, classifier and mappers.

Every suffix, record kind and explorer template the engine knows about lives
here. Other modules import these tables instead of repeating literals.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .types import L2Network

SYMBOL_TABLE_VERSION = "2025.09"

# Suffix used by the Ethereum Name Service itself
ETH_SUFFIX = "eth"

# Chain symbols accepted as a ``.<symbol>`` suffix or a ``:<symbol>`` tail
CHAIN_SYMBOLS: frozenset[str] = frozenset(
    {
        ETH_SUFFIX,
        "btc",
        "sol",
        "doge",
        "xrp",
        "ltc",
        "ada",
        "dot",
        "bch",
        "atom",
        "near",
        "trx",
        "xlm",
        "algo",
        # L2 / sidechain symbols
        "base",
        "polygon",
        "matic",
        "arbitrum",
        "arb",
        "optimism",
        "op",
        "bsc",
        "bnb",
        "avax",
    }
)

# Text record kinds resolved through the rich-record provider
TEXT_RECORD_KINDS: frozenset[str] = frozenset(
    {
        "x",
        "url",
        "github",
        "name",
        "bio",
        "description",
        "avatar",
        "header",
    }
)

RECOGNIZED_SUFFIXES: frozenset[str] = CHAIN_SYMBOLS | TEXT_RECORD_KINDS

L2_SUFFIXES: Mapping[str, L2Network] = MappingProxyType(
    {
        ".base.eth": L2Network.BASE,
        ".polygon.eth": L2Network.POLYGON,
        ".arbitrum.eth": L2Network.ARBITRUM,
        ".optimism.eth": L2Network.OPTIMISM,
    }
)

DEFAULT_EXPLORER_TEMPLATE = "https://etherscan.io/address/{address}"

EXPLORER_TEMPLATES: Mapping[L2Network, str] = MappingProxyType(
    {
        L2Network.BASE: "https://basescan.org/address/{address}",
        L2Network.POLYGON: "https://polygonscan.com/address/{address}",
        L2Network.ARBITRUM: "https://arbiscan.io/address/{address}",
        L2Network.OPTIMISM: "https://optimistic.etherscan.io/address/{address}",
    }
)

# Explorers for raw addresses, keyed by the chain their format belongs to
ADDRESS_EXPLORER_TEMPLATES: Mapping[str, str] = MappingProxyType(
    {
        ETH_SUFFIX: DEFAULT_EXPLORER_TEMPLATE,
        "btc": "https://blockstream.info/address/{address}",
        "sol": "https://solscan.io/account/{address}",
        "xrp": "https://xrpscan.com/account/{address}",
    }
)

SEARCH_URL_TEMPLATE = "https://google.com/search?q={query}"


def l2_network_for(name: str) -> L2Network | None:
    """Return the L2 network whose suffix ``name`` ends with, if any."""
    lowered = name.lower()
    for suffix, network in L2_SUFFIXES.items():
        if lowered.endswith(suffix):
            return network
    return None
