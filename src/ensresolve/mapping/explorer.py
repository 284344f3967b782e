"""Block explorer URL mapping for resolved addresses."""

from __future__ import annotations

import re

from ensresolve.core.models import ClassifiedQuery
from ensresolve.core.symbols import (
    ADDRESS_EXPLORER_TEMPLATES,
    DEFAULT_EXPLORER_TEMPLATE,
    EXPLORER_TEMPLATES,
)

# Raw address shapes, checked in this order
_ADDRESS_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("eth", re.compile(r"^0x[0-9a-fA-F]{40}$")),
    ("xrp", re.compile(r"^r[1-9A-HJ-NP-Za-km-z]{33}$")),
    ("btc", re.compile(r"^(bc1[02-9ac-hj-np-z]{11,71}|[13][1-9A-HJ-NP-Za-km-z]{25,34})$")),
    ("sol", re.compile(r"^[1-9A-HJ-NP-Za-km-z]{32,44}$")),
)


def explorer_url(
    query: ClassifiedQuery,
    address: str,
    *,
    l2_detection_enabled: bool = True,
) -> str:
    """
    Build the block explorer URL for an address resolved from ``query``.

    L2 subdomains (``*.base.eth`` and friends) map to their network's
    explorer unless ``l2_detection_enabled`` is off; everything else goes
    to Etherscan.

    Examples:
        alice.base.eth, 0x1    -> https://basescan.org/address/0x1
        vitalik.eth, 0x1       -> https://etherscan.io/address/0x1
    """
    template = DEFAULT_EXPLORER_TEMPLATE
    if l2_detection_enabled and query.l2_network is not None:
        template = EXPLORER_TEMPLATES.get(query.l2_network, DEFAULT_EXPLORER_TEMPLATE)
    return template.format(address=address)


def detect_address_chain(address: str) -> str | None:
    """Guess which chain a raw address belongs to from its shape."""
    candidate = address.strip()
    for chain, pattern in _ADDRESS_PATTERNS:
        if pattern.match(candidate):
            return chain
    return None


def address_explorer_url(address: str) -> str | None:
    """Explorer URL for a raw address, or ``None`` when its chain is unknown."""
    chain = detect_address_chain(address)
    if chain is None:
        return None
    return ADDRESS_EXPLORER_TEMPLATES[chain].format(address=address.strip())
