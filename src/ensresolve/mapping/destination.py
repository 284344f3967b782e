"""Selection of the URL a resolved identifier should open."""

from __future__ import annotations

from ensresolve.core.models import ClassifiedQuery
from ensresolve.core.symbols import ETH_SUFFIX
from ensresolve.core.types import RequestKind
from ensresolve.mapping.explorer import address_explorer_url, explorer_url
from ensresolve.mapping.text_records import text_record_url


def destination_url(
    query: ClassifiedQuery,
    value: str,
    *,
    l2_detection_enabled: bool = True,
) -> str | None:
    """
    Route a resolved value to the matching URL mapper.

    Args:
        query: The classified identifier that produced ``value``
        value: Resolved address or text record value
        l2_detection_enabled: Whether L2 subdomains use their own explorer

    Returns:
        URL to open, or None when the value has no URL form
    """
    if query.kind == RequestKind.TEXT_RECORD:
        return text_record_url(query.symbol, value)

    if query.symbol == ETH_SUFFIX:
        return explorer_url(query, value, l2_detection_enabled=l2_detection_enabled)

    return address_explorer_url(value)
