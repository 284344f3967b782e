"""Conversion of text record values into destination URLs."""

from __future__ import annotations

import re
from urllib.parse import quote

from ensresolve.core.symbols import SEARCH_URL_TEMPLATE

PROFILE_URL_TEMPLATES: dict[str, str] = {
    "x": "https://x.com/{handle}",
    "twitter": "https://x.com/{handle}",
    "github": "https://github.com/{handle}",
}

SEARCHABLE_KINDS: frozenset[str] = frozenset({"name", "bio", "description"})

_LEADING_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")


def text_record_url(kind: str, value: str) -> str | None:
    """
    Map a text record to the URL it points at.

    Returns ``None`` for kinds with no URL form (``avatar``, ``header``) and
    for unknown kinds.
    """
    kind = kind.lower()
    value = value.strip()

    if kind in PROFILE_URL_TEMPLATES:
        return PROFILE_URL_TEMPLATES[kind].format(handle=value.removeprefix("@"))

    if kind == "url":
        return ensure_scheme(value)

    if kind in SEARCHABLE_KINDS:
        return SEARCH_URL_TEMPLATE.format(query=quote(value, safe=""))

    return None


def ensure_scheme(url: str) -> str:
    """Prefix ``https://`` unless the URL already carries a scheme."""
    if _LEADING_SCHEME.match(url):
        return url
    return f"https://{url}"
