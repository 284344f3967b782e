"""Surface syntax validation for naming-service identifiers."""

from __future__ import annotations

import unicodedata
from typing import ClassVar

from ensresolve.core.symbols import ETH_SUFFIX, RECOGNIZED_SUFFIXES


class FormatValidator:
    """
    Checks whether an identifier matches one of the recognized syntaxes.

    Accepted families, checked in order:
    - ``<label>.eth`` (subdomains such as ``jesse.base.eth`` included)
    - ``<label>.<suffix>`` where suffix is a known chain symbol or text record
    - ``<label>.eth:<suffix>`` explicit chain/record request on an eth name

    Labels may use any Unicode letter, number, mark, symbol or punctuation
    code point, so emoji names like ``1️⃣1️⃣1️⃣.eth`` are accepted.
    """

    # Unicode general category prefixes allowed inside a label
    ALLOWED_CATEGORIES: ClassVar[frozenset[str]] = frozenset({"L", "N", "M", "S", "P"})

    # Format characters that appear inside emoji sequences
    ALLOWED_FORMAT_CHARS: ClassVar[frozenset[str]] = frozenset({"\u200d"})

    # Punctuation that would change the meaning of the identifier or its URL
    RESERVED_CHARS: ClassVar[frozenset[str]] = frozenset({":", "/", "?", "#", "%", "\\"})

    def is_valid(self, text: object) -> bool:
        """Return True if ``text`` matches a recognized identifier syntax."""
        if not isinstance(text, str) or not text:
            return False

        if ":" in text:
            return self._matches_colon_form(text)

        return self._matches_eth_name(text) or self._matches_suffixed_name(text)

    def _matches_eth_name(self, text: str) -> bool:
        """``<label>.eth``"""
        return text.lower().endswith(f".{ETH_SUFFIX}") and self._labels_valid(text)

    def _matches_suffixed_name(self, text: str) -> bool:
        """``<label>.<chainOrRecordSuffix>``"""
        suffix = text.rsplit(".", 1)[-1].lower()
        return suffix in RECOGNIZED_SUFFIXES and self._labels_valid(text)

    def _matches_colon_form(self, text: str) -> bool:
        """``<label>.eth:<suffix>``"""
        if text.count(":") != 1:
            return False
        base_name, symbol = text.rsplit(":", 1)
        return symbol.lower() in RECOGNIZED_SUFFIXES and self._matches_eth_name(base_name)

    def _labels_valid(self, name: str) -> bool:
        labels = name.split(".")
        if len(labels) < 2:
            return False
        return all(label and all(self._is_label_char(ch) for ch in label) for label in labels)

    def _is_label_char(self, ch: str) -> bool:
        if ch in self.RESERVED_CHARS:
            return False
        if ch in self.ALLOWED_FORMAT_CHARS:
            return True
        # Whitespace (Z*), control/surrogate/unassigned (C*) all fall outside
        return unicodedata.category(ch)[0] in self.ALLOWED_CATEGORIES


_default_validator = FormatValidator()


def is_valid(text: object) -> bool:
    """Module-level shortcut for :meth:`FormatValidator.is_valid`."""
    return _default_validator.is_valid(text)
