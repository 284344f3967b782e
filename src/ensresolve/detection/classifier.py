"""Identifier classification into canonical query shapes."""

from __future__ import annotations

from ensresolve.core.exceptions import InvalidFormatError, UnrecognizedSuffixError
from ensresolve.core.models import ClassifiedQuery
from ensresolve.core.symbols import (
    CHAIN_SYMBOLS,
    ETH_SUFFIX,
    TEXT_RECORD_KINDS,
    l2_network_for,
)
from ensresolve.core.types import RequestKind


class IdentifierClassifier:
    """
    Parses an identifier into a :class:`ClassifiedQuery`.

    Only defined for inputs accepted by the format validator; callers should
    gate on :func:`ensresolve.detection.validator.is_valid` first.

    Examples:
        vitalik.eth       -> address_chain("eth")
        onshow.eth:btc    -> address_chain("btc")
        alice.base.eth    -> address_chain("eth"), l2_network=base
        bob.x             -> text_record("x")
    """

    def classify(self, text: str) -> ClassifiedQuery:
        """Classify ``text`` into base label, request kind and L2 network."""
        if ":" in text:
            return self._classify_colon_form(text)

        if "." not in text:
            raise InvalidFormatError(
                message=f"Identifier has no suffix: {text!r}",
                identifier=text,
            )

        base_label, suffix = text.rsplit(".", 1)
        suffix = suffix.lower()

        if suffix == ETH_SUFFIX:
            return ClassifiedQuery(
                identifier=text,
                base_label=base_label,
                kind=RequestKind.ADDRESS_CHAIN,
                symbol=ETH_SUFFIX,
                l2_network=l2_network_for(text),
            )

        kind = self._kind_for_symbol(text, suffix)
        return ClassifiedQuery(
            identifier=text,
            base_label=base_label,
            kind=kind,
            symbol=suffix,
            has_eth_base=False,
        )

    def _classify_colon_form(self, text: str) -> ClassifiedQuery:
        """Handle ``name.eth:symbol`` requests."""
        eth_name, symbol = text.rsplit(":", 1)
        symbol = symbol.lower()

        base_label, _, suffix = eth_name.rpartition(".")
        if not base_label or suffix.lower() != ETH_SUFFIX:
            raise InvalidFormatError(
                message=f"Colon form requires an .eth base name: {text!r}",
                identifier=text,
            )

        return ClassifiedQuery(
            identifier=text,
            base_label=base_label,
            kind=self._kind_for_symbol(text, symbol),
            symbol=symbol,
            l2_network=l2_network_for(eth_name),
        )

    @staticmethod
    def _kind_for_symbol(text: str, symbol: str) -> RequestKind:
        if symbol in CHAIN_SYMBOLS:
            return RequestKind.ADDRESS_CHAIN
        if symbol in TEXT_RECORD_KINDS:
            return RequestKind.TEXT_RECORD
        raise UnrecognizedSuffixError(
            message=f"Unrecognized chain or record suffix {symbol!r} in {text!r}",
            identifier=text,
            suffix=symbol,
        )


_default_classifier = IdentifierClassifier()


def classify(text: str) -> ClassifiedQuery:
    """Module-level shortcut for :meth:`IdentifierClassifier.classify`."""
    return _default_classifier.classify(text)
