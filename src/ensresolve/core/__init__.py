"""Core types, models, and symbol tables."""

from .exceptions import (
    EnsResolveError,
    InvalidFormatError,
    NotFoundError,
    ProviderUnavailableError,
    ResolutionError,
    UnrecognizedSuffixError,
    ValidationError,
)
from .models import ClassifiedQuery, ResolutionOutcome, ResolutionResult
from .symbols import (
    CHAIN_SYMBOLS,
    L2_SUFFIXES,
    RECOGNIZED_SUFFIXES,
    SYMBOL_TABLE_VERSION,
    TEXT_RECORD_KINDS,
)
from .types import (
    DefaultBrowserAction,
    L2Network,
    ProviderName,
    ProviderOrder,
    RequestKind,
    ResolutionStatus,
)

__all__ = [
    # Types
    "DefaultBrowserAction",
    "L2Network",
    "ProviderName",
    "ProviderOrder",
    "RequestKind",
    "ResolutionStatus",
    # Symbol tables
    "CHAIN_SYMBOLS",
    "L2_SUFFIXES",
    "RECOGNIZED_SUFFIXES",
    "SYMBOL_TABLE_VERSION",
    "TEXT_RECORD_KINDS",
    # Models
    "ClassifiedQuery",
    "ResolutionOutcome",
    "ResolutionResult",
    # Exceptions
    "EnsResolveError",
    "InvalidFormatError",
    "NotFoundError",
    "ProviderUnavailableError",
    "ResolutionError",
    "UnrecognizedSuffixError",
    "ValidationError",
]
