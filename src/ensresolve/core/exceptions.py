"""Custom exception hierarchy for ensresolve."""

from typing import Any


class EnsResolveError(Exception):
    """Base exception for all ensresolve errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(EnsResolveError):
    """Input validation failed."""

    pass


class InvalidFormatError(ValidationError):
    """Identifier does not match any recognized surface syntax."""

    def __init__(
        self,
        message: str,
        identifier: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.identifier = identifier


class UnrecognizedSuffixError(ValidationError):
    """Identifier suffix maps to neither a chain symbol nor a text record."""

    def __init__(
        self,
        message: str,
        identifier: str,
        suffix: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.identifier = identifier
        self.suffix = suffix


class ResolutionError(EnsResolveError):
    """Failed to resolve identifier."""

    pass


class ProviderUnavailableError(ResolutionError):
    """Upstream resolution API is unavailable."""

    def __init__(
        self,
        message: str,
        source: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.source = source
        self.status_code = status_code


class NotFoundError(EnsResolveError):
    """No provider returned an address for the identifier."""

    pass
