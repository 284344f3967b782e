"""Identifier validation and classification module."""

from .classifier import IdentifierClassifier, classify
from .validator import FormatValidator, is_valid

__all__ = ["FormatValidator", "IdentifierClassifier", "classify", "is_valid"]
