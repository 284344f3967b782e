"""ensresolve - Naming-service identifier classification and resolution library."""

from ensresolve.client import EnsResolveClient, open_url, resolve
from ensresolve.core.models import ClassifiedQuery, ResolutionOutcome, ResolutionResult
from ensresolve.core.types import (
    DefaultBrowserAction,
    L2Network,
    ProviderName,
    ProviderOrder,
    RequestKind,
    ResolutionStatus,
)
from ensresolve.detection import classify, is_valid
from ensresolve.mapping import destination_url, explorer_url, text_record_url

__version__ = "0.1.0"
__all__ = [
    # Client
    "EnsResolveClient",
    "open_url",
    "resolve",
    # Pure functions
    "classify",
    "destination_url",
    "explorer_url",
    "is_valid",
    "text_record_url",
    # Types
    "DefaultBrowserAction",
    "L2Network",
    "ProviderName",
    "ProviderOrder",
    "RequestKind",
    "ResolutionStatus",
    # Models
    "ClassifiedQuery",
    "ResolutionOutcome",
    "ResolutionResult",
    # Version
    "__version__",
]
