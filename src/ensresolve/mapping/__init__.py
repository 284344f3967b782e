"""URL mapping for resolved addresses and text records."""

from .destination import destination_url
from .explorer import address_explorer_url, detect_address_chain, explorer_url
from .text_records import text_record_url

__all__ = [
    "address_explorer_url",
    "destination_url",
    "detect_address_chain",
    "explorer_url",
    "text_record_url",
]
