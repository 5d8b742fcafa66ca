"""
bolagstatus Store Search

Best-effort lookup of individual stores through an external place search
API. Independent of the status calculator.
"""
from __future__ import annotations

from .client import PLACES_SEARCH_URL, PlaceSearchClient
from .hours_parser import find_line_for_day, parse_open_now
from .models import StoreResult

__all__ = [
    "PLACES_SEARCH_URL",
    "PlaceSearchClient",
    "StoreResult",
    "find_line_for_day",
    "parse_open_now",
]
