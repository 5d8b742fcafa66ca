"""
bolagstatus Exception Hierarchy

Domain-specific exceptions for the opening status service.
All exceptions include error codes for tracking and logging.

Exception codes follow the pattern: BS_<CATEGORY>_<SPECIFIC>

The status calculator itself has no recoverable failure modes. The only
errors raised from the core are invariant violations; everything else
belongs to configuration loading or the external store search.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class BolagStatusError(Exception):
    """
    Base exception for all bolagstatus errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (BS_*)
        details: Additional context about the error
        query: Associated store search query if applicable
    """
    message: str
    code: str = "BS_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)
    query: Optional[str] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.query:
            parts.append(f"(query: {self.query})")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging/API responses."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.query:
            result["query"] = self.query
        return result


# =============================================================================
# Core Invariant Errors
# =============================================================================

@dataclass
class StatusInvariantError(BolagStatusError):
    """An unreachable state was reached while evaluating opening status."""
    code: str = "BS_INVARIANT_VIOLATION"


@dataclass
class InvalidCalendarError(BolagStatusError):
    """Holiday calendar configuration is invalid."""
    code: str = "BS_INVALID_CALENDAR"


# =============================================================================
# Configuration Errors
# =============================================================================

@dataclass
class ConfigurationError(BolagStatusError):
    """An environment setting could not be parsed."""
    code: str = "BS_CONFIG_ERROR"


@dataclass
class HoursLoadError(BolagStatusError):
    """Failed to load an opening hours file."""
    code: str = "BS_HOURS_LOAD_ERROR"


@dataclass
class HoursValidationError(BolagStatusError):
    """Opening hours file failed schema validation."""
    code: str = "BS_HOURS_VALIDATION_ERROR"


# =============================================================================
# Store Search Errors
# =============================================================================

@dataclass
class PlaceSearchError(BolagStatusError):
    """Store search failed. Messages are shown to end users."""
    code: str = "BS_PLACE_SEARCH_ERROR"


@dataclass
class PlaceSearchNotConfiguredError(PlaceSearchError):
    """No API key is configured for the place search backend."""
    code: str = "BS_PLACE_SEARCH_NOT_CONFIGURED"


@dataclass
class PlaceSearchNoResultsError(PlaceSearchError):
    """The search returned no matching stores."""
    code: str = "BS_PLACE_SEARCH_NO_RESULTS"


@dataclass
class PlaceSearchRequestError(PlaceSearchError):
    """The request to the place search backend failed."""
    code: str = "BS_PLACE_SEARCH_REQUEST_FAILED"


@dataclass
class PlaceSearchMalformedResponseError(PlaceSearchError):
    """The place search backend returned an unexpected payload."""
    code: str = "BS_PLACE_SEARCH_MALFORMED_RESPONSE"
