"""
bolagstatus Enumerations

All enums inherit from (str, Enum) for JSON serialization compatibility.
"""
from __future__ import annotations

from datetime import date
from enum import Enum


# =============================================================================
# Store State
# =============================================================================

class StoreState(str, Enum):
    """Opening state reported for the current moment."""
    OPEN = "open"
    CLOSED = "closed"
    OPENING_SOON = "soon"              # Within the opening-soon window


# =============================================================================
# Day Classes
# =============================================================================

class DayClass(str, Enum):
    """Weekday classes that share one row of opening hours."""
    WEEKDAY = "weekday"                # Monday - Friday
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @classmethod
    def for_date(cls, d: date) -> DayClass:
        """Classify a calendar date."""
        weekday = d.weekday()
        if weekday == 5:
            return cls.SATURDAY
        if weekday == 6:
            return cls.SUNDAY
        return cls.WEEKDAY


# =============================================================================
# Holiday Collision Policy
# =============================================================================

class CollisionPolicy(str, Enum):
    """
    Which holiday keeps a date when two holidays compute onto it.

    Holidays are written in a fixed order: fixed dates, Easter-relative,
    Midsummer, All Saints' Day.
    """
    LAST = "last"                      # Later write wins
    FIRST = "first"                    # Earlier write wins
