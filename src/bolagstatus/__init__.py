"""
bolagstatus - Is Systembolaget open right now?

Opening status, countdown and Swedish holiday calendar for Systembolaget
stores, with a JSON service, a command line interface and a store lookup.

Usage:
    from bolagstatus import StatusCalculator, holidays_for_year

    snapshot = StatusCalculator().evaluate()
    print(snapshot.message, snapshot.countdown_display, snapshot.countdown_label)
"""
from __future__ import annotations

__version__ = "1.0.0"

from .calendars import (
    SwedishCalendar,
    get_next_holiday,
    holiday_on,
    holidays_for_year,
)
from .engine import StatusCalculator, StatusTicker, evaluate
from .models import Holiday, StatusSnapshot, StoreState

__all__ = [
    "__version__",
    "Holiday",
    "StatusCalculator",
    "StatusSnapshot",
    "StatusTicker",
    "StoreState",
    "SwedishCalendar",
    "evaluate",
    "get_next_holiday",
    "holiday_on",
    "holidays_for_year",
]
