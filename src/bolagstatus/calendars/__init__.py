"""
bolagstatus Calendars

Holiday calendars used to decide whether stores are closed on a date.

Provides:
- HolidayCalendar protocol for custom implementations
- BaseCalendar with lookups, ranges and next-holiday search
- SwedishCalendar for Swedish public holidays (primary)
- Utility functions bound to the default Swedish calendar

Usage:
    from bolagstatus.calendars import (
        holidays_for_year,
        holiday_on,
        get_next_holiday,
    )

    # All holidays of a year, keyed by "MM-DD"
    holidays = holidays_for_year(2025)

    # Today's holiday, if any
    holiday = holiday_on(date.today())

    # Next full closing day, spanning into next year if needed
    upcoming = get_next_holiday(date(2025, 12, 27))

    # Custom configuration
    calendar = SwedishCalendar(collision_policy=CollisionPolicy.FIRST)
"""
from __future__ import annotations

from .base import (
    BaseCalendar,
    FixedHolidayCalendar,
    HolidayCalendar,
    NoHolidayCalendar,
)
from .sweden import (
    EASTER_OFFSETS,
    FIXED_HOLIDAYS,
    SWEDISH_CALENDAR,
    SwedishCalendar,
    all_saints_day,
    calculate_easter,
    get_next_holiday,
    holiday_on,
    holidays_for_year,
    is_swedish_holiday,
    midsummer_eve,
    swedish_holiday_list,
)

__all__ = [
    # Protocols and base classes
    "HolidayCalendar",
    "BaseCalendar",
    "NoHolidayCalendar",
    "FixedHolidayCalendar",
    # Sweden - Primary
    "SwedishCalendar",
    "SWEDISH_CALENDAR",
    "EASTER_OFFSETS",
    "FIXED_HOLIDAYS",
    "calculate_easter",
    "midsummer_eve",
    "all_saints_day",
    "swedish_holiday_list",
    "holidays_for_year",
    "holiday_on",
    "get_next_holiday",
    "is_swedish_holiday",
]
