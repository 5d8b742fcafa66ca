"""
bolagstatus Models

Value types shared by the calendar, the status calculator and the service.
"""
from __future__ import annotations

from .enums import CollisionPolicy, DayClass, StoreState
from .holiday import DatedHoliday, Holiday, date_key
from .hours import DEFAULT_HOURS, ClockTime, DayHours, OpeningHoursTable
from .status import Countdown, StatusSnapshot

__all__ = [
    # Enums
    "CollisionPolicy",
    "DayClass",
    "StoreState",
    # Holidays
    "DatedHoliday",
    "Holiday",
    "date_key",
    # Hours
    "DEFAULT_HOURS",
    "ClockTime",
    "DayHours",
    "OpeningHoursTable",
    # Status
    "Countdown",
    "StatusSnapshot",
]
