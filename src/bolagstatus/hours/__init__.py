"""
bolagstatus Opening Hours

Loads opening hours tables from YAML/JSON files validated with Pydantic.

Usage:
    from bolagstatus.hours import load_hours

    table = load_hours()                      # bundled standard hours
    table = load_hours("config/hours.yaml")   # custom file
"""
from __future__ import annotations

from .loader import DEFAULT_HOURS_FILE, HoursTableLoader, load_hours
from .schema import SCHEMA_VERSION, DayHoursSchema, HoursTableSchema, validate_hours_table

__all__ = [
    "DEFAULT_HOURS_FILE",
    "HoursTableLoader",
    "load_hours",
    "SCHEMA_VERSION",
    "DayHoursSchema",
    "HoursTableSchema",
    "validate_hours_table",
]
