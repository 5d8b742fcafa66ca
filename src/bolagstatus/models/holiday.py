"""
bolagstatus Holiday Models

A Holiday is keyed by an "MM-DD" string within one calendar year.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date


def date_key(d: date) -> str:
    """Format a date as the "MM-DD" key used in yearly holiday mappings."""
    return f"{d.month:02d}-{d.day:02d}"


@dataclass(frozen=True)
class Holiday:
    """
    A statutory holiday.

    Attributes:
        name: Display name (Swedish)
        closed: True if stores are closed all day, False for reduced hours
    """
    name: str
    closed: bool = True


@dataclass(frozen=True)
class DatedHoliday:
    """A holiday placed on a concrete date."""
    date: date
    holiday: Holiday

    @property
    def key(self) -> str:
        return date_key(self.date)

    def to_dict(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "name": self.holiday.name,
            "closed": self.holiday.closed,
        }
