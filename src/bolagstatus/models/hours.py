"""
bolagstatus Opening Hours Models

Static, process-wide opening hours keyed by day class.

Standard Systembolaget hours:
- Monday - Friday: 10:00 - 19:00 (larger stores until 20:00)
- Saturday: 10:00 - 15:00 (larger stores until 17:00)
- Sunday: closed
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from .enums import DayClass


@dataclass(frozen=True, order=True)
class ClockTime:
    """A wall-clock time of day."""
    hour: int
    minute: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.hour <= 23 or not 0 <= self.minute <= 59:
            raise ValueError(f"Invalid clock time {self.hour}:{self.minute}")

    @property
    def minutes(self) -> int:
        """Minutes since midnight."""
        return self.hour * 60 + self.minute

    @property
    def label(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"

    @classmethod
    def parse(cls, value: str) -> ClockTime:
        """Parse "HH:MM"."""
        hour, _, minute = value.strip().partition(":")
        return cls(int(hour), int(minute or 0))


@dataclass(frozen=True)
class DayHours:
    """
    Opening hours for one day class.

    Attributes:
        opens: Opening time
        closes: Standard closing time
        extended_closes: Closing time of larger stores, if later
    """
    opens: ClockTime
    closes: ClockTime
    extended_closes: Optional[ClockTime] = None

    def __post_init__(self) -> None:
        if self.opens >= self.closes:
            raise ValueError(
                f"Opening time {self.opens.label} must be before closing time {self.closes.label}"
            )
        if self.extended_closes is not None and self.extended_closes < self.closes:
            raise ValueError("Extended closing time cannot be before standard closing time")

    @property
    def label(self) -> str:
        return f"{self.opens.label} – {self.closes.label}"


@dataclass(frozen=True)
class OpeningHoursTable:
    """
    Read-only opening hours per day class.

    A day class mapped to None is closed all day. Sunday is always closed.
    A day class missing from the mapping is a configuration bug and is
    reported by the status calculator as an invariant violation.
    """
    hours: Mapping[DayClass, Optional[DayHours]]
    opening_soon_minutes: int = 30
    name: str = "Standard"

    def __post_init__(self) -> None:
        if self.hours.get(DayClass.SUNDAY) is not None:
            raise ValueError("Sunday must be closed")
        if self.opening_soon_minutes < 0:
            raise ValueError("opening_soon_minutes must be non-negative")
        object.__setattr__(self, "hours", MappingProxyType(dict(self.hours)))

    def has_entry(self, day_class: DayClass) -> bool:
        return day_class in self.hours

    def for_class(self, day_class: DayClass) -> Optional[DayHours]:
        """Hours for a day class. Raises KeyError if the class has no entry."""
        return self.hours[day_class]

    def describe(self) -> list[tuple[str, str]]:
        """Display rows for the weekly hours listing."""
        labels = (
            (DayClass.WEEKDAY, "Måndag – Fredag"),
            (DayClass.SATURDAY, "Lördag"),
            (DayClass.SUNDAY, "Söndag"),
        )
        rows = []
        for day_class, label in labels:
            day_hours = self.hours.get(day_class)
            rows.append((label, day_hours.label if day_hours else "Stängt"))
        return rows


DEFAULT_HOURS = OpeningHoursTable(
    hours={
        DayClass.WEEKDAY: DayHours(ClockTime(10), ClockTime(19), ClockTime(20)),
        DayClass.SATURDAY: DayHours(ClockTime(10), ClockTime(15), ClockTime(17)),
        DayClass.SUNDAY: None,
    },
    opening_soon_minutes=30,
)
