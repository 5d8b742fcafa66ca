"""
bolagstatus Holiday Calendar Base

Provides the protocol and base implementation for holiday calendars
used by the status calculator.

The calendar system is pluggable: a calendar only has to produce the
holidays of a given year, keyed by "MM-DD".
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional, Protocol, Union, runtime_checkable

from ..models import DatedHoliday, Holiday, date_key


@runtime_checkable
class HolidayCalendar(Protocol):
    """
    Protocol for holiday calendars.

    Implementations must be pure functions of the queried year: the same
    year always yields the same mapping.
    """

    def holidays_for_year(self, year: int) -> dict[str, Holiday]:
        """
        Get all holidays of a year.

        Args:
            year: Calendar year

        Returns:
            Mapping of "MM-DD" to Holiday, one entry per date
        """
        ...

    def holiday_on(self, d: date) -> Optional[Holiday]:
        """
        Get the holiday on a date.

        Args:
            d: Date to check

        Returns:
            The Holiday, or None if the date is not a holiday
        """
        ...

    def is_closed_day(self, d: date) -> bool:
        """Check if stores are fully closed for a holiday on a date."""
        ...

    def get_next_holiday(self, from_date: Union[date, datetime]) -> Optional[DatedHoliday]:
        """Get the first fully-closed holiday strictly after a date."""
        ...


def _as_date(value: Union[date, datetime]) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


@dataclass
class BaseCalendar(ABC):
    """
    Abstract base class for holiday calendars.

    Subclasses must implement `holidays_for_year()`. Lookups, ranges and
    the next-holiday search are derived from it.
    """

    @abstractmethod
    def holidays_for_year(self, year: int) -> dict[str, Holiday]:
        """Get all holidays of a year keyed by "MM-DD"."""
        ...

    def holiday_on(self, d: date) -> Optional[Holiday]:
        """Get the holiday on a date, or None."""
        d = _as_date(d)
        return self.holidays_for_year(d.year).get(date_key(d))

    def is_holiday(self, d: date) -> bool:
        """Check if a date is a holiday (closed or reduced hours)."""
        return self.holiday_on(d) is not None

    def is_closed_day(self, d: date) -> bool:
        """Check if a date is a fully-closed holiday."""
        holiday = self.holiday_on(d)
        return holiday is not None and holiday.closed

    def dated_holidays(self, year: int) -> list[DatedHoliday]:
        """
        Get all holidays of a year with concrete dates.

        Returns list of DatedHoliday sorted by date.
        """
        result = []
        for key, holiday in self.holidays_for_year(year).items():
            month, day = (int(part) for part in key.split("-"))
            result.append(DatedHoliday(date(year, month, day), holiday))
        return sorted(result, key=lambda h: h.date)

    def get_holidays_in_range(self, start: date, end: date) -> list[DatedHoliday]:
        """Get all holidays within a date range (both ends inclusive)."""
        holidays = []
        for year in range(start.year, end.year + 1):
            holidays.extend(
                h for h in self.dated_holidays(year) if start <= h.date <= end
            )
        return holidays

    def get_next_holiday(self, from_date: Union[date, datetime]) -> Optional[DatedHoliday]:
        """
        Get the next fully-closed holiday strictly after a date.

        Looks at the holidays of the date's year and the following year,
        so a query in December finds January holidays.

        Args:
            from_date: Date (or datetime, whose date is used) to search from

        Returns:
            The next closed DatedHoliday, or None
        """
        start = _as_date(from_date)
        candidates = self.dated_holidays(start.year) + self.dated_holidays(start.year + 1)
        candidates.sort(key=lambda h: h.date)
        for candidate in candidates:
            if candidate.date > start and candidate.holiday.closed:
                return candidate
        return None


@dataclass
class NoHolidayCalendar(BaseCalendar):
    """
    A calendar with no holidays.

    Only Sundays close stores. Useful for testing.
    """

    def holidays_for_year(self, year: int) -> dict[str, Holiday]:
        return {}


@dataclass
class FixedHolidayCalendar(BaseCalendar):
    """
    A calendar with a fixed set of holiday dates.

    Useful for testing or when holidays are provided externally.
    """

    holidays: dict[date, Holiday] = field(default_factory=dict)

    def holidays_for_year(self, year: int) -> dict[str, Holiday]:
        return {
            date_key(d): holiday
            for d, holiday in sorted(self.holidays.items())
            if d.year == year
        }

    @classmethod
    def from_dates(cls, *dates: date, name: str = "Helgdag") -> FixedHolidayCalendar:
        """Create a calendar of fully-closed holidays from a list of dates."""
        return cls(holidays={d: Holiday(name, closed=True) for d in dates})
