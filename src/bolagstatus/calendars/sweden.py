"""
Swedish Holiday Calendar

Implements the Swedish public holidays (röda dagar) on which
Systembolaget stores are closed.

Fixed holidays:
- Nyårsdagen (January 1)
- Trettondedag jul (January 6)
- Första maj (May 1)
- Sveriges nationaldag (June 6)
- Julafton, Juldagen, Annandag jul (December 24-26)
- Nyårsafton (December 31)

Easter-relative holidays:
- Långfredagen (Easter - 2)
- Påskafton (Easter - 1)
- Påskdagen (Easter Sunday)
- Annandag påsk (Easter + 1)
- Kristi himmelsfärdsdag (Easter + 39)
- Pingstdagen (Easter + 49)

Weekday-relative holidays:
- Midsommarafton (Friday between June 19-25) and Midsommardagen (the Saturday after)
- Alla helgons dag (Saturday between October 31 - November 6)

Holidays are recomputed per year; movable dates shift every year.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from functools import lru_cache
from typing import Optional, Union

from ..exceptions import InvalidCalendarError
from ..models import CollisionPolicy, DatedHoliday, Holiday, date_key
from .base import BaseCalendar

logger = logging.getLogger(__name__)


# Offsets from Easter Sunday, in evaluation order
EASTER_OFFSETS: tuple[tuple[int, str], ...] = (
    (-2, "Långfredagen"),
    (-1, "Påskafton"),
    (0, "Påskdagen"),
    (1, "Annandag påsk"),
    (39, "Kristi himmelsfärdsdag"),
    (49, "Pingstdagen"),
)

FIXED_HOLIDAYS: tuple[tuple[int, int, str], ...] = (
    (1, 1, "Nyårsdagen"),
    (1, 6, "Trettondedag jul"),
    (5, 1, "Första maj"),
    (6, 6, "Sveriges nationaldag"),
    (12, 24, "Julafton"),
    (12, 25, "Juldagen"),
    (12, 26, "Annandag jul"),
    (12, 31, "Nyårsafton"),
)


def calculate_easter(year: int) -> date:
    """
    Calculate Easter Sunday using the Anonymous Gregorian algorithm.

    This is the standard algorithm for calculating Easter in Western Christianity.
    """
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return date(year, month, day)


def _first_weekday_on_or_after(start: date, weekday: int) -> date:
    """
    Get the first date on or after `start` falling on `weekday` (0=Monday).

    Works on real dates, so ranges crossing a month boundary need no
    special handling.
    """
    return start + timedelta(days=(weekday - start.weekday()) % 7)


def midsummer_eve(year: int) -> date:
    """Midsummer Eve: the Friday between June 19 and June 25."""
    return _first_weekday_on_or_after(date(year, 6, 19), 4)


def all_saints_day(year: int) -> date:
    """All Saints' Day: the Saturday between October 31 and November 6."""
    return _first_weekday_on_or_after(date(year, 10, 31), 5)


def swedish_holiday_list(year: int) -> list[DatedHoliday]:
    """
    Get every named holiday of a year in evaluation order.

    The list may contain two entries for the same date; collapsing them
    into a keyed mapping is the calendar's job.
    """
    holidays = [
        DatedHoliday(date(year, month, day), Holiday(name, closed=True))
        for month, day, name in FIXED_HOLIDAYS
    ]

    easter = calculate_easter(year)
    for offset, name in EASTER_OFFSETS:
        holidays.append(
            DatedHoliday(easter + timedelta(days=offset), Holiday(name, closed=True))
        )

    eve = midsummer_eve(year)
    holidays.append(DatedHoliday(eve, Holiday("Midsommarafton", closed=True)))
    holidays.append(
        DatedHoliday(eve + timedelta(days=1), Holiday("Midsommardagen", closed=True))
    )

    holidays.append(DatedHoliday(all_saints_day(year), Holiday("Alla helgons dag", closed=True)))
    return holidays


@lru_cache(maxsize=64)
def _keyed_holidays(year: int, policy: CollisionPolicy) -> tuple[tuple[str, Holiday], ...]:
    keyed: dict[str, Holiday] = {}
    for entry in swedish_holiday_list(year):
        key = entry.key
        existing = keyed.get(key)
        if existing is not None:
            logger.debug(
                "Holiday collision on %s-%s: %s and %s (policy=%s)",
                year, key, existing.name, entry.holiday.name, policy.value,
            )
            if policy is CollisionPolicy.FIRST:
                continue
        keyed[key] = entry.holiday
    return tuple(sorted(keyed.items()))


@dataclass
class SwedishCalendar(BaseCalendar):
    """
    Swedish public holiday calendar.

    All holidays are full closing days for Systembolaget.
    """

    # Which holiday keeps a date when two compute onto it
    collision_policy: CollisionPolicy = CollisionPolicy.LAST

    def __post_init__(self) -> None:
        try:
            self.collision_policy = CollisionPolicy(self.collision_policy)
        except ValueError as e:
            raise InvalidCalendarError(
                message=f"Unknown holiday collision policy: {self.collision_policy!r}",
                details={"allowed": [p.value for p in CollisionPolicy]},
            ) from e

    def holidays_for_year(self, year: int) -> dict[str, Holiday]:
        """
        Get Swedish holidays for a year.

        Returns a new dict on every call; the cached data is immutable.
        """
        return dict(_keyed_holidays(year, self.collision_policy))

    def collisions_for_year(self, year: int) -> list[tuple[date, list[str]]]:
        """List dates onto which more than one named holiday computes."""
        by_date: dict[date, list[str]] = {}
        for entry in swedish_holiday_list(year):
            by_date.setdefault(entry.date, []).append(entry.holiday.name)
        return [(d, names) for d, names in sorted(by_date.items()) if len(names) > 1]


# Pre-configured calendar instance
SWEDISH_CALENDAR = SwedishCalendar()


def holidays_for_year(year: int) -> dict[str, Holiday]:
    """
    Get Swedish holidays for a year using the default calendar.

    Args:
        year: Year to get holidays for

    Returns:
        Mapping of "MM-DD" to Holiday
    """
    return SWEDISH_CALENDAR.holidays_for_year(year)


def holiday_on(d: Union[date, datetime]) -> Optional[Holiday]:
    """
    Get the Swedish holiday on a date, or None.

    Uses the default Swedish calendar.
    """
    return SWEDISH_CALENDAR.holiday_on(d)


def get_next_holiday(from_date: Union[date, datetime]) -> Optional[DatedHoliday]:
    """Get the next fully-closed Swedish holiday strictly after a date."""
    return SWEDISH_CALENDAR.get_next_holiday(from_date)


def is_swedish_holiday(d: date) -> bool:
    """Check if a date is a Swedish public holiday."""
    return SWEDISH_CALENDAR.is_holiday(d)
