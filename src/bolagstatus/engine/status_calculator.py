"""
bolagstatus Status Calculator

Determines whether stores are open at a given instant, what the next
transition is, and how many seconds remain until it.

Key features:
- Holiday-aware state machine (fully-closed holidays, Sundays, opening hours)
- Opening-soon window before today's opening time
- Next-open-day search that skips Sundays and closed holidays
- DST-correct countdowns in one fixed civil timezone
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta, timezone
from typing import Optional, Union
from zoneinfo import ZoneInfo

from .. import labels
from ..calendars import SWEDISH_CALENDAR, HolidayCalendar
from ..exceptions import StatusInvariantError
from ..models import (
    DEFAULT_HOURS,
    ClockTime,
    DayClass,
    DayHours,
    Holiday,
    OpeningHoursTable,
    StatusSnapshot,
    StoreState,
)

DEFAULT_TIMEZONE = "Europe/Stockholm"

# Upper bound on candidate days examined by the next-open-day search
DEFAULT_MAX_LOOKAHEAD_DAYS = 7


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class WallTime:
    """A wall-clock time on a specific date."""
    date: date
    clock: ClockTime


# =============================================================================
# Status Calculator
# =============================================================================

@dataclass
class StatusCalculator:
    """
    Evaluates opening status for an instant.

    The calculator holds only read-only configuration, so one instance can
    be shared across threads and called on every tick.

    State machine (first match wins):
        1. Fully-closed holiday -> CLOSED until the next open day
        2. Day without hours (Sunday) -> CLOSED until the next open day
        3. Otherwise, with today's hours:
           a. open <= now < close -> OPEN until today's close
           b. now < open -> OPENING_SOON within the window, else CLOSED,
              until today's open
           c. after close -> CLOSED until the next open day

    Usage:
        calculator = StatusCalculator()
        snapshot = calculator.evaluate(datetime.now(timezone.utc))
        print(snapshot.state, snapshot.countdown_display, snapshot.countdown_label)
    """

    # Holiday calendar consulted for today and upcoming days
    calendar: HolidayCalendar = field(default_factory=lambda: SWEDISH_CALENDAR)

    # Opening hours per day class
    hours: OpeningHoursTable = field(default_factory=lambda: DEFAULT_HOURS)

    # Civil timezone for all wall-clock computations
    tz: Union[ZoneInfo, str] = DEFAULT_TIMEZONE

    max_lookahead_days: int = DEFAULT_MAX_LOOKAHEAD_DAYS

    def __post_init__(self) -> None:
        if isinstance(self.tz, str):
            self.tz = ZoneInfo(self.tz)
        if self.max_lookahead_days < 1:
            raise ValueError("max_lookahead_days must be at least 1")

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def localize(self, now: datetime) -> datetime:
        """
        Express an instant in the civil timezone.

        Aware datetimes are converted. Naive datetimes are taken as
        wall-clock time in the civil timezone, never the host's. A naive
        time skipped by a DST change is moved to the real local time.
        """
        if now.tzinfo is None:
            now = now.replace(tzinfo=self.tz).astimezone(timezone.utc)
        return now.astimezone(self.tz)

    def evaluate(self, now: Optional[datetime] = None) -> StatusSnapshot:
        """
        Evaluate opening status at an instant.

        Args:
            now: The instant to evaluate; defaults to the current time

        Returns:
            A new StatusSnapshot

        Raises:
            StatusInvariantError: If the hours table has no entry for a day
                class, or no open day is found within the lookahead bound
        """
        local_now = self.localize(now if now is not None else utc_now())
        today = local_now.date()
        now_minutes = local_now.hour * 60 + local_now.minute
        holiday = self.calendar.holiday_on(today)

        if holiday is not None and holiday.closed:
            return self._closed_until_next_open(
                local_now,
                holiday=holiday,
                message=labels.holiday_message(holiday.name),
                today_hours_label=labels.CLOSED_HOLIDAY,
            )

        day_hours = self.hours_for(today)

        if day_hours is None:
            return self._closed_until_next_open(
                local_now,
                holiday=holiday,
                message=labels.MESSAGES[StoreState.CLOSED],
                today_hours_label=labels.CLOSED_TODAY,
            )

        open_minutes = day_hours.opens.minutes
        close_minutes = day_hours.closes.minutes

        if open_minutes <= now_minutes < close_minutes:
            return self._snapshot(
                local_now,
                state=StoreState.OPEN,
                target=WallTime(today, day_hours.closes),
                countdown_label=labels.closes_at(day_hours.closes),
                today_hours_label=day_hours.label,
                holiday=holiday,
            )

        if now_minutes < open_minutes:
            if open_minutes - now_minutes <= self.hours.opening_soon_minutes:
                state = StoreState.OPENING_SOON
            else:
                state = StoreState.CLOSED
            return self._snapshot(
                local_now,
                state=state,
                target=WallTime(today, day_hours.opens),
                countdown_label=labels.opens_at(day_hours.opens),
                today_hours_label=day_hours.label,
                holiday=holiday,
            )

        larger_open = (
            day_hours.extended_closes is not None
            and now_minutes < day_hours.extended_closes.minutes
        )
        return self._closed_until_next_open(
            local_now,
            holiday=holiday,
            message=labels.MESSAGES[StoreState.CLOSED],
            today_hours_label=day_hours.label,
            larger_stores_may_be_open=larger_open,
        )

    def hours_for(self, d: date) -> Optional[DayHours]:
        """
        Get the opening hours of a date's day class.

        Returns None for days without hours (Sunday).

        Raises:
            StatusInvariantError: If the table has no entry for the day class
        """
        day_class = DayClass.for_date(d)
        if not self.hours.has_entry(day_class):
            raise StatusInvariantError(
                message=f"Opening hours table has no entry for {day_class.value}",
                details={"date": d.isoformat(), "table": self.hours.name},
            )
        return self.hours.for_class(day_class)

    def next_open_day(self, today: date) -> WallTime:
        """
        Find the next day stores open, strictly after `today`.

        The first candidate is Monday after a Saturday or Sunday and the next
        calendar day otherwise. Candidates without hours or on fully-closed
        holidays are skipped, examining at most `max_lookahead_days` days.

        Raises:
            StatusInvariantError: If no open day is found within the bound
        """
        offset = 2 if today.weekday() == 5 else 1
        candidate = today + timedelta(days=offset)

        for _ in range(self.max_lookahead_days):
            if not self.calendar.is_closed_day(candidate):
                day_hours = self.hours_for(candidate)
                if day_hours is not None:
                    return WallTime(candidate, day_hours.opens)
            candidate += timedelta(days=1)

        raise StatusInvariantError(
            message=f"No open day found within {self.max_lookahead_days} days",
            details={"from": today.isoformat()},
        )

    def countdown(self, local_now: datetime, target: WallTime) -> tuple[datetime, int]:
        """
        Whole seconds from `local_now` until the target wall-clock time.

        Differences are taken between UTC instants so DST transitions count
        correctly. A target that is not after `local_now` rolls forward one
        day, so the result is never negative.

        Returns:
            (target instant in the civil timezone, seconds remaining)
        """
        now_utc = local_now.astimezone(timezone.utc)
        target_at = self._at(target.date, target.clock)
        if target_at.astimezone(timezone.utc) <= now_utc:
            target_at = self._at(target.date + timedelta(days=1), target.clock)
        remaining = target_at.astimezone(timezone.utc) - now_utc
        return target_at, max(remaining // timedelta(seconds=1), 0)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _at(self, d: date, clock: ClockTime) -> datetime:
        return datetime.combine(d, time(clock.hour, clock.minute), tzinfo=self.tz)

    def _next_open_label(self, today: date, opening: WallTime) -> str:
        if opening.date == today + timedelta(days=1):
            return labels.opens_tomorrow_at(opening.clock)
        return labels.opens_on_day_at(opening.date, opening.clock)

    def _closed_until_next_open(
        self,
        local_now: datetime,
        holiday: Optional[Holiday],
        message: str,
        today_hours_label: str,
        larger_stores_may_be_open: bool = False,
    ) -> StatusSnapshot:
        today = local_now.date()
        opening = self.next_open_day(today)
        return self._snapshot(
            local_now,
            state=StoreState.CLOSED,
            target=opening,
            countdown_label=self._next_open_label(today, opening),
            today_hours_label=today_hours_label,
            holiday=holiday,
            message=message,
            larger_stores_may_be_open=larger_stores_may_be_open,
        )

    def _snapshot(
        self,
        local_now: datetime,
        state: StoreState,
        target: WallTime,
        countdown_label: str,
        today_hours_label: str,
        holiday: Optional[Holiday],
        message: Optional[str] = None,
        larger_stores_may_be_open: bool = False,
    ) -> StatusSnapshot:
        target_at, seconds = self.countdown(local_now, target)
        return StatusSnapshot(
            state=state,
            message=message or labels.MESSAGES[state],
            countdown_seconds=seconds,
            countdown_label=countdown_label,
            countdown_target=target_at,
            current_time_label=labels.time_label(local_now),
            current_date_label=labels.date_label(local_now.date()),
            today_hours_label=today_hours_label,
            now=local_now,
            holiday_name=holiday.name if holiday else None,
            is_holiday=holiday is not None,
            larger_stores_may_be_open=larger_stores_may_be_open,
        )


# Pre-configured calculator instance
DEFAULT_CALCULATOR = StatusCalculator()


def evaluate(now: Optional[datetime] = None) -> StatusSnapshot:
    """Evaluate opening status with the default calculator."""
    return DEFAULT_CALCULATOR.evaluate(now)
