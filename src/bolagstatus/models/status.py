"""
bolagstatus Status Snapshot

The immutable output of one status evaluation. A snapshot is built fresh
from the current instant on every tick and is never mutated.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, NamedTuple, Optional

from .enums import StoreState


class Countdown(NamedTuple):
    """A countdown split into display units."""
    hours: int
    minutes: int
    seconds: int

    @classmethod
    def from_seconds(cls, total_seconds: int) -> Countdown:
        hours, remainder = divmod(max(total_seconds, 0), 3600)
        minutes, seconds = divmod(remainder, 60)
        return cls(hours, minutes, seconds)

    def display(self) -> str:
        """Zero-padded "HH:MM:SS"."""
        return f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}"


@dataclass(frozen=True)
class StatusSnapshot:
    """
    Opening status at one instant.

    Attributes:
        state: OPEN, CLOSED or OPENING_SOON
        message: Headline answer shown to the user
        countdown_seconds: Whole seconds until countdown_target (never negative)
        countdown_label: What the countdown counts down to
        countdown_target: Instant of the next transition, in the civil timezone
        current_time_label: "HH:MM" wall-clock time
        current_date_label: Weekday, day and month in Swedish
        today_hours_label: Today's hours, or a closed label
        holiday_name: Name of today's holiday, if any
        is_holiday: Whether today is a holiday
        larger_stores_may_be_open: After standard close but before larger stores close
        now: The evaluated instant, in the civil timezone
    """
    state: StoreState
    message: str
    countdown_seconds: int
    countdown_label: str
    countdown_target: datetime
    current_time_label: str
    current_date_label: str
    today_hours_label: str
    now: datetime
    holiday_name: Optional[str] = None
    is_holiday: bool = False
    larger_stores_may_be_open: bool = False

    def __post_init__(self) -> None:
        if self.countdown_seconds < 0:
            raise ValueError("countdown_seconds must be non-negative")

    @property
    def is_open(self) -> bool:
        return self.state is StoreState.OPEN

    @property
    def countdown(self) -> Countdown:
        return Countdown.from_seconds(self.countdown_seconds)

    @property
    def countdown_display(self) -> str:
        return self.countdown.display()

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output. Key order is fixed."""
        hours, minutes, seconds = self.countdown
        return {
            "state": self.state.value,
            "is_open": self.is_open,
            "message": self.message,
            "countdown_seconds": self.countdown_seconds,
            "countdown": {"hours": hours, "minutes": minutes, "seconds": seconds},
            "countdown_display": self.countdown_display,
            "countdown_label": self.countdown_label,
            "countdown_target": self.countdown_target.isoformat(),
            "current_time": self.current_time_label,
            "current_date": self.current_date_label,
            "today_hours": self.today_hours_label,
            "holiday_name": self.holiday_name,
            "is_holiday": self.is_holiday,
            "larger_stores_may_be_open": self.larger_stores_may_be_open,
            "now": self.now.isoformat(),
        }
