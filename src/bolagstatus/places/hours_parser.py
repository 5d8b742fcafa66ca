"""
Weekly hours text parsing.

Fallback used when the place search backend does not report whether a
store is open. Lines look like "måndag: 10:00–19:00" or "söndag: Stängt".
"""
from __future__ import annotations

import re
from datetime import datetime
from typing import Optional, Sequence

from ..labels import WEEKDAY_NAMES

# "10:00–20:00", "10.00-20.00", "10:00 – 20:00"
TIME_RANGE = re.compile(r"(\d{1,2})[:.](\d{2})\s*[–-]\s*(\d{1,2})[:.](\d{2})")

CLOSED_WORD = "stängt"


def find_line_for_day(weekday_text: Sequence[str], weekday: int) -> Optional[str]:
    """Find the line describing a weekday (0=Monday)."""
    day_name = WEEKDAY_NAMES[weekday]
    for line in weekday_text:
        if day_name in line.lower():
            return line
    return None


def parse_open_now(weekday_text: Sequence[str], now: datetime) -> Optional[bool]:
    """
    Decide from weekly hours text whether a store is open at `now`.

    Args:
        weekday_text: One line per weekday, in Swedish
        now: Wall-clock time to check, already in the store's timezone

    Returns:
        True/False, or None if today's hours cannot be determined
    """
    if not weekday_text:
        return None

    line = find_line_for_day(weekday_text, now.weekday())
    if line is None:
        return None

    if CLOSED_WORD in line.lower():
        return False

    match = TIME_RANGE.search(line)
    if not match:
        return None

    open_hour, open_minute, close_hour, close_minute = (int(g) for g in match.groups())
    current = now.hour * 60 + now.minute
    return open_hour * 60 + open_minute <= current < close_hour * 60 + close_minute
