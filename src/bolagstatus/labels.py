"""
Display strings.

All user-facing text is Swedish. There is no localization layer; these
constants are the single place the wording lives.
"""
from __future__ import annotations

from datetime import date, datetime

from .models import ClockTime, StoreState

# Indexed by date.weekday() (0=Monday)
WEEKDAY_NAMES = ("måndag", "tisdag", "onsdag", "torsdag", "fredag", "lördag", "söndag")

MONTH_NAMES = (
    "januari", "februari", "mars", "april", "maj", "juni",
    "juli", "augusti", "september", "oktober", "november", "december",
)

MESSAGES = {
    StoreState.OPEN: "Ja! Systembolaget är öppet just nu.",
    StoreState.OPENING_SOON: "Snart! Systembolaget öppnar snart.",
    StoreState.CLOSED: "Nej, Systembolaget är stängt just nu.",
}

HEADLINES = {
    StoreState.OPEN: "JA",
    StoreState.OPENING_SOON: "SNART",
    StoreState.CLOSED: "NEJ",
}

CLOSED_TODAY = "Stängt"
CLOSED_HOLIDAY = "Stängt (helgdag)"


def holiday_message(holiday_name: str) -> str:
    return f"Nej, Systembolaget är stängt idag ({holiday_name})."


def closes_at(time: ClockTime) -> str:
    return f"Stänger kl {time.label}"


def opens_at(time: ClockTime) -> str:
    return f"Öppnar kl {time.label}"


def opens_tomorrow_at(time: ClockTime) -> str:
    return f"Öppnar imorgon kl {time.label}"


def opens_on_day_at(d: date, time: ClockTime) -> str:
    return f"Öppnar på {WEEKDAY_NAMES[d.weekday()]} kl {time.label}"


def time_label(now: datetime) -> str:
    return f"{now.hour:02d}:{now.minute:02d}"


def date_label(d: date) -> str:
    """e.g. "lördag 17 oktober"."""
    return f"{WEEKDAY_NAMES[d.weekday()]} {d.day} {MONTH_NAMES[d.month - 1]}"
