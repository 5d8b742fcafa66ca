"""
bolagstatus Engine

Core services for opening status evaluation.

Services:
- StatusCalculator: Evaluate open/closed/opening-soon for an instant
- StatusTicker: Re-evaluate once per second and publish snapshots

Usage:
    from bolagstatus.engine import StatusCalculator, StatusTicker

    calculator = StatusCalculator()
    snapshot = calculator.evaluate()
"""
from __future__ import annotations

from .status_calculator import (
    DEFAULT_CALCULATOR,
    DEFAULT_MAX_LOOKAHEAD_DAYS,
    DEFAULT_TIMEZONE,
    StatusCalculator,
    WallTime,
    evaluate,
    utc_now,
)
from .ticker import StatusTicker

__all__ = [
    "DEFAULT_CALCULATOR",
    "DEFAULT_MAX_LOOKAHEAD_DAYS",
    "DEFAULT_TIMEZONE",
    "StatusCalculator",
    "StatusTicker",
    "WallTime",
    "evaluate",
    "utc_now",
]
