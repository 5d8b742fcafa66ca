"""
Pytest configuration and fixtures for bolagstatus tests.

Provides wall-clock helpers in the Stockholm timezone and a default calculator.
"""
import os

import pytest
from datetime import datetime
from zoneinfo import ZoneInfo

from bolagstatus.engine import StatusCalculator

STOCKHOLM = ZoneInfo("Europe/Stockholm")


# =============================================================================
# Factory Helpers
# =============================================================================

def local(year: int, month: int, day: int, hour: int = 12, minute: int = 0, second: int = 0) -> datetime:
    """An aware datetime at a Stockholm wall-clock time."""
    return datetime(year, month, day, hour, minute, second, tzinfo=STOCKHOLM)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def calculator() -> StatusCalculator:
    return StatusCalculator()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep BS_* variables from the host environment out of tests."""
    for name in list(os.environ):
        if name.startswith("BS_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def at():
    """Factory for Stockholm wall-clock datetimes."""
    return local
