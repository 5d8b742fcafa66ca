"""
Status Ticker Tests

A fake clock drives the ticker so each tick evaluates a known instant.
"""
from __future__ import annotations

import threading
from datetime import timedelta

import pytest

from bolagstatus.engine import StatusCalculator, StatusTicker
from bolagstatus.models import StoreState


class FakeClock:
    """Advances one minute per call."""

    def __init__(self, start):
        self.current = start - timedelta(minutes=1)

    def __call__(self):
        self.current += timedelta(minutes=1)
        return self.current


class TestTicker:

    def test_run_stops_after_max_ticks(self, at) -> None:
        seen = []
        ticker = StatusTicker(
            StatusCalculator(),
            on_snapshot=seen.append,
            interval=0.001,
            clock=FakeClock(at(2025, 10, 13, 9, 28)),
        )

        ticker.run(max_ticks=4)

        assert ticker.ticks == 4
        assert [s.current_time_label for s in seen] == ["09:28", "09:29", "09:30", "09:31"]
        assert [s.state for s in seen] == [
            StoreState.CLOSED,
            StoreState.CLOSED,
            StoreState.OPENING_SOON,
            StoreState.OPENING_SOON,
        ]
        assert ticker.latest is seen[-1]

    def test_each_tick_recomputes(self, at) -> None:
        ticker = StatusTicker(StatusCalculator(), on_snapshot=lambda s: None, clock=lambda: at(2025, 10, 13, 18, 59))

        first = ticker.tick()
        second = ticker.tick()

        assert first == second
        assert first is not second

    def test_background_thread(self, at) -> None:
        ticked = threading.Event()
        ticker = StatusTicker(
            StatusCalculator(),
            on_snapshot=lambda s: ticked.set(),
            interval=0.01,
            clock=lambda: at(2025, 10, 13, 12, 0),
        )

        ticker.start()
        try:
            assert ticked.wait(timeout=2.0)
            assert ticker.running
            with pytest.raises(RuntimeError):
                ticker.start()
        finally:
            ticker.stop(timeout=2.0)

        assert not ticker.running
        assert ticker.ticks >= 1
        assert ticker.latest.state is StoreState.OPEN

    def test_interval_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            StatusTicker(StatusCalculator(), on_snapshot=print, interval=0)
