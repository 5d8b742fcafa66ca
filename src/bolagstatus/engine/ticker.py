"""
bolagstatus Status Ticker

Re-evaluates the status calculator on a fixed interval and hands each
snapshot to a consumer. Nothing is carried between ticks except the last
snapshot kept for readers; every tick recomputes from the clock.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Optional

from ..models import StatusSnapshot
from .status_calculator import StatusCalculator, utc_now

logger = logging.getLogger(__name__)


@dataclass
class StatusTicker:
    """
    Drives a StatusCalculator once per interval.

    Usage:
        ticker = StatusTicker(StatusCalculator(), on_snapshot=render)
        ticker.start()
        ...
        ticker.stop()
    """

    calculator: StatusCalculator
    on_snapshot: Callable[[StatusSnapshot], None]
    interval: float = 1.0
    clock: Callable[[], datetime] = utc_now

    latest: Optional[StatusSnapshot] = field(default=None, init=False)
    ticks: int = field(default=0, init=False)
    _stop: threading.Event = field(default_factory=threading.Event, init=False, repr=False)
    _thread: Optional[threading.Thread] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.interval <= 0:
            raise ValueError("interval must be positive")

    def tick(self) -> StatusSnapshot:
        """Evaluate once and publish the snapshot."""
        snapshot = self.calculator.evaluate(self.clock())
        previous = self.latest
        if previous is not None and previous.state is not snapshot.state:
            logger.debug(
                "Status changed from %s to %s at %s",
                previous.state.value, snapshot.state.value, snapshot.current_time_label,
            )
        self.latest = snapshot
        self.ticks += 1
        self.on_snapshot(snapshot)
        return snapshot

    def run(self, max_ticks: Optional[int] = None) -> None:
        """
        Tick immediately, then once per interval until stopped.

        Args:
            max_ticks: Stop after this many ticks (None runs until stop())
        """
        self._stop.clear()
        self._loop(max_ticks)

    def _loop(self, max_ticks: Optional[int] = None) -> None:
        count = 0
        while not self._stop.is_set():
            self.tick()
            count += 1
            if max_ticks is not None and count >= max_ticks:
                break
            self._stop.wait(self.interval)

    def start(self) -> threading.Thread:
        """Run the loop in a background daemon thread."""
        if self._thread is not None and self._thread.is_alive():
            raise RuntimeError("Ticker is already running")
        self._stop.clear()
        self._thread = threading.Thread(target=self._loop, name="status-ticker", daemon=True)
        self._thread.start()
        return self._thread

    def stop(self, timeout: Optional[float] = None) -> None:
        """Stop the loop. There is no in-flight work to abort."""
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()
