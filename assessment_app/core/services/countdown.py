"""Countdown control for the timed part of the assessment."""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from assessment_app.constants.assessment_constants import TICK_INTERVAL_MS

logger = logging.getLogger(__name__)


class Ticker(Protocol):
    """Periodic callback source.

    The Qt implementation wraps ``QTimer``; tests drive ``ManualTicker``.
    """

    def start(self, interval_ms: int, callback: Callable[[], None]) -> None:
        ...

    def stop(self) -> None:
        ...

    def is_active(self) -> bool:
        ...


class ManualTicker:
    """Ticker that only fires when told to. Used by headless runs and tests."""

    def __init__(self) -> None:
        self._callback: Callable[[], None] | None = None
        self.interval_ms: int | None = None
        self.start_count = 0

    def start(self, interval_ms: int, callback: Callable[[], None]) -> None:
        self.interval_ms = interval_ms
        self._callback = callback
        self.start_count += 1

    def stop(self) -> None:
        self._callback = None

    def is_active(self) -> bool:
        return self._callback is not None

    def fire(self, times: int = 1) -> int:
        """Deliver up to ``times`` ticks; returns how many were delivered."""
        delivered = 0
        for _ in range(times):
            if self._callback is None:
                break
            self._callback()
            delivered += 1
        return delivered


class CountdownController:
    """Owns the single periodic tick that drives the session clock.

    The controller never touches session state itself: each tick is forwarded
    to ``on_tick`` and the session decides what it means. ``arm`` always starts
    a fresh ticker, so a countdown is re-armed after a restart, never resumed.
    """

    def __init__(self, ticker: Ticker, on_tick: Callable[[], None], interval_ms: int = TICK_INTERVAL_MS) -> None:
        self._ticker = ticker
        self._on_tick = on_tick
        self._interval_ms = interval_ms

    def arm(self) -> None:
        if self._ticker.is_active():
            self._ticker.stop()
        self._ticker.start(self._interval_ms, self._on_tick)
        logger.debug("Countdown armed (%d ms interval)", self._interval_ms)

    def cancel(self) -> None:
        if self._ticker.is_active():
            self._ticker.stop()
            logger.debug("Countdown cancelled")

    def is_armed(self) -> bool:
        return self._ticker.is_active()
