"""Logical clock driving the game loop's repeating timers."""

from __future__ import annotations

import itertools
import logging
import time
from dataclasses import dataclass
from typing import Callable, List

logger = logging.getLogger(__name__)

_EPSILON = 1e-9


@dataclass
class RepeatingTimer:
    """Fires ``callback`` every ``interval`` units until cancelled."""

    interval: float
    callback: Callable[[], None]
    due: float
    name: str = ""
    order: int = 0
    active: bool = True

    def cancel(self) -> None:
        self.active = False


class LogicalClock:
    """Timer engine advanced explicitly by elapsed time.

    Nothing happens between calls to :meth:`advance`; a host (test, CLI
    loop, asyncio task) decides how real time maps onto it. Timers due at
    the same instant fire in the order they were scheduled.
    """

    def __init__(self, now: float = 0.0) -> None:
        self.now = now
        self._timers: List[RepeatingTimer] = []
        self._sequence = itertools.count()

    def schedule(self, interval: float, callback: Callable[[], None], name: str = "") -> RepeatingTimer:
        if interval <= 0:
            raise ValueError(f"Timer interval must be positive, got {interval}")
        timer = RepeatingTimer(
            interval=interval,
            callback=callback,
            due=self.now + interval,
            name=name,
            order=next(self._sequence),
        )
        self._timers.append(timer)
        return timer

    def cancel_all(self) -> None:
        for timer in self._timers:
            timer.cancel()
        self._timers = []

    @property
    def pending(self) -> List[RepeatingTimer]:
        return [t for t in self._timers if t.active]

    def advance(self, elapsed: float) -> int:
        """Move time forward, firing every timer that comes due.

        Returns:
            Number of callbacks fired.
        """
        if elapsed < 0:
            raise ValueError(f"Cannot advance clock backwards ({elapsed})")

        target = self.now + elapsed
        fired = 0
        while True:
            active = self.pending
            if not active:
                break
            timer = min(active, key=lambda t: (t.due, t.order))
            if timer.due > target + _EPSILON:
                break
            self.now = timer.due
            timer.due += timer.interval
            fired += 1
            timer.callback()

        self.now = target
        self._timers = self.pending
        return fired


class RealtimeDriver:
    """Feeds wall-clock time into a tick function.

    ``speed`` scales real seconds into game time units, so a speed of 5
    plays a 5-unit cadence every real second.
    """

    def __init__(
        self,
        tick_fn: Callable[[float], object],
        poll_interval: float = 0.1,
        speed: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
        monotonic: Callable[[], float] = time.monotonic,
    ):
        if speed <= 0:
            raise ValueError(f"speed must be positive, got {speed}")
        self._tick_fn = tick_fn
        self.poll_interval = poll_interval
        self.speed = speed
        self._sleep = sleep
        self._monotonic = monotonic

    def run(self, until: Callable[[], bool], max_seconds: float | None = None) -> None:
        """Tick until ``until()`` is true (or ``max_seconds`` of real time pass)."""
        started = last = self._monotonic()
        while not until():
            self._sleep(self.poll_interval)
            now = self._monotonic()
            self._tick_fn((now - last) * self.speed)
            last = now
            if max_seconds is not None and now - started >= max_seconds:
                logger.warning(f"Realtime driver gave up after {max_seconds}s")
                break
