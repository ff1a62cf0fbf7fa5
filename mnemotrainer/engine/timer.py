from __future__ import annotations

"""Cooperative single-threaded timers.

``Scheduler`` keeps a heap of due callbacks driven by an injectable clock
and sleep function, so the same code runs against wall time in the CLI and
against a fake clock in tests. ``Countdown`` is the session-owned resource
that ticks once per interval until it reaches zero or is cancelled.
"""

import heapq
import itertools
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional


@dataclass
class FakeClock:
    """Manually advanced clock for headless runs and tests."""

    t: float = 0.0

    def now(self) -> float:
        return self.t

    def advance(self, dt: float) -> None:
        self.t += float(dt)


@dataclass(order=True)
class TimerHandle:
    due: float
    seq: int
    callback: Callable[[], None] = field(compare=False)
    cancelled: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        self.cancelled = True


class Scheduler:
    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._clock = clock
        self._sleep = sleep
        self._queue: List[TimerHandle] = []
        self._seq = itertools.count()

    def now(self) -> float:
        return self._clock()

    def call_later(self, delay_s: float, callback: Callable[[], None]) -> TimerHandle:
        handle = TimerHandle(due=self._clock() + max(0.0, float(delay_s)), seq=next(self._seq), callback=callback)
        heapq.heappush(self._queue, handle)
        return handle

    def pending(self) -> int:
        return sum(1 for h in self._queue if not h.cancelled)

    def _next_due(self) -> Optional[TimerHandle]:
        while self._queue and self._queue[0].cancelled:
            heapq.heappop(self._queue)
        return self._queue[0] if self._queue else None

    def run_due(self) -> int:
        """Run every callback whose due time has passed; return how many ran."""
        ran = 0
        while True:
            head = self._next_due()
            if head is None or head.due > self._clock():
                return ran
            heapq.heappop(self._queue)
            head.callback()
            ran += 1

    def run_until_idle(self, until: Optional[Callable[[], bool]] = None) -> None:
        """Sleep to each due callback and run it until nothing is pending.

        ``until`` lets a caller stop early, e.g. once the session left
        Memorize.
        """
        while True:
            if until is not None and until():
                return
            head = self._next_due()
            if head is None:
                return
            wait = head.due - self._clock()
            if wait > 0:
                self._sleep(wait)
            self.run_due()


class Countdown:
    """Decrements ``remaining`` once per interval and fires ``on_expire`` at zero."""

    def __init__(
        self,
        scheduler: Scheduler,
        seconds: int,
        on_tick: Callable[[int], None],
        on_expire: Callable[[], None],
        interval_s: float = 1.0,
    ) -> None:
        self._scheduler = scheduler
        self.remaining = int(seconds)
        self._on_tick = on_tick
        self._on_expire = on_expire
        self._interval = float(interval_s)
        self._handle: Optional[TimerHandle] = None
        self._cancelled = False

    @property
    def active(self) -> bool:
        return self._handle is not None and not self._cancelled

    def start(self) -> None:
        if self.remaining <= 0:
            return
        self._schedule()

    def cancel(self) -> None:
        self._cancelled = True
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _schedule(self) -> None:
        self._handle = self._scheduler.call_later(self._interval, self._tick)

    def _tick(self) -> None:
        if self._cancelled:
            return
        self._handle = None
        self.remaining -= 1
        self._on_tick(self.remaining)
        if self._cancelled:
            return
        if self.remaining <= 0:
            self._cancelled = True
            self._on_expire()
            return
        self._schedule()
