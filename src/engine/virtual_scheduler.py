from __future__ import annotations

import heapq
import itertools
from typing import List, Optional, Tuple

from engine.scheduler import TimerCallback


class VirtualTimer:

    def __init__(self, callback: TimerCallback, interval_ms: Optional[float], description: str = ""):
        self.callback = callback
        self.interval_ms = interval_ms  # None for one-shot timers
        self.description = description
        self._cancelled = False
        self.fired = 0

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True

    def __repr__(self):
        kind = f"every {self.interval_ms}ms" if self.interval_ms is not None else "once"
        return f"VirtualTimer({self.description or kind}, fired={self.fired}, cancelled={self._cancelled})"


class VirtualScheduler:
    """
    Scheduler driven by a virtual clock.

    Nothing happens until advance() is called. Due timers fire in time
    order; timers due at the same instant fire in the order they were
    scheduled. Callbacks may schedule or cancel timers while advancing.

    Example:
        scheduler = VirtualScheduler()
        handle = scheduler.call_every(50, step)
        scheduler.advance(500)   # step() called 10 times
    """

    def __init__(self, start_ms: float = 0.0):
        self._now = start_ms
        self._queue: List[Tuple[float, int, VirtualTimer]] = []
        self._seq = itertools.count()
        self.fired_total = 0

    def now(self) -> float:
        return self._now

    def _push(self, due: float, timer: VirtualTimer) -> None:
        heapq.heappush(self._queue, (due, next(self._seq), timer))

    def call_later(self, delay_ms: float, callback: TimerCallback, description: str = "") -> VirtualTimer:
        timer = VirtualTimer(callback, None, description)
        self._push(self._now + max(0.0, delay_ms), timer)
        return timer

    def call_every(self, interval_ms: float, callback: TimerCallback, description: str = "") -> VirtualTimer:
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive: {interval_ms}")
        timer = VirtualTimer(callback, interval_ms, description)
        self._push(self._now + interval_ms, timer)
        return timer

    def advance(self, ms: float) -> int:
        """
        Move the clock forward by ms, firing every timer that comes due.

        Returns:
            Number of callbacks fired
        """
        if ms < 0:
            raise ValueError(f"Cannot advance by a negative amount: {ms}")

        target = self._now + ms
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self._now = due
            if timer.interval_ms is not None:
                # Re-arm before the callback so it can cancel itself
                self._push(due + timer.interval_ms, timer)
            else:
                timer.cancel()
            timer.fired += 1
            fired += 1
            self.fired_total += 1
            timer.callback()

        self._now = target
        return fired

    def pending(self) -> int:
        """Number of live (not cancelled) timers"""
        return sum(1 for _, _, t in self._queue if not t.cancelled)

    def timers(self) -> List[VirtualTimer]:
        return [t for _, _, t in sorted(self._queue) if not t.cancelled]
