# reveal/clock.py

import asyncio
import heapq
import itertools
from typing import Callable, List, Optional, Protocol

class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Clock(Protocol):
    """Schedules a callback after a delay in seconds."""
    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...


class LoopClock:
    """Clock backed by an asyncio event loop."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)


class ManualTimer:
    def __init__(self, when: float, callback: Callable[[], None]):
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualClock:
    """
    Virtual clock that only moves when advance() is called.

    Timers due at the same instant fire in the order they were scheduled,
    and timers scheduled while advancing fire too if they fall due.
    """

    def __init__(self):
        self.now = 0.0
        self._timers: List = []
        self._counter = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(self.now + max(delay, 0.0), callback)
        heapq.heappush(self._timers, (timer.when, next(self._counter), timer))
        return timer

    @property
    def pending(self) -> int:
        """Number of live timers still waiting to fire."""
        return sum(1 for _, _, timer in self._timers if not timer.cancelled)

    def advance(self, seconds: float) -> int:
        """Move time forward, firing due timers. Returns how many fired."""
        target = self.now + seconds
        fired = 0
        while self._timers and self._timers[0][0] <= target:
            when, _, timer = heapq.heappop(self._timers)
            if timer.cancelled:
                continue
            self.now = when
            timer.callback()
            fired += 1
        self.now = target
        return fired

    def run_until_idle(self, step: float = 1.0, limit: int = 1_000_000) -> int:
        """Advance until no live timers remain."""
        fired = 0
        while self.pending and limit > 0:
            fired += self.advance(step)
            limit -= 1
        return fired
