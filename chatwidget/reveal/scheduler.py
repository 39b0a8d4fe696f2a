# reveal/scheduler.py

import logging
from typing import Callable, Optional, Sequence, Tuple

from .clock import Clock, LoopClock, TimerHandle
from .segments import Segment, total_display_length

DEFAULT_DELAY = 0.03

class RevealScheduler:
    """
    Advances a reveal cursor one character per tick over a bound segment sequence.

    Ticks are cooperative callbacks on the injected clock. Only one tick is
    outstanding at a time; binding or unbinding cancels it. Completion is
    signalled exactly once per binding.
    """

    def __init__(self, clock: Optional[Clock] = None, delay: float = DEFAULT_DELAY, logger=None):
        self.clock = clock or LoopClock()
        self.delay = delay
        self.logger = logger or logging.getLogger(__name__)
        self.segments: Tuple[Segment, ...] = ()
        self.total_length = 0
        self.cursor = 0
        self.done = False
        self.bound = False
        self._handle: Optional[TimerHandle] = None
        self._generation = 0
        self._on_complete: Optional[Callable[[], None]] = None
        self._on_tick: Optional[Callable[[int], None]] = None

    def bind(self, segments: Sequence[Segment],
             on_complete: Optional[Callable[[], None]] = None,
             on_tick: Optional[Callable[[int], None]] = None) -> None:
        """Start revealing new segments from cursor 0."""
        self._cancel_pending()
        self._generation += 1
        self.segments = tuple(segments)
        self.total_length = total_display_length(self.segments)
        self.cursor = 0
        self.done = False
        self.bound = True
        self._on_complete = on_complete
        self._on_tick = on_tick
        self.logger.debug(f"Reveal bound: {self.total_length} characters")
        self._schedule()

    def unbind(self) -> None:
        """Stop revealing; no tick fires after this returns."""
        self._cancel_pending()
        self._generation += 1
        self.bound = False
        self._on_complete = None
        self._on_tick = None

    @property
    def is_running(self) -> bool:
        return self.bound and not self.done

    def _cancel_pending(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _schedule(self) -> None:
        if self.cursor < self.total_length:
            generation = self._generation
            self._handle = self.clock.call_later(self.delay, lambda: self._tick(generation))
        else:
            self._complete()

    def _tick(self, generation: int) -> None:
        # A tick from a superseded binding must not touch the new cursor
        if generation != self._generation or not self.bound:
            return
        self._handle = None
        if self.cursor < self.total_length:
            self.cursor += 1
            if self._on_tick:
                self._on_tick(self.cursor)
            # The listener may have rebound or unbound us
            if generation != self._generation:
                return
        if self._handle is None:
            self._schedule()

    def _complete(self) -> None:
        if self.done:
            return
        self.done = True
        self.logger.debug("Reveal complete")
        callback, self._on_complete = self._on_complete, None
        if callback:
            callback()
