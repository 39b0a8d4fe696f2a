# test_scheduler.py

import asyncio
import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from chatwidget.reveal import LoopClock, ManualClock, RevealScheduler, parse


class TestRevealScheduler:
    """Reveal scheduler driven by a manual clock."""

    def setup_method(self):
        self.clock = ManualClock()
        self.scheduler = RevealScheduler(clock=self.clock, delay=1.0)
        self.completions = []
        self.ticks = []

    def bind(self, text, tag="a"):
        self.scheduler.bind(
            parse(text),
            on_complete=lambda: self.completions.append(tag),
            on_tick=self.ticks.append,
        )

    def test_initial_state_after_bind(self):
        self.bind("Check [here](http://x.com) now")
        assert self.scheduler.cursor == 0
        assert self.scheduler.done is False
        assert self.scheduler.total_length == 14
        assert self.clock.pending == 1

    def test_one_character_per_delay(self):
        self.bind("abcd")
        self.clock.advance(0.5)
        assert self.scheduler.cursor == 0
        self.clock.advance(0.5)
        assert self.scheduler.cursor == 1
        self.clock.advance(2)
        assert self.scheduler.cursor == 3
        assert self.ticks == [1, 2, 3]

    def test_completes_exactly_once(self):
        self.bind("Check [here](http://x.com) now")
        self.clock.run_until_idle()

        assert self.scheduler.cursor == 14
        assert self.scheduler.done is True
        assert self.completions == ["a"]
        assert self.clock.pending == 0

        # Re-entering the tick handler after completion changes nothing
        self.scheduler._tick(self.scheduler._generation)
        assert self.completions == ["a"]
        assert self.scheduler.cursor == 14

    def test_reentrant_tick_on_last_character(self):
        def on_tick(cursor):
            if cursor == self.scheduler.total_length:
                self.scheduler._tick(self.scheduler._generation)

        self.scheduler.bind(parse("abc"), on_complete=lambda: self.completions.append("a"),
                            on_tick=on_tick)
        self.clock.run_until_idle()
        assert self.completions == ["a"]
        assert self.scheduler.cursor == 3

    def test_reentrant_tick_mid_reveal_keeps_one_timer(self):
        reentered = []

        def on_tick(cursor):
            if cursor == 2 and not reentered:
                reentered.append(cursor)
                self.scheduler._tick(self.scheduler._generation)

        self.scheduler.bind(parse("abcde"), on_complete=lambda: self.completions.append("a"),
                            on_tick=on_tick)
        self.clock.advance(2)
        assert self.scheduler.cursor == 3
        assert self.clock.pending == 1

        self.clock.run_until_idle()
        assert self.scheduler.cursor == 5
        assert self.completions == ["a"]

    def test_rebind_cancels_stale_tick(self):
        self.bind("first message", tag="first")
        self.clock.advance(2)
        assert self.scheduler.cursor == 2

        self.bind("second", tag="second")
        assert self.scheduler.cursor == 0
        assert self.scheduler.done is False
        assert self.clock.pending == 1

        self.clock.advance(1)
        assert self.scheduler.cursor == 1

        self.clock.run_until_idle()
        assert self.scheduler.cursor == len("second")
        assert self.completions == ["second"]

    def test_unbind_cancels_pending_tick(self):
        self.bind("abcdef")
        self.clock.advance(1)
        self.scheduler.unbind()

        assert self.clock.pending == 0
        self.clock.advance(100)
        assert self.scheduler.cursor == 1
        assert self.completions == []
        assert self.scheduler.is_running is False

    def test_empty_text_completes_on_bind(self):
        self.bind("")
        assert self.scheduler.done is True
        assert self.completions == ["a"]
        assert self.clock.pending == 0

    def test_link_syntax_is_not_timed(self):
        self.bind("[here](http://a-very-long-target.example.com)")
        fired = self.clock.run_until_idle()
        assert fired == 4
        assert self.completions == ["a"]


class TestLoopClock:
    """Scheduler on a real asyncio loop."""

    @pytest.mark.asyncio
    async def test_reveal_on_event_loop(self):
        finished = asyncio.Event()
        scheduler = RevealScheduler(clock=LoopClock(), delay=0.001)
        scheduler.bind(parse("ab[c](d)"), on_complete=finished.set)

        await asyncio.wait_for(finished.wait(), timeout=2)
        assert scheduler.cursor == 3
        assert scheduler.done is True

    @pytest.mark.asyncio
    async def test_unbind_on_event_loop(self):
        completions = []
        scheduler = RevealScheduler(clock=LoopClock(), delay=0.01)
        scheduler.bind(parse("abcdef"), on_complete=lambda: completions.append(1))
        scheduler.unbind()

        await asyncio.sleep(0.1)
        assert scheduler.cursor == 0
        assert completions == []


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
