# display/animations/dot_loader.py

import asyncio
from typing import Awaitable, TypeVar

T = TypeVar("T")

class AsyncDotLoader:
    """
    Dot-loading animation shown while a request is in flight.
    """
    def __init__(self, terminal, prompt="", no_animation=False, interval=0.4):
        """
        Args:
            terminal: DisplayTerminal instance for output
            prompt: Text to display before the dots
            no_animation: Whether to disable animation
            interval: Seconds between two frames
        """
        self.terminal = terminal
        self.prompt = prompt.rstrip('.?!')
        self.no_anim = no_animation
        self.interval = interval

        # Keep a trailing ? or ! as the dot character
        self.dot_char = prompt[-1] if prompt.endswith(('?', '!')) else '.'
        self.dots = 0
        self.animation_task = None

    async def _animate(self):
        while True:
            self.terminal.write(f"\r{' ' * self.terminal.width}\r{self.prompt}{self.dot_char * self.dots}")
            await asyncio.sleep(self.interval)
            self.dots = (self.dots + 1) % 4

    async def run_with_loading(self, awaitable: Awaitable[T]) -> T:
        """Await `awaitable` while the dots animate, then return its result."""
        if not self.no_anim:
            self.animation_task = asyncio.create_task(self._animate())
            await asyncio.sleep(0)
        try:
            return await awaitable
        finally:
            if self.animation_task:
                self.animation_task.cancel()
                try:
                    await self.animation_task
                except asyncio.CancelledError:
                    pass
                self.animation_task = None
