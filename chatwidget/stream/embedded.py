# stream/embedded.py

import asyncio
from typing import Any

from . import Stream

class EmbeddedStream(Stream):
    """Offline responder used when no endpoint is configured."""

    def __init__(self, logger=None, latency: float = 0.4):
        super().__init__(logger=logger)
        self.latency = latency
        if self.logger:
            self.logger.debug("Initialized embedded stream")

    async def send(self, message: str, session_id: str) -> Any:
        await asyncio.sleep(self.latency)
        text = message.strip()
        return {
            'output': (
                f'You said: "{text}". No responder endpoint is configured, '
                'so this reply comes from the embedded stream. '
                'Pass an [endpoint](https://example.com/chat) to connect one.'
            )
        }
