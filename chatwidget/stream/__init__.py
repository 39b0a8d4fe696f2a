# stream/__init__.py

from typing import Any, Optional

class Stream:
    """Base class for responder clients."""

    def __init__(self, logger=None):
        self.logger = logger
        self._last_error: Optional[str] = None

    @classmethod
    def create(cls, endpoint: Optional[str] = None, logger=None, timeout: float = 30.0) -> 'Stream':
        if endpoint:
            from .remote import RemoteStream
            return RemoteStream(endpoint, logger=logger, timeout=timeout)
        from .embedded import EmbeddedStream
        return EmbeddedStream(logger=logger)

    async def send(self, message: str, session_id: str) -> Any:
        """Deliver one user turn and return the decoded response payload."""
        raise NotImplementedError

    async def close(self) -> None:
        pass

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()


__all__ = ['Stream']
