# stream/remote.py

import httpx
from typing import Any, Optional

from . import Stream
from ..errors import ResponderError

class RemoteStream(Stream):
    """Handler for the remote responder endpoint."""

    def __init__(self, endpoint: str, logger=None, timeout: float = 30.0,
                 client: Optional[httpx.AsyncClient] = None):
        super().__init__(logger=logger)
        self.endpoint = endpoint.rstrip('/')
        self.client = client or httpx.AsyncClient(timeout=timeout)
        if self.logger:
            self.logger.debug(f"Initialized remote stream: {self.endpoint}")

    @staticmethod
    def build_payload(message: str, session_id: str) -> dict:
        return {
            'chatInput': message,
            'sessionId': session_id,
            'action': 'sendMessage',
        }

    async def send(self, message: str, session_id: str) -> Any:
        """
        POST one user turn and return the decoded JSON body.

        Raises:
            ResponderError: on timeout, connection failure, non-2xx status
                or a body that is not JSON.
        """
        try:
            response = await self.client.post(
                self.endpoint,
                json=self.build_payload(message, session_id),
                headers={'Content-Type': 'application/json'},
            )
            if self.logger:
                self.logger.debug(f"Response status: {response.status_code}")
            response.raise_for_status()
            data = response.json()
            if self.logger:
                self.logger.debug(f"Response data: {str(data)[:100]}")
            return data

        except httpx.TimeoutException as e:
            self._fail("Timeout", f"Request timed out: {e}")

        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            self._fail(f"HTTP {status}", f"HTTP error! status: {status}", status)

        except httpx.RequestError as e:
            self._fail("Connection error", f"Failed to connect: {e}")

        except ValueError as e:
            self._fail("Decode error", f"Invalid response body: {e}")

    def _fail(self, short: str, message: str, status: Optional[int] = None) -> None:
        self._last_error = short
        if self.logger:
            self.logger.error(message)
        raise ResponderError(message, status_code=status)

    async def close(self) -> None:
        if self.client:
            await self.client.aclose()
