# test_stream.py

import json
from unittest.mock import Mock

import httpx
import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from chatwidget.errors import ResponderError
from chatwidget.stream import Stream
from chatwidget.stream.embedded import EmbeddedStream
from chatwidget.stream.remote import RemoteStream


class MockLogger:
    def __init__(self):
        self.debug = Mock()
        self.info = Mock()
        self.warning = Mock()
        self.error = Mock()


class TestRemoteStream:
    """Responder request/response contract."""

    def setup_method(self):
        self.logger = MockLogger()
        self.requests = []

    def make_stream(self, handler):
        def recording_handler(request):
            self.requests.append(request)
            return handler(request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(recording_handler))
        return RemoteStream("http://responder.test/chat/", logger=self.logger, client=client)

    @pytest.mark.asyncio
    async def test_request_body(self):
        stream = self.make_stream(lambda request: httpx.Response(200, json={"output": "hi"}))

        assert await stream.send("hello", "01SESSION") == {"output": "hi"}

        request = self.requests[0]
        assert request.method == "POST"
        assert str(request.url) == "http://responder.test/chat"
        assert request.headers["content-type"] == "application/json"
        assert json.loads(request.content) == {
            "chatInput": "hello",
            "sessionId": "01SESSION",
            "action": "sendMessage",
        }
        await stream.close()

    @pytest.mark.asyncio
    async def test_bare_string_body(self):
        stream = self.make_stream(lambda request: httpx.Response(200, json="plain reply"))
        assert await stream.send("hello", "s") == "plain reply"
        await stream.close()

    @pytest.mark.asyncio
    async def test_non_success_status(self):
        stream = self.make_stream(lambda request: httpx.Response(500, json={"error": "x"}))

        with pytest.raises(ResponderError) as excinfo:
            await stream.send("hello", "s")

        assert excinfo.value.status_code == 500
        assert stream._last_error == "HTTP 500"
        self.logger.error.assert_called_once()
        await stream.close()

    @pytest.mark.asyncio
    async def test_body_is_not_json(self):
        stream = self.make_stream(lambda request: httpx.Response(200, text="<html>oops</html>"))

        with pytest.raises(ResponderError):
            await stream.send("hello", "s")
        assert stream._last_error == "Decode error"
        await stream.close()

    @pytest.mark.asyncio
    async def test_connection_failure(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        stream = self.make_stream(handler)
        with pytest.raises(ResponderError) as excinfo:
            await stream.send("hello", "s")

        assert excinfo.value.status_code is None
        assert stream._last_error == "Connection error"
        await stream.close()

    @pytest.mark.asyncio
    async def test_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("too slow", request=request)

        stream = self.make_stream(handler)
        with pytest.raises(ResponderError):
            await stream.send("hello", "s")
        assert stream._last_error == "Timeout"
        await stream.close()


class TestStreamCreate:

    @pytest.mark.asyncio
    async def test_remote_when_endpoint_given(self):
        stream = Stream.create("http://responder.test/chat")
        assert isinstance(stream, RemoteStream)
        await stream.close()

    def test_embedded_without_endpoint(self):
        assert isinstance(Stream.create(None), EmbeddedStream)

    @pytest.mark.asyncio
    async def test_embedded_reply(self):
        async with EmbeddedStream(latency=0) as stream:
            payload = await stream.send("  ping  ", "s")
        assert '"ping"' in payload["output"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
