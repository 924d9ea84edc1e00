"""
Tests for the websocket connection handler.
"""

import asyncio
import json

from websockets.exceptions import ConnectionClosed

from main import handler


class FakeConnection:
    def __init__(self, incoming):
        self.incoming = list(incoming)
        self.sent = []
        self.closed = False

    async def recv(self):
        if not self.incoming:
            raise ConnectionClosed(None, None)
        return self.incoming.pop(0)

    async def send(self, data):
        self.sent.append(json.loads(data))

    async def close(self):
        self.closed = True


class TestHandler:
    def test_replies_to_each_message_until_closed(self) -> None:
        conn = FakeConnection([
            json.dumps({"type": "derive_keys", "seed": "a", "salt": "b"}),
            "garbage",
        ])
        asyncio.run(handler(conn))
        assert [m["type"] for m in conn.sent] == ["keys", "error"]
        assert conn.closed

    def test_unexpected_error_closes_connection(self) -> None:
        class Broken(FakeConnection):
            async def recv(self):
                raise RuntimeError("boom")

        conn = Broken([])
        asyncio.run(handler(conn))
        assert conn.sent == []
        assert conn.closed

    def test_close_failure_is_contained(self) -> None:
        class FailingClose(FakeConnection):
            async def close(self):
                raise RuntimeError("already gone")

        conn = FailingClose([json.dumps({"type": "derive_keys", "seed": "a", "salt": "b"})])
        asyncio.run(handler(conn))
        assert [m["type"] for m in conn.sent] == ["keys"]
