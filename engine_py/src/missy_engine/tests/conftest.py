"""
Shared fixtures for the missy engine tests.
"""

import json

import pytest
from starlette.websockets import WebSocketState

from missy_engine.ws import server


class FakeWebSocket:
    """Stand-in for a Starlette WebSocket that records what it is sent."""

    def __init__(self):
        self.sent = []
        self.client_state = WebSocketState.CONNECTED
        self.application_state = WebSocketState.CONNECTED

    async def send_text(self, text: str):
        self.sent.append(json.loads(text))

    def close(self):
        self.client_state = WebSocketState.DISCONNECTED
        self.application_state = WebSocketState.DISCONNECTED

    def of_type(self, event_type: str):
        return [message for message in self.sent if message["type"] == event_type]

    @property
    def last_state(self):
        updates = self.of_type("gameStateUpdate")
        return updates[-1]["gameState"] if updates else None


class BrokenWebSocket(FakeWebSocket):
    """Reports itself open but fails on every send."""

    async def send_text(self, text: str):
        raise RuntimeError("connection reset")


@pytest.fixture(autouse=True)
def reset_server_state():
    server.registry.clear()
    server.manager.reset()
    yield
    server.registry.clear()
    server.manager.reset()


@pytest.fixture
def connect():
    """Register a fake connection with the server and return (websocket, player_id)."""
    counter = {"n": 0}

    def _connect(player_id: str = None):
        counter["n"] += 1
        player_id = player_id or f"player{counter['n']}-0000"
        websocket = FakeWebSocket()
        server.manager.connect(player_id)
        return websocket, player_id

    return _connect
