"""
Snapshot broadcasting to room members.
"""

import logging
from typing import Any

import orjson
from starlette.websockets import WebSocketState

from ..models import RoomState
from ..serialization import sanitize_state
from .events import create_state_update_event

logger = logging.getLogger(__name__)


def is_open(connection: Any) -> bool:
    """A connection can be written to only while both sides are connected."""
    if connection is None:
        return False
    return (
        getattr(connection, "client_state", None) == WebSocketState.CONNECTED
        and getattr(connection, "application_state", None) == WebSocketState.CONNECTED
    )


def encode_state_update(state: RoomState) -> str:
    """Encode a gameStateUpdate message for the room."""
    event = create_state_update_event(sanitize_state(state))
    return orjson.dumps(event.to_wire()).decode()


async def broadcast_state_update(state: RoomState) -> int:
    """
    Send the room snapshot to every member with an open connection.

    Delivery is best effort: closed connections are skipped and a failed send
    is logged without affecting the other members. Clients that miss a
    snapshot catch up with the next one.

    Returns:
        Number of connections the snapshot was sent to
    """
    message = encode_state_update(state)
    sent = 0

    for player in list(state.players):
        if not is_open(player.connection):
            logger.debug(f"Skipping closed connection of {player.id} in room {state.room_id}")
            continue
        try:
            await player.connection.send_text(message)
            sent += 1
        except Exception as e:
            logger.error(f"Error broadcasting to {player.id}: {e}")

    return sent
