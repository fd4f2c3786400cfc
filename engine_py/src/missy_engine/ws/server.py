"""
WebSocket endpoint and connection lifecycle for the missy card game.
"""

import logging
import uuid
from typing import Any, Dict, Optional, Set

import orjson
from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from ..engine import disconnect_player, draw_card, join_room
from ..errors import GameError
from ..registry import RoomRegistry
from ..constants import MSG_ROOM_NOT_FOUND
from .broadcast import broadcast_state_update
from .events import (
    parse_inbound_event, create_connected_event, create_error_event,
    CreateRoomEvent, DrawCardEvent, JoinRoomEvent
)

logger = logging.getLogger(__name__)

router = APIRouter()


class ConnectionManager:
    """Tracks which player each connection is and which room each player is in."""

    def __init__(self):
        self.player_ids: Set[str] = set()
        self.player_rooms: Dict[str, str] = {}

    def connect(self, player_id: str):
        self.player_ids.add(player_id)
        logger.info(f"Player {player_id} connected")

    def disconnect(self, player_id: str):
        if player_id in self.player_ids:
            self.player_ids.discard(player_id)
            logger.info(f"Player {player_id} disconnected")
        self.player_rooms.pop(player_id, None)

    def assign_room(self, player_id: str, room_id: str):
        self.player_rooms[player_id] = room_id

    def room_of(self, player_id: str) -> Optional[str]:
        return self.player_rooms.get(player_id)

    def leave_room(self, player_id: str) -> Optional[str]:
        return self.player_rooms.pop(player_id, None)

    def connection_count(self) -> int:
        return len(self.player_ids)

    def reset(self):
        self.player_ids.clear()
        self.player_rooms.clear()


# Global state
registry = RoomRegistry()
manager = ConnectionManager()


@router.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket):
    """Main WebSocket endpoint."""
    await websocket.accept()
    player_id = str(uuid.uuid4())
    manager.connect(player_id)

    try:
        await websocket.send_text(create_connected_event(player_id).to_json())

        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break

            raw_data = message.get("text")
            if raw_data is None:
                raw_data = message.get("bytes")
            if raw_data is None:
                continue

            await handle_message(websocket, player_id, raw_data)

    except WebSocketDisconnect:
        pass
    except Exception as e:
        logger.error(f"WebSocket error for player {player_id}: {e}")
    finally:
        await leave_current_room(player_id)
        manager.disconnect(player_id)


async def handle_message(websocket: Any, player_id: str, raw_data) -> None:
    """
    Decode and handle one inbound message.

    Malformed messages are logged and dropped; a failure while handling a
    valid one is logged and the connection keeps going.
    """
    try:
        event = parse_inbound_event(orjson.loads(raw_data))
    except ValueError as e:
        logger.warning(f"Ignoring message from {player_id}: {e}")
        return

    try:
        await handle_event(websocket, player_id, event)
    except Exception:
        logger.exception(f"Error handling {event.type.value} from {player_id}")


async def handle_event(websocket: Any, player_id: str, event) -> None:
    """Route an inbound event to its handler."""

    if isinstance(event, CreateRoomEvent):
        await handle_create_room(websocket, player_id, event)
    elif isinstance(event, JoinRoomEvent):
        await handle_join_room(websocket, player_id, event)
    elif isinstance(event, DrawCardEvent):
        await handle_draw_card(websocket, player_id, event)
    else:
        raise ValueError(f"Unhandled event type: {type(event)}")


async def handle_create_room(websocket: Any, player_id: str, event: CreateRoomEvent) -> None:
    """Create a room hosted by the sender and seat them in it."""
    await leave_current_room(player_id)

    # No await from here until the room is created and joined
    room_id = registry.generate_room_id()
    room = registry.create(room_id, player_id)

    join_room(room, player_id, websocket, rules=registry.rules)
    manager.assign_room(player_id, room_id)
    await broadcast_state_update(room)


async def handle_join_room(websocket: Any, player_id: str, event: JoinRoomEvent) -> None:
    """
    Handle join room event.

    Leaving the previous room awaits a broadcast, during which the target
    room may be destroyed, so the target is looked up again afterwards and
    joined without yielding in between.
    """
    if event.room_id not in registry:
        await send_room_not_found(websocket, player_id, event.room_id)
        return

    if manager.room_of(player_id) != event.room_id:
        await leave_current_room(player_id)

    try:
        room = registry.require(event.room_id)
    except GameError:
        await send_room_not_found(websocket, player_id, event.room_id)
        return

    result = join_room(room, player_id, websocket, rules=registry.rules)
    manager.assign_room(player_id, room.room_id)

    if result.changed:
        await broadcast_state_update(room)


async def send_room_not_found(websocket: Any, player_id: str, room_id: str) -> None:
    logger.info(f"Player {player_id} tried to join missing room {room_id}")
    await websocket.send_text(create_error_event(MSG_ROOM_NOT_FOUND).to_json())


async def handle_draw_card(websocket: Any, player_id: str, event: DrawCardEvent) -> None:
    """Handle draw card event. Rejected draws are dropped without a reply."""
    room = registry.get(manager.room_of(player_id))

    result = draw_card(room, player_id)
    if not result.success:
        logger.debug(f"Ignoring draw from {player_id}: {result.error_message}")
        return

    await broadcast_state_update(room)


async def leave_current_room(player_id: str) -> None:
    """
    Take a player out of the room they are in, if any.

    An emptied room is destroyed; otherwise the remaining members receive the
    new snapshot.
    """
    room_id = manager.leave_room(player_id)
    room = registry.get(room_id)
    if room is None:
        return

    result = disconnect_player(room, player_id)
    if not result.success:
        return

    if result.room_empty:
        registry.remove(room_id)
    else:
        await broadcast_state_update(room)
