"""
WebSocket event models and validation.
"""

from enum import Enum
from typing import Any, Dict, Union

from pydantic import BaseModel, ConfigDict, Field


class EventType(str, Enum):
    """Inbound event types."""
    CREATE_ROOM = "createRoom"
    JOIN_ROOM = "joinRoom"
    DRAW_CARD = "drawCard"


class OutboundEventType(str, Enum):
    """Outbound event types."""
    CONNECTED = "connected"
    ERROR = "error"
    GAME_STATE_UPDATE = "gameStateUpdate"


# Inbound event models
class BaseEvent(BaseModel):
    """Base event model. Unknown fields are ignored."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    type: EventType


class CreateRoomEvent(BaseEvent):
    """Create room event."""
    type: EventType = EventType.CREATE_ROOM


class JoinRoomEvent(BaseEvent):
    """Join room event."""
    type: EventType = EventType.JOIN_ROOM
    room_id: str = Field(..., alias="roomId", min_length=1, max_length=50)


class DrawCardEvent(BaseEvent):
    """Draw card event."""
    type: EventType = EventType.DRAW_CARD


# Union type for all inbound events
InboundEvent = Union[
    CreateRoomEvent,
    JoinRoomEvent,
    DrawCardEvent
]


# Outbound event models
class OutboundEvent(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


class ConnectedEvent(OutboundEvent):
    """Sent once, right after the connection is accepted."""
    type: OutboundEventType = OutboundEventType.CONNECTED
    user_id: str = Field(..., alias="userId")


class ErrorEvent(OutboundEvent):
    """Error event."""
    type: OutboundEventType = OutboundEventType.ERROR
    message: str


class GameStateUpdateEvent(OutboundEvent):
    """Full room snapshot."""
    type: OutboundEventType = OutboundEventType.GAME_STATE_UPDATE
    game_state: Dict[str, Any] = Field(..., alias="gameState")


def parse_inbound_event(data: Any) -> InboundEvent:
    """
    Parse raw event data into appropriate event model.

    Args:
        data: Decoded JSON message from WebSocket

    Returns:
        Parsed event model

    Raises:
        ValueError: If event type is invalid or data is malformed
    """
    if not isinstance(data, dict):
        raise ValueError("Event must be a JSON object")

    event_type = data.get("type")

    if not event_type:
        raise ValueError("Missing event type")

    try:
        event_type = EventType(event_type)
    except ValueError:
        raise ValueError(f"Invalid event type: {event_type}")

    event_map = {
        EventType.CREATE_ROOM: CreateRoomEvent,
        EventType.JOIN_ROOM: JoinRoomEvent,
        EventType.DRAW_CARD: DrawCardEvent,
    }

    event_class = event_map[event_type]

    try:
        return event_class(**data)
    except Exception as e:
        raise ValueError(f"Invalid event data: {str(e)}")


def create_connected_event(user_id: str) -> ConnectedEvent:
    """Create a connected event."""
    return ConnectedEvent(user_id=user_id)


def create_error_event(message: str) -> ErrorEvent:
    """Create an error event."""
    return ErrorEvent(message=message)


def create_state_update_event(state: Dict[str, Any]) -> GameStateUpdateEvent:
    """Create a full state event."""
    return GameStateUpdateEvent(game_state=state)
