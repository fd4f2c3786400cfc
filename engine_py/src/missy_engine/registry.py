"""Process-wide registry of live rooms"""

import logging
import random
from typing import Dict, Iterator, Optional

from .constants import ROOM_CODE_ALPHABET
from .engine import create_room
from .errors import DUPLICATE_ROOM, ROOM_NOT_FOUND, raise_error
from .models import RoomState
from .rules import RuleConfig, default_rules

logger = logging.getLogger(__name__)


class RoomRegistry:
    def __init__(self, rules: RuleConfig = default_rules):
        self.rules = rules
        self.rooms: Dict[str, RoomState] = {}

    def generate_room_id(self) -> str:
        """Fresh uppercase alphanumeric code not used by any live room."""
        while True:
            code = ''.join(random.choices(ROOM_CODE_ALPHABET, k=self.rules.room_code_length))
            if code not in self.rooms:
                return code

    def create(self, room_id: str, host_id: str, seed: Optional[int] = None) -> RoomState:
        if room_id in self.rooms:
            raise_error(DUPLICATE_ROOM, f"Room {room_id} already exists")
        room = create_room(room_id, host_id, seed=seed, rules=self.rules)
        self.rooms[room_id] = room
        logger.info(f"Room {room_id} created by {host_id}")
        return room

    def get(self, room_id: Optional[str]) -> Optional[RoomState]:
        if room_id is None:
            return None
        return self.rooms.get(room_id)

    def require(self, room_id: Optional[str]) -> RoomState:
        room = self.get(room_id)
        if room is None:
            raise_error(ROOM_NOT_FOUND, f"Room {room_id} does not exist")
        return room

    def remove(self, room_id: str):
        if self.rooms.pop(room_id, None) is not None:
            logger.info(f"Room {room_id} is empty and has been removed")

    def clear(self):
        self.rooms.clear()

    def __contains__(self, room_id: str) -> bool:
        return room_id in self.rooms

    def __len__(self) -> int:
        return len(self.rooms)

    def __iter__(self) -> Iterator[RoomState]:
        return iter(list(self.rooms.values()))
