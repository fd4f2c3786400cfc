"""Game models and data structures"""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from .constants import card_color, JOKER_SUIT


@dataclass(frozen=True)
class Card:
    suit: str
    rank: str
    id: str

    @property
    def color(self) -> str:
        return card_color(self.suit, self.rank)

    @property
    def is_joker(self) -> bool:
        return self.suit == JOKER_SUIT


@dataclass
class Player:
    id: str
    name: str
    hand: List[Card] = field(default_factory=list)
    # Live transport handle, never serialized
    connection: Optional[Any] = field(default=None, repr=False, compare=False)


@dataclass
class Roles:
    emperor: Optional[str] = None
    missies: List[str] = field(default_factory=list)  # player ids, unique
    servants: List[str] = field(default_factory=list)  # player ids, unique


@dataclass
class RoomState:
    room_id: str
    host_id: str
    players: List[Player] = field(default_factory=list)
    deck: List[Card] = field(default_factory=list)  # top of the deck is the last card
    current_player_index: int = 0
    last_drawn_card: Optional[Card] = None
    game_log: List[str] = field(default_factory=list)
    roles: Roles = field(default_factory=Roles)
    is_game_over: bool = False

    def get_player(self, player_id: str) -> Optional[Player]:
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def has_player(self, player_id: str) -> bool:
        return self.get_player(player_id) is not None

    @property
    def current_player(self) -> Optional[Player]:
        if 0 <= self.current_player_index < len(self.players):
            return self.players[self.current_player_index]
        return None
