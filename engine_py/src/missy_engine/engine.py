"""Room state machine: room creation, joins, draws and departures"""

import logging
from typing import Any, Optional

from .constants import (
    HOLDABLE_RANKS, LOG_CARD_DRAWN, LOG_CARD_HELD, LOG_GAME_OVER, LOG_ROOM_CREATED,
    RANK_EMPEROR, RANK_MISSY, RANK_SERVANT, player_name
)
from .errors import NOT_IN_ROOM
from .models import Card, Player, RoomState
from .rules import RuleConfig, default_rules
from .shuffle import create_deck
from .validate import validate_draw

logger = logging.getLogger(__name__)


class ActionResult:
    """Outcome of applying an action to a room."""

    def __init__(
        self,
        success: bool,
        state: Optional[RoomState] = None,
        error_code: Optional[str] = None,
        error_message: Optional[str] = None,
        changed: bool = True
    ):
        self.success = success
        self.state = state
        self.error_code = error_code
        self.error_message = error_message
        # False when an accepted action left the room as it was
        self.changed = changed if success else False

    @property
    def room_empty(self) -> bool:
        return self.state is not None and not self.state.players

    @classmethod
    def ok(cls, state: RoomState, changed: bool = True) -> 'ActionResult':
        return cls(success=True, state=state, changed=changed)

    @classmethod
    def error(cls, state: Optional[RoomState], error_code: str, error_message: str) -> 'ActionResult':
        return cls(success=False, state=state, error_code=error_code, error_message=error_message)


def create_room(
    room_id: str,
    host_id: str,
    seed: Optional[int] = None,
    rules: RuleConfig = default_rules
) -> RoomState:
    """
    Create a new room with a freshly shuffled deck.

    The host is recorded but not yet seated; callers join them right after.
    """
    host_name = player_name(host_id, rules.player_name_prefix_length)
    return RoomState(
        room_id=room_id,
        host_id=host_id,
        deck=create_deck(seed),
        game_log=[LOG_ROOM_CREATED.format(name=host_name)],
    )


def join_room(
    state: RoomState,
    player_id: str,
    connection: Any = None,
    rules: RuleConfig = default_rules
) -> ActionResult:
    """
    Seat a player in the room.

    Joining a room the player is already in is accepted without changing the
    player list; only the stored connection handle is refreshed.
    """
    existing = state.get_player(player_id)
    if existing is not None:
        if connection is not None:
            existing.connection = connection
        logger.info(f"Player {player_id} is already in room {state.room_id}")
        return ActionResult.ok(state, changed=False)

    player = Player(
        id=player_id,
        name=player_name(player_id, rules.player_name_prefix_length),
        connection=connection,
    )
    state.players.append(player)

    logger.info(f"Player {player.name} joined room {state.room_id}, players: {len(state.players)}")
    return ActionResult.ok(state)


def _apply_card(state: RoomState, player: Player, card: Card) -> bool:
    """Keep a holdable card or resolve its role. Returns True if the card was kept."""
    if card.rank in HOLDABLE_RANKS:
        player.hand.append(card)
        return True

    roles = state.roles
    if card.rank == RANK_EMPEROR:
        roles.emperor = player.id
    elif card.rank == RANK_MISSY and player.id not in roles.missies:
        roles.missies.append(player.id)
    elif card.rank == RANK_SERVANT and player.id not in roles.servants:
        roles.servants.append(player.id)
    return False


def draw_card(state: Optional[RoomState], player_id: str) -> ActionResult:
    """
    Draw the top card of the deck for the player whose turn it is.

    Out-of-turn draws, draws after game over and draws from an empty deck
    are rejected without touching the state.
    """
    validation = validate_draw(state, player_id)
    if not validation.valid:
        return ActionResult.error(state, validation.error_code, validation.error_message)

    player = state.players[state.current_player_index]
    card = state.deck.pop()

    log_message = LOG_CARD_DRAWN.format(name=player.name, suit=card.suit, rank=card.rank)
    if _apply_card(state, player, card):
        log_message += LOG_CARD_HELD

    state.last_drawn_card = card
    state.current_player_index = (state.current_player_index + 1) % len(state.players)
    state.game_log.append(log_message)

    if not state.deck:
        state.is_game_over = True
        state.game_log.append(LOG_GAME_OVER)
        logger.info(f"Room {state.room_id}: deck exhausted, game over")

    return ActionResult.ok(state)


def disconnect_player(state: RoomState, player_id: str) -> ActionResult:
    """
    Remove a player from the room.

    If players remain, a departed host is replaced by the first remaining
    player, and a turn pointer left past the end of the list goes back to
    the first player. Whose turn it logically was is not preserved.
    """
    if not state.has_player(player_id):
        return ActionResult.error(state, NOT_IN_ROOM, f"Player {player_id} is not in room {state.room_id}")

    state.players = [player for player in state.players if player.id != player_id]

    if not state.players:
        return ActionResult.ok(state)

    if state.host_id == player_id:
        state.host_id = state.players[0].id
        logger.info(f"Room {state.room_id}: host passed to {state.host_id}")

    if state.current_player_index >= len(state.players):
        state.current_player_index = 0

    return ActionResult.ok(state)
