"""
State serialization and sanitization utilities.
"""

from typing import Any, Dict, Optional

from .models import Card, Player, RoomState


def serialize_card(card: Optional[Card]) -> Optional[Dict[str, Any]]:
    """Serialize a card, including its derived color."""
    if card is None:
        return None
    return {
        "suit": card.suit,
        "rank": card.rank,
        "color": card.color,
        "id": card.id
    }


def serialize_player(player: Player) -> Dict[str, Any]:
    """Serialize a player without its connection handle."""
    return {
        "id": player.id,
        "name": player.name,
        "hand": [serialize_card(card) for card in player.hand]
    }


def sanitize_state(state: RoomState) -> Dict[str, Any]:
    """
    Build the snapshot of a room sent to clients.

    The snapshot is a fresh projection holding only plain data; nothing from
    the live room (lists, players, connections) is shared with it.

    Args:
        state: Room state to project

    Returns:
        Sanitized state dictionary safe for JSON transmission
    """
    return {
        "roomId": state.room_id,
        "hostId": state.host_id,
        "players": [serialize_player(player) for player in state.players],
        "deck": [serialize_card(card) for card in state.deck],
        "currentPlayerIndex": state.current_player_index,
        "lastDrawnCard": serialize_card(state.last_drawn_card),
        "gameLog": state.game_log.copy(),
        "roles": {
            "emperor": state.roles.emperor,
            "missies": state.roles.missies.copy(),
            "servants": state.roles.servants.copy()
        },
        "isGameOver": state.is_game_over
    }


def get_public_room_info(state: RoomState) -> Dict[str, Any]:
    """Get summary information about a room for the health endpoint and logs."""
    return {
        "roomId": state.room_id,
        "playerCount": len(state.players),
        "cardsLeft": len(state.deck),
        "isGameOver": state.is_game_over
    }
