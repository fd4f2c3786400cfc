"""
Action validation for draws.
"""

from typing import Optional

from .errors import DECK_EMPTY, GAME_OVER, NOT_IN_ROOM, NOT_YOUR_TURN
from .models import RoomState


class ValidationResult:
    """Result of action validation."""

    def __init__(
        self,
        valid: bool,
        error_code: Optional[str] = None,
        error_message: Optional[str] = None
    ):
        self.valid = valid
        self.error_code = error_code
        self.error_message = error_message

    @classmethod
    def success(cls) -> 'ValidationResult':
        """Create a successful validation result."""
        return cls(valid=True)

    @classmethod
    def error(cls, error_code: str, error_message: str) -> 'ValidationResult':
        """Create an error validation result."""
        return cls(valid=False, error_code=error_code, error_message=error_message)


def is_players_turn(state: RoomState, player_id: str) -> bool:
    """Check whether the turn pointer currently designates this player."""
    current = state.current_player
    return current is not None and current.id == player_id


def validate_draw(state: Optional[RoomState], player_id: str) -> ValidationResult:
    """
    Validate a draw request.

    Every failure here is an expected race between a client and the
    authoritative state (stale turn, finished game, empty deck), so callers
    ignore them rather than report them.

    Args:
        state: Room the player is drawing in, or None if it no longer exists
        player_id: Player attempting to draw

    Returns:
        ValidationResult
    """
    if state is None or not state.has_player(player_id):
        return ValidationResult.error(NOT_IN_ROOM, "Player is not in a room")

    if state.is_game_over:
        return ValidationResult.error(GAME_OVER, "Game is over")

    if not is_players_turn(state, player_id):
        return ValidationResult.error(NOT_YOUR_TURN, "Not your turn")

    if not state.deck:
        return ValidationResult.error(DECK_EMPTY, "Deck is empty")

    return ValidationResult.success()
