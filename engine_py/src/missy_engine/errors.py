# engine_py/src/missy_engine/errors.py

class GameError(Exception):
    """Base exception for game-related errors."""
    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")

# Specific error codes
ROOM_NOT_FOUND = "ROOM_NOT_FOUND"
DUPLICATE_ROOM = "DUPLICATE_ROOM"
NOT_IN_ROOM = "NOT_IN_ROOM"
NOT_YOUR_TURN = "NOT_YOUR_TURN"
GAME_OVER = "GAME_OVER"
DECK_EMPTY = "DECK_EMPTY"

# Helper function to raise common errors
def raise_error(code: str, message: str):
    raise GameError(code, message)
