"""
WebSocket server and event handling for the missy card game.
"""

from .events import *
from .server import router

__all__ = ["router"]
