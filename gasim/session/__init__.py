"""
Session Module - Owns the live game state.

A session represents one sitting at the sandbox:
- Created when the player opens a table
- Holds the single writable GameState
- Applies the player's commands in the order they arrive
- Destroyed when the player leaves

Sessions are EPHEMERAL: nothing is written to disk.
"""

from .manager import SessionManager, Session, SessionState

__all__ = [
    "SessionManager",
    "Session",
    "SessionState",
]
