"""
Session Manager - Creates and manages sandbox sessions.

LIFECYCLE:
1. Player starts a session -> ephemeral session (in-memory only)
2. Player loads a deck -> LoadDeck replaces the whole game state
3. During play every gesture becomes one command:
   draw, draw material, move, toggle rest
4. Session ends -> session dropped, ALL state deleted

OWNERSHIP:
- A session owns the only writable GameState for its game
- Readers get immutable snapshots via Session.state
- Every command replaces the snapshot wholesale, under a lock
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable
import logging
import random
import threading
import time
import uuid

from ..engine_core.state import CardDefinition, GameState, ZoneName
from ..engine_core.action import Action
from ..engine_core.reducer import Reducer

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """State of a sandbox session."""
    CREATED = "created"  # Session created, no deck loaded yet
    ACTIVE = "active"  # Deck loaded, game in progress
    ENDED = "ended"  # Player ended the session
    ABANDONED = "abandoned"  # Cleaned up as stale


@dataclass
class Session:
    """
    An ephemeral sandbox session.

    The five entry points (load_deck, draw_card, draw_material,
    move_card, toggle_rest) return nothing; read the new state from
    Session.state afterwards.
    """
    session_id: str
    created_at: float
    seed: int
    player_name: str = "Player"

    status: SessionState = SessionState.CREATED
    command_count: int = 0
    last_active_at: float = 0.0

    _state: GameState = field(default_factory=GameState.empty, repr=False)
    _reducer: Reducer | None = field(default=None, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def __post_init__(self):
        if self._reducer is None:
            self._reducer = Reducer(rng=random.Random(self.seed))
        if not self.last_active_at:
            self.last_active_at = self.created_at

    @property
    def state(self) -> GameState:
        """Current snapshot. Never mutated after it is published."""
        return self._state

    def is_active(self) -> bool:
        return self.status in {SessionState.CREATED, SessionState.ACTIVE}

    def is_loaded(self) -> bool:
        return self.status == SessionState.ACTIVE

    def dispatch(self, action: Action) -> None:
        """Apply a command and publish the resulting snapshot."""
        with self._lock:
            self._state = self._reducer.apply(self._state, action)
            self.command_count += 1
            self.last_active_at = time.time()
        logger.debug(
            "Session %s applied %s", self.session_id, action.action_type.value
        )

    def load_deck(
        self,
        material: Iterable[CardDefinition],
        main: Iterable[CardDefinition],
    ) -> None:
        self.dispatch(Action.load_deck(material, main))
        self.status = SessionState.ACTIVE

    def draw_card(self) -> None:
        self.dispatch(Action.draw_card())

    def draw_material(self) -> None:
        self.dispatch(Action.draw_material())

    def move_card(self, uid: str, target_zone: ZoneName | str) -> None:
        self.dispatch(Action.move_card(uid, target_zone))

    def toggle_rest(self, uid: str) -> None:
        self.dispatch(Action.toggle_rest(uid))

    def close(self, status: SessionState = SessionState.ENDED) -> None:
        """Mark the session finished and drop its game state."""
        with self._lock:
            self.status = status
            self._state = GameState.empty()


class SessionManager:
    """
    Manages sandbox sessions.

    No persistence - sessions are in-memory only.
    """

    def __init__(self):
        self._sessions: dict[str, Session] = {}
        self._lock = threading.Lock()

    def create_session(
        self,
        seed: int | None = None,
        player_name: str = "Player",
    ) -> Session:
        """
        Create a new session.

        Args:
            seed: RNG seed for shuffles and instance ids (random if omitted)
            player_name: Display name for the player

        Returns:
            New Session with an empty game state
        """
        session_id = str(uuid.uuid4())
        if seed is None:
            seed = random.SystemRandom().getrandbits(64)

        session = Session(
            session_id=session_id,
            created_at=time.time(),
            seed=seed,
            player_name=player_name,
        )
        with self._lock:
            self._sessions[session_id] = session
        logger.info("Created session %s", session_id)
        return session

    def get_session(self, session_id: str) -> Session | None:
        """Get a session by ID."""
        with self._lock:
            return self._sessions.get(session_id)

    def end_session(self, session_id: str, reason: str = "ended") -> bool:
        """
        End a session and drop its state.

        Returns False if there was no such session.
        """
        with self._lock:
            session = self._sessions.pop(session_id, None)
        if session is None:
            return False

        status = SessionState.ABANDONED if reason == "stale" else SessionState.ENDED
        session.close(status)
        logger.info("Ended session %s (%s)", session_id, reason)
        return True

    def list_active_sessions(self) -> list[str]:
        """List IDs of active sessions."""
        with self._lock:
            sessions = list(self._sessions.items())
        return [sid for sid, session in sessions if session.is_active()]

    def cleanup_stale_sessions(self, max_age_seconds: int = 3600) -> list[str]:
        """
        End sessions idle for longer than max_age_seconds.

        Returns the IDs that were removed.
        """
        current_time = time.time()
        with self._lock:
            to_remove = [
                sid for sid, session in self._sessions.items()
                if current_time - session.last_active_at > max_age_seconds
            ]

        return [sid for sid in to_remove if self.end_session(sid, reason="stale")]
