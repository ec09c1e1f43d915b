"""
Reducer - Applies commands to game state.

The reducer is the single point of state mutation.
All state changes must go through apply_action().

Design principles:
- Pure function: (state, command) -> new_state
- Misses (unknown uid, empty deck) return the input state unchanged
- Anything that is not one of the five commands is a programming error
- The only randomness is the main-deck shuffle, drawn from an injectable RNG
"""

from __future__ import annotations
from dataclasses import dataclass, field
from functools import partial
from typing import Iterable
import logging
import random

from .state import GameState, instantiate
from .action import (
    Action, LoadDeck, DrawCard, DrawMaterial, MoveCard, ToggleRest,
)
from .transfer import move_card, draw_card, draw_material, toggle_rest
from .utils import generate_id, shuffle

logger = logging.getLogger(__name__)


@dataclass
class Reducer:
    """
    Reducer applies commands to game state.

    Stateless apart from the RNG, which shuffles the main deck and
    draws instance ids on load.
    """
    rng: random.Random = field(default_factory=random.Random)

    def apply(self, state: GameState, action: Action) -> GameState:
        """
        Apply a command to the game state.

        Returns the new state (the same object when the command was a no-op).
        """
        handler = self._get_handler(action)
        if handler is None:
            raise TypeError(f"Not a command: {action!r}")
        return handler(state, action)

    def _get_handler(self, action: Action):
        """Get the handler function for a command."""
        handlers = {
            LoadDeck: self._handle_load_deck,
            DrawCard: self._handle_draw_card,
            DrawMaterial: self._handle_draw_material,
            MoveCard: self._handle_move_card,
            ToggleRest: self._handle_toggle_rest,
        }
        return handlers.get(type(action))

    def _handle_load_deck(self, state: GameState, action: LoadDeck) -> GameState:
        """Discard the old game; material in input order, main shuffled."""
        new_id = partial(generate_id, self.rng)
        material = tuple(instantiate(card, new_id) for card in action.material)
        main = shuffle([instantiate(card, new_id) for card in action.main], self.rng)
        logger.info(
            "Loaded deck: %d material, %d main", len(material), len(main)
        )
        return GameState(material_deck=material, main_deck=main)

    def _handle_draw_card(self, state: GameState, action: DrawCard) -> GameState:
        return draw_card(state)

    def _handle_draw_material(self, state: GameState, action: DrawMaterial) -> GameState:
        return draw_material(state)

    def _handle_move_card(self, state: GameState, action: MoveCard) -> GameState:
        return move_card(state, action.uid, action.target_zone)

    def _handle_toggle_rest(self, state: GameState, action: ToggleRest) -> GameState:
        return toggle_rest(state, action.uid)


def apply_action(
    state: GameState,
    action: Action,
    rng: random.Random | None = None,
) -> GameState:
    """
    Convenience function to apply a command.

    Creates a Reducer and applies the command.
    """
    reducer = Reducer(rng=rng or random.Random())
    return reducer.apply(state, action)


def replay(
    actions: Iterable[Action],
    seed: int,
    initial: GameState | None = None,
) -> GameState:
    """
    Apply a sequence of commands with a seeded RNG.

    The same seed and sequence always produce the same state, uids
    included, so recorded MoveCard/ToggleRest commands replay exactly.
    """
    reducer = Reducer(rng=random.Random(seed))
    state = initial if initial is not None else GameState.empty()
    for action in actions:
        state = reducer.apply(state, action)
    return state
