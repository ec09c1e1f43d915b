"""
Engine Core - Zone-based card state management.

The engine is a pure state-transition function:
1. Holds where every card instance is (GameState)
2. Accepts a closed set of commands (Action)
3. Applies them via the reducer, producing a new snapshot
4. Moves cards with the transfer primitives

It performs no I/O.
"""

from .errors import EngineError, UnknownZoneError
from .state import (
    CardDefinition,
    CardInstance,
    GameState,
    ZoneName,
    instantiate,
    parse_zone,
)
from .action import (
    Action,
    ActionType,
    Command,
    LoadDeck,
    DrawCard,
    DrawMaterial,
    MoveCard,
    ToggleRest,
)
from .reducer import Reducer, apply_action, replay
from .transfer import (
    remove_instance,
    move_card,
    draw_card,
    draw_material,
    toggle_rest,
    REST_ZONES,
    SEARCH_ORDER,
)

__all__ = [
    "EngineError",
    "UnknownZoneError",
    "CardDefinition",
    "CardInstance",
    "GameState",
    "ZoneName",
    "instantiate",
    "parse_zone",
    "Action",
    "ActionType",
    "Command",
    "LoadDeck",
    "DrawCard",
    "DrawMaterial",
    "MoveCard",
    "ToggleRest",
    "Reducer",
    "apply_action",
    "replay",
    "remove_instance",
    "move_card",
    "draw_card",
    "draw_material",
    "toggle_rest",
    "REST_ZONES",
    "SEARCH_ORDER",
]
