"""
Action System - The closed set of commands the reducer accepts.

Commands:
1. LoadDeck - replace the whole game with a freshly loaded deck
2. DrawCard - main deck to hand
3. DrawMaterial - material deck to material zone
4. MoveCard - any instance to the end of any zone
5. ToggleRest - flip an instance's rested flag

Each command carries exactly the fields it needs. All state changes
flow through these commands.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Iterable, Union

from .state import CardDefinition, ZoneName, parse_zone


class ActionType(Enum):
    """Types of commands."""
    LOAD_DECK = "load_deck"
    DRAW_CARD = "draw_card"
    DRAW_MATERIAL = "draw_material"
    MOVE_CARD = "move_card"
    TOGGLE_REST = "toggle_rest"


@dataclass(frozen=True)
class Action:
    """
    Base class for commands.

    Use the factories rather than instantiating Action itself:

        Action.load_deck(material, main)
        Action.move_card(uid, "battle_zone")
    """
    action_type: ClassVar[ActionType]

    @classmethod
    def load_deck(
        cls,
        material: Iterable[CardDefinition],
        main: Iterable[CardDefinition],
    ) -> LoadDeck:
        """Factory for load action."""
        return LoadDeck(material=tuple(material), main=tuple(main))

    @classmethod
    def draw_card(cls) -> DrawCard:
        """Factory for draw action."""
        return DrawCard()

    @classmethod
    def draw_material(cls) -> DrawMaterial:
        """Factory for material draw action."""
        return DrawMaterial()

    @classmethod
    def move_card(cls, uid: str, target_zone: ZoneName | str) -> MoveCard:
        """Factory for move action."""
        return MoveCard(uid=uid, target_zone=target_zone)

    @classmethod
    def toggle_rest(cls, uid: str) -> ToggleRest:
        """Factory for rest toggle."""
        return ToggleRest(uid=uid)


@dataclass(frozen=True)
class LoadDeck(Action):
    action_type: ClassVar[ActionType] = ActionType.LOAD_DECK
    material: tuple[CardDefinition, ...] = ()
    main: tuple[CardDefinition, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "material", tuple(self.material))
        object.__setattr__(self, "main", tuple(self.main))


@dataclass(frozen=True)
class DrawCard(Action):
    action_type: ClassVar[ActionType] = ActionType.DRAW_CARD


@dataclass(frozen=True)
class DrawMaterial(Action):
    action_type: ClassVar[ActionType] = ActionType.DRAW_MATERIAL


@dataclass(frozen=True)
class MoveCard(Action):
    action_type: ClassVar[ActionType] = ActionType.MOVE_CARD
    uid: str = ""
    target_zone: ZoneName = ZoneName.HAND

    def __post_init__(self):
        # Unknown zone names fail here, before reaching the reducer
        object.__setattr__(self, "target_zone", parse_zone(self.target_zone))


@dataclass(frozen=True)
class ToggleRest(Action):
    action_type: ClassVar[ActionType] = ActionType.TOGGLE_REST
    uid: str = ""


Command = Union[LoadDeck, DrawCard, DrawMaterial, MoveCard, ToggleRest]

COMMAND_TYPES: tuple[type, ...] = (LoadDeck, DrawCard, DrawMaterial, MoveCard, ToggleRest)
