"""
Deck Builder - Assembles the two lists handed to LoadDeck.

Rules enforced here (and nowhere else):
- Champion and Regalia cards go to the material deck, everything else
  to the main deck
- Material deck holds at most 12 cards, main deck at most 60
- A game cannot start from two empty decks
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging

from ..engine_core.state import CardDefinition
from ..engine_core.action import Action, LoadDeck

logger = logging.getLogger(__name__)

MATERIAL_TYPE_MARKERS = ("CHAMPION", "REGALIA")

MATERIAL_DECK_LIMIT = 12
MAIN_DECK_LIMIT = 60

MATERIAL = "material"
MAIN = "main"


class DeckError(Exception):
    """Base class for deck building errors."""


class DeckLimitError(DeckError):
    """The target deck is already full."""

    def __init__(self, deck: str, limit: int):
        self.deck = deck
        self.limit = limit
        super().__init__(f"{deck.capitalize()} deck is full ({limit} cards)")


class EmptyDeckError(DeckError):
    """Both decks are empty."""

    def __init__(self):
        super().__init__("Deck is empty")


def is_material(card: CardDefinition) -> bool:
    """Check if a card belongs in the material deck."""
    return any(card.has_type(marker) for marker in MATERIAL_TYPE_MARKERS)


@dataclass
class DeckBuilder:
    """
    Mutable deck under construction.

    Usage:
        builder = DeckBuilder()
        builder.add(card)
        session.dispatch(builder.to_action())
    """
    material: list[CardDefinition] = field(default_factory=list)
    main: list[CardDefinition] = field(default_factory=list)

    @classmethod
    def from_lists(cls, material, main) -> DeckBuilder:
        """
        Wrap two prebuilt lists, checking only the size limits.

        Cards are kept in the deck the caller put them in.
        """
        material, main = list(material), list(main)
        if len(material) > MATERIAL_DECK_LIMIT:
            raise DeckLimitError(MATERIAL, MATERIAL_DECK_LIMIT)
        if len(main) > MAIN_DECK_LIMIT:
            raise DeckLimitError(MAIN, MAIN_DECK_LIMIT)
        return cls(material=material, main=main)

    @property
    def is_empty(self) -> bool:
        return not self.material and not self.main

    def add(self, card: CardDefinition) -> str:
        """
        Add a card to the deck it belongs in.

        Returns the deck name ("material" or "main").
        Raises DeckLimitError if that deck is full.
        """
        if is_material(card):
            if len(self.material) >= MATERIAL_DECK_LIMIT:
                raise DeckLimitError(MATERIAL, MATERIAL_DECK_LIMIT)
            self.material.append(card)
            return MATERIAL

        if len(self.main) >= MAIN_DECK_LIMIT:
            raise DeckLimitError(MAIN, MAIN_DECK_LIMIT)
        self.main.append(card)
        return MAIN

    def add_all(self, cards) -> None:
        for card in cards:
            self.add(card)

    def remove(self, index: int, deck: str) -> CardDefinition:
        """Remove the card at index from the named deck."""
        if deck == MATERIAL:
            return self.material.pop(index)
        if deck == MAIN:
            return self.main.pop(index)
        raise ValueError(f"Unknown deck: {deck}")

    def clear(self) -> None:
        self.material.clear()
        self.main.clear()

    def to_action(self) -> LoadDeck:
        """Build the LoadDeck command for this deck."""
        if self.is_empty:
            raise EmptyDeckError()
        logger.debug(
            "Deck ready: %d material, %d main", len(self.material), len(self.main)
        )
        return Action.load_deck(self.material, self.main)
