"""Deck building - splits catalog cards into material and main decks."""

from .builder import (
    DeckBuilder,
    DeckError,
    DeckLimitError,
    EmptyDeckError,
    is_material,
    MATERIAL_DECK_LIMIT,
    MAIN_DECK_LIMIT,
)

__all__ = [
    "DeckBuilder",
    "DeckError",
    "DeckLimitError",
    "EmptyDeckError",
    "is_material",
    "MATERIAL_DECK_LIMIT",
    "MAIN_DECK_LIMIT",
]
