"""
Transfer Engine - Moving card instances between zones.

Every mutation is built on remove_instance(): find an instance by uid,
excise it from its zone, and hand it back with the new state. A uid
that is not in play is not an error; each operation then returns the
state it was given.
"""

from __future__ import annotations
import logging

from .state import GameState, CardInstance, ZoneName, parse_zone

logger = logging.getLogger(__name__)

# Fixed scan order for remove_instance
SEARCH_ORDER: tuple[ZoneName, ...] = (
    ZoneName.HAND,
    ZoneName.MATERIAL_ZONE,
    ZoneName.BATTLE_ZONE,
    ZoneName.GRAVEYARD,
    ZoneName.BANISHED,
    ZoneName.MEMORY,
    ZoneName.MATERIAL_DECK,
    ZoneName.MAIN_DECK,
)

# Zones where a card can be rested
REST_ZONES: tuple[ZoneName, ...] = (
    ZoneName.HAND,
    ZoneName.MATERIAL_ZONE,
    ZoneName.BATTLE_ZONE,
    ZoneName.MEMORY,
    ZoneName.BANISHED,
)


def remove_instance(
    state: GameState, uid: str
) -> tuple[CardInstance, GameState] | None:
    """
    Remove an instance from whichever zone holds it.

    Returns (instance, new state) or None if no zone contains uid.
    Order of the remaining cards in the source zone is preserved.
    """
    for zone in SEARCH_ORDER:
        cards = state.zone(zone)
        for index, card in enumerate(cards):
            if card.uid == uid:
                remaining = cards[:index] + cards[index + 1:]
                return card, state.with_zone(zone, remaining)
    return None


def move_card(state: GameState, uid: str, target_zone: ZoneName | str) -> GameState:
    """Move an instance to the tail of target_zone."""
    target = parse_zone(target_zone)
    result = remove_instance(state, uid)
    if result is None:
        logger.debug("move_card: %s not in play, ignoring", uid)
        return state
    card, new_state = result
    return new_state.with_zone(target, new_state.zone(target) + (card,))


def _draw_from(state: GameState, source: ZoneName, target: ZoneName) -> GameState:
    deck = state.zone(source)
    if not deck:
        return state
    top, rest = deck[0], deck[1:]
    return state.with_zone(source, rest).with_zone(target, state.zone(target) + (top,))


def draw_card(state: GameState) -> GameState:
    """Top of the main deck to the end of the hand."""
    return _draw_from(state, ZoneName.MAIN_DECK, ZoneName.HAND)


def draw_material(state: GameState) -> GameState:
    """Top of the material deck to the end of the material zone."""
    return _draw_from(state, ZoneName.MATERIAL_DECK, ZoneName.MATERIAL_ZONE)


def toggle_rest(state: GameState, uid: str) -> GameState:
    """
    Flip the rested flag of an instance in hand or in play.

    The instance keeps its position. Deck zones and the graveyard
    have no rest state; a uid found only there is left alone.
    """
    for zone in REST_ZONES:
        cards = state.zone(zone)
        for index, card in enumerate(cards):
            if card.uid == uid:
                flipped = card.with_rested(not card.rested)
                return state.with_zone(
                    zone, cards[:index] + (flipped,) + cards[index + 1:]
                )
    logger.debug("toggle_rest: %s not in a rest zone, ignoring", uid)
    return state
