"""
Pytest fixtures for gasim tests.
"""

import random

import pytest

from ..engine_core.state import CardDefinition, CardInstance, GameState
from ..engine_core.action import Action
from ..engine_core.reducer import Reducer
from ..deck.samples import SAMPLE_MATERIAL, SAMPLE_MAIN


def make_card(card_id: str, *types: str, cost: int = 0) -> CardDefinition:
    """Build a definition with a readable id."""
    return CardDefinition(id=card_id, name=card_id.title(), types=types or ("ACTION",), cost=cost)


def make_instance(uid: str, card_id: str | None = None, rested: bool = False) -> CardInstance:
    """Build an instance with a fixed uid."""
    return CardInstance(definition=make_card(card_id or uid), uid=uid, rested=rested)


@pytest.fixture
def reducer() -> Reducer:
    """Reducer with a fixed seed."""
    return Reducer(rng=random.Random(1234))


@pytest.fixture
def material_defs() -> list[CardDefinition]:
    return [make_card("a", "CHAMPION"), make_card("b", "REGALIA")]


@pytest.fixture
def main_defs() -> list[CardDefinition]:
    return [make_card("x"), make_card("y"), make_card("z")]


@pytest.fixture
def loaded_state(reducer, material_defs, main_defs) -> GameState:
    """State right after loading material [A, B] and main [X, Y, Z]."""
    return reducer.apply(GameState.empty(), Action.load_deck(material_defs, main_defs))


@pytest.fixture
def sample_state(reducer) -> GameState:
    """State loaded from the sample deck."""
    return reducer.apply(GameState.empty(), Action.load_deck(SAMPLE_MATERIAL, SAMPLE_MAIN))


@pytest.fixture
def table_state() -> GameState:
    """
    Hand-built state with known uids in every zone.

    Deck zones list the top card first.
    """
    return GameState(
        material_deck=(make_instance("md1"), make_instance("md2")),
        main_deck=(make_instance("c1"), make_instance("c2"), make_instance("c3")),
        hand=(make_instance("h1"), make_instance("h2")),
        material_zone=(make_instance("mz1"),),
        battle_zone=(make_instance("bz1"), make_instance("bz2", rested=True)),
        graveyard=(make_instance("gy1"),),
        banished=(make_instance("ban1"),),
        memory=(make_instance("mem1"),),
    )
