"""
Tests for the transfer engine.

Tests:
- remove_instance scan and excision
- move atomicity and no-op on miss
- draw ordering
- rest toggling
"""

import pytest

from ..engine_core.state import ZoneName
from ..engine_core.transfer import (
    REST_ZONES,
    remove_instance,
    move_card,
    draw_card,
    draw_material,
    toggle_rest,
)


def uids(cards):
    return [card.uid for card in cards]


class TestRemoveInstance:
    """Tests for the core primitive."""

    def test_removes_from_owning_zone(self, table_state):
        card, new_state = remove_instance(table_state, "h1")

        assert card.uid == "h1"
        assert uids(new_state.hand) == ["h2"]
        assert new_state.total_cards == table_state.total_cards - 1

    def test_preserves_order_of_rest(self, table_state):
        _, new_state = remove_instance(table_state, "c2")
        assert uids(new_state.main_deck) == ["c1", "c3"]

    def test_other_zones_untouched(self, table_state):
        _, new_state = remove_instance(table_state, "gy1")
        for zone in ZoneName:
            if zone is not ZoneName.GRAVEYARD:
                assert new_state.zone(zone) == table_state.zone(zone)

    def test_not_found(self, table_state):
        assert remove_instance(table_state, "nope") is None

    def test_finds_deck_cards(self, table_state):
        card, _ = remove_instance(table_state, "md2")
        assert card.uid == "md2"


class TestMoveCard:
    """Tests for move_card."""

    def test_move_to_tail_of_target(self, table_state):
        new_state = move_card(table_state, "h1", ZoneName.BATTLE_ZONE)

        assert uids(new_state.battle_zone) == ["bz1", "bz2", "h1"]
        assert uids(new_state.hand) == ["h2"]

    def test_move_is_atomic(self, table_state):
        new_state = move_card(table_state, "mz1", "graveyard")

        assert new_state.find("mz1") == (ZoneName.GRAVEYARD, 1)
        assert new_state.material_zone == ()
        for zone in ZoneName:
            if zone not in (ZoneName.MATERIAL_ZONE, ZoneName.GRAVEYARD):
                assert new_state.zone(zone) == table_state.zone(zone)

    def test_miss_is_noop(self, table_state):
        new_state = move_card(table_state, "nonexistent-uid", "hand")
        assert new_state == table_state
        assert new_state is table_state

    def test_rested_flag_survives_move(self, table_state):
        new_state = move_card(table_state, "bz2", ZoneName.HAND)
        moved = new_state.hand[-1]
        assert moved.uid == "bz2"
        assert moved.rested is True

    def test_move_within_same_zone_goes_to_tail(self, table_state):
        new_state = move_card(table_state, "bz1", ZoneName.BATTLE_ZONE)
        assert uids(new_state.battle_zone) == ["bz2", "bz1"]

    def test_move_onto_deck_goes_to_bottom(self, table_state):
        new_state = move_card(table_state, "h2", ZoneName.MAIN_DECK)
        assert uids(new_state.main_deck) == ["c1", "c2", "c3", "h2"]

    def test_camel_case_target(self, table_state):
        new_state = move_card(table_state, "h1", "materialZone")
        assert uids(new_state.material_zone) == ["mz1", "h1"]

    def test_unknown_zone_raises(self, table_state):
        with pytest.raises(ValueError):
            move_card(table_state, "h1", "sideboard")

    def test_conserves_cards(self, table_state):
        new_state = move_card(table_state, "c3", ZoneName.MEMORY)
        assert new_state.total_cards == table_state.total_cards


class TestDraw:
    """Tests for draw_card and draw_material."""

    def test_draw_takes_top_card(self, table_state):
        new_state = draw_card(table_state)

        assert uids(new_state.main_deck) == ["c2", "c3"]
        assert uids(new_state.hand) == ["h1", "h2", "c1"]

    def test_draw_empty_deck_is_noop(self, table_state):
        state = table_state.with_zone(ZoneName.MAIN_DECK, ())
        assert draw_card(state) is state

    def test_draw_material(self, table_state):
        new_state = draw_material(table_state)

        assert uids(new_state.material_deck) == ["md2"]
        assert uids(new_state.material_zone) == ["mz1", "md1"]
        assert new_state.hand == table_state.hand

    def test_draw_material_empty_is_noop(self, table_state):
        state = table_state.with_zone(ZoneName.MATERIAL_DECK, ())
        assert draw_material(state) is state

    def test_draw_until_empty(self, table_state):
        state = table_state
        for _ in range(5):
            state = draw_card(state)
        assert state.main_deck == ()
        assert uids(state.hand) == ["h1", "h2", "c1", "c2", "c3"]


class TestToggleRest:
    """Tests for toggle_rest."""

    def test_flip_in_place(self, table_state):
        new_state = toggle_rest(table_state, "bz1")

        assert uids(new_state.battle_zone) == ["bz1", "bz2"]
        assert new_state.battle_zone[0].rested is True

    def test_double_toggle_restores(self, table_state):
        new_state = toggle_rest(toggle_rest(table_state, "h2"), "h2")
        assert new_state == table_state

    def test_unrest(self, table_state):
        new_state = toggle_rest(table_state, "bz2")
        assert new_state.battle_zone[1].rested is False

    @pytest.mark.parametrize("uid", ["h1", "mz1", "bz1", "mem1", "ban1"])
    def test_rest_zones(self, table_state, uid):
        new_state = toggle_rest(table_state, uid)
        assert new_state.get_card(uid).rested is True

    @pytest.mark.parametrize("uid", ["md1", "c1", "gy1"])
    def test_deck_and_graveyard_excluded(self, table_state, uid):
        assert toggle_rest(table_state, uid) is table_state

    def test_miss_is_noop(self, table_state):
        assert toggle_rest(table_state, "ghost") is table_state

    def test_rest_zone_list(self):
        assert set(REST_ZONES) == {
            ZoneName.HAND,
            ZoneName.MATERIAL_ZONE,
            ZoneName.BATTLE_ZONE,
            ZoneName.MEMORY,
            ZoneName.BANISHED,
        }

    def test_only_target_changes(self, table_state):
        new_state = toggle_rest(table_state, "h1")
        assert new_state.hand[1] == table_state.hand[1]
        for zone in ZoneName:
            if zone is not ZoneName.HAND:
                assert new_state.zone(zone) is table_state.zone(zone)
