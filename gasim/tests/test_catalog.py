"""
Tests for the catalog client.

The HTTP session is replaced by a fake that serves canned pages, so
no request leaves the machine.
"""

import pytest
import requests

from ..catalog import CatalogClient, card_from_raw, search_cards


class FakeResponse:
    def __init__(self, payload=None, status_code=200, bad_json=False):
        self._payload = payload
        self.status_code = status_code
        self._bad_json = bad_json

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._bad_json:
            raise ValueError("not json")
        return self._payload


class FakeSession:
    """Serves responses in order; records the params of each call."""

    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append(params)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def raw_card(uuid, name="Card", **extra):
    data = {"uuid": uuid, "name": name, "slug": f"{uuid}-slug"}
    data.update(extra)
    return data


def make_client(responses, **kwargs):
    session = FakeSession(responses)
    client = CatalogClient(
        base_url="https://catalog.test/search",
        image_base_url="https://catalog.test/images",
        set_prefix="DOASD",
        page_delay=0,
        session=session,
        **kwargs,
    )
    return client, session


class TestCardFromRaw:
    """Tests for result mapping."""

    def test_full_record(self):
        card = card_from_raw(
            raw_card(
                "u1",
                "Spark Alight",
                types=["ACTION"],
                element="FIRE",
                stats={"cost_memory": 2},
                effect_raw="Deal 2 damage.",
            ),
            image_base_url="https://img",
        )

        assert card.id == "u1"
        assert card.name == "Spark Alight"
        assert card.types == ("ACTION",)
        assert card.element == "FIRE"
        assert card.cost == 2
        assert card.text == "Deal 2 damage."
        assert card.image_url == "https://img/u1-slug.jpg"

    def test_defaults(self):
        card = card_from_raw({"uuid": "u2", "name": "Bare"}, image_base_url="https://img")

        assert card.types == ("UNKNOWN",)
        assert card.element == "NORM"
        assert card.cost == 0
        assert card.text == ""

    def test_edition_slug_preferred(self):
        raw = raw_card(
            "u3",
            editions=[
                {"slug": "other-ed", "set": {"prefix": "ALC"}},
                {"slug": "doasd-ed", "set": {"prefix": "DOASD"}},
            ],
        )
        card = card_from_raw(raw, set_prefix="DOASD", image_base_url="https://img")
        assert card.image_url == "https://img/doasd-ed.jpg"

    def test_edition_without_set(self):
        raw = raw_card("u4", editions=[{"slug": "x"}])
        card = card_from_raw(raw, set_prefix="DOASD", image_base_url="https://img")
        assert card.image_url == "https://img/u4-slug.jpg"

    def test_non_dict_rejected(self):
        with pytest.raises(TypeError):
            card_from_raw(["not", "a", "card"])


class TestFetchCards:
    """Tests for pagination and failure handling."""

    def test_paginates_until_empty_page(self):
        client, session = make_client([
            FakeResponse([raw_card("a"), raw_card("b")]),
            FakeResponse({"data": [raw_card("c")]}),
            FakeResponse([]),
        ])

        cards = client.fetch_cards()

        assert [c.id for c in cards] == ["a", "b", "c"]
        assert [call["page"] for call in session.calls] == [1, 2, 3]
        assert all(call["prefix"] == "DOASD" for call in session.calls)

    def test_stops_at_max_pages(self):
        client, session = make_client(
            [FakeResponse([raw_card(f"p{i}")]) for i in range(5)],
            max_pages=3,
        )

        cards = client.fetch_cards()

        assert len(cards) == 3
        assert len(session.calls) == 3

    def test_http_error_keeps_earlier_pages(self):
        client, _ = make_client([
            FakeResponse([raw_card("a")]),
            FakeResponse(status_code=500),
        ])
        assert [c.id for c in client.fetch_cards()] == ["a"]

    def test_network_error_degrades_to_empty(self):
        client, _ = make_client([requests.exceptions.ConnectionError("down")])
        assert client.fetch_cards() == []

    def test_bad_json_degrades(self):
        client, _ = make_client([FakeResponse(bad_json=True)])
        assert client.fetch_cards() == []

    def test_missing_data_key_ends_fetch(self):
        client, _ = make_client([FakeResponse({"total": 0})])
        assert client.fetch_cards() == []

    def test_malformed_entry_skipped(self):
        client, _ = make_client([
            FakeResponse([{"name": "no uuid"}, raw_card("ok")]),
            FakeResponse([]),
        ])
        assert [c.id for c in client.fetch_cards()] == ["ok"]

    def test_scalar_payload_degrades(self):
        """A plain-text error body ends the fetch without raising."""
        client, _ = make_client([FakeResponse("rate limited")])
        assert client.fetch_cards() == []

    def test_non_object_entry_skipped(self):
        client, _ = make_client([
            FakeResponse(["oops", 42, raw_card("ok")]),
            FakeResponse([]),
        ])
        assert [c.id for c in client.fetch_cards()] == ["ok"]

    def test_odd_nested_fields_tolerated(self):
        client, _ = make_client([
            FakeResponse([
                raw_card("a", stats=[1]),
                raw_card("b", editions=["x", {"slug": "s", "set": "DOASD"}]),
            ]),
            FakeResponse([]),
        ])

        cards = client.fetch_cards()

        assert [c.id for c in cards] == ["a", "b"]
        assert cards[0].cost == 0
        assert cards[1].image_url.endswith("/b-slug.jpg")


class TestSearch:

    @pytest.fixture
    def cards(self):
        return [
            card_from_raw(raw_card("1", "Spark Alight")),
            card_from_raw(raw_card("2", "Crux Sight")),
            card_from_raw(raw_card("3", "Trusty Steed")),
        ]

    def test_case_insensitive(self, cards):
        assert [c.id for c in search_cards(cards, "SIGHT")] == ["2"]

    def test_substring(self, cards):
        assert [c.id for c in search_cards(cards, "t")] == ["1", "2", "3"]

    def test_no_match(self, cards):
        assert search_cards(cards, "dragon") == []
