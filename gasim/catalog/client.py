"""
Catalog Client - Fetches card definitions from the public card search API.

The catalog is paginated; pages are fetched one after another with a
short pause between requests. A failed request ends the fetch: the
cards collected so far are returned and the error is logged. Callers
never see an exception from the network.
"""

from __future__ import annotations
from typing import Any
import logging
import os
import time

import requests

from ..engine_core.state import CardDefinition

logger = logging.getLogger(__name__)

CATALOG_URL = os.getenv("GASIM_CATALOG_URL", "https://api.gatcg.com/cards/search")
CATALOG_IMAGE_URL = os.getenv("GASIM_CATALOG_IMAGE_URL", "https://api.gatcg.com/cards/images")
CATALOG_SET = os.getenv("GASIM_CATALOG_SET", "DOASD")


def card_from_raw(
    raw: dict[str, Any],
    set_prefix: str = CATALOG_SET,
    image_base_url: str = CATALOG_IMAGE_URL,
) -> CardDefinition:
    """
    Convert one search result into a CardDefinition.

    The image comes from the edition printed in set_prefix when there
    is one, otherwise from the card's own slug.
    """
    if not isinstance(raw, dict):
        raise TypeError(f"Expected a card object, got {type(raw).__name__}")

    slug = raw.get("slug")
    for edition in raw.get("editions") or []:
        if not isinstance(edition, dict):
            continue
        edition_set = edition.get("set")
        if isinstance(edition_set, dict) and edition_set.get("prefix") == set_prefix:
            slug = edition.get("slug", slug)
            break

    stats = raw.get("stats")
    if not isinstance(stats, dict):
        stats = {}
    return CardDefinition(
        id=raw["uuid"],
        name=raw.get("name", ""),
        types=raw.get("types") or ["UNKNOWN"],
        element=raw.get("element") or "NORM",
        cost=stats.get("cost_memory") or 0,
        image_url=f"{image_base_url}/{slug}.jpg",
        text=raw.get("effect_raw") or "",
    )


def search_cards(cards: list[CardDefinition], term: str) -> list[CardDefinition]:
    """Case-insensitive name filter."""
    needle = term.lower()
    return [card for card in cards if needle in card.name.lower()]


class CatalogClient:
    """
    Client for the card search API.

    Usage:
        client = CatalogClient()
        cards = client.fetch_cards()
    """

    def __init__(
        self,
        base_url: str = CATALOG_URL,
        image_base_url: str = CATALOG_IMAGE_URL,
        set_prefix: str = CATALOG_SET,
        max_pages: int = 10,
        page_delay: float = 0.05,
        timeout: float = 10,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url
        self.image_base_url = image_base_url
        self.set_prefix = set_prefix
        self.max_pages = max_pages
        self.page_delay = page_delay
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch_page(self, page: int) -> list[dict[str, Any]] | None:
        """
        Fetch one page of raw results.

        Returns None when fetching should stop (HTTP error, bad payload).
        """
        params = {"prefix": self.set_prefix, "page": page}
        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"Catalog request failed on page {page}: {e}")
            return None

        if not response.ok:
            logger.warning(f"Catalog returned HTTP {response.status_code} on page {page}")
            return None

        try:
            payload = response.json()
        except ValueError as e:
            logger.error(f"Catalog page {page} is not JSON: {e}")
            return None

        if isinstance(payload, list):
            data = payload
        elif isinstance(payload, dict):
            data = payload.get("data")
        else:
            logger.error(f"Unexpected catalog payload on page {page}: {payload!r:.80}")
            return None
        if data is None:
            return []
        if not isinstance(data, list):
            logger.error(f"Unexpected catalog payload on page {page}")
            return None
        return data

    def fetch_cards(self) -> list[CardDefinition]:
        """Fetch every page of the configured set, up to max_pages."""
        cards: list[CardDefinition] = []

        for page in range(1, self.max_pages + 1):
            data = self.fetch_page(page)
            if not data:
                break

            for raw in data:
                try:
                    cards.append(card_from_raw(raw, self.set_prefix, self.image_base_url))
                except (KeyError, TypeError, ValueError, AttributeError) as e:
                    logger.warning(f"Skipping malformed catalog entry: {e}")

            if page < self.max_pages and self.page_delay:
                time.sleep(self.page_delay)

        logger.info(f"Fetched {len(cards)} cards for set {self.set_prefix}")
        return cards
