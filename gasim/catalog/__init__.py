"""Catalog - card definitions fetched from the public card database."""

from .client import CatalogClient, card_from_raw, search_cards

__all__ = [
    "CatalogClient",
    "card_from_raw",
    "search_cards",
]
