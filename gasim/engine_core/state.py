"""
Game State - Card definitions, card instances and the zone snapshot.

Design principles:
- Immutable: every field is a frozen dataclass or a tuple
- Every transition returns a new GameState
- Zones are a closed enumeration, looked up through an explicit mapping
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Iterator

from .errors import UnknownZoneError
from .utils import generate_id


class ZoneName(str, Enum):
    """The eight zones a card instance can be in."""
    MATERIAL_DECK = "material_deck"
    MAIN_DECK = "main_deck"
    HAND = "hand"
    MATERIAL_ZONE = "material_zone"
    BATTLE_ZONE = "battle_zone"
    GRAVEYARD = "graveyard"
    BANISHED = "banished"
    MEMORY = "memory"

    @property
    def is_deck(self) -> bool:
        """Deck zones are ordered top (head) to bottom (tail)."""
        return self in (ZoneName.MATERIAL_DECK, ZoneName.MAIN_DECK)


# ZoneName -> GameState attribute
ZONE_FIELDS: dict[ZoneName, str] = {
    ZoneName.MATERIAL_DECK: "material_deck",
    ZoneName.MAIN_DECK: "main_deck",
    ZoneName.HAND: "hand",
    ZoneName.MATERIAL_ZONE: "material_zone",
    ZoneName.BATTLE_ZONE: "battle_zone",
    ZoneName.GRAVEYARD: "graveyard",
    ZoneName.BANISHED: "banished",
    ZoneName.MEMORY: "memory",
}

if set(ZONE_FIELDS) != set(ZoneName):
    raise RuntimeError("ZONE_FIELDS must cover every ZoneName")

# Keys used by the browser client
_CAMEL_ALIASES: dict[str, ZoneName] = {
    "materialDeck": ZoneName.MATERIAL_DECK,
    "mainDeck": ZoneName.MAIN_DECK,
    "materialZone": ZoneName.MATERIAL_ZONE,
    "battleZone": ZoneName.BATTLE_ZONE,
}


def parse_zone(value: ZoneName | str) -> ZoneName:
    """
    Resolve a zone name.

    Accepts a ZoneName, its value ("battle_zone") or the camelCase key
    the browser client uses ("battleZone"). Anything else raises
    UnknownZoneError.
    """
    if isinstance(value, ZoneName):
        return value
    if isinstance(value, str):
        if value in _CAMEL_ALIASES:
            return _CAMEL_ALIASES[value]
        try:
            return ZoneName(value)
        except ValueError:
            pass
    raise UnknownZoneError(value)


@dataclass(frozen=True)
class CardDefinition:
    """
    Static card data from the catalog.

    Shared by every instance made from it; never mutated.
    """
    id: str
    name: str
    types: tuple[str, ...] = ()
    element: str = "NORM"
    cost: int = 0
    image_url: str = ""
    text: str = ""

    def __post_init__(self):
        # Lists from JSON become tuples so the definition stays hashable
        object.__setattr__(self, "types", tuple(self.types))
        if self.cost < 0:
            raise ValueError(f"Card {self.id} has negative cost {self.cost}")

    def has_type(self, marker: str) -> bool:
        """True if any type tag contains marker (e.g. "CHAMPION")."""
        return any(marker in t for t in self.types)


@dataclass(frozen=True)
class CardInstance:
    """
    A card in play.

    Note: This is a runtime instance, not the definition. The uid is
    unique per instance and survives every zone transfer, as does the
    rested flag.
    """
    definition: CardDefinition
    uid: str
    rested: bool = False

    @property
    def card_id(self) -> str:
        return self.definition.id

    @property
    def name(self) -> str:
        return self.definition.name

    @property
    def types(self) -> tuple[str, ...]:
        return self.definition.types

    @property
    def element(self) -> str:
        return self.definition.element

    @property
    def cost(self) -> int:
        return self.definition.cost

    @property
    def image_url(self) -> str:
        return self.definition.image_url

    @property
    def text(self) -> str:
        return self.definition.text

    def with_rested(self, rested: bool) -> CardInstance:
        """Return the same instance (same uid) with a new rested flag."""
        return replace(self, rested=rested)


def instantiate(
    definition: CardDefinition,
    uid_factory: Callable[[], str] = generate_id,
) -> CardInstance:
    """Create a fresh, unrested instance of a definition."""
    return CardInstance(definition=definition, uid=uid_factory(), rested=False)


@dataclass(frozen=True)
class GameState:
    """
    Complete zone snapshot at a point in time.

    This is the canonical state the reducer operates on. Observers hold
    snapshots; a snapshot is never modified after it is built.
    """
    material_deck: tuple[CardInstance, ...] = ()
    main_deck: tuple[CardInstance, ...] = ()
    hand: tuple[CardInstance, ...] = ()
    material_zone: tuple[CardInstance, ...] = ()
    battle_zone: tuple[CardInstance, ...] = ()
    graveyard: tuple[CardInstance, ...] = ()
    banished: tuple[CardInstance, ...] = ()
    memory: tuple[CardInstance, ...] = ()

    @classmethod
    def empty(cls) -> GameState:
        return cls()

    def zone(self, name: ZoneName) -> tuple[CardInstance, ...]:
        """Get the cards in a zone."""
        return getattr(self, ZONE_FIELDS[parse_zone(name)])

    def with_zone(self, name: ZoneName, cards) -> GameState:
        """Return new state with one zone replaced."""
        return replace(self, **{ZONE_FIELDS[parse_zone(name)]: tuple(cards)})

    def zones(self) -> dict[ZoneName, tuple[CardInstance, ...]]:
        return {name: self.zone(name) for name in ZoneName}

    def all_instances(self) -> Iterator[CardInstance]:
        for name in ZoneName:
            yield from self.zone(name)

    @property
    def total_cards(self) -> int:
        return sum(len(self.zone(name)) for name in ZoneName)

    def find(self, uid: str) -> tuple[ZoneName, int] | None:
        """Locate an instance: (zone, index) or None."""
        for name in ZoneName:
            for index, card in enumerate(self.zone(name)):
                if card.uid == uid:
                    return name, index
        return None

    def get_card(self, uid: str) -> CardInstance | None:
        location = self.find(uid)
        if location is None:
            return None
        name, index = location
        return self.zone(name)[index]

    def counts(self) -> dict[ZoneName, int]:
        return {name: len(cards) for name, cards in self.zones().items()}
