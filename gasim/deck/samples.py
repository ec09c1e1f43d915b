"""
Sample Cards - A small offline deck for demos and tests.

Real decks come from the catalog; these stand in when there is no
network. Material cards are Champions and Regalia, the rest go to the
main deck.
"""

from ..engine_core.state import CardDefinition


LORRAINE = CardDefinition(
    id="sample-lorraine",
    name="Lorraine, Wandering Warrior",
    types=("CHAMPION",),
    element="NORM",
    cost=0,
    text="Lineage champion.",
)

LORRAINE_BLADEBOUND = CardDefinition(
    id="sample-lorraine-2",
    name="Lorraine, Bladebound",
    types=("CHAMPION",),
    element="NORM",
    cost=1,
)

EMBER_BLADE = CardDefinition(
    id="sample-ember-blade",
    name="Ember Blade",
    types=("REGALIA", "WEAPON"),
    element="FIRE",
    cost=1,
)

SPARK_ALIGHT = CardDefinition(
    id="sample-spark-alight",
    name="Spark Alight",
    types=("ACTION",),
    element="FIRE",
    cost=1,
    text="Deal 2 damage.",
)

CRUX_SIGHT = CardDefinition(
    id="sample-crux-sight",
    name="Crux Sight",
    types=("ACTION",),
    element="NORM",
    cost=2,
)

TRUSTY_STEED = CardDefinition(
    id="sample-trusty-steed",
    name="Trusty Steed",
    types=("ALLY",),
    element="NORM",
    cost=2,
)

HEALING_WINDS = CardDefinition(
    id="sample-healing-winds",
    name="Healing Winds",
    types=("ACTION",),
    element="WIND",
    cost=3,
)


SAMPLE_MATERIAL = [LORRAINE, LORRAINE_BLADEBOUND, EMBER_BLADE]

# Three copies of each main-deck card
SAMPLE_MAIN = [SPARK_ALIGHT, CRUX_SIGHT, TRUSTY_STEED, HEALING_WINDS] * 3


def sample_cards() -> list[CardDefinition]:
    """All sample definitions, one of each."""
    return [
        LORRAINE,
        LORRAINE_BLADEBOUND,
        EMBER_BLADE,
        SPARK_ALIGHT,
        CRUX_SIGHT,
        TRUSTY_STEED,
        HEALING_WINDS,
    ]
