"""
Identity and shuffle helpers used when a deck is loaded.
"""

from __future__ import annotations
from typing import Sequence, TypeVar
import random
import uuid

T = TypeVar("T")


def generate_id(rng: random.Random | None = None) -> str:
    """
    Return a fresh instance id (uuid4 format, 122 random bits).

    With an rng the id is drawn from it, so a seeded game hands out
    the same ids every time it is replayed.
    """
    if rng is None:
        return uuid.uuid4().hex
    return uuid.UUID(int=rng.getrandbits(128), version=4).hex


def shuffle(items: Sequence[T], rng: random.Random | None = None) -> tuple[T, ...]:
    """
    Return a uniformly shuffled copy of items.

    random.Random.shuffle is Fisher-Yates, so every permutation is
    equally likely. The input is left untouched.
    """
    rng = rng or random.Random()
    shuffled = list(items)
    rng.shuffle(shuffled)
    return tuple(shuffled)
