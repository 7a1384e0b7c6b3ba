"""
Chance primitives - the only source of nondeterminism.

Generators never touch the global random module. They take an object with a
``randrange(stop)`` method, which is ``random.Random`` in production and a
scripted fake in tests.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Protocol, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything that can draw a uniform integer in [0, stop)."""

    def randrange(self, stop: int) -> int: ...


def make_rng(seed: int | None = None) -> random.Random:
    """Create a generator; a seed makes the run reproducible."""
    return random.Random(seed)


def random_int(rng: RandomSource, below: int) -> int:
    """Uniform integer in [0, below)."""
    return rng.randrange(below)


def percent_chance(rng: RandomSource, chance: int) -> bool:
    """True with probability chance/100, drawn against 0-99."""
    return random_int(rng, 100) < chance


def choose(rng: RandomSource, options: Sequence[T]) -> T:
    """Uniformly pick one element of a non-empty sequence."""
    return options[random_int(rng, len(options))]
