"""Random sources for the score offset."""

from __future__ import annotations

import random
from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Anything that can draw a float from a closed interval.

    `random.Random` instances satisfy this protocol.
    """

    def uniform(self, a: float, b: float) -> float: ...


class FixedRandomSource:
    """Random source that always returns the same value, clamped to [a, b]."""

    def __init__(self, value: float = 0.0) -> None:
        self.value = value

    def uniform(self, a: float, b: float) -> float:
        low, high = min(a, b), max(a, b)
        return min(max(self.value, low), high)


def create_random_source(seed: int | None = None) -> RandomSource:
    """Create the default random source, optionally seeded."""
    return random.Random(seed)
