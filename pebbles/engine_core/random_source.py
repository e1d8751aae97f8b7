"""Randomness source for the coin flip and the Easy policy.

Usage:
    rng = SystemRandomSource()          # unpredictable
    rng = SystemRandomSource(seed=123)  # reproducible
    rng = SequenceRandomSource([0, 7])  # scripted, for tests

The engine only ever calls next_u32(); pass an instance to the
lifecycle manager and reducer instead of calling the random module.
"""

from __future__ import annotations
import random
from typing import Iterable, Protocol


class RandomSource(Protocol):
    def next_u32(self) -> int:
        """Return a value in 0..2**32-1."""
        ...


class SystemRandomSource:
    def __init__(self, seed: int | str | None = None):
        self._rng = random.Random(seed) if seed is not None else random.SystemRandom()

    def next_u32(self) -> int:
        return self._rng.getrandbits(32)


class SequenceRandomSource:
    """Replays a fixed list of values, cycling when exhausted."""

    def __init__(self, values: Iterable[int]):
        self._values = [v & 0xFFFFFFFF for v in values]
        if not self._values:
            raise ValueError("SequenceRandomSource needs at least one value")
        self._index = 0

    @property
    def calls(self) -> int:
        return self._index

    def next_u32(self) -> int:
        value = self._values[self._index % len(self._values)]
        self._index += 1
        return value
