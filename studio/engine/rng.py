"""Seeded random stream shared by every generation phase.

A single ``RandomUtils`` instance is threaded through one composition pass.
Output is reproducible only if callers consume it in the same order, so the
phases document their draw sequence.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

_MASK32 = 0xFFFFFFFF
_TWO_POW_32 = 4294967296.0

# Odd increment added to the seed before the first draw (mulberry32 constant).
_SEED_OFFSET = 0x6D2B79F5

# Smallest positive double; keeps log(u1) finite in Box-Muller.
_MIN_UNIFORM = 5e-324


class Mulberry32:
    """Deterministic 32-bit PRNG (mulberry32 mixing on a self-updating state)."""

    def __init__(self, seed: int):
        self._state = (int(seed) + _SEED_OFFSET) & _MASK32

    def next_float(self) -> float:
        """Random float in [0, 1)."""
        t = self._state
        t = ((t ^ (t >> 15)) * (t | 1)) & _MASK32
        t ^= (t + (((t ^ (t >> 7)) * (t | 61)) & _MASK32)) & _MASK32
        self._state = t
        return ((t ^ (t >> 14)) & _MASK32) / _TWO_POW_32


class RandomUtils:
    """Sampling helpers pulled from one ``Mulberry32`` stream in call order."""

    def __init__(self, seed: int):
        self.seed = seed
        self._gen = Mulberry32(seed)

    def random(self) -> float:
        return self._gen.next_float()

    def range(self, lo: float, hi: float) -> float:
        """Uniform float in [lo, hi)."""
        return lo + self.random() * (hi - lo)

    def int(self, lo: int, hi: int) -> int:
        """Uniform integer in [lo, hi], both ends inclusive."""
        return math.floor(lo + self.random() * (hi - lo + 1))

    def pick(self, items: Sequence[T]) -> T:
        if len(items) == 0:
            raise ValueError("Cannot pick from an empty sequence")
        return items[math.floor(self.random() * len(items))]

    def chance(self, probability: float) -> bool:
        return self.random() < probability

    def gaussian(self) -> float:
        """Standard normal sample via classical Box-Muller (two draws)."""
        u1 = self.random()
        u2 = self.random()
        return math.sqrt(-2.0 * math.log(u1 or _MIN_UNIFORM)) * math.cos(2.0 * math.pi * u2)


def create_random_utils(seed: int) -> RandomUtils:
    return RandomUtils(seed)
