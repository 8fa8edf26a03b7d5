"""Seeded random source shared by the generators and the solver.

Every bounded draw goes through a fixed-width numpy dtype (uint32 or
uint64), never through a platform-sized integer, so a given seed produces
the same maze on every host. Index choices are made with ``next_u32`` and
converted at the call site.
"""

from collections.abc import MutableSequence, Sequence
from typing import TypeVar

import numpy as np

T = TypeVar("T")

MAX_U32 = 2**32 - 1
MAX_U64 = 2**64 - 1


class Arengee:
    """Deterministic RNG wrapping a numpy PCG64 generator."""

    def __init__(self, seed: int) -> None:
        if not 0 <= seed <= MAX_U64:
            raise ValueError(f"seed must be a 64-bit unsigned integer, got {seed}")
        self._seed = seed
        self._rng = np.random.Generator(np.random.PCG64(seed))
        self._drawn = False

    def _bounded(self, low: int, high: int, limit: int, dtype: type) -> int:
        if low >= high:
            raise ValueError(f"empty range [{low}, {high})")
        if low < 0 or high - 1 > limit:
            raise ValueError(f"range [{low}, {high}) exceeds {dtype.__name__}")
        self._drawn = True
        return int(self._rng.integers(low, high - 1, dtype=dtype, endpoint=True))

    def next_u32(self, low: int, high: int) -> int:
        """Uniform integer in ``[low, high)`` drawn as a uint32."""
        return self._bounded(low, high, MAX_U32, np.uint32)

    def next_u64(self, low: int, high: int) -> int:
        """Uniform integer in ``[low, high)`` drawn as a uint64."""
        return self._bounded(low, high, MAX_U64, np.uint64)

    def shuffle(self, items: MutableSequence) -> None:
        """In-place Fisher-Yates shuffle using only uint32 draws."""
        for i in range(1, len(items)):
            j = self.next_u32(0, i + 1)
            items[i], items[j] = items[j], items[i]

    def choice(self, items: Sequence[T]) -> T:
        if not items:
            raise ValueError("Cannot choose from an empty sequence")
        if len(items) == 1:
            return items[0]
        return items[self.next_u32(0, len(items))]

    def current_seed(self) -> int:
        """Seed that continues this stream in a fresh ``Arengee``.

        Before the first draw this is the construction seed. Afterwards it
        is the low 64 bits of the PCG64 state; reading it does not advance
        the generator.
        """
        if not self._drawn:
            return self._seed
        return int(self._rng.bit_generator.state["state"]["state"]) & MAX_U64

    @property
    def seed(self) -> int:
        return self._seed
