"""Producers of the test arrays used by the benchmarks."""

from __future__ import annotations

import random
from collections.abc import Iterable

__all__ = ["ArrayGenerator", "standard_sizes", "long_sizes", "POOL_SIZE", "MAX_VALUE"]

POOL_SIZE = 100_000
MAX_VALUE = 6000


def standard_sizes() -> range:
    """Array sizes used by the plain benchmarks: 100, 200, ..., 100000."""
    return range(100, 100_001, 100)


def long_sizes() -> range:
    """Array sizes used by the threshold benchmarks: 10000, 10100, ..., 100000."""
    return range(10_000, 100_001, 100)


class ArrayGenerator:
    """Generates random, reversed and almost sorted integer arrays."""

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = random.SystemRandom().getrandbits(32)
        self.seed = seed
        self._rng = random.Random(seed)
        self._pool = [self._draw() for _ in range(POOL_SIZE)]

    def _draw(self) -> int:
        return self._rng.randint(0, MAX_VALUE)

    def random_array(self, length: int) -> list[int]:
        """Return a contiguous window of ``length`` values from the random pool."""
        if not 0 <= length <= POOL_SIZE:
            raise ValueError(f"length must be between 0 and {POOL_SIZE}, got {length}")
        start = self._rng.randint(0, POOL_SIZE - length)
        return self._pool[start : start + length]

    @staticmethod
    def reversed_array(length: int) -> list[int]:
        """Return ``length - 1, ..., 1, 0``."""
        return list(range(length - 1, -1, -1))

    def almost_sorted_array(self, length: int) -> list[int]:
        """Return ``0 .. length-1`` with ``length // 80`` random pairs swapped."""
        result = list(range(length))
        for _ in range(length // 80):
            first = self._draw() % length
            second = self._draw() % length
            while second == first:
                second = self._draw() % length
            result[first], result[second] = result[second], result[first]
        return result

    def random_arrays(self, sizes: Iterable[int]) -> list[list[int]]:
        """Return one random array for each size."""
        return [self.random_array(size) for size in sizes]

    @staticmethod
    def reversed_arrays(sizes: Iterable[int]) -> list[list[int]]:
        """Return one reversed array for each size."""
        return [ArrayGenerator.reversed_array(size) for size in sizes]

    def almost_sorted_arrays(self, sizes: Iterable[int]) -> list[list[int]]:
        """Return one almost sorted array for each size."""
        return [self.almost_sorted_array(size) for size in sizes]