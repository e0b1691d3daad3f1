"""Timing harness comparing merge sort with the merge/insertion hybrid."""

from __future__ import annotations

import subprocess
import sys
import time
from collections.abc import Callable, Iterable, Sequence
from typing import TextIO

from sortbench.generator import ArrayGenerator
from sortbench.generator import long_sizes as _default_long_sizes
from sortbench.generator import standard_sizes
from sortbench.merge import merge_sort
from sortbench.merge_insert import merge_insert_sort

__all__ = ["SortTester", "DEFAULT_THRESHOLDS", "INSERTION_THRESHOLD"]

DEFAULT_THRESHOLDS = (5, 10, 20, 50, 100, 200, 400, 1000, 2000)
INSERTION_THRESHOLD = 15
_PLAIN_RUNS = 6
_THRESHOLD_RUNS = 3

Sorter = Callable[[list[int]], None]


def _plain_merge(values: list[int]) -> None:
    merge_sort(values, 0, len(values) - 1)


def _hybrid(threshold: int) -> Sorter:
    def sort(values: list[int]) -> None:
        merge_insert_sort(values, 0, len(values) - 1, threshold)

    return sort


def _elapsed_ms(sort: Sorter, data: Sequence[int]) -> int:
    copy = list(data)
    start = time.perf_counter_ns()
    sort(copy)
    return (time.perf_counter_ns() - start) // 1_000_000


class SortTester:
    """Runs the benchmarks and reports progress every hundred arrays."""

    def __init__(
        self,
        generator: ArrayGenerator | None = None,
        sizes: Iterable[int] | None = None,
        long_sizes: Iterable[int] | None = None,
        repeats: int = 10,
        thresholds: Iterable[int] = DEFAULT_THRESHOLDS,
        out: TextIO | None = None,
    ) -> None:
        if repeats < 1:
            raise ValueError("repeats must be at least 1")
        self.generator = generator if generator is not None else ArrayGenerator()
        self.sizes = list(sizes) if sizes is not None else list(standard_sizes())
        self.long_sizes = (
            list(long_sizes) if long_sizes is not None else list(_default_long_sizes())
        )
        self.repeats = repeats
        self.thresholds = list(thresholds)
        self.out = out if out is not None else sys.stdout
        self.logging = 0

    @staticmethod
    def clear_screen() -> None:
        """Clear the terminal."""
        try:
            subprocess.run(["clear"], check=False)
        except OSError:
            pass

    def _tick(self, total: int) -> None:
        self.logging += 1
        if self.logging % 100 == 0:
            print(f"Выполняется тест № {self.logging} из {total}", file=self.out, flush=True)

    def _average_times(self, arrays: list[list[int]], sort: Sorter) -> dict[int, int]:
        total = _PLAIN_RUNS * len(self.sizes)
        results: dict[int, int] = {}
        for data in arrays:
            self._tick(total)
            spent = sum(_elapsed_ms(sort, data) for _ in range(self.repeats))
            results[len(data)] = spent // self.repeats
        return dict(sorted(results.items()))

    def _threshold_times(self, arrays: list[list[int]]) -> list[tuple[int, int, int]]:
        total = _THRESHOLD_RUNS * len(self.thresholds) * len(self.long_sizes)
        results = []
        for threshold in self.thresholds:
            sort = _hybrid(threshold)
            for data in arrays:
                self._tick(total)
                results.append((threshold, len(data), _elapsed_ms(sort, data)))
        return results

    def standard_merge_random(self) -> dict[int, int]:
        """Average merge sort time in ms per size, on random arrays."""
        return self._average_times(self.generator.random_arrays(self.sizes), _plain_merge)

    def standard_merge_reversed(self) -> dict[int, int]:
        """Average merge sort time in ms per size, on reversed arrays."""
        return self._average_times(self.generator.reversed_arrays(self.sizes), _plain_merge)

    def standard_merge_almost_sorted(self) -> dict[int, int]:
        """Average merge sort time in ms per size, on almost sorted arrays."""
        return self._average_times(
            self.generator.almost_sorted_arrays(self.sizes), _plain_merge
        )

    def insert_merge_random(self) -> dict[int, int]:
        """Average hybrid sort time in ms per size, on random arrays."""
        return self._average_times(
            self.generator.random_arrays(self.sizes), _hybrid(INSERTION_THRESHOLD)
        )

    def insert_merge_reversed(self) -> dict[int, int]:
        """Average hybrid sort time in ms per size, on reversed arrays."""
        return self._average_times(
            self.generator.reversed_arrays(self.sizes), _hybrid(INSERTION_THRESHOLD)
        )

    def insert_merge_almost_sorted(self) -> dict[int, int]:
        """Average hybrid sort time in ms per size, on almost sorted arrays."""
        return self._average_times(
            self.generator.almost_sorted_arrays(self.sizes), _hybrid(INSERTION_THRESHOLD)
        )

    def threshold_random(self) -> list[tuple[int, int, int]]:
        """(threshold, size, ms) for each threshold and long random array."""
        return self._threshold_times(self.generator.random_arrays(self.long_sizes))

    def threshold_reversed(self) -> list[tuple[int, int, int]]:
        """(threshold, size, ms) for each threshold and long reversed array."""
        return self._threshold_times(self.generator.reversed_arrays(self.long_sizes))

    def threshold_almost_sorted(self) -> list[tuple[int, int, int]]:
        """(threshold, size, ms) for each threshold and long almost sorted array."""
        return self._threshold_times(
            self.generator.almost_sorted_arrays(self.long_sizes)
        )