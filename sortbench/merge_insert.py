"""Hybrid merge sort that hands short ranges to insertion sort."""

from __future__ import annotations

from collections.abc import MutableSequence

from sortbench.merge import merge as _merge_runs

__all__ = ["insertion_sort", "merge", "merge_insert_sort"]


def insertion_sort(values: MutableSequence[int]) -> None:
    """Sort ``values`` in place with straight insertion sort."""
    for i in range(1, len(values)):
        key = values[i]
        j = i - 1
        while j >= 0 and values[j] > key:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = key


def merge(values: MutableSequence[int], left: int, mid: int, right: int) -> None:
    """Merge the sorted runs ``values[left:mid+1]`` and ``values[mid+1:right+1]`` in place."""
    _merge_runs(values, left, mid, right)


def merge_insert_sort(
    values: MutableSequence[int], left: int, right: int, threshold: int
) -> None:
    """Sort ``values[left:right+1]`` in place.

    Ranges of at most ``threshold`` elements are sorted by insertion sort;
    longer ranges are split in half and merged.
    """
    if right - left + 1 <= threshold:
        chunk = list(values[left : right + 1])
        insertion_sort(chunk)
        values[left : right + 1] = chunk
    elif left < right:
        mid = left + (right - left) // 2
        merge_insert_sort(values, left, mid, threshold)
        merge_insert_sort(values, mid + 1, right, threshold)
        merge(values, left, mid, right)