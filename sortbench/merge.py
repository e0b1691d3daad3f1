"""Classic top-down merge sort working in place on a list."""

from __future__ import annotations

import heapq
from collections.abc import MutableSequence

__all__ = ["merge", "merge_sort"]


def merge(values: MutableSequence[int], left: int, mid: int, right: int) -> None:
    """Merge the sorted runs ``values[left:mid+1]`` and ``values[mid+1:right+1]`` in place.

    On ties the element from the left run comes first, so the merge is stable.
    """
    left_run = values[left : mid + 1]
    right_run = values[mid + 1 : right + 1]
    values[left : right + 1] = list(heapq.merge(left_run, right_run))


def merge_sort(values: MutableSequence[int], left: int, right: int) -> None:
    """Sort ``values[left:right+1]`` in place with recursive merge sort."""
    if left < right:
        mid = left + (right - left) // 2
        merge_sort(values, left, mid)
        merge_sort(values, mid + 1, right)
        merge(values, left, mid, right)