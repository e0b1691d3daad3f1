import random

import pytest

from sortbench.merge_insert import insertion_sort, merge, merge_insert_sort


@pytest.mark.parametrize("length", [0, 1, 2, 5, 40])
def test_insertion_sort(length):
    rng = random.Random(length + 7)
    values = [rng.randint(0, 20) for _ in range(length)]
    expected = sorted(values)
    insertion_sort(values)
    assert values == expected


def test_insertion_sort_reversed():
    values = [5, 4, 3, 2, 1]
    insertion_sort(values)
    assert values == [1, 2, 3, 4, 5]


def test_merge_runs():
    values = [2, 5, 1, 3]
    merge(values, 0, 1, 3)
    assert values == sorted([2, 5, 1, 3])


@pytest.mark.parametrize("threshold", [-1, 0, 1, 2, 15, 50, 1000])
@pytest.mark.parametrize("length", [0, 1, 7, 64, 333])
def test_merge_insert_sort_matches_sorted(threshold, length):
    rng = random.Random(threshold * 1000 + length)
    values = [rng.randint(0, 6000) for _ in range(length)]
    expected = sorted(values)
    merge_insert_sort(values, 0, len(values) - 1, threshold)
    assert values == expected


def test_merge_insert_sort_subrange():
    values = [100, 3, 2, 1, 0, -100]
    merge_insert_sort(values, 1, 4, 2)
    assert values[0] == 100
    assert values[5] == -100
    assert values[1:5] == sorted([3, 2, 1, 0])