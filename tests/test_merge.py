import random

import pytest

from sortbench.merge import merge, merge_sort


def test_merge_two_runs():
    values = [1, 4, 7, 2, 3, 9]
    merge(values, 0, 2, 5)
    assert values == sorted([1, 4, 7, 2, 3, 9])


def test_merge_leaves_outside_untouched():
    values = [99, 5, 8, 1, 6, -3]
    merge(values, 1, 2, 4)
    assert values[0] == 99
    assert values[5] == -3
    assert values[1:5] == sorted([5, 8, 1, 6])


def test_merge_with_empty_right_run():
    values = [1, 2, 3]
    merge(values, 0, 2, 2)
    assert values == [1, 2, 3]


@pytest.mark.parametrize("length", [0, 1, 2, 3, 10, 101, 500])
def test_merge_sort_matches_sorted(length):
    rng = random.Random(length)
    values = [rng.randint(-50, 50) for _ in range(length)]
    expected = sorted(values)
    merge_sort(values, 0, len(values) - 1)
    assert values == expected


def test_merge_sort_subrange():
    values = [9, 8, 7, 6, 5, 4]
    merge_sort(values, 1, 4)
    assert values[0] == 9
    assert values[5] == 4
    assert values[1:5] == sorted([8, 7, 6, 5])


def test_merge_sort_reversed_input():
    values = list(range(200, 0, -1))
    merge_sort(values, 0, len(values) - 1)
    assert values == list(range(1, 201))