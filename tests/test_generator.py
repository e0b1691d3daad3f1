import pytest

from sortbench.generator import (
    MAX_VALUE,
    ArrayGenerator,
    long_sizes,
    standard_sizes,
)


def test_standard_sizes_bounds():
    sizes = list(standard_sizes())
    assert len(sizes) == 1000
    assert sizes[0] == 100
    assert sizes[-1] == 100000


def test_long_sizes_bounds():
    sizes = list(long_sizes())
    assert sizes[0] == 10000
    assert sizes[-1] == 100000
    assert all(b - a == 100 for a, b in zip(sizes, sizes[1:]))


def test_seed_is_reproducible():
    first = ArrayGenerator(seed=42)
    second = ArrayGenerator(seed=42)
    assert first.seed == 42
    assert first.random_array(500) == second.random_array(500)
    assert first.almost_sorted_array(800) == second.almost_sorted_array(800)


def test_random_array_values_in_range():
    gen = ArrayGenerator(seed=1)
    values = gen.random_array(1000)
    assert len(values) == 1000
    assert all(0 <= v <= MAX_VALUE for v in values)


def test_random_array_full_pool_and_empty():
    gen = ArrayGenerator(seed=3)
    assert len(gen.random_array(100000)) == 100000
    assert gen.random_array(0) == []


@pytest.mark.parametrize("length", [-1, 100001])
def test_random_array_rejects_bad_length(length):
    gen = ArrayGenerator(seed=3)
    with pytest.raises(ValueError):
        gen.random_array(length)


def test_reversed_array():
    assert ArrayGenerator.reversed_array(5) == [4, 3, 2, 1, 0]
    assert ArrayGenerator.reversed_array(0) == []


def test_almost_sorted_short_is_sorted():
    gen = ArrayGenerator(seed=5)
    assert gen.almost_sorted_array(79) == list(range(79))


def test_almost_sorted_is_permutation_with_few_displacements():
    gen = ArrayGenerator(seed=9)
    length = 8000
    values = gen.almost_sorted_array(length)
    assert sorted(values) == list(range(length))
    displaced = sum(1 for i, v in enumerate(values) if i != v)
    assert displaced <= 2 * (length // 80)


def test_batch_helpers_follow_sizes():
    gen = ArrayGenerator(seed=11)
    sizes = [10, 20, 30]
    assert [len(a) for a in gen.random_arrays(sizes)] == sizes
    assert [len(a) for a in gen.almost_sorted_arrays(sizes)] == sizes
    assert ArrayGenerator.reversed_arrays(sizes) == [
        ArrayGenerator.reversed_array(s) for s in sizes
    ]