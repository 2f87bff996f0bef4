from itertools import combinations

import pytest
from hypothesis import given, strategies as st

from algosuite.graphs import minimum_time, recover_array, restore_array


def _subset_sums(values):
    return sorted(
        sum(combo)
        for size in range(len(values) + 1)
        for combo in combinations(values, size)
    )


def test_minimum_time_example():
    assert minimum_time(3, [[1, 3], [2, 3]], [3, 2, 5]) == 8


@given(st.lists(st.integers(1, 20), min_size=1, max_size=8))
def test_minimum_time_independent_courses(time):
    assert minimum_time(len(time), [], time) == max(time)


@given(st.lists(st.integers(1, 20), min_size=1, max_size=8))
def test_minimum_time_chain(time):
    relations = [[i, i + 1] for i in range(1, len(time))]
    assert minimum_time(len(time), relations, time) == sum(time)


@given(st.lists(st.integers(-100, 100), min_size=2, max_size=10, unique=True))
def test_restore_array_forward_pairs(values):
    pairs = [[a, b] for a, b in zip(values, values[1:])]
    result = restore_array(pairs)
    assert result in (values, values[::-1])


@given(st.lists(st.integers(-100, 100), min_size=2, max_size=10, unique=True))
def test_restore_array_scrambled_pairs(values):
    pairs = [[b, a] for a, b in reversed(list(zip(values, values[1:])))]
    result = restore_array(pairs)
    assert result in (values, values[::-1])


def test_restore_array_empty():
    with pytest.raises(ValueError):
        restore_array([])


def test_restore_array_cycle():
    with pytest.raises(ValueError):
        restore_array([[1, 2], [2, 3], [3, 1]])


@given(st.lists(st.integers(-10, 10), min_size=1, max_size=4))
def test_recover_array_round_trip(values):
    sums = _subset_sums(values)
    recovered = recover_array(len(values), sums)
    assert len(recovered) == len(values)
    assert _subset_sums(recovered) == sums


def test_recover_array_wrong_size():
    with pytest.raises(ValueError):
        recover_array(2, [0, 1, 2])