import operator
from itertools import accumulate

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algosuite.arrays import (
    build_array,
    build_stack_operations,
    buy_choco,
    can_be_increasing,
    check_arithmetic_subarrays,
    constrained_subset_sum,
    eliminate_maximum,
    find_array,
    find_lhs,
    find_max_consecutive_ones,
    find_special_integer,
    get_sum_absolute_differences,
    job_scheduling,
    max_coins,
    max_product,
    max_product_difference,
    maximum_score,
    sort_by_bits,
)


@given(st.integers(min_value=0, max_value=20), st.integers(min_value=0, max_value=20))
def test_find_max_consecutive_ones(a, b):
    assert find_max_consecutive_ones([1] * a + [0] + [1] * b) == max(a, b)


def test_find_max_consecutive_ones_none():
    assert find_max_consecutive_ones([0, 2, 0]) == 0


def test_find_lhs():
    assert find_lhs([1, 3, 2, 2, 5, 2, 3, 7]) == 5
    assert find_lhs([1, 1, 1, 1]) == 0


@given(st.lists(st.integers(min_value=-5, max_value=5), max_size=30))
def test_find_lhs_bounds(nums):
    result = find_lhs(nums)
    assert result == 0 or 2 <= result <= len(nums)


def test_find_special_integer():
    arr = [1, 2, 2, 6, 6, 6, 6, 7, 10]
    assert find_special_integer(arr) == arr[3]


def test_find_special_integer_fallback():
    arr = list(range(8))
    assert find_special_integer(arr) == len(arr) // 4


def test_constrained_subset_sum_example():
    assert constrained_subset_sum([10, 2, -10, 5, 20], 2) == 37


@given(st.lists(st.integers(min_value=-100, max_value=-1), min_size=1, max_size=20),
       st.integers(min_value=1, max_value=5))
def test_constrained_subset_sum_all_negative(nums, k):
    assert constrained_subset_sum(nums, k) == max(nums)


@given(st.lists(st.integers(min_value=0, max_value=100), min_size=1, max_size=20),
       st.integers(min_value=1, max_value=5))
def test_constrained_subset_sum_all_non_negative(nums, k):
    assert constrained_subset_sum(nums, k) == sum(nums)


def test_constrained_subset_sum_empty():
    with pytest.raises(ValueError):
        constrained_subset_sum([], 1)


def test_job_scheduling_example():
    assert job_scheduling([1, 2, 3, 3], [3, 4, 5, 6], [50, 10, 40, 70]) == 120


@given(st.lists(st.integers(min_value=1, max_value=100), min_size=1, max_size=10))
def test_job_scheduling_disjoint_jobs(profits):
    starts = [2 * i for i in range(len(profits))]
    ends = [s + 1 for s in starts]
    assert job_scheduling(starts, ends, profits) == sum(profits)


def test_job_scheduling_mismatch():
    with pytest.raises(ValueError):
        job_scheduling([1, 2], [3], [5, 6])


@given(st.lists(st.integers(min_value=0, max_value=10**4), max_size=30))
def test_sort_by_bits_properties(arr):
    result = sort_by_bits(arr)
    assert sorted(result) == sorted(arr)
    keys = [(bin(v).count("1"), v) for v in result]
    assert keys == sorted(keys)


def test_sort_by_bits_powers_of_two():
    arr = [8, 4, 2, 1]
    assert sort_by_bits(arr) == sorted(arr)


def test_build_stack_operations():
    assert build_stack_operations([1, 3], 3) == ["Push", "Push", "Pop", "Push"]
    assert build_stack_operations([1, 2], 4) == ["Push", "Push"]


@given(st.integers(min_value=1, max_value=20))
def test_build_stack_operations_full(n):
    target = list(range(1, n + 1))
    ops = build_stack_operations(target, n)
    assert ops == ["Push"] * n
    assert ops.count("Push") - ops.count("Pop") == len(target)


@given(st.lists(st.integers(min_value=1, max_value=20), min_size=2, max_size=10))
def test_max_product_permutation_invariant(nums):
    assert max_product(nums) == max_product(list(reversed(nums)))
    assert max_product(nums) == max_product(sorted(nums))


def test_max_product_short():
    assert max_product([7]) == 0


def test_max_coins():
    assert max_coins([2, 4, 1, 2, 7, 8]) == 9


@given(st.lists(st.integers(min_value=1, max_value=50), max_size=30))
def test_max_coins_bounded(piles):
    assert 0 <= max_coins(piles) <= sum(piles)


def test_check_arithmetic_subarrays():
    nums = [5, 1, 3, 7, 2, 9, 4]
    assert check_arithmetic_subarrays(nums, [0, 0], [2, 3]) == [True, True]
    assert check_arithmetic_subarrays(nums, [3, 4], [5, 6]) == [False, False]


def test_check_arithmetic_subarrays_single_element():
    with pytest.raises(ValueError):
        check_arithmetic_subarrays([1, 2, 3], [1], [1])


@given(st.lists(st.integers(min_value=0, max_value=10), min_size=1, max_size=10))
def test_sum_absolute_differences_constant(values):
    result = get_sum_absolute_differences([values[0]] * len(values))
    assert result == [0] * len(values)


@given(st.lists(st.integers(min_value=-50, max_value=50), max_size=15))
def test_sum_absolute_differences_mirror(values):
    nums = sorted(values)
    mirrored = [-x for x in reversed(nums)]
    assert get_sum_absolute_differences(mirrored) == list(reversed(get_sum_absolute_differences(nums)))


def test_maximum_score_example():
    assert maximum_score([1, 4, 3, 7, 4, 5], 3) == 15


@given(st.integers(min_value=1, max_value=100), st.integers(min_value=1, max_value=10))
def test_maximum_score_constant(c, n):
    assert maximum_score([c] * n, n // 2) == c * n


def test_maximum_score_bad_index():
    with pytest.raises(IndexError):
        maximum_score([1, 2], 2)


def test_can_be_increasing():
    assert can_be_increasing([1, 2, 10, 5, 7]) is True
    assert can_be_increasing([1, 2, 3]) is True
    assert can_be_increasing([2, 3, 1, 2]) is False
    assert can_be_increasing([1, 1, 1]) is False


def test_max_product_difference_example():
    assert max_product_difference([5, 6, 2, 7, 4]) == 34


@given(st.lists(st.integers(min_value=1, max_value=100), min_size=4, max_size=12))
def test_max_product_difference_order_invariant(nums):
    assert max_product_difference(nums) == max_product_difference(list(reversed(nums)))
    assert max_product_difference(nums) >= 0


def test_max_product_difference_too_short():
    with pytest.raises(ValueError):
        max_product_difference([3])


@given(st.permutations(list(range(8))))
def test_build_array_is_permutation(perm):
    assert sorted(build_array(perm)) == sorted(perm)


def test_build_array_involution():
    perm = [1, 0, 3, 2]
    assert build_array(perm) == sorted(perm)
    identity = list(range(5))
    assert build_array(identity) == identity


def test_eliminate_maximum():
    dist = [1, 3, 4]
    assert eliminate_maximum(dist, [1, 1, 1]) == len(dist)
    assert eliminate_maximum([1, 1, 2, 3], [1, 1, 1, 1]) == 1


@given(st.lists(st.tuples(st.integers(min_value=1, max_value=50),
                          st.integers(min_value=1, max_value=10)), max_size=15))
def test_eliminate_maximum_bounded(pairs):
    dist = [d for d, _ in pairs]
    speed = [s for _, s in pairs]
    assert 0 <= eliminate_maximum(dist, speed) <= len(pairs)


@given(st.lists(st.integers(min_value=0, max_value=10**6), max_size=20))
def test_find_array_round_trip(pref):
    assert list(accumulate(find_array(pref), operator.xor)) == pref


def test_buy_choco():
    money = 3
    assert buy_choco([1, 2, 2], money) == 0
    assert buy_choco([3, 2, 3], money) == money
    assert buy_choco([1], money) == money


@given(st.lists(st.integers(min_value=1, max_value=100), max_size=10),
       st.integers(min_value=1, max_value=200))
def test_buy_choco_bounds(prices, money):
    assert 0 <= buy_choco(prices, money) <= money