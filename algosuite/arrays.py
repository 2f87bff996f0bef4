"""Routines over integer sequences."""

from __future__ import annotations

import heapq
from bisect import bisect_right
from collections import Counter
from fractions import Fraction
from itertools import groupby, pairwise
from typing import Iterable, List, Sequence


def find_max_consecutive_ones(nums: Iterable[int]) -> int:
    """Length of the longest run of 1s."""
    return max((sum(1 for _ in run) for value, run in groupby(nums) if value == 1), default=0)


def find_lhs(nums: Iterable[int]) -> int:
    """Length of the longest subsequence whose maximum and minimum differ by exactly one."""
    freq = Counter(nums)
    return max((count + freq[value + 1] for value, count in freq.items() if value + 1 in freq), default=0)


def find_special_integer(arr: Sequence[int]) -> int:
    """Value occurring in more than a quarter of arr; len(arr) // 4 if there is none."""
    quarter = len(arr) // 4
    for value, count in Counter(arr).items():
        if count > quarter:
            return value
    return quarter


def constrained_subset_sum(nums: Sequence[int], k: int) -> int:
    """Largest sum of a non-empty subsequence whose consecutive picks are at most k apart."""
    if not nums:
        raise ValueError("nums must not be empty")
    heap = [(-nums[0], 0)]
    best = nums[0]
    for index, value in enumerate(nums[1:], start=1):
        while index - heap[0][1] > k:
            heapq.heappop(heap)
        current = max(0, -heap[0][0]) + value
        best = max(best, current)
        heapq.heappush(heap, (-current, index))
    return best


def job_scheduling(start_time: Iterable[int], end_time: Iterable[int], profit: Iterable[int]) -> int:
    """Most profit from jobs that do not overlap in time."""
    jobs = sorted(zip(end_time, start_time, profit, strict=True))
    ends = [end for end, _, _ in jobs]
    best = [0]
    for index, (_, start, gain) in enumerate(jobs):
        previous = bisect_right(ends, start, 0, index)
        best.append(max(best[index], best[previous] + gain))
    return best[-1]


def _weight(value: int) -> int:
    return value.bit_count() if value > 0 else 0


def sort_by_bits(arr: Iterable[int]) -> List[int]:
    """Sort by number of set bits, then by value."""
    return sorted(arr, key=lambda value: (_weight(value), value))


def build_stack_operations(target: Iterable[int], n: int) -> List[str]:
    """Push and Pop operations over the stream 1..n that leave target on the stack."""
    operations: List[str] = []
    wanted = iter(target)
    next_wanted = next(wanted, None)
    for number in range(1, n + 1):
        if next_wanted is None:
            break
        operations.append("Push")
        if number == next_wanted:
            next_wanted = next(wanted, None)
        else:
            operations.append("Pop")
    return operations


def max_product(nums: Iterable[int]) -> int:
    """Largest (a - 1) * (b - 1) over the two largest elements; 0 for fewer than two."""
    largest = heapq.nlargest(2, nums)
    if len(largest) < 2:
        return 0
    return (largest[0] - 1) * (largest[1] - 1)


def max_coins(piles: Iterable[int]) -> int:
    """Coins collected taking the second largest of every chosen triple."""
    descending = sorted(piles, reverse=True)
    rounds = len(descending) // 3
    return sum(descending[1:2 * rounds:2])


def check_arithmetic_subarrays(nums: Sequence[int], l: Iterable[int], r: Iterable[int]) -> List[bool]:
    """For each range [l[i], r[i]], whether its elements can be rearranged into an arithmetic sequence."""
    result = []
    for low, high in zip(l, r, strict=True):
        window = sorted(nums[low:high + 1])
        if len(window) < 2:
            raise ValueError("each range must hold at least two elements")
        step = window[1] - window[0]
        result.append(all(b - a == step for a, b in pairwise(window)))
    return result


def get_sum_absolute_differences(nums: Sequence[int]) -> List[int]:
    """For a sorted sequence, each element's summed distance to all the others."""
    total = sum(nums)
    size = len(nums)
    left = 0
    result = []
    for index, value in enumerate(nums):
        right = total - left - value
        result.append(value * index - left + right - value * (size - index - 1))
        left += value
    return result


def maximum_score(nums: Sequence[int], k: int) -> int:
    """Best min(window) * len(window) over windows containing index k."""
    size = len(nums)
    if not 0 <= k < size:
        raise IndexError("k is out of range")
    best = low = nums[k]
    i = j = k
    while i > 0 or j < size - 1:
        if i == 0:
            j += 1
        elif j == size - 1:
            i -= 1
        elif nums[i - 1] < nums[j + 1]:
            j += 1
        else:
            i -= 1
        low = min(low, nums[i], nums[j])
        best = max(best, low * (j - i + 1))
    return best


def can_be_increasing(nums: Sequence[int]) -> bool:
    """Return True if removing at most one element leaves a strictly increasing sequence."""
    if not nums:
        raise ValueError("nums must not be empty")
    removed = False
    previous = nums[0]
    for index, value in enumerate(nums[1:], start=1):
        if value > previous:
            previous = value
            continue
        if removed:
            return False
        removed = True
        if index < 2 or nums[index - 2] < value:
            previous = value
        else:
            previous = nums[index - 1]
    return True


def max_product_difference(nums: Iterable[int]) -> int:
    """Product of the two largest minus product of the two smallest elements."""
    ordered = sorted(nums)
    if len(ordered) < 2:
        raise ValueError("nums must hold at least two elements")
    return ordered[-1] * ordered[-2] - ordered[0] * ordered[1]


def build_array(nums: Sequence[int]) -> List[int]:
    """Compose the permutation with itself: result[i] = nums[nums[i]]."""
    return [nums[index] for index in nums]


def eliminate_maximum(dist: Iterable[int], speed: Iterable[int]) -> int:
    """Monsters defeated, shooting one per minute, before any reaches the city."""
    arrivals = sorted(zip(dist, speed, strict=True), key=lambda pair: Fraction(*pair))
    for minute, (distance, pace) in enumerate(arrivals):
        if distance <= minute * pace:
            return minute
    return len(arrivals)


def find_array(pref: Sequence[int]) -> List[int]:
    """Recover the array whose running XOR is pref."""
    if not pref:
        return []
    return [pref[0]] + [a ^ b for a, b in pairwise(pref)]


def buy_choco(prices: Iterable[int], money: int) -> int:
    """Money left after buying the two cheapest chocolates, or all of it if unaffordable."""
    cheapest = heapq.nsmallest(2, prices)
    if len(cheapest) < 2:
        return money
    left = money - sum(cheapest)
    return left if left >= 0 else money