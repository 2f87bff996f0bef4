"""Counting, enumeration and small number-theory routines."""

from __future__ import annotations

import math
from typing import Iterable, List, Sequence

MOD = 1_000_000_007


def combination_sum(candidates: Sequence[int], target: int) -> List[List[int]]:
    """All multisets of candidates (each usable repeatedly) summing to target."""
    values = list(candidates)
    if any(value <= 0 for value in values):
        raise ValueError("candidates must be positive")
    result: List[List[int]] = []
    chosen: List[int] = []

    def search(index: int, remaining: int) -> None:
        if index == len(values):
            if remaining == 0:
                result.append(list(chosen))
            return
        value = values[index]
        if value <= remaining:
            chosen.append(value)
            search(index, remaining - value)
            chosen.pop()
        search(index + 1, remaining)

    search(0, target)
    return result


def combination_sum_unique(candidates: Iterable[int], target: int) -> List[List[int]]:
    """Distinct combinations summing to target, each candidate used at most once."""
    values = sorted(candidates)
    result: List[List[int]] = []
    chosen: List[int] = []

    def search(start: int, remaining: int) -> None:
        if remaining == 0:
            result.append(list(chosen))
            return
        for i in range(start, len(values)):
            if i > start and values[i] == values[i - 1]:
                continue
            if values[i] > remaining:
                break
            chosen.append(values[i])
            search(i + 1, remaining - values[i])
            chosen.pop()

    search(0, target)
    return result


def subsets_with_dup(nums: Iterable[int]) -> List[List[int]]:
    """All distinct subsets of a multiset, each in sorted order."""
    values = sorted(nums)
    result: List[List[int]] = []
    chosen: List[int] = []

    def search(start: int) -> None:
        result.append(list(chosen))
        for i in range(start, len(values)):
            if i != start and values[i] == values[i - 1]:
                continue
            chosen.append(values[i])
            search(i + 1)
            chosen.pop()

    search(0)
    return result


def combination_sum_k(k: int, n: int) -> List[List[int]]:
    """All sets of k distinct digits 1..9 summing to n, in lexicographic order."""
    result: List[List[int]] = []
    chosen: List[int] = []

    def search(start: int, remaining: int) -> None:
        if remaining < 0 or len(chosen) > k:
            return
        if remaining == 0 and len(chosen) == k:
            result.append(list(chosen))
            return
        for digit in range(start, 10):
            chosen.append(digit)
            search(digit + 1, remaining - digit)
            chosen.pop()

    search(1, n)
    return result


def combination_sum_count(nums: Sequence[int], target: int) -> int:
    """Number of ordered sequences drawn from nums that sum to target."""
    if any(value <= 0 for value in nums):
        raise ValueError("nums must be positive")
    if target < 0:
        return 0
    ways = [1] + [0] * target
    for total in range(1, target + 1):
        ways[total] = sum(ways[total - value] for value in nums if value <= total)
    return ways[target]


def num_rolls_to_target(n: int, k: int, target: int) -> int:
    """Ways that n dice with k faces each can total target, modulo 1e9+7."""
    if target < 0:
        return 0
    ways = [1] + [0] * target
    for _ in range(n):
        ways = [
            sum(ways[total - face] for face in range(1, min(k, total) + 1)) % MOD
            for total in range(target + 1)
        ]
    return ways[target] % MOD


def pascal_row(row_index: int) -> List[int]:
    """Row ``row_index`` (zero based) of Pascal's triangle."""
    row = [1]
    for _ in range(row_index):
        row = [a + b for a, b in zip([0, *row], [*row, 0])]
    return row


def count_vowel_permutation(n: int) -> int:
    """Strings of length n over vowels obeying the successor rules, modulo 1e9+7."""
    a = e = i = o = u = 1
    for _ in range(n - 1):
        a, e, i, o, u = e, (a + i) % MOD, (a + e + o + u) % MOD, (i + u) % MOD, a
    return (a + e + i + o + u) % MOD


def num_factored_binary_trees(arr: Iterable[int]) -> int:
    """Binary trees whose non-leaf nodes equal the product of their children, modulo 1e9+7."""
    values = sorted(arr)
    ways: dict = {}
    total = 0
    for x in values:
        count = 1
        limit = math.isqrt(x)
        for left in values:
            if left > limit:
                break
            if x % left:
                continue
            right = x // left
            if right in ways:
                count = (count + ways[left] * ways[right] * (1 if left == right else 2)) % MOD
        ways[x] = count
        total = (total + count) % MOD
    return total


def poor_pigs(buckets: int, minutes_to_die: int, minutes_to_test: int) -> int:
    """Fewest pigs needed to find the poisoned bucket in the time allowed."""
    states = minutes_to_test // minutes_to_die + 1
    pigs = 0
    reach = 1
    while reach < buckets:
        reach *= states
        pigs += 1
    return pigs


def kth_grammar(n: int, k: int) -> int:
    """The k-th symbol (1 based) of row n of the 0 -> 01, 1 -> 10 grammar."""
    symbol = 0
    while n > 1:
        if k % 2 == 0:
            symbol ^= 1
            k //= 2
        else:
            k = (k + 1) // 2
        n -= 1
    return symbol


def is_power_of_four(n: int) -> bool:
    """Return True if n is 4 raised to a non-negative integer power."""
    return n > 0 and n & (n - 1) == 0 and (n.bit_length() - 1) % 2 == 0


def number_of_matches(n: int) -> int:
    """Matches played in a knockout tournament of n teams."""
    return n - 1


def total_money(n: int) -> int:
    """Money saved after n days, depositing one more each day and restarting weekly one higher."""
    weeks, days = divmod(n, 7)
    total = weeks * (weeks - 1) // 2 * 7
    total += weeks * 28
    total += days * (days + 1) // 2 + weeks * days
    return total