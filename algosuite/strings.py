"""String scanning, matching and rearranging routines."""

from __future__ import annotations

from collections import Counter
from itertools import groupby
from operator import itemgetter
from typing import Iterable, List, Sequence

from .combinatorics import MOD

_VOWELS = frozenset("aeiouAEIOU")
_REMOVABLE = {"B": "A", "D": "C"}


def longest_palindrome(s: str) -> str:
    """Longest palindromic substring; on a tie the leftmost one wins."""
    n = len(s)
    best_start, best_len = 0, 0
    for center in range(2 * n - 1):
        left = center // 2
        right = left + center % 2
        while left >= 0 and right < n and s[left] == s[right]:
            left -= 1
            right += 1
        start, length = left + 1, right - left - 1
        if length > best_len or (length == best_len and start < best_start):
            best_start, best_len = start, length
    return s[best_start:best_start + best_len]


def _typed(text: str) -> List[str]:
    kept: List[str] = []
    for ch in text:
        if ch == "#":
            if kept:
                kept.pop()
        else:
            kept.append(ch)
    return kept


def backspace_compare(s: str, t: str) -> bool:
    """Return True if both strings type the same text when '#' is a backspace."""
    return _typed(s) == _typed(t)


def min_steps_to_anagram(s: str, t: str) -> int:
    """Characters of t to replace so that t becomes an anagram of s."""
    if len(s) != len(t):
        raise ValueError("strings must have the same length")
    return sum((Counter(t) - Counter(s)).values())


def max_length_between_equal_characters(s: str) -> int:
    """Longest substring lying between two equal characters, or -1 if none repeat."""
    first_seen = {}
    best = -1
    for index, ch in enumerate(s):
        if ch in first_seen:
            best = max(best, index - first_seen[ch] - 1)
        else:
            first_seen[ch] = index
    return best


def close_strings(word1: str, word2: str) -> bool:
    """Return True if one word can become the other by swapping positions and letter roles."""
    counts1, counts2 = Counter(word1), Counter(word2)
    return counts1.keys() == counts2.keys() and sorted(counts1.values()) == sorted(counts2.values())


def count_homogenous(s: str) -> int:
    """Number of substrings made of a single repeated character, modulo 1e9+7."""
    total = 0
    for _, run in groupby(s):
        length = sum(1 for _ in run)
        total += length * (length + 1) // 2
    return total % MOD


def merge_alternately(word1: str, word2: str) -> str:
    """Interleave the two words letter by letter, then append what remains."""
    shorter = min(len(word1), len(word2))
    interleaved = "".join(a + b for a, b in zip(word1, word2))
    return interleaved + word1[shorter:] + word2[shorter:]


def largest_odd_number(num: str) -> str:
    """Largest odd number that is a prefix of the digit string, or '' if none."""
    return num.rstrip("02468")


def is_circular_sentence(sentence: str) -> bool:
    """Return True if each word ends with the letter the next one starts with, wrapping around."""
    if not sentence:
        raise ValueError("sentence must not be empty")
    last = len(sentence) - 1
    for index, ch in enumerate(sentence):
        if ch != " ":
            continue
        if index == 0 or index == last or sentence[index - 1] != sentence[index + 1]:
            return False
    return sentence[0] == sentence[-1]


def min_length_after_removals(s: str) -> int:
    """Length left after repeatedly deleting 'AB' and 'CD' substrings."""
    stack: List[str] = []
    for ch in s:
        if stack and _REMOVABLE.get(ch) == stack[-1]:
            stack.pop()
        else:
            stack.append(ch)
    return len(stack)


def sort_vowels(s: str) -> str:
    """Sort the vowels of s by code point, leaving consonants in place."""
    ordered = iter(sorted(ch for ch in s if ch in _VOWELS))
    return "".join(next(ordered) if ch in _VOWELS else ch for ch in s)


def min_changes_beautiful(s: str) -> int:
    """Changes needed so that every aligned pair of characters is equal."""
    return sum(a != b for a, b in zip(s[::2], s[1::2]))


def minimum_steps(s: str) -> int:
    """Adjacent swaps needed to move every '1' to the right of every '0'."""
    swaps = 0
    black = 0
    for ch in s:
        if ch == "0":
            swaps += black
        else:
            black += 1
    return swaps


def min_cost_colorful(colors: str, needed_time: Sequence[int]) -> int:
    """Least total time to remove balloons so no two neighbours share a colour."""
    if len(colors) != len(needed_time):
        raise ValueError("colors and needed_time must have the same length")
    total = 0
    for _, group in groupby(zip(colors, needed_time), key=itemgetter(0)):
        times = [time for _, time in group]
        total += sum(times) - max(times)
    return total


def longest_common_prefix(arr1: Iterable[int], arr2: Iterable[int]) -> int:
    """Longest decimal prefix shared by a number of arr1 and a number of arr2."""
    prefixes = set()
    for number in arr1:
        text = str(number)
        prefixes.update(text[:end] for end in range(1, len(text) + 1))
    best = 0
    for number in arr2:
        text = str(number)
        for end in range(len(text), best, -1):
            if text[:end] in prefixes:
                best = end
                break
    return best