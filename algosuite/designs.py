"""Small stateful data structures."""

from __future__ import annotations

import heapq
import math
from collections import deque
from itertools import accumulate
from typing import Dict, Iterable, Iterator, List, Sequence, Tuple, Union

NestedList = List[Union[int, "NestedList"]]


class NestedIterator:
    """Iterate over the integers of an arbitrarily nested list, depth first."""

    def __init__(self, nested_list: Sequence) -> None:
        self._stack = list(reversed(nested_list))

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        if not self.has_next():
            raise StopIteration
        return self._stack.pop()

    def has_next(self) -> bool:
        """Return True if another integer remains."""
        while self._stack:
            top = self._stack[-1]
            if isinstance(top, int):
                return True
            self._stack.pop()
            self._stack.extend(reversed(top))
        return False


class SeatManager:
    """Hand out the lowest-numbered free seat among seats 1..n."""

    def __init__(self, n: int) -> None:
        self._free = list(range(1, n + 1))

    def reserve(self) -> int:
        """Reserve and return the smallest free seat number."""
        if not self._free:
            raise IndexError("no seats available")
        return heapq.heappop(self._free)

    def unreserve(self, seat_number: int) -> None:
        """Make a seat available again."""
        heapq.heappush(self._free, seat_number)


class FoodRatings:
    """Track food ratings and report the best rated food of each cuisine."""

    def __init__(self, foods: Iterable[str], cuisines: Iterable[str], ratings: Iterable[int]) -> None:
        self._rating: Dict[str, int] = {}
        self._cuisine: Dict[str, str] = {}
        self._ranked: Dict[str, List[Tuple[int, str]]] = {}
        for food, cuisine, rating in zip(foods, cuisines, ratings, strict=True):
            self._rating[food] = rating
            self._cuisine[food] = cuisine
            heapq.heappush(self._ranked.setdefault(cuisine, []), (-rating, food))

    def change_rating(self, food: str, new_rating: int) -> None:
        """Set a new rating for a known food."""
        cuisine = self._cuisine[food]
        self._rating[food] = new_rating
        heapq.heappush(self._ranked[cuisine], (-new_rating, food))

    def highest_rated(self, cuisine: str) -> str:
        """Best rated food of the cuisine; ties go to the lexicographically smallest name."""
        ranked = self._ranked[cuisine]
        while -ranked[0][0] != self._rating[ranked[0][1]]:
            heapq.heappop(ranked)
        return ranked[0][1]


class Graph:
    """Directed weighted graph answering shortest-path queries."""

    def __init__(self, n: int, edges: Iterable[Sequence[int]]) -> None:
        self._adjacent: List[List[Tuple[int, int]]] = [[] for _ in range(n)]
        for edge in edges:
            self.add_edge(edge)

    def add_edge(self, edge: Sequence[int]) -> None:
        """Add an edge given as (from, to, cost)."""
        source, target, cost = edge
        self._adjacent[source].append((target, cost))

    def shortest_path(self, node1: int, node2: int) -> int:
        """Least total cost from node1 to node2, or -1 if node2 cannot be reached."""
        best = [math.inf] * len(self._adjacent)
        best[node1] = 0
        queue = [(0, node1)]
        while queue:
            cost, node = heapq.heappop(queue)
            if cost > best[node]:
                continue
            if node == node2:
                return cost
            for neighbour, step in self._adjacent[node]:
                candidate = cost + step
                if candidate < best[neighbour]:
                    best[neighbour] = candidate
                    heapq.heappush(queue, (candidate, neighbour))
        return -1


class CalendarTwo:
    """Calendar accepting bookings unless they would cause a triple overlap."""

    def __init__(self) -> None:
        self._delta: Dict[int, int] = {}

    def _shift(self, start: int, end: int, amount: int) -> None:
        self._delta[start] = self._delta.get(start, 0) + amount
        self._delta[end] = self._delta.get(end, 0) - amount

    def book(self, start: int, end: int) -> bool:
        """Book the half-open interval [start, end) if no point becomes triple booked."""
        self._shift(start, end, 1)
        active = accumulate(self._delta[point] for point in sorted(self._delta))
        if any(count > 2 for count in active):
            self._shift(start, end, -1)
            return False
        return True


class CircularDeque:
    """Double-ended queue with a fixed capacity."""

    def __init__(self, k: int) -> None:
        if k < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = k
        self._items: deque = deque()

    def __len__(self) -> int:
        return len(self._items)

    def insert_front(self, value: int) -> bool:
        """Add at the front; False if full."""
        if self.is_full():
            return False
        self._items.appendleft(value)
        return True

    def insert_last(self, value: int) -> bool:
        """Add at the back; False if full."""
        if self.is_full():
            return False
        self._items.append(value)
        return True

    def delete_front(self) -> bool:
        """Remove from the front; False if empty."""
        if self.is_empty():
            return False
        self._items.popleft()
        return True

    def delete_last(self) -> bool:
        """Remove from the back; False if empty."""
        if self.is_empty():
            return False
        self._items.pop()
        return True

    def front(self) -> int:
        """First item; raises IndexError if empty."""
        if self.is_empty():
            raise IndexError("deque is empty")
        return self._items[0]

    def rear(self) -> int:
        """Last item; raises IndexError if empty."""
        if self.is_empty():
            raise IndexError("deque is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return True if no items are held."""
        return not self._items

    def is_full(self) -> bool:
        """Return True if the deque is at capacity."""
        return len(self._items) == self._capacity