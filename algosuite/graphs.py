"""Graph-shaped reconstruction and scheduling routines."""

from __future__ import annotations

from collections import Counter, defaultdict, deque
from typing import Dict, List, Sequence


def minimum_time(n: int, relations: Sequence[Sequence[int]], time: Sequence[int]) -> int:
    """Months to finish all n courses given 1-based prerequisite pairs and course durations."""
    graph: Dict[int, List[int]] = defaultdict(list)
    in_degree = [0] * n
    for before, after in relations:
        graph[before - 1].append(after - 1)
        in_degree[after - 1] += 1

    finish = [0] * n
    ready = deque()
    for node, degree in enumerate(in_degree):
        if degree == 0:
            ready.append(node)
            finish[node] = time[node]

    while ready:
        node = ready.popleft()
        for neighbour in graph[node]:
            finish[neighbour] = max(finish[neighbour], finish[node] + time[neighbour])
            in_degree[neighbour] -= 1
            if in_degree[neighbour] == 0:
                ready.append(neighbour)

    return max(finish, default=0)


def restore_array(adjacent_pairs: Sequence[Sequence[int]]) -> List[int]:
    """Rebuild an array of distinct values from its unordered adjacent pairs."""
    if not adjacent_pairs:
        raise ValueError("adjacent_pairs must not be empty")
    neighbours: Dict[int, List[int]] = defaultdict(list)
    for a, b in adjacent_pairs:
        neighbours[a].append(b)
        neighbours[b].append(a)

    start = next((node for node, adjacent in neighbours.items() if len(adjacent) == 1), None)
    if start is None:
        raise ValueError("pairs do not form a path")

    result = [start]
    previous = None
    current = start
    for _ in adjacent_pairs:
        adjacent = neighbours[current]
        if adjacent[0] == previous:
            if len(adjacent) < 2:
                raise ValueError("pairs do not form a path")
            following = adjacent[1]
        else:
            following = adjacent[0]
        result.append(following)
        previous, current = current, following
    return result


def recover_array(n: int, sums: Sequence[int]) -> List[int]:
    """Recover n integers from the multiset of all 2**n of their subset sums."""
    if len(sums) != 2 ** n:
        raise ValueError("sums must hold exactly 2**n values")
    remaining = sorted(sums)
    result: List[int] = []
    for _ in range(n):
        diff = remaining[1] - remaining[0]
        pending: Counter = Counter()
        without: List[int] = []
        with_value: List[int] = []
        has_zero = False
        for value in remaining:
            if pending[value]:
                with_value.append(value)
                pending[value] -= 1
            else:
                without.append(value)
                pending[value + diff] += 1
                if value == 0:
                    has_zero = True
        if has_zero:
            result.append(diff)
            remaining = without
        else:
            result.append(-diff)
            remaining = with_value
    return result