"""Graph searches: course ordering by in-degree and cheapest bounded-stop routes."""

from __future__ import annotations

import heapq
import math
from collections import deque
from typing import Iterable, Sequence


def _kahn_order(num_courses: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    adjacency: list[list[int]] = [[] for _ in range(num_courses)]
    in_degree = [0] * num_courses
    for src, dst in edges:
        adjacency[src].append(dst)
        in_degree[dst] += 1
    queue = deque(node for node, degree in enumerate(in_degree) if degree == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adjacency[node]:
            in_degree[neighbour] -= 1
            if in_degree[neighbour] == 0:
                queue.append(neighbour)
    return order


def can_finish(num_courses: int, prerequisites: Sequence[Sequence[int]]) -> bool:
    """Report whether the prerequisite pairs ``[course, required]`` contain no cycle."""
    order = _kahn_order(num_courses, ((course, required) for course, required in prerequisites))
    return len(order) == num_courses


def find_order(num_courses: int, prerequisites: Sequence[Sequence[int]]) -> list[int]:
    """Return an order taking each course after its prerequisites, or [] if none exists."""
    order = _kahn_order(num_courses, ((required, course) for course, required in prerequisites))
    return order if len(order) == num_courses else []


def find_cheapest_price(
    n: int, flights: Sequence[Sequence[int]], src: int, dst: int, k: int
) -> int:
    """Return the cheapest fare from ``src`` to ``dst`` with at most ``k`` stops, or -1."""
    graph: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for origin, target, price in flights:
        graph[origin].append((target, price))

    fewest_stops = [math.inf] * n
    heap = [(0, src, 0)]
    while heap:
        cost, city, stops = heapq.heappop(heap)
        if city == dst:
            return cost
        if stops > k or fewest_stops[city] < stops:
            continue
        fewest_stops[city] = stops
        for target, price in graph[city]:
            heapq.heappush(heap, (cost + price, target, stops + 1))
    return -1