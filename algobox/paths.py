"""Shortest paths and minimum spanning trees."""

from __future__ import annotations

import heapq
from collections.abc import Iterable


class DisjointSet:
    """Union-find over the integers 0..size-1 with path halving."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))

    def find(self, item: int) -> int:
        """Return the representative of item's set."""
        if not 0 <= item < len(self._parent):
            raise IndexError(f"{item} is not in 0..{len(self._parent) - 1}")
        parent = self._parent
        while parent[item] != item:
            parent[item] = parent[parent[item]]
            item = parent[item]
        return item

    def union(self, x: int, y: int) -> bool:
        """Join the sets of x and y; return False if they were already one set."""
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False
        self._parent[root_x] = root_y
        return True


def dijkstra(
    node_count: int,
    edges: Iterable[tuple[int, int, int]],
    source: int,
    directed: bool = False,
) -> list[int | None]:
    """Shortest distances from source to nodes 1..node_count.

    edges holds (x, y, length) triples; unless directed, each edge runs both
    ways. Unreachable nodes get None.
    """
    graph: list[list[tuple[int, int]]] = [[] for _ in range(node_count + 1)]
    for x, y, length in edges:
        for node in (x, y):
            if not 1 <= node <= node_count:
                raise IndexError(f"node {node} is not in 1..{node_count}")
        graph[x].append((length, y))
        if not directed:
            graph[y].append((length, x))
    if not 1 <= source <= node_count:
        raise IndexError(f"source {source} is not in 1..{node_count}")

    distance: list[int | None] = [None] * (node_count + 1)
    distance[source] = 0
    heap = [(0, source)]
    while heap:
        dist, node = heapq.heappop(heap)
        if dist > distance[node]:
            continue
        for length, nxt in graph[node]:
            candidate = dist + length
            current = distance[nxt]
            if current is None or candidate < current:
                distance[nxt] = candidate
                heapq.heappush(heap, (candidate, nxt))
    return distance[1:]


def kruskal(node_count: int, edges: Iterable[tuple[int, int, int]]) -> int:
    """Total cost of a minimum spanning forest.

    edges holds (from, to, cost) triples over nodes 0..node_count; they are
    taken by cost, then by endpoints.
    """
    sets = DisjointSet(node_count + 1)
    total = 0
    for cost, x, y in sorted((cost, x, y) for x, y, cost in edges):
        if sets.union(x, y):
            total += cost
    return total