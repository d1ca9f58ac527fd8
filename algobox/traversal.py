"""Graph traversals: breadth-first, depth-first and topological order."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable, Mapping, Sequence


class AdjacencyGraph:
    """A directed graph stored as adjacency lists.

    Edges are added with vertex labels numbered from 1; the breadth-first
    traversal works on vertex indices numbered from 0.
    """

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("vertex count must not be negative")
        self._adj: list[list[int]] = [[] for _ in range(vertices)]

    def _index(self, label: int) -> int:
        if not 1 <= label <= len(self._adj):
            raise IndexError(f"vertex {label} is not in 1..{len(self._adj)}")
        return label - 1

    def add_edge(self, src: int, dest: int) -> None:
        """Add a directed edge between two vertices labelled from 1."""
        self._adj[self._index(src)].append(self._index(dest))

    def adjacency(self) -> dict[int, list[int]]:
        """Map each vertex label to the labels of its successors, in insertion order."""
        return {i + 1: [d + 1 for d in dests] for i, dests in enumerate(self._adj)}

    def bfs(self, start: int) -> list[int]:
        """Breadth-first order from the zero-based vertex index start, as zero-based indices."""
        if not 0 <= start < len(self._adj):
            raise IndexError(f"vertex index {start} is not in 0..{len(self._adj) - 1}")
        visited = {start}
        queue = deque([start])
        order: list[int] = []
        while queue:
            node = queue.popleft()
            order.append(node)
            for nxt in self._adj[node]:
                if nxt not in visited:
                    visited.add(nxt)
                    queue.append(nxt)
        return order


def dfs_matrix(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Depth-first order over a square adjacency matrix, lower neighbours first."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= start < size:
        raise IndexError(f"vertex {start} is not in 0..{size - 1}")

    def neighbours(node: int):
        return (i for i, cell in enumerate(matrix[node]) if cell == 1)

    visited = [False] * size
    visited[start] = True
    order = [start]
    stack = [neighbours(start)]
    while stack:
        for nxt in stack[-1]:
            if not visited[nxt]:
                visited[nxt] = True
                order.append(nxt)
                stack.append(neighbours(nxt))
                break
        else:
            stack.pop()
    return order


class _Colour(enum.Enum):
    WHITE = 0
    GREY = 1
    BLACK = 2


def _successors(adjacency: Mapping[int, Iterable[int]] | Sequence[Iterable[int]], node: int):
    if isinstance(adjacency, Mapping):
        return adjacency.get(node, ())
    if 0 <= node < len(adjacency):
        return adjacency[node]
    return ()


def dfs_stack(
    adjacency: Mapping[int, Iterable[int]] | Sequence[Iterable[int]], start: int
) -> list[int]:
    """Depth-first order using an explicit stack and white/grey/black marks.

    adjacency maps a node to its successors, either as a mapping or as a
    sequence indexed by node; nodes missing from it have no successors.
    """
    colour: dict[int, _Colour] = {start: _Colour.GREY}
    stack = [start]
    order: list[int] = []
    while stack:
        node = stack.pop()
        if colour.get(node, _Colour.WHITE) is _Colour.GREY:
            order.append(node)
            for nxt in _successors(adjacency, node):
                stack.append(nxt)
                if colour.get(nxt, _Colour.WHITE) is not _Colour.BLACK:
                    colour[nxt] = _Colour.GREY
            colour[node] = _Colour.BLACK
    return order


def topological_sort(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Order vertices labelled 1..vertex_count so that every edge points forward.

    Vertices are explored in increasing order and the reversed post-order
    is returned.
    """
    graph: list[list[int]] = [[] for _ in range(vertex_count)]
    for src, dest in edges:
        for label in (src, dest):
            if not 1 <= label <= vertex_count:
                raise IndexError(f"vertex {label} is not in 1..{vertex_count}")
        graph[src - 1].append(dest - 1)

    visited = [False] * vertex_count
    post_order: list[int] = []
    for root in range(vertex_count):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(graph[root]))]
        while stack:
            node, successors = stack[-1]
            for nxt in successors:
                if not visited[nxt]:
                    visited[nxt] = True
                    stack.append((nxt, iter(graph[nxt])))
                    break
            else:
                stack.pop()
                post_order.append(node)
    return [node + 1 for node in reversed(post_order)]