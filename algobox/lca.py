"""Lowest common ancestor in a rooted tree by binary lifting."""

from __future__ import annotations

from collections.abc import Iterable


class LowestCommonAncestor:
    """Answer lowest-common-ancestor queries on a tree rooted at node 1.

    Nodes are labelled 1..n; the tree is given as its n - 1 edges.
    """

    def __init__(self, n: int, edges: Iterable[tuple[int, int]]) -> None:
        if n < 1:
            raise ValueError("a tree needs at least one node")
        edge_list = list(edges)
        if len(edge_list) != n - 1:
            raise ValueError(f"a tree of {n} nodes has {n - 1} edges, got {len(edge_list)}")
        self._n = n
        adjacency: list[list[int]] = [[] for _ in range(n)]
        for a, b in edge_list:
            a, b = self._index(a), self._index(b)
            adjacency[a].append(b)
            adjacency[b].append(a)

        parent = [-1] * n
        depth = [0] * n
        seen = [False] * n
        seen[0] = True
        stack = [0]
        while stack:
            node = stack.pop()
            for nxt in adjacency[node]:
                if not seen[nxt]:
                    seen[nxt] = True
                    parent[nxt] = node
                    depth[nxt] = depth[node] + 1
                    stack.append(nxt)
        if not all(seen):
            raise ValueError("edges do not connect every node into one tree")

        self._depth = depth
        self._up = [parent]
        for _ in range(1, max(1, n.bit_length())):
            previous = self._up[-1]
            self._up.append([previous[p] if p != -1 else -1 for p in previous])

    def _index(self, label: int) -> int:
        if not 1 <= label <= self._n:
            raise IndexError(f"node {label} is not in 1..{self._n}")
        return label - 1

    def level(self, node: int) -> int:
        """Depth of node below the root, which is at level 0."""
        return self._depth[self._index(node)]

    def query(self, u: int, v: int) -> int:
        """Return the label of the lowest common ancestor of u and v."""
        u, v = self._index(u), self._index(v)
        depth = self._depth
        if depth[v] > depth[u]:
            u, v = v, u
        distance = depth[u] - depth[v]
        for power, table in enumerate(self._up):
            if distance >> power & 1:
                u = table[u]
        if u == v:
            return u + 1
        for table in reversed(self._up):
            if table[u] != table[v]:
                u, v = table[u], table[v]
        return self._up[0][u] + 1