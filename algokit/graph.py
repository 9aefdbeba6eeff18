"""Adjacency-matrix graph with searches, spanning tree, ordering and shortest paths."""

from __future__ import annotations

import math
from collections import deque
from typing import Hashable

__all__ = ["Graph", "MAX_VERTICES"]

MAX_VERTICES = 20
_LINK = 1


class Graph:
    """Graph of labelled vertices stored in an adjacency matrix.

    Edges are undirected unless ``directed`` is set. Searches start at the
    first vertex added.
    """

    def __init__(self, max_vertices: int = MAX_VERTICES, directed: bool = False) -> None:
        if max_vertices < 0:
            raise ValueError(f"max_vertices must be non-negative, got {max_vertices}")
        self.max_vertices = max_vertices
        self.directed = directed
        self.labels: list[Hashable] = []
        self._adjacency = [[0] * max_vertices for _ in range(max_vertices)]

    def __len__(self) -> int:
        return len(self.labels)

    def add_vertex(self, label: Hashable) -> int:
        """Add a vertex and return its index."""
        if len(self.labels) >= self.max_vertices:
            raise OverflowError(f"graph holds at most {self.max_vertices} vertices")
        self.labels.append(label)
        return len(self.labels) - 1

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self.labels):
            raise IndexError(f"vertex {index} out of range")

    def add_edge(self, start: int, end: int) -> None:
        """Link ``start`` to ``end`` (and back, when undirected)."""
        self._check(start)
        self._check(end)
        self._adjacency[start][end] = _LINK
        if not self.directed:
            self._adjacency[end][start] = _LINK

    def _unvisited_neighbour(self, vertex: int, visited: set[int]) -> int | None:
        row = self._adjacency[vertex]
        return next(
            (j for j in range(len(self.labels)) if row[j] == _LINK and j not in visited),
            None,
        )

    def dfs(self) -> list[Hashable]:
        """Labels in depth-first visiting order from the first vertex."""
        if not self.labels:
            return []
        visited = {0}
        order = [self.labels[0]]
        stack = [0]
        while stack:
            following = self._unvisited_neighbour(stack[-1], visited)
            if following is None:
                stack.pop()
            else:
                visited.add(following)
                order.append(self.labels[following])
                stack.append(following)
        return order

    def bfs(self) -> list[Hashable]:
        """Labels in breadth-first visiting order from the first vertex."""
        if not self.labels:
            return []
        visited = {0}
        order = [self.labels[0]]
        queue = deque([0])
        while queue:
            current = queue.popleft()
            while (following := self._unvisited_neighbour(current, visited)) is not None:
                visited.add(following)
                order.append(self.labels[following])
                queue.append(following)
        return order

    def mst(self) -> list[tuple[Hashable, Hashable]]:
        """Edges of a depth-first spanning tree as ``(from, to)`` label pairs."""
        if not self.labels:
            return []
        visited = {0}
        edges: list[tuple[Hashable, Hashable]] = []
        stack = [0]
        while stack:
            source = stack[-1]
            target = self._unvisited_neighbour(source, visited)
            if target is None:
                stack.pop()
            else:
                visited.add(target)
                stack.append(target)
                edges.append((self.labels[source], self.labels[target]))
        return edges

    def topological_sort(self) -> list[Hashable]:
        """Labels ordered so every edge points forward; raises on a cycle.

        Repeatedly takes a vertex with no edges to the remaining vertices
        and places it last. The graph itself is not changed.
        """
        remaining = list(range(len(self.labels)))
        ordered: list[Hashable] = []
        while remaining:
            sink = next(
                (
                    row
                    for row in remaining
                    if not any(self._adjacency[row][col] for col in remaining)
                ),
                None,
            )
            if sink is None:
                raise ValueError("graph has cycles")
            ordered.append(self.labels[sink])
            remaining.remove(sink)
        ordered.reverse()
        return ordered

    def shortest_paths(self) -> tuple[list[list[float]], list[list[int]]]:
        """All-pairs hop counts and predecessors by Floyd-Warshall.

        Returns ``(distance, predecessor)``: ``distance[i][j]`` is the number
        of edges on a shortest path (``math.inf`` when unreachable, 0 for
        ``i == j``) and ``predecessor[i][j]`` is the vertex before ``j`` on
        that path, or -1.
        """
        count = len(self.labels)
        distance: list[list[float]] = [[math.inf] * count for _ in range(count)]
        predecessor = [[-1] * count for _ in range(count)]
        for i in range(count):
            for j in range(count):
                if i == j:
                    distance[i][j] = 0
                elif self._adjacency[i][j]:
                    distance[i][j] = self._adjacency[i][j]
                    predecessor[i][j] = i
        for k in range(count):
            for i in range(count):
                for j in range(count):
                    through = distance[i][k] + distance[k][j]
                    if through < distance[i][j]:
                        distance[i][j] = through
                        predecessor[i][j] = predecessor[k][j]
        return distance, predecessor