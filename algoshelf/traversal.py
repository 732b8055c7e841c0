"""Breadth-first search, depth-first path finding and Dijkstra's algorithm."""

from __future__ import annotations

import heapq
import itertools
from collections import deque
from collections.abc import Hashable, Iterable, Iterator, Sequence
from typing import Any, Protocol

from algoshelf.graph import WeightedGraph

__all__ = ["ListGraph", "bfs", "dfs_path", "dijkstra"]


class _Neighbours(Protocol):
    def __getitem__(self, vertex: Any) -> Iterable[Any]: ...


def bfs(graph: _Neighbours, source: Hashable) -> Iterator[Hashable]:
    """Yield the vertices reachable from ``source`` in breadth-first order.

    ``graph[v]`` must give the neighbours of ``v``; they are visited in the
    order it returns them.
    """
    visited = {source}
    queue = deque([source])
    while queue:
        vertex = queue.popleft()
        yield vertex
        for neighbour in graph[vertex]:
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)


class ListGraph:
    """Directed graph on the vertices 0 .. n-1 stored as adjacency lists."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must be non-negative")
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise IndexError(f"vertex {vertex} out of range 0..{len(self._adjacency) - 1}")

    def add_edge(self, v: int, w: int) -> None:
        """Add the edge v -> w."""
        self._check(v)
        self._check(w)
        self._adjacency[v].append(w)

    def bfs(self, source: int) -> list[int]:
        """Return the breadth-first visiting order from ``source``."""
        self._check(source)
        return list(bfs(self._adjacency, source))


def dfs_path(edges: Sequence[Sequence[int]], start: int, end: int) -> list[int] | None:
    """Find a path from ``start`` to ``end`` by depth-first search.

    ``edges`` is an n x n adjacency matrix; a truthy entry ``edges[i][j]`` means
    i and j are joined. Neighbours are tried in ascending index order. Returns
    the path from ``start`` to ``end`` inclusive, or None if ``end`` is unreachable.
    """
    size = len(edges)
    for vertex in (start, end):
        if not 0 <= vertex < size:
            raise IndexError(f"vertex {vertex} out of range 0..{size - 1}")
    if start == end:
        return [start]
    path = [start]
    visited = {start}
    frontier = [iter(range(size))]
    while frontier:
        here = path[-1]
        for candidate in frontier[-1]:
            if candidate not in visited and edges[here][candidate]:
                if candidate == end:
                    return [*path, candidate]
                visited.add(candidate)
                path.append(candidate)
                frontier.append(iter(range(size)))
                break
        else:
            frontier.pop()
            path.pop()
    return None


def dijkstra(graph: WeightedGraph, source: Hashable) -> dict[Hashable, Hashable]:
    """Compute shortest paths from ``source``.

    Returns a mapping from every reachable vertex other than ``source`` to its
    predecessor on a shortest path.
    """
    distance: dict[Hashable, int] = {source: 0}
    previous: dict[Hashable, Hashable] = {}
    order = itertools.count()
    queue: list[tuple[int, int, Hashable]] = [(0, next(order), source)]
    while queue:
        current, _, vertex = heapq.heappop(queue)
        if current > distance[vertex]:
            continue
        for target, weight in graph[vertex]:
            candidate = current + weight
            if target not in distance or candidate < distance[target]:
                distance[target] = candidate
                previous[target] = vertex
                heapq.heappush(queue, (candidate, next(order), target))
    return previous