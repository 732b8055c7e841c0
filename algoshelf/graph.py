"""Adjacency-map graphs for contest-style graph algorithms."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Generic, NamedTuple, TypeVar

__all__ = ["DirectedGraph", "Edge", "WeightedGraph"]

T = TypeVar("T", bound=Hashable)


class DirectedGraph(Generic[T]):
    """Unweighted directed graph that also tracks each vertex's in-degree."""

    def __init__(self) -> None:
        self._adjacency: dict[T, set[T]] = {}
        self._incoming: dict[T, int] = {}

    @property
    def vertices(self) -> set[T]:
        """Every vertex that was inserted or appears in an edge."""
        return set(self._incoming)

    @property
    def incoming(self) -> dict[T, int]:
        """A copy of the in-degree of every vertex."""
        return dict(self._incoming)

    def connect(self, u: T, v: T) -> None:
        """Add the edge u -> v; adding an existing edge changes nothing."""
        self._incoming.setdefault(u, 0)
        self._incoming.setdefault(v, 0)
        targets = self._adjacency.setdefault(u, set())
        if v not in targets:
            targets.add(v)
            self._incoming[v] += 1

    def insert(self, u: T) -> None:
        """Add ``u`` as a vertex without any edges."""
        self._incoming.setdefault(u, 0)

    def disconnect(self, u: T, v: T) -> None:
        """Remove the edge u -> v; raise KeyError if there is no such edge."""
        targets = self._adjacency.get(u)
        if targets is None or v not in targets:
            raise KeyError((u, v))
        targets.remove(v)
        self._incoming[v] -= 1

    def __getitem__(self, u: T) -> list[T]:
        """The neighbours of ``u`` in ascending order (empty for an unknown vertex)."""
        return sorted(self._adjacency.get(u, ()))


class Edge(NamedTuple):
    """An outgoing weighted edge."""

    target: Hashable
    weight: int


class WeightedGraph(Generic[T]):
    """Directed graph with non-negative integer edge weights; parallel edges allowed."""

    def __init__(self) -> None:
        self._edges: dict[T, list[Edge]] = {}
        self.vertices: set[T] = set()

    def connect(self, u: T, v: T, weight: int = 0) -> None:
        """Add an edge u -> v with the given weight.

        Raises ValueError for a negative weight.
        """
        if weight < 0:
            raise ValueError(f"edge weight must be non-negative, got {weight!r}")
        self._edges.setdefault(u, []).append(Edge(v, weight))
        self.vertices.add(u)
        self.vertices.add(v)

    def disconnect(self, u: T, v: T, weight: int | None = None) -> None:
        """Remove the first edge u -> v, or the first with that exact weight.

        Raises KeyError if no matching edge exists.
        """
        edges = self._edges.get(u, [])
        for index, edge in enumerate(edges):
            if edge.target == v and (weight is None or edge.weight == weight):
                del edges[index]
                return
        raise KeyError((u, v) if weight is None else (u, v, weight))

    def __getitem__(self, u: T) -> list[Edge]:
        """The outgoing edges of ``u`` in insertion order."""
        return list(self._edges.get(u, ()))