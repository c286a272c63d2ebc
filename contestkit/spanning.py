"""Minimum spanning trees with Kruskal's algorithm and a union-find forest."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from itertools import combinations
from typing import Any


class RoadKind(Enum):
    """The kind of road an edge stands for."""

    RAILWAY = "railway"
    HIGHWAY = "highway"


@dataclass(frozen=True)
class Edge:
    """A weighted undirected edge between vertices ``u`` and ``v``."""

    u: int
    v: int
    weight: float
    kind: RoadKind | None = None

    def other(self, vertex: int) -> int:
        """The endpoint of the edge that is not ``vertex``."""
        return self.v if vertex == self.u else self.u


class UnionFind:
    """Disjoint sets over ``0 .. size - 1`` with path compression."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("a union-find cannot have a negative size")
        self._parent = list(range(size))
        self.component_count = size

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, p: int) -> int:
        """The representative of the set holding ``p``."""
        if not 0 <= p < len(self._parent):
            raise ValueError(f"element {p} is outside 0..{len(self._parent) - 1}")
        root = p
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[p] != root:
            self._parent[p], p = root, self._parent[p]
        return root

    def union(self, p: int, q: int) -> bool:
        """Merge the sets of ``p`` and ``q``; False if they were already one."""
        root_p = self.find(p)
        root_q = self.find(q)
        if root_p == root_q:
            return False
        self._parent[root_p] = root_q
        self.component_count -= 1
        return True

    def connected(self, p: int, q: int) -> bool:
        """Whether ``p`` and ``q`` lie in the same set."""
        return self.find(p) == self.find(q)


def _by_weight(edge: Edge) -> Any:
    return edge.weight


def kruskal(
    vertex_count: int,
    edges: Iterable[Edge],
    key: Callable[[Edge], Any] | None = None,
) -> list[Edge]:
    """Edges of a spanning forest, taken greedily in ``key`` order.

    ``key`` defaults to the edge weight, giving a minimum spanning tree.
    Edges are chosen in the order they were taken.
    """
    ordered = list(edges)
    for edge in ordered:
        for vertex in (edge.u, edge.v):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"edge {edge} names a vertex outside 0..{vertex_count - 1}")
    ordered.sort(key=key or _by_weight)

    forest = UnionFind(vertex_count)
    tree: list[Edge] = []
    for edge in ordered:
        if len(tree) >= vertex_count - 1:
            break
        if forest.union(edge.u, edge.v):
            tree.append(edge)
    return tree


def mst_weight(vertex_count: int, edges: Iterable[Edge]) -> float:
    """Total weight of a minimum spanning forest."""
    return sum(edge.weight for edge in kruskal(vertex_count, edges))


def _numbered(
    roads: Iterable[tuple[int, int, float]], kind: RoadKind | None = None
) -> list[Edge]:
    return [Edge(u - 1, v - 1, weight, kind) for u, v, weight in roads]


def _cup_order(edge: Edge) -> tuple[bool, float]:
    return (edge.kind is not RoadKind.RAILWAY, edge.weight)


def cup_cost(
    cities: int,
    railways: Iterable[tuple[int, int, float]],
    highways: Iterable[tuple[int, int, float]],
) -> float:
    """Cost of joining every city, using every useful railway before any highway.

    Cities are numbered from 1; each road is ``(city, city, cost)``.
    """
    edges = _numbered(railways, RoadKind.RAILWAY) + _numbered(highways, RoadKind.HIGHWAY)
    return sum(edge.weight for edge in kruskal(cities, edges, key=_cup_order))


def freight_cost(colonies: int, roads: Iterable[tuple[int, int, float]]) -> float:
    """Cheapest set of roads joining the colonies.

    Colonies are numbered from 0; each road is ``(colony, colony, cost)``.
    Roads from a colony to itself are ignored.
    """
    edges = [Edge(p, q, cost) for p, q, cost in roads if p != q]
    return mst_weight(colonies, edges)


def map_reduction_cost(cities: int, roads: Iterable[tuple[int, int, float]]) -> float:
    """Least total length of highways keeping every city reachable.

    Cities are numbered from 1; each road is ``(city, city, length)``.
    """
    return mst_weight(cities, _numbered(roads))


def frog_distance(stones: Sequence[tuple[float, float]]) -> float:
    """Smallest longest jump needed to go from the first stone to the second."""
    if len(stones) < 2:
        raise ValueError("the frog needs at least two stones")
    points = [(x, y) for x, y in stones]
    edges = sorted(
        (Edge(i, j, math.dist(points[i], points[j])) for i, j in combinations(range(len(points)), 2)),
        key=_by_weight,
    )
    forest = UnionFind(len(points))
    longest = 0.0
    for edge in edges:
        if forest.connected(0, 1):
            break
        if forest.union(edge.u, edge.v):
            longest = edge.weight
    return longest