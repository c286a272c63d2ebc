"""Undirected graphs, breadth-first search and connected components."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Sequence


class Graph:
    """An undirected graph over vertices ``0 .. vertex_count - 1``."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("a graph cannot have a negative number of vertices")
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]
        self.edge_count = 0

    @property
    def vertex_count(self) -> int:
        return len(self._adjacency)

    def __len__(self) -> int:
        return len(self._adjacency)

    def _check(self, u: int) -> None:
        if not 0 <= u < len(self._adjacency):
            raise ValueError(f"vertex {u} is not in the graph")

    def add_edge(self, u: int, v: int) -> None:
        """Join ``u`` and ``v`` in both directions."""
        self._check(u)
        self._check(v)
        self._adjacency[u].append(v)
        self._adjacency[v].append(u)
        self.edge_count += 1

    def neighbours(self, u: int) -> tuple[int, ...]:
        """Vertices joined to ``u``, in the order the edges were added."""
        self._check(u)
        return tuple(self._adjacency[u])


def _search(graph: Graph, origin: int) -> tuple[dict[int, int], dict[int, int]]:
    graph._check(origin)
    distances = {origin: 0}
    parents = {origin: origin}
    queue = deque([origin])
    while queue:
        u = queue.popleft()
        for v in graph.neighbours(u):
            if v not in distances:
                distances[v] = distances[u] + 1
                parents[v] = u
                queue.append(v)
    return distances, parents


def bfs_distances(graph: Graph, origin: int) -> dict[int, int]:
    """Edge counts from ``origin`` to every vertex it can reach."""
    distances, _ = _search(graph, origin)
    return distances


def shortest_path(graph: Graph, origin: int, target: int) -> list[int]:
    """Vertices on a shortest path from ``origin`` to ``target``.

    The origin itself is left out and the target is last; the list is
    empty when the target is the origin or cannot be reached.
    """
    graph._check(target)
    _, parents = _search(graph, origin)
    if target not in parents:
        return []
    path = []
    vertex = target
    while vertex != origin:
        path.append(vertex)
        vertex = parents[vertex]
    path.reverse()
    return path


def connected_components(graph: Graph) -> list[int]:
    """Component id of each vertex; ids count up from 0 in vertex order."""
    ids: list[int | None] = [None] * graph.vertex_count
    component = 0
    for root in range(graph.vertex_count):
        if ids[root] is not None:
            continue
        ids[root] = component
        stack = [root]
        while stack:
            u = stack.pop()
            for v in graph.neighbours(u):
                if ids[v] is None:
                    ids[v] = component
                    stack.append(v)
        component += 1
    return [i for i in ids if i is not None]


def _graph_from_numbered(vertices: int, edges: Iterable[tuple[int, int]]) -> Graph:
    graph = Graph(vertices)
    for u, v in edges:
        if not (1 <= u <= vertices and 1 <= v <= vertices):
            raise ValueError(f"edge ({u}, {v}) names a vertex outside 1..{vertices}")
        graph.add_edge(u - 1, v - 1)
    return graph


def network_is_connected(stations: int, links: Iterable[tuple[int, int]]) -> bool:
    """Whether every station reaches station 1; stations are numbered from 1."""
    if stations < 1:
        raise ValueError("a network needs at least one station")
    graph = _graph_from_numbered(stations, links)
    return len(bfs_distances(graph, 0)) == stations


def generation_attendance(parents: Sequence[int], attendees: Iterable[int]) -> list[float]:
    """Percentage of each generation, from the first, that attended.

    ``parents[i - 1]`` is the parent of person ``i``; 0 is the king. Only
    as many generations as there are attendee entries are reported, and
    the report stops at the first empty generation.
    """
    n = len(parents)
    children: list[list[int]] = [[] for _ in range(n + 1)]
    for person, parent in enumerate(parents, start=1):
        if not 0 <= parent <= n:
            raise ValueError(f"person {person} has unknown parent {parent}")
        children[parent].append(person)

    entries = list(attendees)
    for person in entries:
        if not 0 <= person <= n:
            raise ValueError(f"attendee {person} is not a known person")
    attended = set(entries)

    totals: Counter[int] = Counter()
    present: Counter[int] = Counter()
    stack = [(0, 0)]
    while stack:
        person, generation = stack.pop()
        totals[generation] += 1
        if person in attended:
            present[generation] += 1
        stack.extend((child, generation + 1) for child in children[person])

    shares = []
    for generation in range(1, len(entries) + 1):
        if totals[generation] == 0:
            break
        shares.append(100.0 * present[generation] / totals[generation])
    return shares


def min_bus_lines(
    stations: int, start: int, end: int, routes: Iterable[tuple[int, int]]
) -> int | None:
    """Fewest bus lines from ``start`` to ``end``; stations are numbered from 1.

    Returns ``None`` when ``end`` cannot be reached.
    """
    graph = _graph_from_numbered(stations, routes)
    for station in (start, end):
        if not 1 <= station <= stations:
            raise ValueError(f"station {station} is outside 1..{stations}")
    return bfs_distances(graph, start - 1).get(end - 1)


def count_components(vertices: int, edges: Iterable[tuple[int, int]]) -> int:
    """Number of connected components; vertices are numbered from 1."""
    graph = _graph_from_numbered(vertices, edges)
    return len(set(connected_components(graph)))