"""Shortest paths, bridges and dominators on small graphs."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from itertools import combinations

from .spanning import UnionFind


def _dijkstra(adjacency: Sequence[Sequence[tuple[int, int]]], source: int) -> dict[int, int]:
    distances = {source: 0}
    heap = [(0, source)]
    while heap:
        dist, u = heapq.heappop(heap)
        if dist > distances[u]:
            continue
        for v, weight in adjacency[u]:
            candidate = dist + weight
            if candidate < distances.get(v, candidate + 1):
                distances[v] = candidate
                heapq.heappush(heap, (candidate, v))
    return distances


def babel_shortest(
    start: str, end: str, words: Iterable[tuple[str, str, str]]
) -> int | None:
    """Shortest total length of a word chain from language ``start`` to ``end``.

    Each entry is ``(language, language, word)``: a word known in both
    languages. Consecutive words must share a language and must not begin
    with the same letter. Returns ``None`` when no chain exists.
    """
    entries = [(left, right, word) for left, right, word in words]
    for _, _, word in entries:
        if not word:
            raise ValueError("words must not be empty")

    count = len(entries)
    source, sink = count, count + 1
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(count + 2)]

    for (i, (a, b, first)), (j, (c, d, second)) in combinations(enumerate(entries), 2):
        if {a, b} & {c, d} and first[0] != second[0]:
            adjacency[i].append((j, len(second)))
            adjacency[j].append((i, len(first)))

    for i, (left, right, word) in enumerate(entries):
        if start in (left, right):
            adjacency[source].append((i, len(word)))
        if end in (left, right):
            adjacency[i].append((sink, 0))

    return _dijkstra(adjacency, source).get(sink)


def _check_vertex(vertex: int, vertices: int) -> None:
    if not 0 <= vertex < vertices:
        raise ValueError(f"vertex {vertex} is outside 0..{vertices - 1}")


def bridge_queries(
    vertices: int,
    edges: Iterable[tuple[int, int]],
    queries: Iterable[tuple[int, int]],
) -> list[bool]:
    """For each query, whether its two vertices are joined by bridges alone.

    Vertices are numbered from 0. Edges are undirected; two vertices answer
    ``True`` when a path of bridges links them (a vertex always links to itself).
    """
    adjacency: list[list[int]] = [[] for _ in range(vertices)]
    for a, b in edges:
        _check_vertex(a, vertices)
        _check_vertex(b, vertices)
        adjacency[a].append(b)
        adjacency[b].append(a)

    discovered = [0] * vertices
    low = [0] * vertices
    forest = UnionFind(vertices)
    counter = 0

    for root in range(vertices):
        if discovered[root]:
            continue
        counter += 1
        discovered[root] = low[root] = counter
        stack = [(root, root, iter(adjacency[root]))]
        while stack:
            v, parent, pending = stack[-1]
            for w in pending:
                if not discovered[w]:
                    counter += 1
                    discovered[w] = low[w] = counter
                    stack.append((w, v, iter(adjacency[w])))
                    break
                if w != parent:
                    low[v] = min(low[v], discovered[w])
            else:
                stack.pop()
                if stack:
                    above = stack[-1][0]
                    low[above] = min(low[above], low[v])
                    if low[v] > discovered[above]:
                        forest.union(above, v)

    answers = []
    for a, b in queries:
        _check_vertex(a, vertices)
        _check_vertex(b, vertices)
        answers.append(forest.connected(a, b))
    return answers


def _reachable(matrix: Sequence[Sequence[int]], blocked: int | None) -> set[int]:
    if blocked == 0:
        return set()
    seen = {0}
    stack = [0]
    while stack:
        u = stack.pop()
        for v, linked in enumerate(matrix[u]):
            if linked and v != blocked and v not in seen:
                seen.add(v)
                stack.append(v)
    return seen


def dominators(matrix: Sequence[Sequence[int]]) -> list[list[bool]]:
    """Dominator table of a directed graph given as an adjacency matrix.

    ``table[i][j]`` is true when every path from vertex 0 to ``j`` passes
    through ``i``; ``table[i][i]`` is true when ``i`` is reachable at all.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("the adjacency matrix must be square")
    if size == 0:
        return []

    reachable = _reachable(matrix, None)
    table = []
    for i in range(size):
        avoiding = _reachable(matrix, i)
        row = [j in reachable and j not in avoiding for j in range(size)]
        row[i] = i in reachable
        table.append(row)
    return table


def format_dominators(table: Sequence[Sequence[bool]]) -> str:
    """Draw a dominator table as a boxed grid of ``Y`` and ``N`` cells."""
    size = len(table)
    border = "+" + "-" * max(0, 2 * size - 1) + "+"
    lines = [border]
    for row in table:
        lines.append("|" + "|".join("Y" if cell else "N" for cell in row) + "|")
        lines.append(border)
    return "\n".join(lines) + "\n"


def mice_escaping(
    cells: int,
    exit_cell: int,
    time_limit: int,
    passages: Iterable[tuple[int, int, int]],
) -> int:
    """Number of cells whose mouse reaches the exit within ``time_limit``.

    Cells are numbered from 1; each passage is ``(from, to, time)`` and one
    way. A later passage between the same two cells replaces an earlier one.
    The exit cell itself always counts.
    """
    if cells < 1:
        raise ValueError("a maze needs at least one cell")
    if not 1 <= exit_cell <= cells:
        raise ValueError(f"exit {exit_cell} is outside 1..{cells}")

    times: dict[tuple[int, int], int] = {}
    for u, v, time in passages:
        for cell in (u, v):
            if not 1 <= cell <= cells:
                raise ValueError(f"cell {cell} is outside 1..{cells}")
        if time < 0:
            raise ValueError("passage times cannot be negative")
        times[(u, v)] = time

    reverse: list[list[tuple[int, int]]] = [[] for _ in range(cells + 1)]
    for (u, v), time in times.items():
        reverse[v].append((u, time))

    distances = _dijkstra(reverse, exit_cell)
    return sum(
        1 for cell, dist in distances.items() if cell == exit_cell or dist <= time_limit
    )


def has_negative_cycle(systems: int, wormholes: Iterable[tuple[int, int, int]]) -> bool:
    """Whether the wormholes, as ``(from, to, years)``, hold a negative cycle.

    Star systems are numbered from 0.
    """
    edges = []
    for x, y, years in wormholes:
        _check_vertex(x, systems)
        _check_vertex(y, systems)
        edges.append((x, y, years))

    distances = [0] * systems
    for _ in range(systems - 1):
        for x, y, years in edges:
            if distances[x] + years < distances[y]:
                distances[y] = distances[x] + years
    return any(distances[x] + years < distances[y] for x, y, years in edges)