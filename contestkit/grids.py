"""Flood fills and breadth-first searches over rectangular grids."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from enum import IntEnum

Cell = tuple[int, int]

_KING_MOVES: tuple[Cell, ...] = (
    (0, 1),
    (0, -1),
    (1, 0),
    (-1, 0),
    (-1, -1),
    (-1, 1),
    (1, 1),
    (1, -1),
)
_ROOK_STEPS: tuple[Cell, ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))

_LAVA = "*"


class _Hall(IntEnum):
    EXIT = 0
    FREE = 1
    CRYSTAL = 2
    GOBLIN = 3


def _inside(cell: Cell, rows: int, cols: int) -> bool:
    return 0 <= cell[0] < rows and 0 <= cell[1] < cols


def _adjacent(cell: Cell, rows: int, cols: int, steps: Sequence[Cell]) -> Iterator[Cell]:
    row, col = cell
    for d_row, d_col in steps:
        candidate = (row + d_row, col + d_col)
        if _inside(candidate, rows, cols):
            yield candidate


def _width(grid: Sequence[Sequence[object]]) -> int:
    widths = {len(row) for row in grid}
    if len(widths) > 1:
        raise ValueError("grid rows must all have the same length")
    return widths.pop() if widths else 0


def count_painted(rows: int, cols: int, start: Cell, filled: Iterable[Cell]) -> int:
    """Count the cells painted by a fill that spreads in all eight directions.

    Coordinates are zero-based ``(row, col)`` pairs. Filled cells stop the
    paint; the starting cell is always counted.
    """
    start = (start[0], start[1])
    if not _inside(start, rows, cols):
        raise ValueError(f"start {start} lies outside a {rows}x{cols} grid")
    blocked: set[Cell] = set()
    for cell in filled:
        cell = (cell[0], cell[1])
        if not _inside(cell, rows, cols):
            raise ValueError(f"filled cell {cell} lies outside a {rows}x{cols} grid")
        blocked.add(cell)

    blocked.add(start)
    stack = [start]
    painted = 1
    while stack:
        cell = stack.pop()
        for neighbour in _adjacent(cell, rows, cols, _KING_MOVES):
            if neighbour not in blocked:
                blocked.add(neighbour)
                stack.append(neighbour)
                painted += 1
    return painted


def shortest_exit(cave: Sequence[Sequence[int]]) -> int | None:
    """Return the fewest steps from the goblin to a hall with an exit.

    Halls are coded 0 (exit), 1 (free), 2 (crystal, impassable) and
    3 (the goblin). Returns ``None`` when no exit can be reached.
    """
    rows = len(cave)
    cols = _width(cave)
    start: Cell | None = None
    blocked: set[Cell] = set()
    for r, row in enumerate(cave):
        for c, hall in enumerate(row):
            if hall == _Hall.GOBLIN:
                start = (r, c)
            elif hall == _Hall.CRYSTAL:
                blocked.add((r, c))
    if start is None:
        raise ValueError("the cave has no goblin")

    distance = {start: 0}
    blocked.add(start)
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        for neighbour in _adjacent(cell, rows, cols, _ROOK_STEPS):
            if neighbour in blocked:
                continue
            blocked.add(neighbour)
            distance[neighbour] = distance[cell] + 1
            if cave[neighbour[0]][neighbour[1]] == _Hall.EXIT:
                return distance[neighbour]
            queue.append(neighbour)
    return None


def spread_lava(grid: Sequence[str], threshold: int) -> list[str]:
    """Flood lava from the top-left cell through cells no higher than ``threshold``.

    Each row is a string of digits; flooded cells become ``*``. Lava moves
    up, down, left and right only.
    """
    rows = len(grid)
    cols = _width(grid)
    for row in grid:
        if not all(ch.isdigit() or ch == _LAVA for ch in row):
            raise ValueError(f"row {row!r} must hold only digits")
    cells = [list(row) for row in grid]
    if rows == 0 or cols == 0:
        return [""] * rows

    def passable(cell: Cell) -> bool:
        ch = cells[cell[0]][cell[1]]
        return ch != _LAVA and int(ch) <= threshold

    origin = (0, 0)
    if not passable(origin):
        return list(grid)

    cells[0][0] = _LAVA
    queue = deque([origin])
    while queue:
        cell = queue.popleft()
        for neighbour in _adjacent(cell, rows, cols, _ROOK_STEPS):
            if passable(neighbour):
                cells[neighbour[0]][neighbour[1]] = _LAVA
                queue.append(neighbour)
    return ["".join(row) for row in cells]