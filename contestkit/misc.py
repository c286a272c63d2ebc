"""Small simulations and greedy puzzles."""

from __future__ import annotations

from bisect import bisect_left
from collections import Counter
from collections.abc import Iterable, Sequence

_AGE_CEILING = 61
_DECK_SIZE = 52
_CHOSEN_CARD = 32

_BEATS = {("s", "p"), ("p", "r"), ("r", "s")}


def matchmaking(bachelors: Sequence[int], spinsters: Sequence[int]) -> tuple[int, int] | None:
    """Bachelors left unmatched and the youngest age among all bachelors.

    Returns ``None`` when there are no more bachelors than spinsters.
    The reported age never exceeds 61.
    """
    left = len(bachelors) - len(spinsters)
    if left <= 0:
        return None
    return left, min(_AGE_CEILING, *bachelors)


def dynamic_frog(distance: int, stones: Iterable[tuple[str, int]]) -> int:
    """Longest leap of a frog crossing to ``distance`` and coming back.

    Each stone is ``(kind, position)``: kind ``"B"`` for a big stone,
    ``"S"`` for a small one that sinks after one visit. The frog skips
    every other small stone on the way out and takes the others back.
    """
    positions: list[int] = []
    small: list[bool] = []
    for kind, position in stones:
        if kind not in ("B", "S"):
            raise ValueError(f"stone kind {kind!r} must be 'B' or 'S'")
        positions.append(position)
        small.append(kind == "S")
    count = len(positions)
    positions.append(distance)
    small.append(False)

    def at(index: int) -> int:
        return positions[index] if index >= 0 else 0

    hit = [False] * (count + 1)
    longest = positions[0]

    i = 0
    while i < count:
        hit[i] = True
        if small[i + 1]:
            longest = max(longest, positions[i + 2] - positions[i])
            i += 1
        else:
            longest = max(longest, positions[i + 1] - positions[i])
        i += 1

    i = count
    while i > 0:
        if hit[i - 1] and small[i - 1]:
            longest = max(longest, positions[i] - at(i - 2))
            i -= 1
        else:
            longest = max(longest, positions[i] - positions[i - 1])
        i -= 1
    return longest


def removable_gas_stations(length: int, stations: Iterable[tuple[int, int]]) -> int | None:
    """Most stations that can close while the rest still cover the road.

    Each station is ``(position, radius)``. Returns ``None`` when even all
    the stations together leave part of ``0..length`` uncovered.
    """
    intervals = sorted((x - r, x + r) for x, r in stations)
    remaining = len(intervals)
    position = 0
    index = 0
    while position < length:
        reach = position
        while index < len(intervals) and intervals[index][0] <= position:
            reach = max(reach, intervals[index][1])
            index += 1
        if reach == position:
            return None
        position = reach
        remaining -= 1
    return remaining


def largest_square(grid: Sequence[Sequence[int]], low: int, high: int) -> int:
    """Side of the largest square whose heights all lie in ``low..high``.

    Rows and columns of ``grid`` must be sorted in increasing order.
    """
    rows = len(grid)
    widths = {len(row) for row in grid}
    if len(widths) > 1:
        raise ValueError("grid rows must all have the same length")
    cols = widths.pop() if widths else 0

    largest = 0
    for i, row in enumerate(grid):
        start = bisect_left(row, low)
        for side in range(largest, rows):
            if i + side >= rows or start + side >= cols or grid[i + side][start + side] > high:
                break
            largest = side + 1
    return largest


def rps_tournament(
    players: int, games: Iterable[tuple[int, str, int, str]]
) -> list[float | None]:
    """Win ratio of each player, numbered from 1, in a rock-paper-scissors tournament.

    Each game is ``(player, move, player, move)``; only the first letter of
    a move counts. A player with no decided game gets ``None``.
    """
    wins = [0] * (players + 1)
    losses = [0] * (players + 1)
    for p1, m1, p2, m2 in games:
        for player in (p1, p2):
            if not 1 <= player <= players:
                raise ValueError(f"player {player} is outside 1..{players}")
        if not m1 or not m2:
            raise ValueError("moves must not be empty")
        first = m1[0] if m1[0] in "sp" else "r"
        second = m2[0]
        if (first, second) in _BEATS:
            wins[p1] += 1
            losses[p2] += 1
        elif (second, first) in _BEATS:
            wins[p2] += 1
            losses[p1] += 1

    ratios: list[float | None] = []
    for player in range(1, players + 1):
        played = wins[player] + losses[player]
        ratios.append(wins[player] / played if played else None)
    return ratios


def count_scarecrows(field: str) -> int:
    """Scarecrows needed to guard every fertile ``.`` cell of a field.

    A scarecrow guards its own cell and the cells on either side; ``#``
    cells need no guard.
    """
    count = 0
    i = 0
    while i < len(field):
        if field[i] == "#":
            i += 1
            continue
        count += 1
        i += 3
    return count


def bus_overtime(
    morning: Sequence[int], evening: Sequence[int], limit: int, rate: int
) -> int:
    """Least overtime paid when morning and evening routes are paired among drivers.

    A driver working more than ``limit`` hours earns ``rate`` per extra hour.
    """
    if len(morning) != len(evening):
        raise ValueError("there must be as many evening routes as morning routes")
    paired = zip(sorted(morning), sorted(evening, reverse=True))
    return sum((m + e - limit) * rate for m, e in paired if m + e > limit)


def pack_bags(sizes: Iterable[int]) -> tuple[int, list[list[int]]]:
    """Fewest nested stacks for the bags, and the stacks themselves.

    Bags are sorted and dealt round-robin into as many stacks as the most
    common size appears.
    """
    bags = sorted(sizes)
    if not bags:
        raise ValueError("there must be at least one bag")
    stacks = max(Counter(bags).values())
    return stacks, [bags[i::stacks] for i in range(stacks)]


def find_card(cards: Sequence[str]) -> str:
    """The card the trick ends on: the 33rd of a 52-card deck."""
    if len(cards) != _DECK_SIZE:
        raise ValueError(f"a deck holds {_DECK_SIZE} cards")
    return cards[_CHOSEN_CARD]


def positive_terms(values: Iterable[int]) -> list[int]:
    """The positive values, in order; they make the greatest sum."""
    return [value for value in values if value > 0]