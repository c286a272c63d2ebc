"""Exhaustive searches: decodings, seatings and domino chains."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from itertools import islice, permutations

_MAX_PEOPLE = 8


def decode_bad_code(
    encoding: Iterable[tuple[str, int]] | Mapping[str, int],
    text: str,
    limit: int = 100,
) -> list[str]:
    """Decodings of ``text`` under a code that maps letters to numbers.

    Zeros before a code are skipped. Decodings come in the order of a
    depth-first search over the codes sorted by letter, at most ``limit``.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    pairs = encoding.items() if isinstance(encoding, Mapping) else encoding
    codes = []
    for letter, number in pairs:
        if number < 0:
            raise ValueError(f"code for {letter!r} must not be negative")
        codes.append((letter, str(number)))
    codes.sort()

    def decode(pos: int) -> Iterator[str]:
        if pos == len(text):
            yield ""
            return
        while pos < len(text) and text[pos] == "0":
            pos += 1
        if pos >= len(text):
            return
        for letter, code in codes:
            if text.startswith(code, pos):
                for rest in decode(pos + len(code)):
                    yield letter + rest

    return list(islice(decode(0), limit))


def count_seatings(people: int, constraints: Iterable[tuple[int, int, int]]) -> int:
    """Count orderings of ``people`` in a row that meet every constraint.

    A constraint ``(a, b, c)`` with ``c > 0`` keeps ``a`` and ``b`` at most
    ``c`` seats apart; with ``c < 0`` at least ``-c`` seats apart.
    """
    if not 0 <= people <= _MAX_PEOPLE:
        raise ValueError(f"people must be in 0..{_MAX_PEOPLE}")
    rules = []
    for a, b, c in constraints:
        for person in (a, b):
            if not 0 <= person < people:
                raise ValueError(f"person {person} is outside 0..{people - 1}")
        rules.append((a, b, c))

    def satisfied(order: tuple[int, ...]) -> bool:
        seat = {person: i for i, person in enumerate(order)}
        for a, b, c in rules:
            gap = abs(seat[a] - seat[b])
            if (c > 0 and gap > c) or (c < 0 and gap < -c):
                return False
        return True

    return sum(1 for order in permutations(range(people)) if satisfied(order))


def domino_chain_possible(
    spaces: int,
    left: tuple[int, int],
    right: tuple[int, int],
    pieces: Sequence[tuple[int, int]],
) -> bool:
    """Whether ``spaces`` of the pieces can join the ``left`` piece to the ``right`` one.

    The chain starts at the second number of ``left`` and ends at the first
    number of ``right``; pieces may be turned round.
    """
    if spaces < 0:
        raise ValueError("spaces must not be negative")
    tiles = [(a, b) for a, b in pieces]
    used = [False] * len(tiles)

    def other_end(tile: tuple[int, int], face: int) -> int | None:
        if tile[0] == face:
            return tile[1]
        if tile[1] == face:
            return tile[0]
        return None

    def fits(size: int, start: int, end: int) -> bool:
        if size == 0:
            return start == end
        if size == 1:
            return any(
                not used[i] and tile in ((start, end), (end, start))
                for i, tile in enumerate(tiles)
            )
        for i, tile in enumerate(tiles):
            if used[i]:
                continue
            new_start = other_end(tile, start)
            if new_start is None:
                continue
            used[i] = True
            for j, other in enumerate(tiles):
                if used[j]:
                    continue
                new_end = other_end(other, end)
                if new_end is None:
                    continue
                used[j] = True
                found = fits(size - 2, new_start, new_end)
                used[j] = False
                if found:
                    used[i] = False
                    return True
            used[i] = False
        return False

    return fits(spaces, left[1], right[0])