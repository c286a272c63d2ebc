"""String puzzles: occurrence counts, subsequences, periods and overlaps."""

from __future__ import annotations

from bisect import bisect_right
from collections import defaultdict
from collections.abc import Iterable, Sequence

_BASES = "ATCG"


def echo_blocks(count: int, lines: Iterable[str]) -> list[str]:
    """Lines written for ``count`` blocks that echo the input.

    The first block takes every line and ends with a blank line; each
    further block finds no input left and is a single blank line.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    if count == 0:
        return []
    return [*lines, *[""] * count]


def count_occurrences(pattern: str, text: str) -> int:
    """Number of places, overlaps included, where ``pattern`` starts in ``text``."""
    found = 0
    position = text.find(pattern)
    while position != -1:
        found += 1
        position = text.find(pattern, position + 1)
    return found


def _total(patterns: set[str], text: str) -> int:
    return sum(count_occurrences(pattern, text) for pattern in patterns)


def genetic_search(pattern: str, text: str) -> tuple[int, int, int]:
    """Occurrence counts of ``pattern`` and of its one-letter edits in ``text``.

    The result holds the count for the pattern itself, the total over the
    distinct patterns with one letter deleted, and the total over the
    distinct patterns with one of A, T, C or G inserted.
    """
    deletions = {pattern[:i] + pattern[i + 1 :] for i in range(len(pattern))}
    insertions = {
        pattern[:i] + base + pattern[i:]
        for i in range(len(pattern) + 1)
        for base in _BASES
    }
    return (
        count_occurrences(pattern, text),
        _total(deletions, text),
        _total(insertions, text),
    )


class SubsequenceIndex:
    """Positions of each character of a text, for subsequence lookups."""

    def __init__(self, text: str) -> None:
        positions: defaultdict[str, list[int]] = defaultdict(list)
        for index, ch in enumerate(text):
            positions[ch].append(index)
        self._positions = dict(positions)
        self.text = text

    def span(self, query: str) -> tuple[int, int] | None:
        """First and last text positions of the earliest match of ``query`` as a subsequence.

        Returns ``None`` when ``query`` is not a subsequence; an empty query
        gives ``(0, -1)``.
        """
        first = 0
        last = -1
        for offset, ch in enumerate(query):
            positions = self._positions.get(ch, [])
            slot = bisect_right(positions, last)
            if slot == len(positions):
                return None
            last = positions[slot]
            if offset == 0:
                first = last
        return first, last


def string_power(text: str) -> int:
    """Largest ``n`` such that ``text`` is some string repeated ``n`` times.

    Periods from 1 up to two less than the length are tried; a text of at
    most two characters counts as its own length.
    """
    size = len(text)
    if size == 0:
        raise ValueError("text must not be empty")
    if size <= 2:
        return size
    for period in range(1, size - 1):
        if size % period:
            continue
        if all(text[j] == text[j % period] for j in range(period, size)):
            return size // period
    return 1


def scrolled_length(overlap: int, words: Sequence[str]) -> int:
    """Length of the shortest text that scrolls through ``words`` in order.

    Every word is ``overlap`` letters long. A word equal to the one before
    is skipped; otherwise it is laid over the longest suffix of the text so
    far that starts it.
    """
    if overlap < 1:
        raise ValueError("overlap must be positive")
    text = ""
    previous: str | None = None
    for word in words:
        if len(word) != overlap:
            raise ValueError(f"word {word!r} is not {overlap} letters long")
        if word == previous:
            continue
        previous = word
        if not text:
            text = word
            continue
        tail = text[-overlap:]
        shared = next(
            (overlap - j for j in range(overlap) if word.startswith(tail[j:])), 0
        )
        text += word[shared:]
    return len(text)