"""Counting and optimisation puzzles solved with dynamic programming."""

from __future__ import annotations

from collections.abc import Iterable

_MAX_CHANGE = 10_000


def bar_codes(units: int, bars: int, max_width: int) -> int:
    """Count bar codes of ``units`` units made of ``bars`` bars.

    Each bar is between 1 and ``max_width`` units wide.
    """
    if units < 0 or bars < 0 or max_width < 0:
        raise ValueError("units, bars and max_width must not be negative")
    if bars == 0:
        return 0
    row = [0] * (units + 1)
    for unit in range(1, min(units, max_width) + 1):
        row[unit] = 1
    for bar in range(2, bars + 1):
        following = [0] * (units + 1)
        for unit in range(bar, units + 1):
            following[unit] = sum(
                row[unit - wide] for wide in range(1, min(max_width, unit - 1) + 1)
            )
        row = following
    return row[units]


def bars_sum_possible(target: int, bars: Iterable[int]) -> bool:
    """Whether some of the bars, each used at most once, add up to ``target``."""
    if target < 0:
        raise ValueError("target must not be negative")
    reachable = {0}
    for length in bars:
        if length < 0:
            raise ValueError("bar lengths must not be negative")
        reachable |= {total + length for total in reachable if total + length <= target}
    return target in reachable


def determine_it(n: int, value: int) -> int:
    """Fill the ``n`` by ``n`` table seeded with ``value`` and return its top-right cell.

    Cell ``(n, 1)`` holds ``value``; every other cell is built from the
    best sums of cells below it or to its left, rows filled from the bottom.
    """
    if n < 1:
        raise ValueError("n must be positive")
    if value < 0:
        raise ValueError("value must not be negative")
    table = [[0] * (n + 1) for _ in range(n + 1)]
    table[n][1] = value
    for i in range(n, 0, -1):
        for j in range(1, n + 1):
            if i == n and j == 1:
                continue
            if i >= j:
                below = max([0, *(table[k][1] + table[k][j] for k in range(i + 1, n + 1))])
                left = max([0, *(table[i][k] + table[n][k] for k in range(1, j))])
                table[i][j] = below + left
            else:
                table[i][j] = max([0, *(table[i][k] + table[k + 1][j] for k in range(i, j))])
    return table[1][n]


def exact_change(price: int, coins: Iterable[int]) -> tuple[int, int]:
    """Smallest amount of at least ``price`` payable with the coins, and the fewest coins for it.

    Each coin is used at most once; amounts above ten thousand are not considered.
    """
    if price > _MAX_CHANGE:
        raise ValueError(f"price must be at most {_MAX_CHANGE}")
    fewest: dict[int, int] = {}
    for coin in coins:
        if not 1 <= coin <= _MAX_CHANGE:
            raise ValueError(f"coin {coin} is outside 1..{_MAX_CHANGE}")
        extended = {
            amount + coin: count + 1
            for amount, count in fewest.items()
            if amount + coin <= _MAX_CHANGE
        }
        for amount, count in extended.items():
            fewest[amount] = min(fewest.get(amount, count), count)
        fewest[coin] = 1
    payable = [amount for amount in fewest if amount >= price]
    if not payable:
        raise ValueError(f"the coins cannot pay {price}")
    amount = min(payable)
    return amount, fewest[amount]


def lcs_length(first: str, second: str) -> int:
    """Length of the longest common subsequence of two strings."""
    previous = [0] * (len(second) + 1)
    for ch in first:
        current = [0]
        for j, other in enumerate(second, start=1):
            if ch == other:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def marriage_calls(n: int, back: int) -> int:
    """Calls made by the recursive function that looks ``back`` terms behind ``n``.

    A call with ``n <= 1`` makes no further calls; every other call recurses
    on ``n - 1`` through ``n - back``.
    """
    if back < 0:
        raise ValueError("back must not be negative")
    if n <= 1:
        return 1
    calls = [1, 1]
    for m in range(2, n + 1):
        total = 1 + max(0, back - m)
        total += sum(calls[m - i] for i in range(1, min(back, m) + 1))
        calls.append(total)
    return calls[n]