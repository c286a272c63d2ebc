"""Number-theory puzzles: primes, Fibonacci numbers, gcds and cycles."""

from __future__ import annotations

from collections.abc import Iterable
from math import isqrt

_INT_MAX = 2**31 - 1
_TWIN_LIMIT = 20_000_000


def _fibonacci_positions() -> dict[int, int]:
    positions = {1: 0, 2: 1}
    a, b = 1, 2
    while a + b < _INT_MAX:
        a, b = b, a + b
        positions[b] = len(positions)
    return positions


_FIBONACCI_POSITIONS = _fibonacci_positions()


def davinci_decode(numbers: Iterable[int], text: str) -> str:
    """Place the capital letters of ``text`` at the Fibonacci positions given.

    The k-th capital goes to the index of the k-th number in the sequence
    1, 2, 3, 5, 8, ...; unused positions up to the last letter are spaces.
    """
    positions = []
    for number in numbers:
        if number not in _FIBONACCI_POSITIONS:
            raise ValueError(f"{number} is not a Fibonacci number")
        positions.append(_FIBONACCI_POSITIONS[number])

    letters = (ch for ch in text if "A" <= ch <= "Z")
    slots = dict(zip(positions, letters))
    if not slots:
        return ""
    return "".join(slots.get(i, " ") for i in range(max(slots) + 1))


def _prime_factors(m: int) -> Iterable[tuple[int, int]]:
    divisor = 2
    while divisor * divisor <= m:
        if m % divisor == 0:
            exponent = 0
            while m % divisor == 0:
                m //= divisor
                exponent += 1
            yield divisor, exponent
        divisor += 1 if divisor == 2 else 2
    if m > 1:
        yield m, 1


def factorial_divisible(n: int, m: int) -> bool:
    """Whether ``m`` divides ``n!``."""
    if n < 0:
        raise ValueError("n must not be negative")
    if m < 1:
        raise ValueError("m must be positive")
    for prime, exponent in _prime_factors(m):
        available = 0
        power = prime
        while power <= n:
            available += n // power
            power *= prime
        if available < exponent:
            return False
    return True


def count_irreducible(n: int) -> int:
    """Count of ``k`` in ``1..n`` coprime with ``n``; 1 for ``n == 1``."""
    if n < 1:
        raise ValueError("n must be positive")
    result = n
    for prime, _ in _prime_factors(n):
        result = result // prime * (prime - 1)
    return result


def _extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    if b == 0:
        return a, 1, 0
    gcd, x, y = _extended_gcd(b, a % b)
    return gcd, y, x - (a // b) * y


def marbles(n: int, c1: int, n1: int, c2: int, n2: int) -> tuple[int, int] | None:
    """Cheapest counts of boxes holding ``n1`` and ``n2`` marbles that store ``n``.

    A box of the first kind costs ``c1``, of the second ``c2``. Returns
    ``(k1, k2)`` with ``k1 * n1 + k2 * n2 == n``, or ``None`` when no such
    non-negative pair exists.
    """
    if n1 < 1 or n2 < 1:
        raise ValueError("box capacities must be positive")
    gcd, x, y = _extended_gcd(n1, n2)
    if n % gcd != 0:
        return None
    t1 = -((x * n) // n2)
    t2 = (y * n) // n1
    if t2 < t1:
        return None

    base = (n // gcd) * (c1 * x + c2 * y)
    slope = (c1 * n2 - c2 * n1) // gcd
    t = t1 if base + t1 * slope < base + t2 * slope else t2
    return (x * n + n2 * t) // gcd, (y * n - n1 * t) // gcd


def _fibonacci_pair(n: int, modulus: int) -> tuple[int, int]:
    if n == 0:
        return 0, 1 % modulus
    a, b = _fibonacci_pair(n >> 1, modulus)
    c = a * ((2 * b - a) % modulus) % modulus
    d = (a * a + b * b) % modulus
    return (d, (c + d) % modulus) if n & 1 else (c, d)


def modular_fibonacci(n: int, m: int) -> int:
    """The ``n``-th Fibonacci number modulo ``2 ** m``."""
    if n < 0 or m < 0:
        raise ValueError("n and m must not be negative")
    if n == 0 or m == 0:
        return 0
    if n in (1, 2):
        return 1
    return _fibonacci_pair(n, 1 << m)[0]


def _sieve(limit: int) -> bytearray:
    marks = bytearray([1]) * (limit + 1)
    marks[0:2] = b"\x00\x00"
    for i in range(2, isqrt(limit) + 1):
        if marks[i]:
            marks[i * i :: i] = bytes(len(range(i * i, limit + 1, i)))
    return marks


def twin_prime_pair(index: int) -> tuple[int, int]:
    """The ``index``-th pair of twin primes, counting from 1.

    Only pairs whose smaller prime is at most twenty million are known.
    """
    if index < 1:
        raise ValueError("index must be positive")
    limit = 1 << 12
    while True:
        marks = _sieve(limit + 2)
        found = 0
        for p in range(3, limit + 1):
            if marks[p] and marks[p + 2]:
                found += 1
                if found == index:
                    return p, p + 2
        if limit >= _TWIN_LIMIT:
            raise ValueError(f"fewer than {index} twin prime pairs below {_TWIN_LIMIT}")
        limit = min(limit * 4, _TWIN_LIMIT)


def pandigital_divisions(n: int) -> list[tuple[int, int]]:
    """Pairs ``(numerator, denominator)`` of five-digit numbers with quotient ``n``.

    Written with leading zeros, the two numbers use each digit exactly once.
    Pairs come in increasing order of denominator.
    """
    if n < 1:
        raise ValueError("n must be positive")
    found = []
    for denominator in range(1234, 98765 // n + 1):
        numerator = n * denominator
        if len(set(f"{numerator:05d}{denominator:05d}")) == 10:
            found.append((numerator, denominator))
    return found


def pseudo_random_cycle(z: int, increment: int, modulus: int, seed: int) -> int:
    """Length of the cycle reached by ``L -> (z * L + increment) % modulus``."""
    if modulus < 1:
        raise ValueError("modulus must be positive")
    seen = {seed: 0}
    value = seed
    step = 0
    while True:
        value = (z * value + increment) % modulus
        step += 1
        if value in seen:
            return step - seen[value]
        seen[value] = step