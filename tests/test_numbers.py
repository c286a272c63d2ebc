import math

import pytest

from contestkit.numbers import (
    count_irreducible,
    davinci_decode,
    factorial_divisible,
    marbles,
    modular_fibonacci,
    pandigital_divisions,
    pseudo_random_cycle,
    twin_prime_pair,
)


def _is_prime(value):
    return value > 1 and all(value % d for d in range(2, math.isqrt(value) + 1))


def test_davinci_in_order():
    assert davinci_decode([1, 2, 3, 5, 8], "HELLO world") == "HELLO"


def test_davinci_reversed():
    assert davinci_decode([8, 5, 3, 2, 1], "HELLO") == "HELLO"[::-1]


def test_davinci_gap_filled_with_spaces():
    assert davinci_decode([1, 5], "AB") == "A  B"


def test_davinci_no_capitals():
    assert davinci_decode([1, 2], "abc") == ""


def test_davinci_rejects_non_fibonacci():
    with pytest.raises(ValueError):
        davinci_decode([4], "A")


@pytest.mark.parametrize("n", range(0, 12))
def test_factorial_divisible_matches_factorial(n):
    for m in range(1, 40):
        assert factorial_divisible(n, m) == (math.factorial(n) % m == 0)


def test_factorial_divisible_large_prime():
    assert factorial_divisible(1_000_002, 1_000_003) is False
    assert factorial_divisible(1_000_003, 1_000_003) is True


def test_factorial_divisible_rejects_zero():
    with pytest.raises(ValueError):
        factorial_divisible(5, 0)


@pytest.mark.parametrize("n", range(2, 60))
def test_count_irreducible_matches_gcd_count(n):
    assert count_irreducible(n) == sum(1 for k in range(1, n + 1) if math.gcd(k, n) == 1)


def test_count_irreducible_prime():
    assert count_irreducible(1_000_000_007) == 1_000_000_006


def test_count_irreducible_one():
    assert count_irreducible(1) == 1


def test_count_irreducible_rejects_zero():
    with pytest.raises(ValueError):
        count_irreducible(0)


def test_marbles_gcd_failure():
    assert marbles(5, 1, 2, 1, 4) is None


def test_marbles_no_non_negative_solution():
    assert marbles(1, 1, 2, 1, 3) is None


def test_modular_fibonacci_edges():
    assert modular_fibonacci(0, 5) == 0
    assert modular_fibonacci(7, 0) == 0
    assert modular_fibonacci(1, 3) == 1
    assert modular_fibonacci(2, 3) == 1


@pytest.mark.parametrize("n", range(1, 40))
def test_modular_fibonacci_recurrence(n):
    m = 10
    total = modular_fibonacci(n, m) + modular_fibonacci(n + 1, m)
    assert total % 2**m == modular_fibonacci(n + 2, m)


@pytest.mark.parametrize("n", [3, 50, 1000, 123456])
def test_modular_fibonacci_reduces(n):
    assert modular_fibonacci(n, 5) == modular_fibonacci(n, 30) % 32


def test_modular_fibonacci_negative():
    with pytest.raises(ValueError):
        modular_fibonacci(-1, 3)


def test_twin_prime_first():
    assert twin_prime_pair(1) == (3, 5)


def test_twin_primes_are_increasing_twins():
    pairs = [twin_prime_pair(i) for i in range(1, 60)]
    for small, large in pairs:
        assert large == small + 2
        assert _is_prime(small) and _is_prime(large)
    assert [p for p, _ in pairs] == sorted({p for p, _ in pairs})


def test_twin_prime_rejects_zero():
    with pytest.raises(ValueError):
        twin_prime_pair(0)


def test_pandigital_results_are_valid():
    found = pandigital_divisions(62)
    assert found
    for numerator, denominator in found:
        assert numerator == 62 * denominator
        assert sorted(f"{numerator:05d}{denominator:05d}") == list("0123456789")
    assert [d for _, d in found] == sorted(d for _, d in found)


def test_pandigital_quotient_one_has_none():
    assert pandigital_divisions(1) == []


def test_pandigital_rejects_zero():
    with pytest.raises(ValueError):
        pandigital_divisions(0)


def test_pseudo_random_sample():
    assert pseudo_random_cycle(7, 5, 12, 4) == 6


@pytest.mark.parametrize("modulus", [1, 2, 7, 100])
def test_pseudo_random_full_cycle(modulus):
    assert pseudo_random_cycle(1, 1, modulus, 0) == modulus


@pytest.mark.parametrize("z, increment, modulus, seed", [(5173, 3849, 3279, 1511), (3, 2, 17, 9)])
def test_pseudo_random_bounded_by_modulus(z, increment, modulus, seed):
    length = pseudo_random_cycle(z, increment, modulus, seed)
    assert 1 <= length <= modulus


def test_pseudo_random_rejects_zero_modulus():
    with pytest.raises(ValueError):
        pseudo_random_cycle(1, 1, 0, 0)