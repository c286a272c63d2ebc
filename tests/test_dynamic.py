import math

import pytest

from contestkit.dynamic import (
    bar_codes,
    bars_sum_possible,
    determine_it,
    exact_change,
    lcs_length,
    marriage_calls,
)


def test_bar_codes_worked_example():
    assert bar_codes(7, 4, 3) == 16


@pytest.mark.parametrize("units,bars", [(5, 2), (8, 3), (10, 4), (6, 6)])
def test_bar_codes_without_width_limit_are_compositions(units, bars):
    assert bar_codes(units, bars, units) == math.comb(units - 1, bars - 1)


@pytest.mark.parametrize("units,width", [(3, 5), (5, 5), (6, 5)])
def test_single_bar_fits_only_when_narrow_enough(units, width):
    assert bar_codes(units, 1, width) == int(units <= width)


def test_more_bars_than_units_gives_no_code():
    assert bar_codes(3, 5, 3) == bar_codes(3, 0, 3) == 0


def test_bar_codes_rejects_negative():
    with pytest.raises(ValueError):
        bar_codes(-1, 2, 3)


def test_bars_sum_of_all_is_possible():
    bars = [3, 9, 14, 27]
    assert bars_sum_possible(sum(bars), bars)
    assert all(bars_sum_possible(b, bars) for b in bars)


def test_bars_zero_target_always_possible():
    assert bars_sum_possible(0, [])


def test_bars_odd_target_with_even_bars_fails():
    assert not bars_sum_possible(11, [2, 4, 6, 8])


def test_bars_each_used_once():
    assert not bars_sum_possible(10, [5])


def test_bars_negative_target():
    with pytest.raises(ValueError):
        bars_sum_possible(-3, [1, 2])


def test_determine_it_single_cell_is_the_seed():
    assert determine_it(1, 42) == 42


@pytest.mark.parametrize("n", [2, 3, 5, 8])
def test_determine_it_scales_with_seed(n):
    assert determine_it(n, 6) == 2 * determine_it(n, 3)
    assert determine_it(n, 0) == 0


def test_determine_it_rejects_empty_table():
    with pytest.raises(ValueError):
        determine_it(0, 5)


def test_exact_change_worked_example():
    assert exact_change(1400, [500, 1000, 2000]) == (1500, 2)


def test_exact_change_matching_coin():
    assert exact_change(700, [200, 700, 300, 500]) == (700, 1)


def test_exact_change_properties():
    coins = [30, 70, 110, 250]
    amount, count = exact_change(200, coins)
    assert amount >= 200
    assert 1 <= count <= len(coins)
    assert exact_change(amount, coins) == (amount, count)


def test_exact_change_unpayable():
    with pytest.raises(ValueError):
        exact_change(1000, [100, 200])


@pytest.mark.parametrize("text", ["", "a", "contest", "banana"])
def test_lcs_with_itself(text):
    assert lcs_length(text, text) == len(text)
    assert lcs_length(text, "") == 0


def test_lcs_of_subsequence_is_its_length():
    text = "dynamic programming"
    assert lcs_length(text, text[::3]) == len(text[::3])


def test_lcs_symmetric_and_bounded():
    a, b = "algorithm", "logarithm"
    assert lcs_length(a, b) == lcs_length(b, a)
    assert lcs_length(a, b) <= min(len(a), len(b))


def test_marriage_calls_base_cases():
    assert marriage_calls(0, 5) == marriage_calls(1, 5) == marriage_calls(9, 0) == 1


@pytest.mark.parametrize("n", [1, 2, 5, 30])
def test_marriage_calls_one_back_is_linear(n):
    assert marriage_calls(n, 1) == n


@pytest.mark.parametrize("n", range(2, 12))
def test_marriage_calls_two_back_recurrence(n):
    assert marriage_calls(n, 2) == 1 + marriage_calls(n - 1, 2) + marriage_calls(n - 2, 2)


def test_marriage_calls_negative_back():
    with pytest.raises(ValueError):
        marriage_calls(5, -1)