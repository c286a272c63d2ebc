import math

import pytest

from contestkit.search import count_seatings, decode_bad_code, domino_chain_possible

CODE = {"a": 1, "b": 2, "c": 34}


def _encode(word):
    return "".join(str(CODE[ch]) for ch in word)


@pytest.mark.parametrize("word", ["a", "ab", "cab", "bacca"])
def test_decode_round_trip(word):
    assert word in decode_bad_code(CODE, _encode(word))


def test_decodings_encode_back_to_text():
    code = [("x", 1), ("y", 11), ("z", 111)]
    text = "11111"
    results = decode_bad_code(code, text)
    assert results
    lookup = dict(code)
    assert all("".join(str(lookup[ch]) for ch in r) == text for r in results)
    assert len(set(results)) == len(results)


def test_leading_zeros_are_skipped():
    assert decode_bad_code([("a", 1), ("b", 2)], "0102") == ["ab"]


def test_trailing_zeros_leave_no_decoding():
    assert decode_bad_code([("a", 1), ("b", 2)], "120") == []


def test_limit_caps_results():
    code = [("a", 1), ("b", 11)]
    text = "1" * 20
    everything = decode_bad_code(code, text)
    assert len(everything) == 100
    assert decode_bad_code(code, text, limit=5) == everything[:5]


def test_decode_rejects_negative_limit():
    with pytest.raises(ValueError):
        decode_bad_code(CODE, "12", limit=-1)


@pytest.mark.parametrize("people", [0, 1, 3, 5])
def test_seatings_without_constraints(people):
    assert count_seatings(people, []) == math.factorial(people)


def test_seatings_worked_example():
    assert count_seatings(3, [(0, 1, -2)]) == 2


@pytest.mark.parametrize("gap", [1, 2, 3])
def test_near_and_far_constraints_are_complementary(gap):
    near = count_seatings(5, [(0, 3, gap)])
    far = count_seatings(5, [(0, 3, -(gap + 1))])
    assert near + far == math.factorial(5)


def test_widest_constraint_always_holds():
    assert count_seatings(4, [(1, 2, 3)]) == math.factorial(4)


def test_seatings_reject_unknown_person():
    with pytest.raises(ValueError):
        count_seatings(3, [(0, 3, 1)])


def test_domino_no_spaces_needs_matching_ends():
    assert domino_chain_possible(0, (0, 3), (3, 1), [])
    assert not domino_chain_possible(0, (0, 3), (2, 1), [])


def test_domino_single_space_either_way_round():
    assert domino_chain_possible(1, (0, 3), (2, 1), [(3, 2)])
    assert domino_chain_possible(1, (0, 3), (2, 1), [(2, 3)])
    assert not domino_chain_possible(1, (0, 3), (2, 1), [(1, 1)])


def test_domino_longer_chains():
    assert domino_chain_possible(2, (0, 3), (2, 1), [(3, 5), (5, 2)])
    assert domino_chain_possible(3, (0, 1), (4, 0), [(2, 1), (4, 3), (3, 2)])
    assert not domino_chain_possible(3, (0, 1), (4, 0), [(1, 2), (3, 4)])


def test_domino_negative_spaces():
    with pytest.raises(ValueError):
        domino_chain_possible(-1, (0, 1), (1, 0), [])