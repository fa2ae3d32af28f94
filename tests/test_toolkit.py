import itertools

import pytest

from algodrills.toolkit import (
    digit_count,
    pair_demo,
    pair_precedes,
    permutations_after,
    popcount,
    previous_permutation,
    sort_pairs,
)


def test_pair_demo_layout():
    lines = pair_demo().splitlines()
    assert len(lines) == 7
    assert lines[2] == "Printing array of pairs: "
    pairs = [tuple(int(tok) for tok in line.split("  ")) for line in lines[3:]]
    assert pairs == [(1, 2), (3, 4), (5, 6), (7, 8)]
    assert [int(tok) for tok in lines[1].split("  ")] == [1, 1, 2]
    assert pair_demo().endswith("\n")


def test_pair_precedes_orders_by_second_then_first_descending():
    assert pair_precedes((1, 2), (1, 3))
    assert not pair_precedes((1, 3), (1, 2))
    assert pair_precedes((2, 2), (1, 2))
    assert not pair_precedes((1, 2), (2, 2))
    assert not pair_precedes((1, 2), (1, 2))


def test_sort_pairs_source_example():
    assert sort_pairs([(1, 2), (2, 2), (1, 3)]) == [(2, 2), (1, 2), (1, 3)]


def test_sort_pairs_consistent_with_precedes():
    data = [(3, 1), (1, 1), (5, 0), (2, 4), (2, 1), (0, 4)]
    result = sort_pairs(data)
    assert sorted(result) == sorted(data)
    for a, b in zip(result, result[1:]):
        assert not pair_precedes(b, a)


def test_permutations_after_sorted_start_lists_all_others():
    result = permutations_after("123")
    expected = sorted("".join(p) for p in itertools.permutations("123"))[1:]
    assert result == expected


def test_permutations_after_last_is_empty():
    assert permutations_after("321") == []


def test_permutations_after_with_repeats_are_distinct():
    result = permutations_after("aab")
    assert len(result) == len(set(result))
    assert result == sorted(result)
    assert "aab" not in result


def test_previous_permutation_values():
    assert previous_permutation("321") == "312"
    assert previous_permutation("123") == "321"


@pytest.mark.parametrize("text", ["1234", "abcd", "1123"])
def test_previous_undoes_next(text):
    following = permutations_after(text)
    for earlier, later in zip([text] + following, following):
        assert previous_permutation(later) == earlier


@pytest.mark.parametrize("k", range(0, 40, 7))
def test_popcount_powers(k):
    assert popcount(2 ** k) == 1
    assert popcount(2 ** k - 1) == k


def test_popcount_zero_and_negative():
    assert popcount(0) == 0
    with pytest.raises(ValueError):
        popcount(-1)


@pytest.mark.parametrize("k", [0, 1, 3, 12])
def test_digit_count_powers_of_ten(k):
    assert digit_count(10 ** k) == k + 1
    assert digit_count(10 ** (k + 1) - 1) == k + 1


@pytest.mark.parametrize("bad", [0, -5])
def test_digit_count_rejects_non_positive(bad):
    with pytest.raises(ValueError):
        digit_count(bad)