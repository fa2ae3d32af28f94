import pytest

from algodrills.recursion import (
    combination_sum,
    combination_sum_unique,
    count_subsequences_with_sum,
    count_subsets_with_sum,
    fib,
    first_subsequence_with_sum,
    is_palindrome,
    permutations,
    reverse_array,
    subsequences,
    subsequences_with_sum,
    subset_sums,
)


def test_fib_base_cases():
    assert fib(0) == 0
    assert fib(1) == 1


@pytest.mark.parametrize("n", range(2, 25))
def test_fib_recurrence(n):
    assert fib(n) == fib(n - 1) + fib(n - 2)


def test_fib_negative_raises():
    with pytest.raises(ValueError):
        fib(-1)


def test_palindrome_source_example():
    assert is_palindrome("NAMANn") is False


@pytest.mark.parametrize("text", ["", "a", "NAMAN", "abba", "racecar"])
def test_palindromes(text):
    assert is_palindrome(text)


def test_palindrome_mirror_invariant():
    text = "algodrill"
    assert is_palindrome(text + text[::-1])
    assert not is_palindrome(text)


def test_combination_sum_source_example():
    assert combination_sum([2, 3, 6, 7], 7) == [[2, 2, 3], [7]]


def test_combination_sum_invariants():
    candidates = [2, 3, 5]
    found = combination_sum(candidates, 12)
    assert found
    for combo in found:
        assert sum(combo) == 12
        assert set(combo) <= set(candidates)
        assert combo == sorted(combo)
    assert len({tuple(c) for c in found}) == len(found)


def test_combination_sum_rejects_non_positive():
    with pytest.raises(ValueError):
        combination_sum([0, 1], 3)


def test_combination_sum_unique_source_example():
    assert combination_sum_unique([10, 1, 2, 7, 6, 1, 5], 8) == [
        [1, 1, 6],
        [1, 2, 5],
        [1, 7],
        [2, 6],
    ]


def test_combination_sum_unique_invariants():
    candidates = [2, 5, 2, 1, 2]
    found = combination_sum_unique(candidates, 5)
    assert found
    assert found == sorted(found)
    assert len({tuple(c) for c in found}) == len(found)
    for combo in found:
        assert sum(combo) == 5
        assert combo == sorted(combo)
        for value in set(combo):
            assert combo.count(value) <= candidates.count(value)


def test_combination_sum_unique_no_solution():
    assert combination_sum_unique([4, 6], 5) == []


def test_count_subsequences_matches_enumeration():
    values = [1, 2, 3, 4]
    assert count_subsequences_with_sum(values, 5) == len(
        list(subsequences_with_sum(values, 5))
    )


def test_count_subsets_matches_enumeration():
    values = [1, 2, 1]
    assert count_subsets_with_sum(values, 3) == len(
        list(subsequences_with_sum(values, 3))
    )


def test_pruned_count_misses_negative_paths():
    values = [5, -5]
    assert count_subsequences_with_sum(values, 0) < count_subsets_with_sum(values, 0)


def test_permutations_invariants():
    values = [1, 2, 3]
    found = permutations(values)
    assert len(found) == 6
    assert len({tuple(p) for p in found}) == len(found)
    assert all(sorted(p) == values for p in found)
    assert found == sorted(found)
    assert found[0] == values
    assert found[-1] == values[::-1]


def test_permutations_of_empty():
    assert permutations([]) == [[]]


def test_first_subsequence_with_sum():
    values = [1, 2, 3, 4]
    first = first_subsequence_with_sum(values, 5)
    assert first == next(subsequences_with_sum(values, 5))
    assert sum(first) == 5


def test_first_subsequence_with_sum_none():
    assert first_subsequence_with_sum([1, 2, 3, 4], 100) is None


def test_reverse_array():
    values = [1, 2, 3, 4, 5, 6, 7, 8, 9]
    assert reverse_array(values) == values[::-1]
    assert values == [1, 2, 3, 4, 5, 6, 7, 8, 9]


def test_reverse_array_round_trip():
    values = [4, 8, 15, 16, 23, 42]
    assert reverse_array(reverse_array(values)) == values


def test_subsequences_order_and_count():
    values = [3, 1, 2]
    found = list(subsequences(values))
    assert len(found) == 2 ** len(values)
    assert found[0] == values
    assert found[-1] == []
    assert len({tuple(s) for s in found}) == len(found)


def test_subsequences_with_sum_all_match():
    found = list(subsequences_with_sum([1, 2, 3, 4], 5))
    assert found
    assert all(sum(s) == 5 for s in found)


def test_subset_sums():
    values = [1, 2, 3, 4, 5]
    sums = subset_sums(values)
    assert len(sums) == 2 ** len(values)
    assert sums == sorted(sums)
    assert sums[0] == 0
    assert sums[-1] == sum(values)