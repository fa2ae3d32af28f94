"""Recursive drills: Fibonacci, palindromes, subsequences, combinations."""

from __future__ import annotations

import itertools
from collections.abc import Iterator, Sequence
from functools import cache


@cache
def _fib(n: int) -> int:
    if n in (0, 1):
        return n
    return _fib(n - 1) + _fib(n - 2)


def fib(n: int) -> int:
    """The n-th Fibonacci number, with fib(0) == 0 and fib(1) == 1."""
    if n < 0:
        raise ValueError("fib needs a non-negative index")
    return _fib(n)


def is_palindrome(text: str) -> bool:
    """True if ``text`` reads the same backwards, case included."""
    return text == text[::-1]


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Every combination of candidates, each usable any number of times, summing to ``target``.

    Combinations keep the candidates' order; earlier candidates are taken as
    often as possible first.
    """
    if any(value <= 0 for value in candidates):
        raise ValueError("combination_sum needs positive candidates")
    found: list[list[int]] = []

    def search(index: int, remaining: int, chosen: list[int]) -> None:
        if index >= len(candidates):
            if remaining == 0:
                found.append(list(chosen))
            return
        value = candidates[index]
        if value <= remaining:
            chosen.append(value)
            search(index, remaining - value, chosen)
            chosen.pop()
        search(index + 1, remaining, chosen)

    search(0, target, [])
    return found


def combination_sum_unique(
    candidates: Sequence[int], target: int
) -> list[list[int]]:
    """Distinct combinations summing to ``target``, each candidate used at most once.

    Results are ascending lists, in lexicographic order.
    """
    ordered = sorted(candidates)
    found: list[list[int]] = []

    def search(start: int, remaining: int, chosen: list[int]) -> None:
        if remaining == 0:
            found.append(list(chosen))
            return
        for index in range(start, len(ordered)):
            value = ordered[index]
            if index > start and value == ordered[index - 1]:
                continue
            if value > remaining:
                break
            chosen.append(value)
            search(index + 1, remaining - value, chosen)
            chosen.pop()

    search(0, target, [])
    return found


def count_subsequences_with_sum(values: Sequence[int], target: int) -> int:
    """Count subsequences summing to ``target``, abandoning any branch whose running sum exceeds it.

    The pruning assumes non-negative values.
    """

    def count(index: int, total: int) -> int:
        if total > target:
            return 0
        if index >= len(values):
            return int(total == target)
        return count(index + 1, total + values[index]) + count(index + 1, total)

    return count(0, 0)


def count_subsets_with_sum(values: Sequence[int], target: int) -> int:
    """Count subsets summing to ``target``; works for any integer values."""

    def count(index: int, remaining: int) -> int:
        if index >= len(values):
            return int(remaining == 0)
        return count(index + 1, remaining - values[index]) + count(
            index + 1, remaining
        )

    return count(0, target)


def permutations(values: Sequence[int]) -> list[list[int]]:
    """Every ordering of ``values``, earlier positions chosen first."""
    return [list(order) for order in itertools.permutations(values)]


def subsequences(values: Sequence[int]) -> Iterator[list[int]]:
    """Yield every subsequence, those taking each element before those skipping it.

    The full sequence comes first and the empty one last.
    """

    def walk(start: int) -> Iterator[tuple[int, ...]]:
        if start >= len(values):
            yield ()
            return
        head = values[start]
        for rest in walk(start + 1):
            yield (head, *rest)
        yield from walk(start + 1)

    for found in walk(0):
        yield list(found)


def subsequences_with_sum(values: Sequence[int], target: int) -> Iterator[list[int]]:
    """Yield, in the order of :func:`subsequences`, those summing to ``target``."""
    return (found for found in subsequences(values) if sum(found) == target)


def first_subsequence_with_sum(
    values: Sequence[int], target: int
) -> list[int] | None:
    """The first subsequence summing to ``target``, or None if there is none."""
    return next(subsequences_with_sum(values, target), None)


def reverse_array(values: Sequence[int]) -> list[int]:
    """A new list holding ``values`` in reverse order."""
    result = list(values)

    def swap_ends(start: int, end: int) -> None:
        if start >= end:
            return
        result[start], result[end] = result[end], result[start]
        swap_ends(start + 1, end - 1)

    swap_ends(0, len(result) - 1)
    return result


def subset_sums(values: Sequence[int]) -> list[int]:
    """The sums of all subsets of ``values``, in ascending order."""
    return sorted(sum(found) for found in subsequences(values))