"""Small container and algorithm helpers: pairs, ordering, permutations, bits."""

from __future__ import annotations

from collections.abc import Iterable

_PAIRS = [(1, 2), (3, 4), (5, 6), (7, 8)]


def pair_demo() -> str:
    """Return the text that walks through a pair, a nested pair and a list of pairs."""
    first, second = 1, 2
    outer, (inner_first, inner_second) = 1, (1, 2)
    lines = [
        f"{first}  {second}",
        f"{outer}  {inner_first}  {inner_second}",
        "Printing array of pairs: ",
    ]
    lines.extend(f"{a}  {b}" for a, b in _PAIRS)
    return "".join(f"{line}\n" for line in lines)


def pair_precedes(first: tuple[int, int], second: tuple[int, int]) -> bool:
    """True if ``first`` sorts before ``second``: second item ascending, then first item descending."""
    if first[1] != second[1]:
        return first[1] < second[1]
    return first[0] > second[0]


def sort_pairs(pairs: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Sort pairs by second item ascending, ties by first item descending."""
    return sorted(pairs, key=lambda pair: (pair[1], -pair[0]))


def _step(chars: list[str], forward: bool) -> bool:
    """Rearrange ``chars`` into the next (or previous) permutation in place.

    Returns False, after wrapping around to the opposite extreme, when no such
    permutation exists.
    """

    def before(a: str, b: str) -> bool:
        return a < b if forward else a > b

    pivot = len(chars) - 2
    while pivot >= 0 and not before(chars[pivot], chars[pivot + 1]):
        pivot -= 1
    if pivot < 0:
        chars.reverse()
        return False
    swap = len(chars) - 1
    while not before(chars[pivot], chars[swap]):
        swap -= 1
    chars[pivot], chars[swap] = chars[swap], chars[pivot]
    chars[pivot + 1 :] = reversed(chars[pivot + 1 :])
    return True


def permutations_after(text: str) -> list[str]:
    """Every permutation of ``text`` that follows it in dictionary order."""
    chars = list(text)
    found = []
    while _step(chars, forward=True):
        found.append("".join(chars))
    return found


def previous_permutation(text: str) -> str:
    """The permutation just before ``text``; the smallest wraps to the largest."""
    chars = list(text)
    _step(chars, forward=False)
    return "".join(chars)


def popcount(n: int) -> int:
    """Number of set bits in a non-negative integer."""
    if n < 0:
        raise ValueError("popcount needs a non-negative integer")
    return n.bit_count()


def digit_count(n: int) -> int:
    """Number of decimal digits in a positive integer."""
    if n <= 0:
        raise ValueError("digit_count needs a positive integer")
    return len(str(n))