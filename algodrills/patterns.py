"""Text patterns built from stars, digits and letters, one row per line."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

_A = ord("A")
_E = ord("E")


def _letters(codes: range) -> str:
    return "".join(f"{chr(code)} " for code in codes)


def pattern_1(n: int) -> list[str]:
    """A solid n-by-n square of stars."""
    return ["*" * n for _ in range(n)]


def pattern_2(n: int) -> list[str]:
    """A right triangle of stars growing by one per row."""
    return ["*" * (i + 1) for i in range(n)]


def pattern_3(n: int) -> list[str]:
    """Rows 0..n, row i counting from 1 up to i; the first row is empty."""
    return ["".join(f"{j} " for j in range(1, i + 1)) for i in range(n + 1)]


def pattern_4(n: int) -> list[str]:
    """An inverted right triangle of stars."""
    return ["*" * (n - i) for i in range(n)]


def pattern_5(n: int) -> list[str]:
    """An inverted triangle of counting numbers."""
    return ["".join(f"{j} " for j in range(1, n - i + 1)) for i in range(n)]


def pattern_6(n: int) -> list[str]:
    """A centred pyramid of stars."""
    return [" " * (n - i) + "*" * (2 * i - 1) for i in range(1, n + 1)]


def pattern_7(n: int) -> list[str]:
    """An inverted pyramid of stars."""
    return [
        " " * max(0, i - 2) + "*" * (2 * (n - i) + 1) for i in range(1, n + 1)
    ]


def pattern_8(n: int) -> list[str]:
    """An inverted pyramid of stars, drawn the same way as pattern 7."""
    return pattern_7(n)


def pattern_9(n: int) -> list[str]:
    """A pyramid followed by an inverted pyramid: a diamond."""
    lower = [" " * (i - 1) + "*" * (2 * (n - i) + 1) for i in range(1, n + 1)]
    return pattern_6(n) + lower


def pattern_10(n: int) -> list[str]:
    """A growing then shrinking run of stars, the last row empty."""
    rising = ["*" * i for i in range(1, n + 1)]
    falling = ["*" * (n - i) for i in range(1, n + 1)]
    return rising + falling


def pattern_11(n: int) -> list[str]:
    """A triangle of alternating 1s and 0s; odd rows start with 1."""
    return [
        "".join(str((i + k) % 2) for k in range(i)) for i in range(1, n + 1)
    ]


def pattern_12(n: int) -> list[str]:
    """Counting up, a gap, then counting down, meeting in the last row."""
    rows = []
    for i in range(1, n + 1):
        up = "".join(str(j) for j in range(1, i + 1))
        down = "".join(str(j) for j in range(i, 0, -1))
        rows.append(up + " " * (2 * (n - i)) + down)
    return rows


def pattern_13(n: int) -> list[str]:
    """Floyd's triangle: consecutive numbers, each followed by three spaces."""
    rows = []
    count = 1
    for i in range(1, n + 1):
        rows.append("".join(f"{value}   " for value in range(count, count + i)))
        count += i
    return rows


def pattern_14(n: int) -> list[str]:
    """Row i holds the first i letters of the alphabet."""
    return [_letters(range(_A, _A + i)) for i in range(1, n + 1)]


def pattern_15(n: int) -> list[str]:
    """Row i repeats the i-th letter i times."""
    return [f"{chr(_A + i - 1)} " * i for i in range(1, n + 1)]


def pattern_16(n: int) -> list[str]:
    """A centred letter pyramid rising to the middle and falling back to A."""
    rows = []
    for i in range(1, n + 1):
        rising = _letters(range(_A, _A + i))
        falling = _letters(range(_A + i - 2, _A - 1, -1))
        rows.append(" " * (n - i) + rising + falling)
    return rows


def pattern_17(n: int) -> list[str]:
    """Row i holds the i characters ending at E."""
    return [_letters(range(_E - i + 1, _E + 1)) for i in range(1, n + 1)]


def pattern_18(n: int) -> list[str]:
    """Two mirrored star triangles with a gap: closing, then opening."""
    top = [
        "* " * (n - i + 1) + "  " * (2 * (i - 1)) + "* " * (n - i + 1)
        for i in range(1, n + 1)
    ]
    bottom = [
        "* " * i + "  " * (2 * (n - i)) + "* " * i for i in range(1, n + 1)
    ]
    return top + bottom


def pattern_19(n: int) -> list[str]:
    """A hollow n-by-n square of stars."""
    rows = []
    for i in range(1, n + 1):
        if i in (1, n):
            rows.append("* " * n)
        else:
            rows.append(
                "".join("* " if j in (1, n) else "  " for j in range(1, n + 1))
            )
    return rows


PATTERNS: dict[int, Callable[[int], list[str]]] = {
    1: pattern_1,
    2: pattern_2,
    3: pattern_3,
    4: pattern_4,
    5: pattern_5,
    6: pattern_6,
    7: pattern_7,
    8: pattern_8,
    9: pattern_9,
    10: pattern_10,
    11: pattern_11,
    12: pattern_12,
    13: pattern_13,
    14: pattern_14,
    15: pattern_15,
    16: pattern_16,
    17: pattern_17,
    18: pattern_18,
    19: pattern_19,
}


def render(number: int, n: int) -> str:
    """Return pattern ``number`` of size ``n`` as text, each row ending in a newline."""
    try:
        builder = PATTERNS[number]
    except KeyError:
        raise ValueError(f"unknown pattern number: {number}") from None
    return "".join(f"{row}\n" for row in builder(n))


def main(argv: Sequence[str] | None = None) -> int:
    """Print a pattern; the size is taken from the arguments or standard input."""
    parser = argparse.ArgumentParser(
        prog="algodrills-patterns", description="Print a text pattern."
    )
    parser.add_argument("number", type=int, choices=sorted(PATTERNS))
    parser.add_argument("n", type=int, nargs="?", help="size (read from stdin if omitted)")
    args = parser.parse_args(argv)

    n = args.n
    if n is None:
        tokens = sys.stdin.read().split()
        if not tokens:
            parser.error("expected a size on standard input")
        try:
            n = int(tokens[0])
        except ValueError:
            parser.error(f"invalid size: {tokens[0]!r}")

    sys.stdout.write(render(args.number, n))
    return 0