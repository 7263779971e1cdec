"""Text patterns built from stars, numbers and letters.

Every pattern function returns the full text, one line per row, each row
ending in a newline.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable


def _lines(rows: Iterable[str]) -> str:
    return "".join(f"{row}\n" for row in rows)


def _tokens(items: Iterable[object]) -> str:
    return "".join(f"{item} " for item in items)


def pattern1(n: int) -> str:
    """A solid n-by-n square of stars."""
    return _lines("* " * n for _ in range(n))


def pattern2(n: int) -> str:
    """A right triangle of stars, growing by one per row."""
    return _lines("* " * (i + 1) for i in range(n))


def pattern3(n: int) -> str:
    """Row i counts from 1 up to i."""
    return _lines(_tokens(range(1, i + 1)) for i in range(1, n + 1))


def pattern4(n: int) -> str:
    """Row i repeats the number i, i times."""
    return _lines(_tokens([i] * i) for i in range(1, n + 1))


def pattern5(n: int) -> str:
    """An inverted right triangle of stars."""
    return _lines("* " * (n - i + 1) for i in range(1, n + 1))


def pattern6(n: int) -> str:
    """An inverted triangle of counting numbers."""
    return _lines(_tokens(range(1, n - i + 2)) for i in range(1, n + 1))


def _pyramid_row(n: int, i: int) -> str:
    width = 2 * i - 1
    return " " * ((2 * n - width) // 2) + "*" * width


def pattern7(n: int) -> str:
    """A centred pyramid of stars."""
    return _lines(_pyramid_row(n, i) for i in range(1, n + 1))


def pattern8(n: int) -> str:
    """A centred inverted pyramid of stars."""
    return _lines(_pyramid_row(n, i) for i in range(n, 0, -1))


def pattern9(n: int) -> str:
    """A pyramid followed by an inverted pyramid."""
    return pattern7(n) + pattern8(n)


def pattern10(n: int) -> str:
    """A sideways triangle of stars, widest in the middle row."""
    widths = [*range(1, n + 1), *range(n - 1, 0, -1)]
    return _lines("*" * width for width in widths)


def pattern11(n: int) -> str:
    """A triangle of alternating ones and zeros."""
    return _lines(
        _tokens(1 if i % 2 == j % 2 else 0 for j in range(1, i + 1))
        for i in range(1, n + 1)
    )


def pattern12(n: int) -> str:
    """Numbers climbing in from both sides towards a shrinking gap."""
    return _lines(
        _tokens(range(1, i + 1)) + "  " * (2 * (n - i)) + _tokens(range(i, 0, -1))
        for i in range(1, n + 1)
    )


def pattern13(n: int) -> str:
    """Floyd's triangle: consecutive numbers filling a right triangle."""
    rows = []
    start = 1
    for i in range(1, n + 1):
        rows.append(_tokens(range(start, start + i)))
        start += i
    return _lines(rows)


def _letters(count: int) -> Iterable[str]:
    return (chr(ord("A") + k) for k in range(count))


def pattern14(n: int) -> str:
    """Row i holds the first i capital letters."""
    return _lines(_tokens(_letters(i)) for i in range(1, n + 1))


def pattern15(n: int) -> str:
    """Row i holds the first n-i+1 capital letters."""
    return _lines(_tokens(_letters(n - i + 1)) for i in range(1, n + 1))


def pattern16(n: int) -> str:
    """Row i repeats the i-th capital letter i times."""
    return _lines(_tokens([chr(ord("A") + i - 1)] * i) for i in range(1, n + 1))


def pattern17(n: int) -> str:
    """A centred pyramid of letters rising to the middle and falling back."""
    rows = []
    for i in range(1, n + 1):
        width = 2 * i - 1
        letters = (chr(ord("A") + min(j, width - 1 - j)) for j in range(width))
        rows.append("  " * (n - i) + _tokens(letters))
    return _lines(rows)


def pattern18(n: int) -> str:
    """Letters counting back from the n-th letter, one more per row."""
    return _lines(
        _tokens(chr(ord("A") + j - 1) for j in range(n, i - 1, -1))
        for i in range(n, 0, -1)
    )


def _wing_row(n: int, i: int) -> str:
    return "* " * i + "  " * (2 * (n - i)) + "* " * i


def pattern19(n: int) -> str:
    """A star frame with a diamond-shaped hole."""
    order = [*range(n, 0, -1), *range(1, n + 1)]
    return _lines(_wing_row(n, i) for i in order)


def pattern20(n: int) -> str:
    """A butterfly of stars."""
    order = [*range(1, n + 1), *range(n - 1, 0, -1)]
    return _lines(_wing_row(n, i) for i in order)


def pattern21(n: int) -> str:
    """A hollow square outlined in stars."""
    edges = {1, n}
    return _lines(
        "".join("*" if i in edges or j in edges else " " for j in range(1, n + 1))
        for i in range(1, n + 1)
    )


def _concentric(n: int) -> list[list[int]]:
    size = 2 * n - 1
    return [
        [n - min(r, c, size - 1 - r, size - 1 - c) for c in range(size)]
        for r in range(size)
    ]


def pattern22(n: int) -> str:
    """Concentric squares of numbers from n at the rim down to 1 in the centre."""
    if n < 1:
        # The middle row still ends its (empty) line.
        return "\n"
    return _lines(_tokens(row) for row in _concentric(n))


def pattern22_alt(n: int) -> str:
    """The concentric number square with the numbers run together."""
    return _lines("".join(map(str, row)) for row in _concentric(n))


PATTERNS: dict[str, Callable[[int], str]] = {
    "1": pattern1,
    "2": pattern2,
    "3": pattern3,
    "4": pattern4,
    "5": pattern5,
    "6": pattern6,
    "7": pattern7,
    "8": pattern8,
    "9": pattern9,
    "10": pattern10,
    "11": pattern11,
    "12": pattern12,
    "13": pattern13,
    "14": pattern14,
    "15": pattern15,
    "16": pattern16,
    "17": pattern17,
    "18": pattern18,
    "19": pattern19,
    "20": pattern20,
    "21": pattern21,
    "22": pattern22,
    "22_alt": pattern22_alt,
}


def main(argv: list[str] | None = None) -> int:
    """Read a case count and then one size per case from stdin; print each pattern."""
    parser = argparse.ArgumentParser(description="Print text patterns.")
    parser.add_argument("--pattern", default="22", choices=list(PATTERNS))
    args = parser.parse_args(argv)
    draw = PATTERNS[args.pattern]

    numbers = iter(int(token) for token in sys.stdin.read().split())
    cases = next(numbers, 0)
    for _, n in zip(range(cases), numbers):
        sys.stdout.write(draw(n))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())