"""Standard-library style algorithms: custom sorting, bit counts, permutations, bounds."""

from __future__ import annotations

import bisect
from collections.abc import Iterator, Sequence


def sort_pairs_by_second(pairs: Sequence[tuple[int, int]]) -> list[tuple[int, int]]:
    """Pairs sorted by second element ascending, ties by first element descending."""
    return sorted(pairs, key=lambda pair: (pair[1], -pair[0]))


def popcount(n: int) -> int:
    """The number of set bits in a non-negative integer."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return bin(n).count("1")


def _next_permutation(chars: list[str]) -> bool:
    pivot = len(chars) - 2
    while pivot >= 0 and chars[pivot] >= chars[pivot + 1]:
        pivot -= 1
    if pivot < 0:
        return False
    swap = len(chars) - 1
    while chars[swap] <= chars[pivot]:
        swap -= 1
    chars[pivot], chars[swap] = chars[swap], chars[pivot]
    chars[pivot + 1 :] = reversed(chars[pivot + 1 :])
    return True


def permutations_in_order(text: str) -> Iterator[str]:
    """Every distinct arrangement of the characters, in dictionary order."""
    chars = sorted(text)
    yield "".join(chars)
    while _next_permutation(chars):
        yield "".join(chars)


def contains(values: Sequence[int], x: int) -> bool:
    """Whether x is in the sorted values, by binary search."""
    i = bisect.bisect_left(values, x)
    return i < len(values) and values[i] == x


def lower_bound(values: Sequence[int], x: int) -> int:
    """The first index whose value is not less than x, or len(values)."""
    return bisect.bisect_left(values, x)


def upper_bound(values: Sequence[int], x: int) -> int:
    """The first index whose value is greater than x, or len(values)."""
    return bisect.bisect_right(values, x)


def first_occurrence(values: Sequence[int], x: int) -> int:
    """The index of the first x in the sorted values, or -1."""
    i = lower_bound(values, x)
    return i if i < len(values) and values[i] == x else -1


def last_occurrence(values: Sequence[int], x: int) -> int:
    """The index of the last x in the sorted values, or -1."""
    i = upper_bound(values, x) - 1
    return i if i >= 0 and values[i] == x else -1


def largest_smaller(values: Sequence[int], x: int) -> int | None:
    """The largest value strictly below x in the sorted values, or None."""
    i = lower_bound(values, x) - 1
    return values[i] if i >= 0 else None


def smallest_greater(values: Sequence[int], x: int) -> int | None:
    """The smallest value strictly above x in the sorted values, or None."""
    i = upper_bound(values, x)
    return values[i] if i < len(values) else None