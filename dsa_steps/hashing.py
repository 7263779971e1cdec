"""Frequency counting by precomputation: number and character hashing."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

ALPHABET_SIZE = 26


def frequency_table(values: Iterable[int], max_value: int = 12) -> list[int]:
    """Count each value into a list indexed by value, from 0 to max_value.

    Raises ValueError for a value outside that range.
    """
    table = [0] * (max_value + 1)
    for value in values:
        if not 0 <= value <= max_value:
            raise ValueError(f"value {value} outside 0..{max_value}")
        table[value] += 1
    return table


def frequency_map(values: Iterable[int]) -> Counter[int]:
    """Count each value; keys iterate in sorted order and missing keys count 0."""
    return Counter(sorted(values))


def letter_frequencies(text: str) -> list[int]:
    """Count each lowercase letter a-z into a list of 26 counts.

    Raises ValueError for any other character.
    """
    counts = [0] * ALPHABET_SIZE
    for ch in text:
        if not "a" <= ch <= "z":
            raise ValueError(f"not a lowercase letter: {ch!r}")
        counts[ord(ch) - ord("a")] += 1
    return counts