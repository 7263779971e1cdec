"""Subarray sums: longest with a given sum, count with a given sum, and maximum sum."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from typing import NamedTuple


def longest_subarray_sum_brute(values: Sequence[int], k: int) -> int:
    """Length of the longest subarray summing to k, summing every subarray afresh."""
    best = 0
    size = len(values)
    for i in range(size):
        for j in range(i, size):
            if sum(values[i : j + 1]) == k:
                best = max(best, j - i + 1)
    return best


def longest_subarray_sum_quadratic(values: Sequence[int], k: int) -> int:
    """Length of the longest subarray summing to k, extending a running sum."""
    best = 0
    for i in range(len(values)):
        total = 0
        for j in range(i, len(values)):
            total += values[j]
            if total == k:
                best = max(best, j - i + 1)
    return best


def longest_subarray_sum_prefix(values: Sequence[int], k: int) -> int:
    """Length of the longest subarray summing to k, via first-seen prefix sums.

    Works with negative values too.
    """
    first_seen: dict[int, int] = {}
    total = 0
    best = 0
    for i, value in enumerate(values):
        total += value
        if total == k:
            best = max(best, i + 1)
        remainder = total - k
        if remainder in first_seen:
            best = max(best, i - first_seen[remainder])
        first_seen.setdefault(total, i)
    return best


def longest_subarray_sum_window(values: Sequence[int], k: int) -> int:
    """Length of the longest subarray summing to k, by a sliding window.

    Correct only for non-negative values.
    """
    best = 0
    left = 0
    total = 0
    for right, value in enumerate(values):
        total += value
        while left <= right and total > k:
            total -= values[left]
            left += 1
        if total == k:
            best = max(best, right - left + 1)
    return best


def count_subarrays_with_sum(values: Sequence[int], k: int) -> int:
    """Number of subarrays summing to k, counting matching earlier prefix sums."""
    prefix_counts: Counter[int] = Counter({0: 1})
    total = 0
    count = 0
    for value in values:
        total += value
        count += prefix_counts.get(total - k, 0)
        prefix_counts[total] += 1
    return count


def max_subarray_sum_brute(values: Sequence[int]) -> int:
    """The largest sum of a non-empty subarray, summing every subarray afresh."""
    if not values:
        raise ValueError("empty sequence has no subarray")
    size = len(values)
    return max(sum(values[i : j + 1]) for i in range(size) for j in range(i, size))


def max_subarray_sum_quadratic(values: Sequence[int]) -> int:
    """The largest sum of a non-empty subarray, extending a running sum."""
    if not values:
        raise ValueError("empty sequence has no subarray")
    best = values[0]
    for i in range(len(values)):
        total = 0
        for value in values[i:]:
            total += value
            best = max(best, total)
    return best


class MaxSubarray(NamedTuple):
    """A maximum-sum subarray: its sum and inclusive bounds, (-1, -1) when empty."""

    total: int
    start: int
    end: int


def max_subarray(values: Sequence[int]) -> MaxSubarray:
    """The maximum-sum subarray by Kadane's algorithm.

    When every value is negative the empty subarray wins: (0, -1, -1).
    """
    best: int | None = None
    total = 0
    start = best_start = best_end = 0
    for i, value in enumerate(values):
        if total == 0:
            start = i
        total += value
        if best is None or total > best:
            best = total
            best_start, best_end = start, i
        if total < 0:
            total = 0
    if best is None or best < 0:
        return MaxSubarray(0, -1, -1)
    return MaxSubarray(best, best_start, best_end)