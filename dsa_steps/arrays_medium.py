"""Medium array problems: two sum, colours, majority, stock profit, signs, leaders."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def two_sum_brute(values: Sequence[int], target: int) -> tuple[int, int]:
    """Indices (i, j), i < j, of two elements summing to target, or (-1, -1)."""
    for i, first in enumerate(values):
        for j in range(i + 1, len(values)):
            if first + values[j] == target:
                return i, j
    return -1, -1


def two_sum(values: Sequence[int], target: int) -> tuple[int, int]:
    """Indices of two elements summing to target via a value-to-index map, or (-1, -1)."""
    seen: dict[int, int] = {}
    for i, value in enumerate(values):
        partner = target - value
        if partner in seen:
            return seen[partner], i
        seen[value] = i
    return -1, -1


def has_two_sum(values: Sequence[int], target: int) -> bool:
    """Whether two elements sum to target, using two pointers over a sorted copy."""
    ordered = sorted(values)
    left, right = 0, len(ordered) - 1
    while left <= right:
        total = ordered[left] + ordered[right]
        if total == target:
            return True
        if total > target:
            right -= 1
        else:
            left += 1
    return False


def sort_colors_counting(values: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place by counting each."""
    counts = Counter(0 if v == 0 else 1 if v == 1 else 2 for v in values)
    values[:] = [0] * counts[0] + [1] * counts[1] + [2] * counts[2]


def sort_colors(values: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place with the Dutch national flag method."""
    low, mid, high = 0, 0, len(values) - 1
    while mid <= high:
        if values[mid] == 0:
            values[low], values[mid] = values[mid], values[low]
            low += 1
            mid += 1
        elif values[mid] == 1:
            mid += 1
        else:
            values[mid], values[high] = values[high], values[mid]
            high -= 1


def majority_brute(values: Sequence[int]) -> int | None:
    """The element occurring more than len/2 times, or None."""
    half = len(values) // 2
    for value in values:
        if sum(1 for other in values if other == value) > half:
            return value
    return None


def majority_hash(values: Sequence[int]) -> int | None:
    """The majority element found while counting frequencies, or None."""
    half = len(values) // 2
    counts: Counter[int] = Counter()
    for value in values:
        counts[value] += 1
        if counts[value] > half:
            return value
    return None


def majority(values: Sequence[int]) -> int | None:
    """The majority element by Moore's voting with a verifying pass, or None."""
    candidate = 0
    votes = 0
    for value in values:
        if votes == 0:
            candidate = value
        votes += 1 if value == candidate else -1
    if values and values.count(candidate) > len(values) // 2:
        return candidate
    return None


def max_profit(prices: Sequence[int]) -> int:
    """The best gain from one buy followed by one later sell; 0 if none."""
    profit = 0
    lowest = None
    for price in prices:
        if lowest is None or price < lowest:
            lowest = price
        profit = max(profit, price - lowest)
    return profit


def rearrange_by_sign_split(values: list[int]) -> None:
    """Alternate positives and negatives in place, positive first.

    Zeros are ignored; raises ValueError when there are too few of either sign.
    """
    positives = [v for v in values if v > 0]
    negatives = [v for v in values if v < 0]
    half = len(values) // 2
    if len(positives) < half or len(negatives) < half:
        raise ValueError("needs as many positives as negatives")
    for i, (pos, neg) in enumerate(zip(positives[:half], negatives[:half])):
        values[2 * i] = pos
        values[2 * i + 1] = neg


def rearrange_by_sign(values: Sequence[int]) -> list[int]:
    """A new list with positives at even and non-positives at odd positions.

    Raises ValueError when the counts do not fit that layout.
    """
    positives = [v for v in values if v > 0]
    others = [v for v in values if v <= 0]
    if len(positives) != (len(values) + 1) // 2:
        raise ValueError("needs as many positives as negatives")
    result = [0] * len(values)
    result[0::2] = positives
    result[1::2] = others
    return result


def alternate_by_sign(values: Sequence[int]) -> list[int]:
    """Alternate positives and non-positives, then append whichever is left over."""
    positives = [v for v in values if v > 0]
    others = [v for v in values if v <= 0]
    paired = min(len(positives), len(others))
    result = []
    for pos, neg in zip(positives, others):
        result += [pos, neg]
    return result + positives[paired:] + others[paired:]


def leaders_brute(values: Sequence[int]) -> list[int]:
    """Elements with no strictly greater element anywhere to their right."""
    return [
        value
        for i, value in enumerate(values)
        if all(other <= value for other in values[i + 1 :])
    ]


def leaders(values: Sequence[int]) -> list[int]:
    """The last element and each element strictly greater than all to its right."""
    if not values:
        return []
    found = []
    best = None
    for value in reversed(values):
        if best is None or value > best:
            best = value
            found.append(value)
    found.reverse()
    return found