"""Easy array problems: extremes, sortedness, duplicates, rotation, zeros, search."""

from __future__ import annotations

from collections.abc import Sequence

from dsa_steps.maths import INT_MAX


def largest(values: Sequence[int]) -> int:
    """The largest element, found in one pass. Raises ValueError when empty."""
    if not values:
        raise ValueError("empty sequence has no largest element")
    best = values[0]
    for value in values:
        if value > best:
            best = value
    return best


def second_largest_two_pass(values: Sequence[int]) -> int:
    """The largest element below the maximum, in two passes; -1 if there is none.

    Meant for non-negative values, where -1 cannot be a real answer.
    """
    top = largest(values)
    second = -1
    for value in values:
        if value > second and value != top:
            second = value
    return second


def second_largest(values: Sequence[int]) -> int:
    """The largest element below the maximum, in one pass; -1 if there is none.

    Meant for non-negative values, where -1 cannot be a real answer.
    """
    if not values:
        raise ValueError("empty sequence")
    top = values[0]
    second = -1
    for value in values:
        if value > top:
            second = top
            top = value
        elif second < value < top:
            second = value
    return second


def second_smallest(values: Sequence[int]) -> int:
    """The smallest element above the minimum, in one pass; INT_MAX if there is none."""
    if not values:
        raise ValueError("empty sequence")
    bottom = values[0]
    second = INT_MAX
    for value in values:
        if value < bottom:
            second = bottom
            bottom = value
        elif value != bottom and value < second:
            second = value
    return second


def is_sorted(values: Sequence[int]) -> bool:
    """Whether the values never decrease from one element to the next."""
    return all(prev <= cur for prev, cur in zip(values, values[1:]))


def remove_duplicates_set(values: list[int]) -> int:
    """Write the distinct values, ascending, to the front of the list; return their count."""
    distinct = sorted(set(values))
    values[: len(distinct)] = distinct
    return len(distinct)


def remove_duplicates(values: list[int]) -> int:
    """Compact a sorted list so its distinct values lead it; return their count.

    Uses two pointers; positions past the count keep whatever they held.
    """
    if not values:
        return 0
    last = 0
    for value in values[1:]:
        if value != values[last]:
            last += 1
            values[last] = value
    return last + 1


def rotate_left_one(values: list[int]) -> None:
    """Rotate the list one place to the left, in place."""
    if values:
        values.append(values.pop(0))


def rotate_left_brute(values: list[int], k: int) -> None:
    """Rotate left by k places, one place at a time."""
    for _ in range(k):
        rotate_left_one(values)


def rotate_left(values: list[int], k: int) -> None:
    """Rotate left by k places using a temporary copy of the first k elements."""
    size = len(values)
    if not size:
        return
    k %= size
    head = values[:k]
    values[: size - k] = values[k:]
    values[size - k :] = head


def rotate_right(values: list[int], k: int) -> None:
    """Rotate right by k places using a temporary copy of the last k elements."""
    size = len(values)
    if not size:
        return
    k %= size
    tail = values[size - k :]
    values[k:] = values[: size - k]
    values[:k] = tail


def rotate_left_reversal(values: list[int], k: int) -> None:
    """Rotate left by k places with three reversals and no extra storage."""
    size = len(values)
    if not size:
        return
    k %= size
    values[:k] = values[:k][::-1]
    values[k:] = values[k:][::-1]
    values.reverse()


def move_zeroes_brute(values: Sequence[int]) -> list[int]:
    """A copy with the non-zero values first, in order, and the zeros after them."""
    non_zero = [value for value in values if value != 0]
    return non_zero + [0] * (len(values) - len(non_zero))


def move_zeroes(values: Sequence[int]) -> list[int]:
    """A copy with zeros moved to the end by swapping past the first zero."""
    result = list(values)
    try:
        zero_at = result.index(0)
    except ValueError:
        return result
    for i in range(zero_at + 1, len(result)):
        if result[i] != 0:
            result[i], result[zero_at] = result[zero_at], result[i]
            zero_at += 1
    return result


def move_zeroes_counting(values: list[int]) -> None:
    """Move zeros to the end in place by compacting non-zeros, then filling zeros."""
    zeros = values.count(0)
    write = 0
    for value in list(values):
        if value != 0:
            values[write] = value
            write += 1
    for i in range(len(values) - zeros, len(values)):
        values[i] = 0


def linear_search(values: Sequence[int], target: int) -> int:
    """The index of the first element equal to target, or -1."""
    for i, value in enumerate(values):
        if value == target:
            return i
    return -1