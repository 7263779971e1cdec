"""Basic recursion: counting, summing, factorials, reversal, palindromes, Fibonacci."""

from __future__ import annotations


def count_up(limit: int) -> list[int]:
    """Count from 0 up to, but not including, limit."""

    def step(current: int) -> list[int]:
        if current >= limit:
            return []
        return [current, *step(current + 1)]

    return step(0)


def repeat_name(name: str, n: int) -> list[str]:
    """The name, n times."""

    def step(i: int) -> list[str]:
        if i > n:
            return []
        return [name, *step(i + 1)]

    return step(1)


def numbers_ascending(n: int) -> list[int]:
    """1 to n, each value emitted before the recursive call."""

    def step(i: int) -> list[int]:
        if i > n:
            return []
        return [i, *step(i + 1)]

    return step(1)


def numbers_descending(n: int) -> list[int]:
    """n down to 1, each value emitted before the recursive call."""
    if n < 1:
        return []
    return [n, *numbers_descending(n - 1)]


def numbers_ascending_backtrack(n: int) -> list[int]:
    """1 to n by backtracking: recurse from n downwards, emit on the way back."""

    def step(i: int) -> list[int]:
        if i < 1:
            return []
        return [*step(i - 1), i]

    return step(n)


def numbers_descending_backtrack(n: int) -> list[int]:
    """n down to 1 by backtracking: recurse from 1 upwards, emit on the way back."""

    def step(i: int) -> list[int]:
        if i > n:
            return []
        return [*step(i + 1), i]

    return step(1)


def sum_parameterized(n: int) -> int:
    """Sum 1..n, carrying the running total as a parameter."""

    def step(i: int, total: int) -> int:
        if i < 1:
            return total
        return step(i - 1, total + i)

    return step(n, 0)


def sum_functional(n: int) -> int:
    """Sum 1..n as n plus the sum of the smaller problem."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return 0
    return n + sum_functional(n - 1)


def factorial_parameterized(n: int) -> int:
    """n!, carrying the running product as a parameter."""

    def step(i: int, product: int) -> int:
        if i < 1:
            return product
        return step(i - 1, product * i)

    return step(n, 1)


def factorial(n: int) -> int:
    """n! as n times the factorial of n-1."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return 1
    return n * factorial(n - 1)


def reverse_in_place(values: list) -> None:
    """Reverse the list in place by swapping mirrored positions recursively."""
    size = len(values)

    def step(i: int) -> None:
        if i >= size // 2:
            return
        j = size - i - 1
        values[i], values[j] = values[j], values[i]
        step(i + 1)

    step(0)


def is_palindrome(text: str) -> bool:
    """Whether text reads the same backwards, comparing mirrored characters."""

    def step(i: int) -> bool:
        if i >= len(text) // 2:
            return True
        if text[i] != text[len(text) - i - 1]:
            return False
        return step(i + 1)

    return step(0)


def fibonacci(n: int) -> int:
    """The n-th Fibonacci number by plain double recursion; n itself for n <= 1."""
    if n <= 1:
        return n
    return fibonacci(n - 1) + fibonacci(n - 2)