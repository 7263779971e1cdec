"""Digit arithmetic, divisors, primality and greatest common divisors."""

from __future__ import annotations

import math

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)


def count_digits(n: int) -> int:
    """Count the decimal digits of n by repeated division; 0 for n <= 0."""
    count = 0
    while n > 0:
        count += 1
        n //= 10
    return count


def count_digits_log(n: int) -> int:
    """Count the decimal digits of a positive n with a base-10 logarithm."""
    if n <= 0:
        raise ValueError("n must be positive")
    return int(math.log10(n) + 1)


def reverse_digits(x: int) -> int:
    """Reverse the digits of x, keeping its sign.

    Returns 0 when the result does not fit a signed 32-bit integer.
    """
    sign = -1 if x < 0 else 1
    result = sign * int(str(abs(x))[::-1])
    if not INT_MIN <= result <= INT_MAX:
        return 0
    return result


def is_palindrome_number(x: int) -> bool:
    """Whether x reads the same backwards; negatives never do."""
    if x < 0:
        return False
    reversed_x = int(str(x)[::-1])
    if reversed_x > INT_MAX:
        return False
    return reversed_x == x


def is_armstrong(x: int) -> bool:
    """Whether x equals the sum of its digits each raised to the digit count."""
    if x < 0:
        return False
    power = count_digits(x)
    return sum(int(digit) ** power for digit in str(x)) == x if x else True


def divisors_brute(n: int) -> list[int]:
    """All positive divisors of n, found by trying every number up to n."""
    return [i for i in range(1, n + 1) if n % i == 0]


def divisors(n: int) -> list[int]:
    """All positive divisors of n in ascending order, trying up to sqrt(n)."""
    if n < 1:
        return []
    found = []
    for i in range(1, math.isqrt(n) + 1):
        if n % i == 0:
            found.append(i)
            if n // i != i:
                found.append(n // i)
    return sorted(found)


def is_prime_brute(n: int) -> bool:
    """Whether n has exactly two divisors, counting every candidate up to n."""
    return sum(1 for i in range(1, n + 1) if n % i == 0) == 2


def is_prime(n: int) -> bool:
    """Whether n has exactly two divisors, counting divisor pairs up to sqrt(n)."""
    if n < 1:
        return False
    count = 0
    for i in range(1, math.isqrt(n) + 1):
        if n % i == 0:
            count += 1 if n // i == i else 2
    return count == 2


def gcd_brute(a: int, b: int) -> int:
    """The largest common divisor, trying every number up to min(a, b).

    For non-positive inputs no candidate is tried and the result is 1.
    """
    result = 1
    for i in range(1, min(a, b) + 1):
        if a % i == 0 and b % i == 0:
            result = i
    return result


def gcd_descending(a: int, b: int) -> int:
    """The first common divisor found counting down from min(a, b)."""
    for i in range(min(a, b), 0, -1):
        if a % i == 0 and b % i == 0:
            return i
    raise ValueError("a and b must be positive")


def gcd(a: int, b: int) -> int:
    """Euclid's algorithm by remainders until one side reaches 0."""
    while a > 0 and b > 0:
        if a > b:
            a %= b
        else:
            b %= a
    return b if a == 0 else a