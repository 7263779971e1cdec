# dsa-steps

A collection of classic data-structure and algorithm exercises, many of them
solved in several ways, from the naive approach to the optimal one. Functions
return their results rather than printing them, so the approaches can be
compared side by side.

The package has no dependencies beyond the Python standard library and needs
Python 3.10 or later.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Topics |
| --- | --- |
| `dsa_steps.patterns` | star, number and letter patterns (`pattern1` … `pattern22`, `pattern22_alt`), plus the `dsa-patterns` command |
| `dsa_steps.maths` | digit counting, digit reversal with 32-bit overflow check, palindrome and Armstrong numbers, divisors, primality, GCD |
| `dsa_steps.recursion` | basic recursion: counting, repeating, sums, factorials, in-place reversal, palindromes, Fibonacci |
| `dsa_steps.hashing` | frequency counting with a fixed-size table, a map, and per-letter counts |
| `dsa_steps.stl_algorithms` | sorting pairs with a custom order, bit counts, permutations in dictionary order, binary-search bounds and queries |
| `dsa_steps.arrays_easy` | largest, second largest and second smallest, sortedness, removing duplicates, rotations, moving zeros, linear search |
| `dsa_steps.arrays_medium` | two sum, sort colours, majority element, stock profit, rearranging by sign, leaders |
| `dsa_steps.subarrays` | longest subarray with sum k, number of subarrays with sum k, maximum subarray sum |

Where a problem has several solutions, each has its own function, for example
`maths.gcd_brute`, `maths.gcd_descending` and `maths.gcd`, or
`arrays_medium.majority_brute`, `arrays_medium.majority_hash` and
`arrays_medium.majority`.

Functions that report "not found" follow the conventions of each exercise:
`two_sum` returns `(-1, -1)`, `linear_search` and `first_occurrence` return
`-1`, while `majority` and `largest_smaller` return `None`. Invalid input,
such as a value outside a frequency table or an empty sequence where an
element is required, raises `ValueError`.

## Examples

```python
from dsa_steps.maths import gcd, divisors, reverse_digits
from dsa_steps.stl_algorithms import lower_bound, upper_bound, permutations_in_order
from dsa_steps.arrays_medium import two_sum, leaders
from dsa_steps.subarrays import count_subarrays_with_sum, max_subarray

gcd(52, 10)                              # 2
divisors(36)                             # [1, 2, 3, 4, 6, 9, 12, 18, 36]
reverse_digits(1534236469)               # 0, the reversal overflows 32 bits
lower_bound([1, 4, 5, 6, 9, 9], 4)       # 1
upper_bound([1, 4, 5, 6, 9, 9], 4)       # 2
list(permutations_in_order("213"))       # ['123', '132', '213', '231', '312', '321']
two_sum([2, 6, 5, 8, 11], 14)            # (1, 3)
leaders([10, 22, 12, 3, 0, 6])           # [22, 12, 6]
count_subarrays_with_sum([1, 2, 3, -3, 1, 1, 1, 4, 2, -3], 3)   # 8
max_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4])   # MaxSubarray(total=6, start=3, end=6)
```

Some functions change a list in place and return `None`, such as
`recursion.reverse_in_place`, `arrays_medium.sort_colors` and
`arrays_easy.rotate_left`.

## The pattern printer

The `dsa-patterns` command reads a number of cases from standard input, then
one size per case, and prints a pattern for each size. By default it prints
the concentric number square (`pattern22`); `--pattern` picks another one by
its number, or `22_alt` for the square with the numbers run together:

```
printf '1\n3\n' | dsa-patterns
printf '2\n3\n5\n' | dsa-patterns --pattern 7
```

## What is not included

The package holds no sorting algorithms of its own (selection, bubble,
insertion, merge or quick sort), no matrix exercises, and none of the
harder array problems such as Pascal's triangle or three sum. The union and
intersection of sorted arrays, the missing-number and single-number problems,
the longest consecutive sequence and permutation generation beyond
`stl_algorithms.permutations_in_order` are not covered either.