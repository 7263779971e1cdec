import random

import pytest

from dsa_steps.subarrays import (
    MaxSubarray,
    count_subarrays_with_sum,
    longest_subarray_sum_brute,
    longest_subarray_sum_prefix,
    longest_subarray_sum_quadratic,
    longest_subarray_sum_window,
    max_subarray,
    max_subarray_sum_brute,
    max_subarray_sum_quadratic,
)

SOURCE_ARRAY = [1, 2, 3, 1, 1, 1, 1, 4, 2, 3]


def _random_lists(seed, low, high, count=30):
    rng = random.Random(seed)
    return [
        [rng.randint(low, high) for _ in range(rng.randint(1, 12))]
        for _ in range(count)
    ]


@pytest.mark.parametrize(
    "func",
    [
        longest_subarray_sum_brute,
        longest_subarray_sum_quadratic,
        longest_subarray_sum_prefix,
        longest_subarray_sum_window,
    ],
)
def test_longest_on_source_array(func):
    assert func(SOURCE_ARRAY, 3) == 3


@pytest.mark.parametrize("values", _random_lists(2, -4, 4))
def test_longest_variants_agree_with_negatives(values):
    k = sum(values[: len(values) // 2 + 1])
    expected = longest_subarray_sum_brute(values, k)
    assert longest_subarray_sum_quadratic(values, k) == expected
    assert longest_subarray_sum_prefix(values, k) == expected
    assert expected >= 1


@pytest.mark.parametrize("values", _random_lists(3, 0, 5))
def test_window_agrees_for_non_negative(values):
    for k in range(0, 12):
        assert longest_subarray_sum_window(values, k) == longest_subarray_sum_prefix(
            values, k
        )


def test_longest_whole_array():
    values = [2, -1, 3]
    assert longest_subarray_sum_prefix(values, sum(values)) == len(values)


def test_longest_empty_is_zero():
    assert longest_subarray_sum_window([], 5) == 0
    assert longest_subarray_sum_prefix([], 0) == 0


def test_count_small_example():
    assert count_subarrays_with_sum([1, 2, 3], 3) == 2


@pytest.mark.parametrize("values", _random_lists(4, -3, 3))
def test_count_at_least_whole_array(values):
    assert count_subarrays_with_sum(values, sum(values)) >= 1


def test_count_zero_when_out_of_reach():
    values = [1, 2, 3]
    assert count_subarrays_with_sum(values, sum(values) + 1) == 0


def test_count_single_elements():
    values = [5, 5, 5]
    assert count_subarrays_with_sum(values, 5) == len(values)


def test_max_subarray_classic():
    assert max_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4]) == MaxSubarray(6, 3, 6)


def test_max_subarray_all_negative_is_empty():
    assert max_subarray([-3, -1, -2]) == MaxSubarray(0, -1, -1)


def test_max_subarray_empty_input():
    assert max_subarray([]) == MaxSubarray(0, -1, -1)


@pytest.mark.parametrize("values", _random_lists(5, -5, 5))
def test_max_variants_agree(values):
    brute = max_subarray_sum_brute(values)
    assert max_subarray_sum_quadratic(values) == brute
    result = max_subarray(values)
    assert result.total == max(0, brute)
    if result.start != -1:
        assert sum(values[result.start : result.end + 1]) == result.total


def test_max_brute_all_negative_is_largest_element():
    values = [-3, -1, -2]
    assert max_subarray_sum_brute(values) == max(values)


@pytest.mark.parametrize("func", [max_subarray_sum_brute, max_subarray_sum_quadratic])
def test_max_empty_raises(func):
    with pytest.raises(ValueError):
        func([])