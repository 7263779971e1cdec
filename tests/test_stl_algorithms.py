import itertools

import pytest

from dsa_steps import stl_algorithms as sa

A = [1, 4, 4, 4, 4, 9, 9, 10, 11]
B = [1, 4, 5, 6, 9, 9]


def test_sort_pairs_source_example():
    assert sa.sort_pairs_by_second([(1, 2), (2, 1), (4, 1)]) == [(4, 1), (2, 1), (1, 2)]


def test_popcount_source_examples():
    assert sa.popcount(7) == 3
    assert sa.popcount(6) == 2


def test_popcount_negative_raises():
    with pytest.raises(ValueError):
        sa.popcount(-1)


def test_permutations_source_example():
    expected = ["123", "132", "213", "231", "312", "321"]
    assert list(sa.permutations_in_order("213")) == expected


def test_permutations_distinct_and_ordered():
    result = list(sa.permutations_in_order("aabc"))
    assert result == sorted(set(result))
    assert set(result) == {"".join(p) for p in itertools.permutations("aabc")}


def test_contains():
    data = [1, 4, 5, 8, 9]
    assert sa.contains(data, 3) is False
    assert sa.contains(data, 4) is True


@pytest.mark.parametrize("x, expected", [(4, 1), (7, 4), (10, 6)])
def test_lower_bound(x, expected):
    assert sa.lower_bound(B, x) == expected


@pytest.mark.parametrize("x, expected", [(4, 2), (7, 4), (10, 6)])
def test_upper_bound(x, expected):
    assert sa.upper_bound(B, x) == expected


@pytest.mark.parametrize("x, expected", [(4, 1), (0, -1), (12, -1)])
def test_first_occurrence(x, expected):
    assert sa.first_occurrence(A, x) == expected


@pytest.mark.parametrize("x, expected", [(4, 4), (2, -1), (0, -1)])
def test_last_occurrence(x, expected):
    assert sa.last_occurrence(A, x) == expected


@pytest.mark.parametrize("x, expected", [(4, 1), (2, 1), (1, None), (0, None)])
def test_largest_smaller(x, expected):
    assert sa.largest_smaller(A, x) == expected


@pytest.mark.parametrize("x, expected", [(4, 9), (2, 4), (1, 4), (11, None)])
def test_smallest_greater(x, expected):
    assert sa.smallest_greater(A, x) == expected


def test_bounds_bracket_occurrences():
    for x in range(0, 13):
        lo, hi = sa.lower_bound(A, x), sa.upper_bound(A, x)
        assert hi - lo == A.count(x)
        assert all(v < x for v in A[:lo])
        assert all(v > x for v in A[hi:])