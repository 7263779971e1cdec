import pytest

from dsa_steps import hashing


def test_frequency_table_counts():
    values = [1, 3, 2, 1, 3, 12]
    table = hashing.frequency_table(values, 12)
    assert len(table) == 13
    assert sum(table) == len(values)
    assert table[1] == values.count(1)
    assert table[12] == values.count(12)
    assert table[0] == 0


def test_frequency_table_default_range():
    table = hashing.frequency_table([12, 12])
    assert len(table) == 13
    assert table[12] == 2


@pytest.mark.parametrize("bad", [-1, 13])
def test_frequency_table_out_of_range(bad):
    with pytest.raises(ValueError):
        hashing.frequency_table([1, bad], 12)


def test_frequency_map_sorted_and_default_zero():
    values = [10, 5, 10, 1_000_000_000, 5, 5]
    freq = hashing.frequency_map(values)
    assert list(freq) == sorted(set(values))
    assert freq[5] == values.count(5)
    assert freq[7] == 0
    assert sum(freq.values()) == len(values)


def test_letter_frequencies():
    text = "abcabcz"
    counts = hashing.letter_frequencies(text)
    assert len(counts) == 26
    assert sum(counts) == len(text)
    assert counts[ord("a") - ord("a")] == text.count("a")
    assert counts[ord("z") - ord("a")] == text.count("z")
    assert counts[ord("q") - ord("a")] == 0


@pytest.mark.parametrize("text", ["abC", "a b", "a1"])
def test_letter_frequencies_rejects_other_characters(text):
    with pytest.raises(ValueError):
        hashing.letter_frequencies(text)