"""
Tests for nucleotide frequency and information content
"""

import math

import pytest

from spliceview.constants import SYMBOLS
from spliceview.frequency import (
    FrequencyProfile,
    frequencies,
    frequency_profile,
    information_content,
    shannon_entropy,
)
from spliceview.records import PositionRecord


class TestFrequencies:
    """Tests for count normalization"""

    def test_frequencies_sum_to_one(self):
        """Test that non-zero counts normalize to a total of 1"""
        freqs = frequencies([3, 1, 4, 1, 5])

        assert sum(freqs.values()) == pytest.approx(1.0)
        assert list(freqs) == list(SYMBOLS)

    def test_frequencies_values(self):
        """Test individual frequencies"""
        freqs = frequencies([5, 5, 0, 0, 0])

        assert freqs == {"A": 0.5, "C": 0.5, "G": 0.0, "T": 0.0, "N": 0.0}

    def test_zero_counts_give_zero_frequencies(self):
        """Test that zero coverage does not divide by zero"""
        freqs = frequencies([0, 0, 0, 0, 0])

        assert all(value == 0.0 for value in freqs.values())


class TestEntropy:
    """Tests for Shannon entropy"""

    def test_single_symbol_has_zero_entropy(self):
        """Test that a fully determined position has zero entropy"""
        assert shannon_entropy(frequencies([0, 0, 9, 0, 0])) == 0.0

    def test_uniform_four_symbols(self):
        """Test that four equal symbols give 2 bits"""
        assert shannon_entropy(frequencies([1, 1, 1, 1, 0])) == pytest.approx(2.0)

    def test_zero_frequencies_are_skipped(self):
        """Test that zero-probability symbols contribute nothing"""
        with_zeros = shannon_entropy({"A": 0.5, "C": 0.5, "G": 0.0, "T": 0.0, "N": 0.0})
        without = shannon_entropy({"A": 0.5, "C": 0.5})

        assert with_zeros == without == pytest.approx(1.0)

    def test_empty_distribution(self):
        """Test that an all-zero distribution has zero entropy"""
        assert shannon_entropy(dict.fromkeys(SYMBOLS, 0.0)) == 0.0


class TestInformationContent:
    """Tests for information content"""

    def test_only_n_gives_two_bits(self):
        """Test that a position covered only by N carries 2 bits"""
        freqs = frequencies([0, 0, 0, 0, 10])

        assert information_content(freqs) == pytest.approx(2.0)

    def test_two_equal_symbols_give_one_bit(self):
        """Test A=5, C=5"""
        assert information_content(frequencies([5, 5, 0, 0, 0])) == pytest.approx(1.0)

    def test_zero_coverage_gives_zero(self):
        """Test that zero coverage yields 0 bits"""
        assert information_content(frequencies([0, 0, 0, 0, 0])) == 0.0

    def test_uniform_five_symbols_is_negative(self):
        """Test that spreading over all five symbols drops below zero"""
        ic = information_content(frequencies([1, 1, 1, 1, 1]))

        assert ic == pytest.approx(2.0 - math.log2(5))
        assert ic < 0

    def test_unnormalized_input(self):
        """Test that frequencies are normalized before use"""
        assert information_content({"A": 2.0, "C": 2.0}) == pytest.approx(1.0)


class TestFrequencyProfile:
    """Tests for frequency_profile"""

    def test_profile_of_record(self):
        """Test profile fields for a covered record"""
        profile = frequency_profile(PositionRecord("chr1", 10, A=8, G=2))

        assert isinstance(profile, FrequencyProfile)
        assert profile.frequencies["A"] == pytest.approx(0.8)
        assert profile.frequencies["G"] == pytest.approx(0.2)
        assert profile.information_content == pytest.approx(2.0 - profile.entropy)
        assert not profile.is_empty

    def test_profile_of_empty_record(self):
        """Test that an uncovered record gives an empty profile"""
        profile = frequency_profile(PositionRecord("chr1", 10))

        assert profile.is_empty
        assert profile.entropy == 0.0
        assert profile.information_content == 0.0
