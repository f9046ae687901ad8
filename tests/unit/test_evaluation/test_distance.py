"""
Tests for edit distance.
"""

import pytest

from puzzlebreak.evaluation.distance import edit_distance, bounded_edit_distance, is_fuzzy_match


class TestEditDistance:
    """Test cases for edit_distance()."""

    def test_identical_strings(self):
        """Test distance is zero for equal strings."""
        assert edit_distance("round", "round") == 0

    def test_single_deletion(self):
        """Test one missing character."""
        assert edit_distance("round", "rund") == 1

    def test_distant_words(self):
        """Test unrelated words are far apart."""
        assert edit_distance("round", "circular") > 2

    @pytest.mark.parametrize("a,b,expected", [
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("gelato", "gelatto", 1),
        ("abc", "cba", 2),
    ])
    def test_known_distances(self, a, b, expected):
        """Test textbook Levenshtein examples."""
        assert edit_distance(a, b) == expected

    def test_empty_string(self):
        """Test distance to the empty string is the other length."""
        assert edit_distance("", "round") == 5
        assert edit_distance("round", "") == 5
        assert edit_distance("", "") == 0

    @pytest.mark.parametrize("a,b", [
        ("round", "rund"), ("sphere", "spherical"), ("", "abc"), ("café", "cafe"),
    ])
    def test_symmetric(self, a, b):
        """Test distance does not depend on argument order."""
        assert edit_distance(a, b) == edit_distance(b, a)

    def test_counts_code_points(self):
        """Test non-ASCII characters count as single edits."""
        assert edit_distance("naïve", "naive") == 1
        assert edit_distance("日本", "日木") == 1


class TestBoundedEditDistance:
    """Test cases for bounded_edit_distance()."""

    def test_within_limit_returns_exact_distance(self):
        """Test distances within the limit are exact."""
        assert bounded_edit_distance("round", "rund", 2) == 1

    def test_beyond_limit_returns_limit_plus_one(self):
        """Test far strings report limit + 1."""
        assert bounded_edit_distance("round", "circular", 2) == 3
        assert bounded_edit_distance("a", "abcdefgh", 2) == 3

    @pytest.mark.parametrize("a,b,limit", [
        ("kitten", "sitting", 3),
        ("round", "rnd", 2),
        ("gelato", "gelato", 0),
    ])
    def test_distance_equal_to_limit_is_exact(self, a, b, limit):
        """Test a distance exactly at the limit is reported unchanged."""
        assert bounded_edit_distance(a, b, limit) == edit_distance(a, b) == limit

    def test_negative_limit_rejected(self):
        """Test negative limits raise."""
        with pytest.raises(ValueError):
            bounded_edit_distance("a", "b", -1)


class TestIsFuzzyMatch:
    """Test cases for is_fuzzy_match()."""

    def test_at_threshold_matches(self):
        """Test the threshold is inclusive."""
        assert is_fuzzy_match("round", "rnd", 2)

    def test_beyond_threshold_rejects(self):
        """Test one past the threshold is rejected."""
        assert not is_fuzzy_match("round", "rn", 2)

    def test_zero_threshold_requires_equality(self):
        """Test threshold 0 only accepts identical strings."""
        assert is_fuzzy_match("round", "round", 0)
        assert not is_fuzzy_match("round", "rounds", 0)

    def test_negative_threshold_rejected(self):
        """Test negative thresholds raise."""
        with pytest.raises(ValueError):
            is_fuzzy_match("a", "a", -1)
