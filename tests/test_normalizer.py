"""
Tests for word normalization.
"""

import pytest

from wordbank.normalizer import normalize


class TestNormalize:
    """Comparison keys ignore case and all whitespace."""

    @pytest.mark.parametrize("word", ["Hello  World", "helloworld", " HELLOWORLD ", "hello\tworld\n"])
    def test_case_and_whitespace_variants_share_a_key(self, word):
        """Spacing and case variants collapse to one key."""
        assert normalize(word) == "helloworld"

    def test_korean_with_internal_space(self):
        """Inner spaces in Hangul are dropped."""
        assert normalize("피 자") == normalize("피자") == "피자"

    def test_trailing_space_ignored(self):
        """Trailing space does not change the key."""
        assert normalize("마크 ") == normalize("마크")

    def test_distinct_words_stay_distinct(self):
        """Different words keep different keys."""
        assert normalize("pizza") != normalize("pasta")

    def test_empty_and_blank_are_empty_key(self):
        """Blank input gives the empty key."""
        assert normalize("") == ""
        assert normalize("   ") == ""

    def test_applying_twice_changes_nothing(self):
        """Normalizing is idempotent."""
        key = normalize("  Mine  Craft ")
        assert normalize(key) == key == "minecraft"
