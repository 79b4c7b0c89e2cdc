"""
Tests for limits — Word and character bounded truncation

Covers:
- End marker appended only when something was dropped
- Whitespace handling in character limits
- Fallback for invalid limits
- ellipsize() positioning and tag stripping
"""

import pytest

from quill.core.limits import (
    DEFAULT_END_CHAR, TruncateResult,
    truncate_words, limit_by_words,
    truncate_characters, limit_by_characters,
    ellipsize,
)


class TestWordLimit:
    """Word-count truncation."""

    def test_truncates_with_marker(self):
        """Dropped words get the end marker."""
        assert limit_by_words("hello world foo", 2, "...") == "hello world..."

    def test_short_text_no_marker(self):
        """No marker when nothing was dropped."""
        assert limit_by_words("hi", 5, "...") == "hi"

    def test_exact_count_no_marker(self):
        """Exactly `limit` words is not a truncation."""
        assert limit_by_words("one two three", 3, "...") == "one two three"

    def test_trailing_whitespace_not_truncation(self):
        """Trailing whitespace alone does not trigger the marker."""
        result = truncate_words("one two  ", 2, "...")
        assert result == TruncateResult("one two", truncated=False)

    def test_result_flag(self):
        """truncate_words reports truncation."""
        result = truncate_words("a b c d", 2, "...")
        assert result.truncated
        assert result.text == "a b..."
        assert str(result) == "a b..."

    def test_default_marker(self):
        """The default marker is the ellipsis entity."""
        assert limit_by_words("a b c", 1) == "a" + DEFAULT_END_CHAR

    def test_blank_input_unchanged(self):
        """Whitespace-only input is returned untouched."""
        assert limit_by_words("   ", 3) == "   "
        assert limit_by_words("", 3) == ""

    @pytest.mark.parametrize("limit", [0, -1, None, "x"])
    def test_invalid_limit_uses_default(self, limit):
        """Unusable limits fall back to 100 words."""
        text = " ".join(["w"] * 150)
        result = truncate_words(text, limit, "...")
        assert result.truncated
        assert len(result.text[:-3].split()) == 100

    def test_newlines_are_word_separators(self):
        """Any whitespace separates words."""
        assert limit_by_words("a\nb\tc d", 3, "!") == "a\nb\tc!"

    def test_huge_limit(self):
        """A limit far beyond the word count keeps everything."""
        assert limit_by_words("a b c", 10 ** 10, "...") == "a b c"
        assert not truncate_words("a b c", 2 ** 40, "...").truncated

    def test_leading_whitespace_kept(self):
        """Leading whitespace stays in front of the kept words."""
        assert limit_by_words("  a b", 1, "...") == "  a..."


class TestCharacterLimit:
    """Character-count truncation."""

    def test_truncates_at_word_boundary(self):
        """Words are kept whole and the marker added."""
        assert limit_by_characters("The quick brown fox", 8, "...") == "The quick..."

    def test_short_text_unchanged(self):
        """Text under the limit is returned as-is."""
        assert limit_by_characters("short", 50) == "short"

    def test_short_text_keeps_whitespace(self):
        """Under the limit, whitespace is not touched."""
        assert limit_by_characters("a\n\nb", 50) == "a\n\nb"

    def test_exact_limit_not_truncated(self):
        """Length equal to the limit is not a truncation."""
        result = truncate_characters("abcde", 5, "...")
        assert result == TruncateResult("abcde", truncated=False)

    def test_fits_after_collapsing(self):
        """Text that fits once whitespace collapses is returned collapsed."""
        result = truncate_characters("a\n\nb   c", 6, "...")
        assert result == TruncateResult("a b c", truncated=False)

    def test_overshoots_by_last_word(self):
        """The final word is kept even past the limit."""
        result = truncate_characters("The quick brown fox", 5, "...")
        assert result.text == "The quick..."
        assert result.truncated

    def test_internal_whitespace_collapsed(self):
        """Truncated output has single spaces."""
        assert limit_by_characters("one\t\ttwo   three four", 7, "~") == "one two~"

    def test_empty(self):
        """Empty input is returned as-is."""
        assert limit_by_characters("", 5) == ""
        assert truncate_characters("", 5) == TruncateResult("")


class TestEllipsize:
    """ellipsize() shortening."""

    TEXT = "Hello wonderful world"

    def test_end(self):
        """position 1 keeps the head."""
        assert ellipsize(self.TEXT, 10) == "Hello wond&hellip;"

    def test_middle(self):
        """position 0.5 keeps head and tail."""
        assert ellipsize(self.TEXT, 10, 0.5, "~") == "Hello~world"

    def test_start(self):
        """position 0 keeps the tail only."""
        assert ellipsize(self.TEXT, 10, 0, "~") == "~rful world"

    def test_short_text_unchanged(self):
        """Text within max_length gets no ellipsis."""
        assert ellipsize("short", 10) == "short"

    def test_tags_stripped(self):
        """HTML tags are removed first."""
        assert ellipsize("<b>Hello</b> world", 20) == "Hello world"

    def test_position_clamped(self):
        """Positions above 1 behave like 1."""
        assert ellipsize("abcdef", 3, 5, "~") == "abc~"

    def test_non_numeric_position(self):
        """Non-numeric positions behave like 1."""
        assert ellipsize("abcdef", 3, "x", "~") == "abc~"

    def test_invalid_length(self):
        """Non-positive max_length keeps the whole text."""
        assert ellipsize("abcdef", 0) == "abcdef"

    def test_empty(self):
        """Empty input gives empty output."""
        assert ellipsize("", 5) == ""
