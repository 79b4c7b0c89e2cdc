"""
Tests for matcher — Boundary-aware censoring and highlighting

Covers:
- Delimiter-bounded matching at string edges and around digits
- Wildcards and case-insensitivity, including non-ASCII letters
- Mask vs replacement censoring
- Phrase and diacritic-tolerant keyword highlighting
"""

from quill.core.accents import AccentTable
from quill.core.matcher import (
    DelimitedMatch, find_delimited, word_pattern,
    censor, highlight_phrase, highlight_keyword,
)


class TestFindDelimited:
    """Bounded match discovery on padded text."""

    def test_offsets(self):
        """Offsets point at the word inside the padded text."""
        assert find_delimited(" a quick b ", "quick") == [DelimitedMatch(3, 8)]

    def test_length(self):
        """Length is end - start."""
        assert DelimitedMatch(3, 8).length == 5

    def test_not_inside_word(self):
        """A word embedded in a longer word is not bounded."""
        assert find_delimited(" darning ", "darn") == []

    def test_empty_word(self):
        """Empty word never matches."""
        assert find_delimited(" text ", "") == []

    def test_bare_wildcard(self):
        """A word made only of wildcards never matches."""
        assert find_delimited(" a, b ", "*") == []

    def test_wildcard_is_lazy(self):
        """* stops at the first delimiter."""
        match = word_pattern("bad*").search(" badword123 ")
        assert match.group(1) == "badword"


class TestCensor:
    """censor() masking and replacement."""

    def test_mask(self):
        """Matched word is masked with # of equal length."""
        assert censor("the quick brown fox", ["quick"], "") == "the ##### brown fox"

    def test_wildcard_masks_full_token(self):
        """Wildcard masks the whole matched token, not the prefix."""
        assert censor("badword123 ok", ["bad*"], "") == "#######123 ok"

    def test_replacement(self):
        """A replacement token substitutes each match."""
        assert censor("darn it, darn", ["darn"], "[x]") == "[x] it, [x]"

    def test_case_insensitive(self):
        """Matching ignores case."""
        assert censor("DARN it", ["darn"]) == "#### it"

    def test_non_ascii_case_insensitive(self):
        """Non-ASCII letters match across case."""
        assert censor("Über alles", ["über"], "***") == "*** alles"

    def test_non_ascii_mask_counts_characters(self):
        """Masks use character length."""
        assert censor("ein über mann", ["über"]) == "ein #### mann"

    def test_embedded_word_untouched(self):
        """darn does not match inside darning."""
        assert censor("darning socks", ["darn"]) == "darning socks"

    def test_adjacent_occurrences(self):
        """Back-to-back occurrences sharing a delimiter are all caught."""
        assert censor("darn darn darn", ["darn"]) == "#### #### ####"

    def test_digits_are_delimiters(self):
        """Digits bound a word like punctuation does."""
        assert censor("abc123darn456", ["darn"]) == "abc123####456"

    def test_punctuation_bounds(self):
        """Punctuation on either side still matches."""
        assert censor("(darn), 'darn'!", ["darn"]) == "(####), '####'!"

    def test_multiple_words(self):
        """Every banned word is applied."""
        assert censor("heck and darn", ["darn", "heck"]) == "#### and ####"

    def test_non_collection_returns_input(self):
        """A banned list that is not a collection is ignored."""
        assert censor("darn", "darn") == "darn"
        assert censor("darn", None) == "darn"

    def test_empty_words_skipped(self):
        """Empty banned entries are ignored."""
        assert censor("keep this", ["", "this"]) == "keep ####"

    def test_result_trimmed(self):
        """Surrounding whitespace is trimmed from the result."""
        assert censor("  darn  ", ["darn"]) == "####"

    def test_bare_wildcard_ignored(self):
        """Wildcard-only words insert nothing between delimiters."""
        assert censor("a, b", ["*"], "X") == "a, b"
        assert censor("a, b", ["**"]) == "a, b"
        assert censor("a, darn", ["*", "darn"], "X") == "a, X"


class TestHighlightPhrase:
    """highlight_phrase() tagging."""

    def test_default_tags(self):
        """Occurrences are wrapped in <mark> tags."""
        assert highlight_phrase("hello world", "world") == "hello <mark>world</mark>"

    def test_preserves_original_case(self):
        """The original casing is kept inside the tags."""
        assert highlight_phrase("Go go GO", "go", "[", "]") == "[Go] [go] [GO]"

    def test_regex_characters_literal(self):
        """Regex metacharacters in the phrase are literal."""
        assert highlight_phrase("cost (est.) $5", "(est.)") == "cost <mark>(est.)</mark> $5"

    def test_empty_phrase(self):
        """Empty phrase leaves the text alone."""
        assert highlight_phrase("hello", "") == "hello"


class TestHighlightKeyword:
    """highlight_keyword() diacritic tolerance."""

    def test_verbatim_uses_phrase(self):
        """A verbatim keyword behaves like highlight_phrase."""
        assert highlight_keyword("hello world", "world") == "hello <mark>world</mark>"

    def test_folds_accents(self, small_table):
        """The original accented text is tagged."""
        result = highlight_keyword("Søren said hi", "soren", table=small_table)
        assert result == "<mark>Søren</mark> said hi"

    def test_expanding_fold(self, small_table):
        """A character folding to several letters maps back to one."""
        assert highlight_keyword("Straße 5", "strasse", table=small_table) == "<mark>Straße</mark> 5"

    def test_multiple_tokens(self):
        """'%' separates keywords, each highlighted."""
        text = "Hà Nội, Việt Nam"
        result = highlight_keyword(text, "ha noi%viet")
        assert result == "<mark>Hà Nội</mark>, <mark>Việt</mark> Nam"

    def test_custom_tags(self, small_table):
        """Custom tags are used."""
        assert highlight_keyword("café", "cafe", "[", "]", table=small_table) == "[café]"

    def test_already_tagged_skipped(self, small_table):
        """Text already inside tags is not wrapped again."""
        text = "<mark>Søren</mark> and Søren"
        result = highlight_keyword(text, "soren", table=small_table)
        assert result == "<mark>Søren</mark> and <mark>Søren</mark>"

    def test_no_match_unchanged(self, small_table):
        """Text without the keyword is returned as-is."""
        assert highlight_keyword("nothing here", "soren", table=small_table) == "nothing here"

    def test_empty_table_no_folding(self):
        """With an empty table accents are not folded."""
        assert highlight_keyword("Søren", "soren", table=AccentTable()) == "Søren"

    def test_empty_keyword(self):
        """Empty keyword leaves the text alone."""
        assert highlight_keyword("Søren", "") == "Søren"
