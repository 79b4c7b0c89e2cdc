"""
Tests for entities — High-ASCII <-> numeric character entity conversion

Covers:
- UTF-8 arithmetic for 2- and 3-byte sequences
- Lenient handling of truncated runs (never raises)
- Named entity reversal
- Round-trip for valid text
"""

import pytest

from quill.core.entities import (
    ByteRun, encode, decode, ascii_to_entities, entities_to_ascii,
)


class TestByteRun:
    """ByteRun assembly."""

    def test_two_byte_run_from_low_lead(self):
        """Lead bytes below 224 expect a 2-byte run."""
        run = ByteRun()
        run.add(0xC3)
        assert run.expected == 2
        assert not run.complete

    def test_three_byte_run_from_high_lead(self):
        """Lead bytes of 224 and above expect a 3-byte run."""
        run = ByteRun()
        run.add(0xE2)
        assert run.expected == 3

    def test_complete_run_flushes_codepoint(self):
        """A complete run flushes as one entity and resets."""
        run = ByteRun()
        run.add(0xC3)
        run.add(0xA9)
        assert run.complete
        assert run.flush() == "&#233;"
        assert not run.pending

    def test_incomplete_run_flushes_raw_ordinals(self):
        """An incomplete run flushes its ordinals joined in one entity."""
        run = ByteRun()
        run.add(0xE2)
        run.add(0x82)
        assert run.flush() == "&#226;130;"


class TestEncode:
    """encode(): bytes -> entities."""

    def test_two_byte_character(self):
        """é (C3 A9) becomes &#233;."""
        assert encode(b"caf\xc3\xa9") == "caf&#233;"

    def test_three_byte_character(self):
        """€ (E2 82 AC) becomes &#8364;."""
        assert encode(b"\xe2\x82\xac") == "&#8364;"

    def test_ascii_passthrough(self):
        """Pure ASCII is unchanged."""
        assert encode(b"plain text & more") == "plain text & more"

    def test_accepts_str(self):
        """Text input is encoded as UTF-8 first."""
        assert encode("é") == "&#233;"
        assert encode("日本") == "&#26085;&#26412;"

    def test_empty(self):
        """Empty input gives empty output."""
        assert encode(b"") == ""
        assert encode("") == ""

    def test_lone_lead_byte_before_ascii(self):
        """A single pending byte is flushed before the ASCII byte."""
        assert encode(b"a\xc3b") == "a&#195;b"

    def test_pending_pair_survives_ascii(self):
        """Two pending bytes stay pending across an ASCII byte."""
        assert encode(b"\xe2\x82a\xac") == "a&#8364;"

    def test_trailing_single_byte(self):
        """Incomplete run at end of input is flushed, not dropped."""
        assert encode(b"x\xc3") == "x&#195;"

    def test_trailing_pair_concatenated(self):
        """Two trailing bytes of a 3-byte run flush as one entity."""
        assert encode(b"a\xe2\x82") == "a&#226;130;"

    def test_never_raises_on_garbage(self):
        """Arbitrary high bytes always produce output."""
        result = encode(bytes(range(128, 256)))
        assert result.startswith("&#")

    def test_lone_surrogate_in_text(self):
        """A lone surrogate in str input is encoded, not rejected."""
        assert encode("a\ud800b") == "a&#55296;b"
        assert decode(encode("a\ud800b")) == "a&#55296;b"


class TestDecode:
    """decode(): entities -> text."""

    def test_two_byte_entity(self):
        """&#233; decodes to é, i.e. bytes C3 A9."""
        result = decode("&#233;", True)
        assert result == "é"
        assert result.encode("utf-8") == b"\xc3\xa9"

    def test_three_byte_entity(self):
        """&#8364; decodes to €."""
        assert decode("&#8364;") == "€"

    def test_ascii_entity(self):
        """Entities below 128 decode to a single character."""
        assert decode("&#65;&#66;") == "AB"

    def test_named_entities_reversed(self):
        """all=True reverses the named entities."""
        text = "&lt;b&gt; &amp; &quot;x&quot; &apos;y&apos; &#45;"
        assert decode(text) == "<b> & \"x\" 'y' -"

    def test_named_entities_kept(self):
        """all=False leaves named entities alone."""
        text = "&lt;b&gt; &amp; &#233;"
        assert decode(text, all=False) == "&lt;b&gt; &amp; é"

    def test_repeated_entities(self):
        """Every occurrence of the same entity is replaced."""
        assert decode("&#233;t&#233;") == "été"

    def test_above_three_byte_range_untouched(self):
        """Values beyond U+FFFF are left as entities."""
        assert decode("&#128512;") == "&#128512;"

    def test_surrogate_untouched(self):
        """Surrogate code points have no valid form and are left."""
        assert decode("&#55357;") == "&#55357;"

    def test_non_entities_untouched(self):
        """Things that only look like entities pass through."""
        assert decode("& #12; &#x41; &#;", all=False) == "& #12; &#x41; &#;"

    def test_empty(self):
        """Empty input is returned unchanged."""
        assert decode("") == ""

    def test_huge_entity_untouched(self):
        """Thousands of digits are left alone without failing."""
        text = "&#" + "1" * 5000 + ";"
        assert decode(text) == text

    def test_leading_zeros(self):
        """Leading zeros do not push a value out of range."""
        assert decode("&#00000000065;") == "A"

    def test_non_ascii_digits_untouched(self):
        """Only ASCII digits form an entity."""
        assert decode("&#\u0661\u0662\u0663;") == "&#\u0661\u0662\u0663;"


class TestRoundTrip:
    """decode(encode(b)) reconstructs valid text."""

    @pytest.mark.parametrize("text", [
        "héllo wörld",
        "Crème brûlée €100",
        "日本語のテキスト",
        "Tiếng Việt có dấu",
        "mixed: ASCII, ñ, ß, 中",
    ])
    def test_round_trip(self, text):
        """Valid 1-3 byte UTF-8 survives encode then decode."""
        assert decode(encode(text.encode("utf-8"))) == text

    def test_aliases(self):
        """Legacy names point at the same functions."""
        assert ascii_to_entities is encode
        assert entities_to_ascii is decode
