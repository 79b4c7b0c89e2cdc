"""
Matcher — Boundary-aware censoring and highlighting

Finds words and phrases in display text and either masks them or wraps
them in marker tags.

Regex word boundaries (\\b) only know ASCII-style word characters in many
engines and treat letters like ü as boundaries. Instead, a match here must
be bookended by a character from DELIMITERS: punctuation, whitespace or a
digit. The haystack is padded with a space on both sides so the start and
end of the string behave like any interior position.

Usage:
    censor("the quick brown fox", ["quick"])          -> "the ##### brown fox"
    censor("darn it", ["darn"], replacement="[x]")    -> "[x] it"
    highlight_phrase("hello world", "world")          -> "hello <mark>world</mark>"
    highlight_keyword("Hà Nội mùa thu", "ha noi")     -> "<mark>Hà Nội</mark> mùa thu"
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .accents import AccentTable, get_accent_table


logger = logging.getLogger(__name__)


# Characters assumed to bookend a word
DELIMITERS = r"""[-_'"`(){}<>\[\]|!?@#%&,.:;^~*+=/ 0-9\n\r\t]"""

# Characters stripped from the padded result
TRIM_CHARS = " \t\n\r\0\x0b"

MASK_CHAR = "#"

# Separates the words of a multi-word keyword search
KEYWORD_SEPARATOR = "%"

DEFAULT_OPEN_TAG = "<mark>"
DEFAULT_CLOSE_TAG = "</mark>"


@dataclass(frozen=True)
class DelimitedMatch:
    """A delimiter-bounded occurrence, as offsets into the padded text."""
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start


# =============================================================================
# Boundary Matching
# =============================================================================

def word_pattern(word: str) -> 're.Pattern':
    """
    Compile a case-insensitive, delimiter-bounded pattern for word.

    `*` in the word matches zero or more word characters, lazily, so
    "bad*" stops at the first delimiter after "bad".
    """
    body = re.escape(word).replace(r'\*', r'\w*?')
    return re.compile(rf'(?<={DELIMITERS})({body})(?={DELIMITERS})', re.IGNORECASE)


def _is_matchable(word: str) -> bool:
    """A word needs at least one literal character; bare wildcards match nothing."""
    return bool(word) and bool(word.replace("*", ""))


def find_delimited(padded: str, word: str) -> List[DelimitedMatch]:
    """Find every non-overlapping bounded occurrence of word in padded text."""
    if not _is_matchable(word):
        return []
    return [DelimitedMatch(m.start(1), m.end(1)) for m in word_pattern(word).finditer(padded)]


def _mask(padded: str, matches: List[DelimitedMatch]) -> str:
    """Copy padded text forward, masking each match with MASK_CHAR."""
    out = []
    cursor = 0
    for match in matches:
        out.append(padded[cursor:match.start])
        out.append(MASK_CHAR * match.length)
        cursor = match.end
    out.append(padded[cursor:])
    return "".join(out)


def censor(text: str, banned_words: Iterable[str], replacement: str = "") -> str:
    """
    Censor disallowed words.

    Args:
        text: Text to censor
        banned_words: Collection of words; `*` acts as a wildcard.
                      Words made only of `*` are ignored.
        replacement: Token to substitute. Empty means mask each match
                     with one '#' per character (code point, not byte:
                     "Über" becomes "####").

    Returns:
        Censored text, trimmed. The input unchanged if banned_words is
        not a list, tuple or set.

    Examples:
        censor("the quick brown fox", ["quick"])   -> "the ##### brown fox"
        censor("badword123 ok", ["bad*"])          -> "#######123 ok"
        censor("Über alles", ["über"], "***")      -> "*** alles"
    """
    if not isinstance(banned_words, (list, tuple, set, frozenset)):
        return text
    if text is None:
        return text

    padded = f" {text} "

    for word in banned_words:
        word = str(word) if word else ""
        if not _is_matchable(word):
            continue
        if replacement:
            padded = word_pattern(word).sub(lambda m: replacement, padded)
            continue

        matches = find_delimited(padded, word)
        if matches:
            logger.debug("Masking %d occurrence(s) of %r", len(matches), word)
            padded = _mask(padded, matches)

    return padded.strip(TRIM_CHARS)


# =============================================================================
# Highlighting
# =============================================================================

def highlight_phrase(
    text: str,
    phrase: str,
    open_tag: str = DEFAULT_OPEN_TAG,
    close_tag: str = DEFAULT_CLOSE_TAG
) -> str:
    """
    Wrap every case-insensitive occurrence of phrase in tags.

    Examples:
        highlight_phrase("hello world", "world") -> "hello <mark>world</mark>"
        highlight_phrase("Go go GO", "go", "[", "]") -> "[Go] [go] [GO]"
    """
    if not text or not phrase:
        return text
    pattern = re.compile(re.escape(phrase), re.IGNORECASE)
    return pattern.sub(lambda m: f"{open_tag}{m.group(0)}{close_tag}", text)


def _tagged_regions(text: str, open_tag: str, close_tag: str) -> List[DelimitedMatch]:
    """Spans of text already wrapped in open_tag ... close_tag."""
    regions = []
    start = text.find(open_tag)
    while start != -1:
        close = text.find(close_tag, start + len(open_tag))
        if close == -1:
            break
        end = close + len(close_tag)
        regions.append(DelimitedMatch(start, end))
        start = text.find(open_tag, end)
    return regions


def _keyword_tokens(keyword: str, table: AccentTable) -> List[str]:
    tokens = []
    for token in keyword.split(KEYWORD_SEPARATOR):
        token = table.fold(token.strip()).lower()
        if token and token not in tokens:
            tokens.append(token)
    return tokens


def highlight_keyword(
    text: str,
    keyword: str,
    open_tag: str = DEFAULT_OPEN_TAG,
    close_tag: str = DEFAULT_CLOSE_TAG,
    table: Optional[AccentTable] = None
) -> str:
    """
    Diacritic-tolerant highlighting.

    If keyword occurs verbatim, this is highlight_phrase(). Otherwise the
    keyword is split on '%' into tokens; each token and the text are folded
    through the accent table and lower-cased, and the ORIGINAL text at each
    folded match is wrapped in tags. Matches inside text that is already
    tagged are skipped.

    Args:
        text: Text to highlight in
        keyword: Keyword, or several joined with '%'
        open_tag: Tag inserted before each match
        close_tag: Tag inserted after each match
        table: Accent table (default: shared bundled table)

    Returns:
        Tagged text; unchanged if nothing matched

    Examples:
        highlight_keyword("Crème brûlée", "creme")          -> "<mark>Crème</mark> brûlée"
        highlight_keyword("Hà Nội, Việt Nam", "ha noi%viet") -> "<mark>Hà Nội</mark>, <mark>Việt</mark> Nam"
    """
    if not text or not keyword:
        return text

    if keyword in text:
        return highlight_phrase(text, keyword, open_tag, close_tag)

    table = table if table is not None else get_accent_table()
    folded, owners = table.fold_with_offsets(text, lower=True)

    # Existing tagged regions are never wrapped again
    taken = _tagged_regions(text, open_tag, close_tag)
    spans: List[DelimitedMatch] = []
    for token in _keyword_tokens(keyword, table):
        position = folded.find(token)
        while position != -1:
            end = position + len(token)
            span = DelimitedMatch(owners[position], owners[end - 1] + 1)
            original = text[span.start:span.end]
            overlaps = any(span.start < s.end and s.start < span.end for s in taken + spans)
            if not overlaps and open_tag not in original and close_tag not in original:
                spans.append(span)
            position = folded.find(token, end)

    if not spans:
        return text

    out = []
    cursor = 0
    for span in sorted(spans, key=lambda s: s.start):
        out.append(text[cursor:span.start])
        out.append(f"{open_tag}{text[span.start:span.end]}{close_tag}")
        cursor = span.end
    out.append(text[cursor:])
    return "".join(out)
