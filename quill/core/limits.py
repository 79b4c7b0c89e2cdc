"""
Limits — Word and character bounded truncation

Shortens text for previews while keeping whole words. The end marker is
appended only when something was actually cut, so callers can tell a
shortened preview from complete text.

Two flavours of every operation:
- truncate_words / truncate_characters return a TruncateResult
- limit_by_words / limit_by_characters return the text only

Usage:
    limit_by_words("hello world foo", 2, "...")      -> "hello world..."
    truncate_words("hi", 5, "...")                   -> TruncateResult("hi", truncated=False)
    limit_by_characters("The quick brown fox", 8, "...") -> "The quick..."
"""

import math
import re
from dataclasses import dataclass
from typing import Any


DEFAULT_WORD_LIMIT = 100
DEFAULT_CHAR_LIMIT = 500
DEFAULT_END_CHAR = "&#8230;"     # Horizontal ellipsis entity
DEFAULT_ELLIPSIS = "&hellip;"

TAG_PATTERN = re.compile(r'<[^>]*>')

# A word and the whitespace after it
WORD_TOKEN = re.compile(r'\S+\s*')


@dataclass(frozen=True)
class TruncateResult:
    """Truncated text plus whether anything was dropped."""
    text: str
    truncated: bool = False

    def __str__(self) -> str:
        return self.text


def _resolve_limit(limit: Any, default: int) -> int:
    """Positive int, or the default for anything else."""
    if isinstance(limit, bool):
        return default
    try:
        value = int(limit)
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


# =============================================================================
# Word Limits
# =============================================================================

def truncate_words(text: str, limit: Any = DEFAULT_WORD_LIMIT, end_char: str = DEFAULT_END_CHAR) -> TruncateResult:
    """
    Keep up to `limit` whitespace-delimited words from the start of text.

    Args:
        text: Text to truncate
        limit: Maximum word count (default 100)
        end_char: Appended when words were dropped

    Returns:
        TruncateResult; blank input is returned untouched
    """
    if text is None or not text.strip():
        return TruncateResult(text or "")

    limit = _resolve_limit(limit, DEFAULT_WORD_LIMIT)

    end = 0
    for count, match in enumerate(WORD_TOKEN.finditer(text), 1):
        end = match.end()
        if count >= limit:
            break
    if not end:
        return TruncateResult(text)
    kept = text[:end]

    if len(kept) == len(text):
        return TruncateResult(kept.rstrip())
    return TruncateResult(kept.rstrip() + end_char, truncated=True)


def limit_by_words(text: str, limit: Any = DEFAULT_WORD_LIMIT, end_char: str = DEFAULT_END_CHAR) -> str:
    """
    Limit text to a number of words.

    Examples:
        limit_by_words("hello world foo", 2, "...") -> "hello world..."
        limit_by_words("hi", 5, "...")              -> "hi"
    """
    if text is None or not text.strip():
        return text
    return truncate_words(text, limit, end_char).text


# =============================================================================
# Character Limits
# =============================================================================

def _collapse_whitespace(text: str) -> str:
    for char in ("\r", "\n", "\t", "\v", "\f"):
        text = text.replace(char, " ")
    return re.sub(r' {2,}', ' ', text)


def truncate_characters(text: str, limit: Any = DEFAULT_CHAR_LIMIT, end_char: str = DEFAULT_END_CHAR) -> TruncateResult:
    """
    Cut text near `limit` characters without breaking words.

    Words are added until the output reaches the limit, so the result may
    run past it by the length of the final word.

    Args:
        text: Text to truncate
        limit: Character count to reach (default 500)
        end_char: Appended when text was dropped

    Returns:
        TruncateResult. Short input is returned as-is; input that only
        fits after whitespace collapsing is returned collapsed.
    """
    if not text:
        return TruncateResult(text or "")

    limit = _resolve_limit(limit, DEFAULT_CHAR_LIMIT)
    if len(text) < limit:
        return TruncateResult(text)

    normalized = _collapse_whitespace(text)
    if len(normalized) <= limit:
        return TruncateResult(normalized)

    out = ""
    for word in normalized.strip().split(" "):
        out += word + " "
        if len(out) >= limit:
            out = out.strip()
            if len(out) == len(normalized):
                return TruncateResult(out)
            return TruncateResult(out + end_char, truncated=True)

    # Limit never reached: the only difference was edge whitespace
    return TruncateResult(normalized.strip())


def limit_by_characters(text: str, limit: Any = DEFAULT_CHAR_LIMIT, end_char: str = DEFAULT_END_CHAR) -> str:
    """
    Limit text to roughly `limit` characters, preserving whole words.

    Examples:
        limit_by_characters("The quick brown fox", 8, "...") -> "The quick..."
        limit_by_characters("short", 50)                     -> "short"
    """
    if not text:
        return text
    return truncate_characters(text, limit, end_char).text


# =============================================================================
# Ellipsis
# =============================================================================

def ellipsize(text: str, max_length: Any, position: float = 1, ellipsis: str = DEFAULT_ELLIPSIS) -> str:
    """
    Strip tags and shorten text to max_length with an ellipsis.

    Args:
        text: Text (HTML tags are removed first)
        max_length: Number of characters to keep
        position: Where to split, 0..1. 1 keeps the head only, 0.5 keeps
                  half from the start and half from the end, 0 keeps
                  the tail only.
        ellipsis: Inserted at the split point

    Examples:
        ellipsize("Hello wonderful world", 10)           -> "Hello wond&hellip;"
        ellipsize("Hello wonderful world", 10, 0.5, "~") -> "Hello~world"
    """
    if not text:
        return ""

    text = TAG_PATTERN.sub("", text).strip()
    max_length = _resolve_limit(max_length, len(text))
    if len(text) <= max_length:
        return text

    try:
        position = min(max(float(position), 0.0), 1.0)
    except (TypeError, ValueError):
        position = 1.0
    head = text[:math.floor(max_length * position)]
    if position == 1:
        return head + ellipsis

    tail_length = max_length - len(head)
    tail = text[-tail_length:] if tail_length > 0 else ""
    return head + ellipsis + tail
