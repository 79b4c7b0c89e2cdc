"""
Core — Text transformations

Stateless, pure functions over text:
- Entities: high-ASCII bytes <-> numeric character entities
- Wrap: word wrap with {unwrap} spans and URL integrity
- Matcher: boundary-aware censoring and highlighting
- Limits: word/character truncation and ellipsis
- Accents: accented character transliteration table
"""

from .entities import encode, decode, ascii_to_entities, entities_to_ascii, ByteRun
from .wrap import wrap, DEFAULT_WIDTH
from .matcher import censor, highlight_phrase, highlight_keyword, DelimitedMatch, DELIMITERS
from .limits import (
    TruncateResult,
    truncate_words, truncate_characters,
    limit_by_words, limit_by_characters,
    ellipsize,
)
from .accents import (
    AccentTable, get_accent_table, reset_accent_table,
    convert_accented_characters,
)

__all__ = [
    # Entities
    "encode", "decode", "ascii_to_entities", "entities_to_ascii", "ByteRun",
    # Wrap
    "wrap", "DEFAULT_WIDTH",
    # Matcher
    "censor", "highlight_phrase", "highlight_keyword", "DelimitedMatch", "DELIMITERS",
    # Limits
    "TruncateResult", "truncate_words", "truncate_characters",
    "limit_by_words", "limit_by_characters", "ellipsize",
    # Accents
    "AccentTable", "get_accent_table", "reset_accent_table",
    "convert_accented_characters",
]
