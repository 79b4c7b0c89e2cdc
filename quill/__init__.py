"""
Quill — Text tools for bounded, safe display

Prepares user-supplied or stored text for display:
- Truncate by words or characters, keeping whole words
- Wrap long lines without breaking words, URLs or {unwrap} spans
- Censor disallowed vocabulary, highlight phrases and keywords
- Convert between high-ASCII bytes and &#N; entities

Every transformation is a pure function; none of them raise on bad input.

Usage:
    from quill import wrap, censor, limit_by_words, decode

    wrap(article, 60)
    censor(comment, ["darn", "heck*"])
    limit_by_words(summary, 25, "...")
    decode("caf&#233;")
"""

__version__ = "0.1.0"

# Core layer (transformations)
from .core.entities import encode, decode, ascii_to_entities, entities_to_ascii
from .core.wrap import wrap
from .core.matcher import censor, highlight_phrase, highlight_keyword
from .core.limits import (
    TruncateResult,
    truncate_words, truncate_characters,
    limit_by_words, limit_by_characters,
    ellipsize,
)
from .core.accents import AccentTable, get_accent_table, convert_accented_characters

# Config (stays at root)
from .config import Config, ConfigManager, get_config

__all__ = [
    # Entities
    'encode', 'decode', 'ascii_to_entities', 'entities_to_ascii',
    # Wrap
    'wrap',
    # Matching
    'censor', 'highlight_phrase', 'highlight_keyword',
    # Limits
    'TruncateResult', 'truncate_words', 'truncate_characters',
    'limit_by_words', 'limit_by_characters', 'ellipsize',
    # Accents
    'AccentTable', 'get_accent_table', 'convert_accented_characters',
    # Config
    'Config', 'ConfigManager', 'get_config',
]
