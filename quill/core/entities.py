"""
Entities — High-ASCII bytes <-> numeric character entities

Converts the high-order bytes of UTF-8 text into decimal entities (&#233;)
and back again. Used when text must travel through 7-bit channels or be
embedded in markup that cannot carry raw multi-byte characters.

Key properties:
- LENIENT: Malformed or truncated multi-byte runs never raise
- BYTE-ORIENTED: Encoding works on the raw UTF-8 bytes, one at a time
- ROUND-TRIP: decode(encode(b)) == b.decode() for valid 1-3 byte UTF-8

Usage:
    encode("café")              # -> "caf&#233;"
    decode("caf&#233;")         # -> "café"
    decode("&lt;b&gt;", all=False)  # -> "&lt;b&gt;" (named entities kept)
"""

import logging
import re
from dataclasses import dataclass, field
from typing import List, Union


logger = logging.getLogger(__name__)


# Numeric entity: &#NNN;
ENTITY_PATTERN = re.compile(r'&#([0-9]+);')

# Named entities reversed by decode(all=True), in replacement order
NAMED_ENTITIES = (
    ('&amp;', '&'),
    ('&lt;', '<'),
    ('&gt;', '>'),
    ('&quot;', '"'),
    ('&apos;', "'"),
    ('&#45;', '-'),
)

# Largest value the 3-byte inverse arithmetic can express
MAX_CODEPOINT = 0xFFFF


# =============================================================================
# Byte Runs
# =============================================================================

@dataclass
class ByteRun:
    """
    Multi-byte sequence being assembled by encode().

    The expected length is fixed by the first byte: lead bytes below 224
    open a 2-byte run, everything else a 3-byte run.
    """
    ordinals: List[int] = field(default_factory=list)
    expected: int = 0

    @property
    def pending(self) -> bool:
        return bool(self.ordinals)

    @property
    def complete(self) -> bool:
        return self.pending and len(self.ordinals) == self.expected

    def add(self, ordinal: int) -> None:
        if not self.ordinals:
            self.expected = 2 if ordinal < 224 else 3
        self.ordinals.append(ordinal)

    def codepoint(self) -> int:
        """Combine the run with UTF-8 continuation arithmetic."""
        if self.expected == 3:
            b0, b1, b2 = self.ordinals
            return (b0 & 0x0F) * 4096 + (b1 & 0x3F) * 64 + (b2 & 0x3F)
        b0, b1 = self.ordinals
        return (b0 & 0x1F) * 64 + (b1 & 0x3F)

    def flush(self) -> str:
        """
        Emit the run as an entity and reset.

        A complete run becomes one code point. An incomplete run is emitted
        as its raw ordinals joined into a single entity ("&#226;130;").
        """
        if self.complete:
            entity = f"&#{self.codepoint()};"
        else:
            entity = "&#" + ";".join(str(o) for o in self.ordinals) + ";"
        self.ordinals = []
        self.expected = 0
        return entity


# =============================================================================
# Encoding
# =============================================================================

def encode(data: Union[bytes, str]) -> str:
    """
    Convert high-ASCII bytes to numeric character entities.

    Args:
        data: Raw bytes, or text (encoded as UTF-8 first)

    Returns:
        ASCII-safe text with every multi-byte sequence replaced by &#N;

    Examples:
        encode(b"caf\\xc3\\xa9")   -> "caf&#233;"
        encode(b"\\xe2\\x82\\xac") -> "&#8364;"
        encode(b"a\\xc3b")        -> "a&#195;b"   (truncated run flushed)
    """
    if not data:
        return ""
    if isinstance(data, str):
        # Lone surrogates go through the 3-byte arithmetic like any other code point
        data = data.encode("utf-8", "surrogatepass")

    out = []
    run = ByteRun()

    for ordinal in data:
        if ordinal < 128:
            # A lone lead byte followed by ASCII will never complete
            if len(run.ordinals) == 1:
                out.append(run.flush())
            out.append(chr(ordinal))
            continue

        run.add(ordinal)
        if run.complete:
            out.append(run.flush())

    if run.pending:
        logger.debug("Flushing incomplete byte run at end of input: %s", run.ordinals)
        out.append(run.flush())

    return "".join(out)


# =============================================================================
# Decoding
# =============================================================================

def _codepoint_to_bytes(number: int) -> bytes:
    """Inverse of ByteRun.codepoint(): 1, 2 or 3 bytes."""
    if number < 128:
        return bytes([number])
    if number < 2048:
        return bytes([192 + number // 64, 128 + number % 64])
    return bytes([
        224 + number // 4096,
        128 + (number % 4096) // 64,
        128 + number % 64,
    ])


def _replace_entity(match: 're.Match') -> str:
    digits = match.group(1).lstrip("0") or "0"
    # Longer digit strings are past MAX_CODEPOINT; skip int() on huge input
    if len(digits) > 7:
        return match.group(0)
    number = int(digits)
    if number > MAX_CODEPOINT:
        return match.group(0)
    try:
        return _codepoint_to_bytes(number).decode("utf-8")
    except UnicodeDecodeError:
        # Surrogate range: no valid 3-byte form
        return match.group(0)


def decode(text: str, all: bool = True) -> str:
    """
    Convert numeric character entities back to characters.

    Args:
        text: Text containing &#N; entities
        all: Also reverse &amp; &lt; &gt; &quot; &apos; &#45;

    Returns:
        Decoded text. Entities that cannot be expressed (above U+FFFF or
        in the surrogate range) are left as they are.

    Examples:
        decode("&#233;")                 -> "é"
        decode("&#8364; &amp; co")       -> "€ & co"
        decode("&amp;", all=False)       -> "&amp;"
    """
    if not text:
        return text

    text = ENTITY_PATTERN.sub(_replace_entity, text)

    if all:
        for entity, literal in NAMED_ENTITIES:
            text = text.replace(entity, literal)

    return text


# Legacy names
ascii_to_entities = encode
entities_to_ascii = decode
