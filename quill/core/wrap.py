"""
Wrap — Word wrapping with protected spans and URL integrity

Wraps text at a column limit while keeping three kinds of content intact:
- Words are never split at the soft-wrap stage
- Anything between {unwrap} and {/unwrap} is passed through untouched
- Lines carrying a URL are never hard-split

Any other word longer than the limit is hard-split into chunks so that
no line exceeds the column limit.

Usage:
    wrap("The quick brown fox", 10)
    -> "The quick\\nbrown fox"

    wrap("{unwrap}keep this-as-is{/unwrap} then wrap", 8)
    -> protected span survives verbatim
"""

import logging
import re
from typing import Any, List, Tuple

import xxhash


logger = logging.getLogger(__name__)


DEFAULT_WIDTH = 76

UNWRAP_PATTERN = re.compile(r'\{unwrap\}(.+?)\{/unwrap\}', re.DOTALL)

# Over-length lines matching this are left alone
URL_PATTERN = re.compile(r'\[url.+\]|://|www\.')


# =============================================================================
# Parameter Handling
# =============================================================================

def resolve_width(width: Any) -> int:
    """
    Coerce a column limit, falling back to DEFAULT_WIDTH.

    Accepts ints and integer-like strings. Anything non-numeric or
    non-positive yields the default.
    """
    if isinstance(width, bool):
        return DEFAULT_WIDTH
    try:
        value = int(width)
    except (TypeError, ValueError):
        logger.debug("Non-numeric wrap width %r, using %d", width, DEFAULT_WIDTH)
        return DEFAULT_WIDTH
    if value <= 0:
        logger.debug("Non-positive wrap width %r, using %d", width, DEFAULT_WIDTH)
        return DEFAULT_WIDTH
    return value


# =============================================================================
# Protected Spans
# =============================================================================

def _placeholder_prefix(text: str) -> str:
    """
    Build a placeholder prefix that does not occur anywhere in text.

    Salted with an xxhash digest of the text; re-seeded on the (unlikely)
    chance the digest already appears.
    """
    seed = 0
    while True:
        salt = xxhash.xxh32(text.encode("utf-8"), seed=seed).hexdigest()
        prefix = f"{{{{unwrapped-{salt}-"
        if prefix not in text:
            return prefix
        logger.debug("Placeholder salt %s collides with input, re-seeding", salt)
        seed += 1


def protect_spans(text: str) -> Tuple[str, List[str], str]:
    """
    Replace each {unwrap}...{/unwrap} span with a positional placeholder.

    Returns:
        (text with placeholders, spans in extraction order, placeholder prefix)
    """
    spans: List[str] = []
    prefix = _placeholder_prefix(text)

    def _stash(match: 're.Match') -> str:
        spans.append(match.group(1))
        return f"{prefix}{len(spans) - 1}}}}}"

    return UNWRAP_PATTERN.sub(_stash, text), spans, prefix


def restore_spans(text: str, spans: List[str], prefix: str) -> str:
    """Put protected spans back, keyed by extraction index."""
    for index, span in enumerate(spans):
        text = text.replace(f"{prefix}{index}}}}}", span, 1)
    return text


# =============================================================================
# Wrapping Stages
# =============================================================================

def _cells(text: str, spans: List[str], prefix: str) -> Tuple[List[str], List[int]]:
    """
    Split text into wrap cells and their display widths.

    Ordinary characters are one cell of width 1. Each placeholder is a
    single cell as wide as the span it stands for.
    """
    placeholder = re.compile(re.escape(prefix) + r'([0-9]+)\}\}')
    cells: List[str] = []
    widths: List[int] = []
    cursor = 0
    for match in placeholder.finditer(text):
        plain = text[cursor:match.start()]
        cells.extend(plain)
        widths.extend([1] * len(plain))
        cells.append(match.group(0))
        widths.append(len(spans[int(match.group(1))]))
        cursor = match.end()
    plain = text[cursor:]
    cells.extend(plain)
    widths.extend([1] * len(plain))
    return cells, widths


def _soft_wrap(cells: List[str], widths: List[int], width: int) -> List[str]:
    """
    Greedy wrap that only ever turns spaces into newlines.

    Existing newlines reset the column count. A cell that would cross the
    width moves to the next line together with its word; a word longer
    than the width is left whole on its own line for the hard-split stage.
    """
    cells = list(cells)
    columns = [0]
    for cell_width in widths:
        columns.append(columns[-1] + cell_width)

    line_start = 0
    last_space = 0

    for i, cell in enumerate(cells):
        if cell == "\n":
            line_start = last_space = i + 1
        elif cell == " ":
            if columns[i] - columns[line_start] >= width:
                cells[i] = "\n"
                line_start = i + 1
            last_space = i
        elif columns[i + 1] - columns[line_start] > width and line_start != last_space:
            cells[last_space] = "\n"
            line_start = last_space + 1

    return cells


def _split_lines(cells: List[str], widths: List[int]) -> List[Tuple[List[str], List[int]]]:
    """Group cells into lines at newline cells."""
    lines = []
    start = 0
    for i, cell in enumerate(cells):
        if cell == "\n":
            lines.append((cells[start:i], widths[start:i]))
            start = i + 1
    lines.append((cells[start:], widths[start:]))
    return lines


def _hard_split(cells: List[str], widths: List[int], width: int) -> List[str]:
    """
    Cut an over-length line into chunks of at most width - 1 columns.

    Placeholder cells are never cut; one wider than a chunk gets a chunk
    of its own.
    """
    step = max(width - 1, 1)
    chunks = []
    start = 0
    remaining = sum(widths)
    while remaining > width:
        end = start
        used = 0
        while end < len(cells) and (end == start or used + widths[end] <= step):
            used += widths[end]
            end += 1
        chunks.append("".join(cells[start:end]))
        remaining -= used
        start = end
    if start < len(cells):
        chunks.append("".join(cells[start:]))
    return chunks


def wrap(text: str, width: Any = DEFAULT_WIDTH) -> str:
    """
    Wrap text at the column limit, preserving words, URLs and {unwrap} spans.

    A protected span counts as one unbreakable unit as wide as the span
    itself.

    Args:
        text: Text to wrap
        width: Column limit (default 76; invalid values fall back to it)

    Returns:
        Wrapped text, lines joined with "\\n". Only URL lines and lines
        made of a single protected span may exceed the limit.

    Examples:
        wrap("aaa bbb ccc", 7)            -> "aaa bbb\\nccc"
        wrap("abcdefghij", 4)             -> "abc\\ndef\\nghij"
        wrap("see http://example.com/x", 5) -> "see\\nhttp://example.com/x"
        wrap("{unwrap}a{/unwrap} b c", 10)  -> "a b c"
    """
    if not text:
        return ""

    width = resolve_width(width)

    text = re.sub(r' +', ' ', text)
    if "\r" in text:
        text = text.replace("\r\n", "\n").replace("\r", "\n")

    text, spans, prefix = protect_spans(text)
    cells, widths = _cells(text, spans, prefix)
    cells = _soft_wrap(cells, widths, width)

    lines = []
    for line_cells, line_widths in _split_lines(cells, widths):
        line = "".join(line_cells)
        if sum(line_widths) <= width or URL_PATTERN.search(line):
            lines.append(line)
            continue
        lines.extend(_hard_split(line_cells, line_widths, width))

    output = "\n".join(lines)

    if spans:
        output = restore_spans(output, spans, prefix)
    return output
