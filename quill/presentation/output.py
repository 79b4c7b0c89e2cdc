"""
Output — Encoding-safe printing and JSON rendering for the CLI

Transformed text can contain any Unicode (decoded entities, restored
spans, highlight tags). Terminals and pipes cannot always encode it, so
CLI output goes through safe_print(), which degrades to ASCII
equivalents instead of crashing.

JSON output (--json) is rendered with orjson for piping into other tools.
"""

import sys
from typing import Any, Dict

import orjson


# Common Unicode to ASCII replacements for display
UNICODE_TO_ASCII = {
    '…': '...',
    '–': '-',
    '—': '--',
    '“': '"',
    '”': '"',
    '‘': "'",
    '’': "'",
    '•': '*',
    '·': '.',
    '×': 'x',
    '«': '<<',
    '»': '>>',
    '\u00a0': ' ',
}


def safe_print(text: str, end: str = '\n', file=None) -> None:
    """
    Print with graceful encoding fallback.

    Handles UnicodeEncodeError by replacing unencodable characters
    with ASCII equivalents or '?' as last resort.

    Args:
        text: Text to print (may contain any Unicode)
        end: String appended after text (default: newline)
        file: Output stream (default: sys.stdout)
    """
    if file is None:
        file = sys.stdout

    try:
        print(text, end=end, file=file)
    except UnicodeEncodeError:
        # Replace known Unicode chars with ASCII equivalents
        safe_text = text
        for unicode_char, ascii_equiv in UNICODE_TO_ASCII.items():
            safe_text = safe_text.replace(unicode_char, ascii_equiv)

        try:
            print(safe_text, end=end, file=file)
        except UnicodeEncodeError:
            # Last resort: replace all unencodable chars with ?
            encoding = getattr(file, 'encoding', 'utf-8') or 'utf-8'
            encoded = safe_text.encode(encoding, errors='replace')
            print(encoded.decode(encoding), end=end, file=file)


def render_json(data: Dict[str, Any], compact: bool = False) -> str:
    """
    Render a result document as JSON.

    Args:
        data: JSON-serializable mapping
        compact: If True, output a single line (no indentation)

    Returns:
        JSON text (non-ASCII characters kept as-is)
    """
    option = 0 if compact else orjson.OPT_INDENT_2
    return orjson.dumps(data, option=option).decode("utf-8")
