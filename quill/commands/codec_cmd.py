"""
CodecCommand — Numeric character entity conversion

Handles:
- encode: high-ASCII bytes -> &#N; entities
- decode: &#N; entities (and optionally named entities) -> text
"""

from ..commands.base import BaseCommand, add_input_arguments
from ..core.entities import encode, decode


class CodecCommand(BaseCommand):
    """Command for converting between raw text and numeric entities."""

    def encode(self, data: bytes) -> int:
        """Print data with every multi-byte sequence as an entity."""
        self.emit(encode(data))
        return 0

    def decode(self, text: str, named: bool = True) -> int:
        """
        Print text with entities decoded.

        Args:
            text: Entity-bearing text
            named: Also decode &amp; &lt; &gt; &quot; &apos; &#45;
        """
        self.emit(decode(text, all=named))
        return 0


# =============================================================================
# Command Registration (Self-Registration Pattern)
# =============================================================================

COMMAND_NAMES = ['encode', 'decode']


def register_parser(subparsers):
    """Register encode and decode command parsers."""
    p1 = subparsers.add_parser('encode', help='Convert high-ASCII characters to &#N; entities')
    add_input_arguments(p1)

    p2 = subparsers.add_parser('decode', help='Convert &#N; entities back to characters')
    add_input_arguments(p2)
    p2.add_argument('--no-named', action='store_true',
                    help='Leave named entities (&amp; &lt; ...) untouched')

    return p1, p2


def handle(cli, args):
    """Handle encode or decode command dispatch."""
    if args.command == 'encode':
        return cli._codec_cmd.encode(cli._codec_cmd.read_bytes(args))
    return cli._codec_cmd.decode(cli._codec_cmd.read_text(args), named=not args.no_named)
