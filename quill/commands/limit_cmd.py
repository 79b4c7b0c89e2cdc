"""
LimitCommand — Truncation and ellipsis

Handles:
- limit: word-count (--words) or character-count (--chars) truncation
- ellipsize: tag-stripping shortening with a positioned ellipsis
"""

from typing import Optional

from ..commands.base import BaseCommand, CommandError, add_input_arguments
from ..core.limits import truncate_words, truncate_characters, ellipsize, TruncateResult


class LimitCommand(BaseCommand):
    """Command for bounded truncation."""

    def limit(
        self,
        text: str,
        words: Optional[int] = None,
        chars: Optional[int] = None,
        end_char: Optional[str] = None,
        as_json: bool = False
    ) -> int:
        """
        Print text limited by word or character count.

        Args:
            text: Text to truncate
            words: Word limit (mutually exclusive with chars)
            chars: Character limit
            end_char: Marker for truncated output (default: limits.end_char)
            as_json: Print {"text", "truncated"} instead of bare text
        """
        if end_char is None:
            end_char = self.config.limits.end_char

        if chars is not None:
            result = truncate_characters(text, chars, end_char)
        else:
            result = truncate_words(text, words or self.config.limits.words, end_char)

        self._emit_result(result, as_json)
        return 0

    def ellipsize(self, text: str, length: int, position: float = 1, ellipsis: Optional[str] = None) -> int:
        """Print text shortened to length with an ellipsis at position."""
        if ellipsis is None:
            self.emit(ellipsize(text, length, position))
        else:
            self.emit(ellipsize(text, length, position, ellipsis))
        return 0

    def _emit_result(self, result: TruncateResult, as_json: bool) -> None:
        if as_json:
            self.emit_json({"text": result.text, "truncated": result.truncated})
        else:
            self.emit(result.text)


# =============================================================================
# Command Registration (Self-Registration Pattern)
# =============================================================================

COMMAND_NAMES = ['limit', 'ellipsize']


def register_parser(subparsers):
    """Register limit and ellipsize command parsers."""
    p1 = subparsers.add_parser('limit', help='Truncate by words or characters, keeping whole words')
    add_input_arguments(p1)
    group = p1.add_mutually_exclusive_group()
    group.add_argument('--words', type=int, metavar='N',
                       help='Keep at most N words (default: limits.words)')
    group.add_argument('--chars', type=int, metavar='N',
                       help='Cut near N characters')
    p1.add_argument('--end-char', help='Marker appended when truncated')
    p1.add_argument('--json', action='store_true', dest='as_json',
                    help='Output JSON with text and truncated flag')

    p2 = subparsers.add_parser('ellipsize', help='Strip tags and shorten with an ellipsis')
    add_input_arguments(p2)
    p2.add_argument('--length', '-l', type=int, required=True,
                    help='Characters to keep')
    p2.add_argument('--position', type=float, default=1,
                    help='Split point 0..1 (1 = end, 0.5 = middle)')
    p2.add_argument('--ellipsis', help='Ellipsis marker (default: &hellip;)')

    return p1, p2


def handle(cli, args):
    """Handle limit or ellipsize command dispatch."""
    cmd = cli._limit_cmd
    if args.command == 'limit':
        return cmd.limit(
            cmd.read_text(args),
            words=args.words,
            chars=args.chars,
            end_char=args.end_char,
            as_json=args.as_json
        )
    if args.length <= 0:
        raise CommandError("--length must be a positive integer")
    return cmd.ellipsize(cmd.read_text(args), args.length, args.position, args.ellipsis)
