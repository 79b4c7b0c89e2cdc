"""
MatchCommand — Censoring and highlighting

Handles:
- censor: mask or replace banned words (config censor.words + --word)
- highlight: tag a phrase, or a diacritic-tolerant keyword
"""

from typing import List, Optional

from ..commands.base import BaseCommand, CommandError, add_input_arguments
from ..core.matcher import censor, highlight_phrase, highlight_keyword


class MatchCommand(BaseCommand):
    """Command for boundary-aware censoring and highlighting."""

    def censor(self, text: str, words: Optional[List[str]] = None, replacement: Optional[str] = None) -> int:
        """
        Print text with banned words censored.

        Args:
            text: Text to censor
            words: Extra banned words (added to censor.words)
            replacement: Replacement token (default: censor.replacement;
                         empty masks with '#')
        """
        banned = list(self.config.censor.words) + list(words or [])
        if not banned:
            raise CommandError("No banned words. Use --word or set censor.words")

        if replacement is None:
            replacement = self.config.censor.replacement

        self.emit(censor(text, banned, replacement))
        return 0

    def highlight(
        self,
        text: str,
        phrase: Optional[str] = None,
        keyword: Optional[str] = None,
        open_tag: Optional[str] = None,
        close_tag: Optional[str] = None
    ) -> int:
        """
        Print text with a phrase or keyword wrapped in tags.

        Args:
            text: Text to highlight in
            phrase: Exact phrase (case-insensitive)
            keyword: Accent-insensitive keyword, '%' separates several
            open_tag: Opening tag (default: highlight.open_tag)
            close_tag: Closing tag (default: highlight.close_tag)
        """
        open_tag = open_tag or self.config.highlight.open_tag
        close_tag = close_tag or self.config.highlight.close_tag

        if keyword:
            result = highlight_keyword(text, keyword, open_tag, close_tag, table=self.accent_table)
        else:
            result = highlight_phrase(text, phrase or "", open_tag, close_tag)

        self.emit(result)
        return 0


# =============================================================================
# Command Registration (Self-Registration Pattern)
# =============================================================================

COMMAND_NAMES = ['censor', 'highlight']


def register_parser(subparsers):
    """Register censor and highlight command parsers."""
    p1 = subparsers.add_parser('censor', help='Mask or replace banned words')
    add_input_arguments(p1)
    p1.add_argument('--word', action='append', dest='words', metavar='WORD',
                    help='Banned word, repeatable; * is a wildcard')
    p1.add_argument('--replacement', '-r',
                    help='Replacement token (default: mask with #)')

    p2 = subparsers.add_parser('highlight', help='Wrap a phrase or keyword in tags')
    add_input_arguments(p2)
    group = p2.add_mutually_exclusive_group(required=True)
    group.add_argument('--phrase', help='Phrase to highlight (case-insensitive)')
    group.add_argument('--keyword',
                       help="Accent-insensitive keyword; separate several with '%%'")
    p2.add_argument('--open-tag', help='Opening tag (default: <mark>)')
    p2.add_argument('--close-tag', help='Closing tag (default: </mark>)')

    return p1, p2


def handle(cli, args):
    """Handle censor or highlight command dispatch."""
    cmd = cli._match_cmd
    if args.command == 'censor':
        return cmd.censor(cmd.read_text(args), words=args.words, replacement=args.replacement)
    return cmd.highlight(
        cmd.read_text(args),
        phrase=args.phrase,
        keyword=args.keyword,
        open_tag=args.open_tag,
        close_tag=args.close_tag
    )
