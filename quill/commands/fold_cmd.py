"""
FoldCommand — Accented character transliteration

Prints input with accented characters replaced by base letters, using
the table chosen by accents.table (bundled table by default).
"""

from ..commands.base import BaseCommand, add_input_arguments
from ..core.accents import convert_accented_characters


class FoldCommand(BaseCommand):
    """Command for transliterating accented characters."""

    def fold(self, text: str) -> int:
        """Print text with accents folded."""
        self.emit(convert_accented_characters(text, table=self.accent_table))
        return 0


# =============================================================================
# Command Registration (Self-Registration Pattern)
# =============================================================================

COMMAND_NAME = 'fold'


def register_parser(subparsers):
    """Register fold command parser."""
    p = subparsers.add_parser('fold', help='Replace accented characters with base letters')
    add_input_arguments(p)
    return p


def handle(cli, args):
    """Handle fold command dispatch."""
    return cli._fold_cmd.fold(cli._fold_cmd.read_text(args))
