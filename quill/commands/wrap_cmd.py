"""
WrapCommand — Word wrap with protected spans

Wraps input at the configured width (wrap.width) unless --width is given.
"""

from ..commands.base import BaseCommand, add_input_arguments
from ..core.wrap import wrap


class WrapCommand(BaseCommand):
    """Command for wrapping text at a column limit."""

    def wrap(self, text: str, width: int = None) -> int:
        """
        Print text wrapped at width.

        Args:
            text: Text to wrap ({unwrap}...{/unwrap} spans are kept whole)
            width: Column limit (default: wrap.width from config)
        """
        if width is None:
            width = self.config.wrap.width
        self.emit(wrap(text, width))
        return 0


# =============================================================================
# Command Registration (Self-Registration Pattern)
# =============================================================================

COMMAND_NAME = 'wrap'


def register_parser(subparsers):
    """Register wrap command parser."""
    p = subparsers.add_parser('wrap', help='Wrap text, keeping words, URLs and {unwrap} spans whole')
    add_input_arguments(p)
    p.add_argument('--width', '-w', type=int,
                   help='Column limit (default: wrap.width, 76)')
    return p


def handle(cli, args):
    """Handle wrap command dispatch."""
    return cli._wrap_cmd.wrap(cli._wrap_cmd.read_text(args), width=args.width)
