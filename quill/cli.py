"""
CLI -- Command interface

Thin shell over the core transformations. Every command reads text from
an argument, a file, or stdin, and prints the transformed text.

    quill wrap --width 40 < article.txt
    quill censor "some text" --word darn --word heck
    quill limit --words 20 --json -f post.txt
    quill decode "caf&#233;"
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .config import ConfigManager
from .core.accents import AccentTable
from .commands.base import CommandError
from .commands.codec_cmd import CodecCommand
from .commands.wrap_cmd import WrapCommand
from .commands.censor_cmd import MatchCommand
from .commands.limit_cmd import LimitCommand
from .commands.fold_cmd import FoldCommand
from .commands.config_cmd import ConfigCommand
from . import __version__


logger = logging.getLogger(__name__)


class QuillCLI:
    """Command-line interface for the Quill text tools."""

    def __init__(self, project_dir: Path):
        self.project_dir = Path(project_dir)

        self.config_manager = ConfigManager(self.project_dir)
        self.config = self.config_manager.load()
        self._accent_table: Optional[AccentTable] = None

        # Command handlers (composition: each gets the CLI for resources)
        self._codec_cmd = CodecCommand(self)
        self._wrap_cmd = WrapCommand(self)
        self._match_cmd = MatchCommand(self)
        self._limit_cmd = LimitCommand(self)
        self._fold_cmd = FoldCommand(self)
        self._config_cmd = ConfigCommand(self)

    @property
    def accent_table(self) -> AccentTable:
        """Accent table from config, loaded on first use."""
        if self._accent_table is None:
            self._accent_table = self.config.accents.load_table()
        return self._accent_table


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr; DEBUG with --verbose, else WARNING."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    """Main parser with every registered command."""
    parser = argparse.ArgumentParser(
        prog="quill",
        description="Quill -- Text tools for bounded, safe display",
        epilog="Wrap, truncate, censor, highlight and entity-encode text."
    )

    parser.add_argument(
        '--project', '-p',
        default=os.environ.get("QUILL_PROJECT_PATH", "."),
        help='Project directory holding .quill/config.yaml (default: QUILL_PROJECT_PATH or current)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Log debug detail to stderr'
    )

    parser.add_argument(
        '--version', '-V',
        action='version',
        version=f'quill {__version__}'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Register all commands from command modules (self-registration pattern)
    from .commands import register_all
    register_all(subparsers)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the Quill CLI.

    Returns:
        Exit status: 0 on success, 1 on command error, 2 on usage error
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    if not args.command:
        parser.print_help()
        return 2

    cli = QuillCLI(Path(args.project))

    from .commands import dispatch
    try:
        return dispatch(args.command, cli, args) or 0
    except CommandError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyError as e:
        print(f"Error: {e}", file=sys.stderr)
        parser.print_help()
        return 2


if __name__ == '__main__':
    sys.exit(main())
