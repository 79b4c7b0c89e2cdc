"""
BaseCommand — Shared foundation for all CLI commands

Provides access to CLI resources via composition, plus the input and
output plumbing every transformation command shares: text comes from a
positional argument, --file, or stdin; results go through safe_print().
"""

import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict

from ..presentation.output import safe_print, render_json

if TYPE_CHECKING:
    from ..cli import QuillCLI


class CommandError(Exception):
    """User-facing command failure (bad input, unreadable file)."""


class BaseCommand:
    """
    Base class for CLI commands with access to shared resources.

    Commands share the CLI's config and accent table instead of loading their own.
    """

    def __init__(self, cli: 'QuillCLI'):
        """
        Initialize command with CLI instance.

        Args:
            cli: The main QuillCLI instance holding all resources
        """
        self._cli = cli

    # -------------------------------------------------------------------------
    # Resources (convenience properties)
    # -------------------------------------------------------------------------

    @property
    def config(self):
        """Application configuration."""
        return self._cli.config

    @property
    def config_manager(self):
        """Configuration manager (load/save/display)."""
        return self._cli.config_manager

    @property
    def accent_table(self):
        """Accent table chosen by configuration."""
        return self._cli.accent_table

    # -------------------------------------------------------------------------
    # Input / output
    # -------------------------------------------------------------------------

    def read_text(self, args: Any) -> str:
        """Read command input as text: --file, positional TEXT, or stdin."""
        path = getattr(args, 'file', None)
        if path:
            try:
                return Path(path).read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise CommandError(f"Cannot read {path}: {e}") from e

        text = getattr(args, 'text', None)
        if text is not None:
            return text
        return sys.stdin.read()

    def read_bytes(self, args: Any) -> bytes:
        """Read command input as raw bytes: --file, positional TEXT, or stdin."""
        path = getattr(args, 'file', None)
        if path:
            try:
                return Path(path).read_bytes()
            except OSError as e:
                raise CommandError(f"Cannot read {path}: {e}") from e

        text = getattr(args, 'text', None)
        if text is not None:
            return text.encode("utf-8")
        return sys.stdin.buffer.read()

    def emit(self, text: str) -> None:
        safe_print(text)

    def emit_json(self, data: Dict[str, Any]) -> None:
        safe_print(render_json(data))


def add_input_arguments(parser) -> None:
    """Positional TEXT and --file, shared by every transformation command."""
    parser.add_argument('text', nargs='?', default=None,
                        help='Text to transform (default: read stdin)')
    parser.add_argument('--file', '-f', metavar='PATH',
                        help='Read input from file instead')
