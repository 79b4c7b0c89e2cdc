"""
ConfigCommand — Configuration management

Handles configuration operations:
- Displaying current configuration
- Setting configuration values (project or user scope)
"""

from ..commands.base import BaseCommand, CommandError


class ConfigCommand(BaseCommand):
    """
    Command for configuration management.

    Provides access to configuration display and modification.
    """

    def show_config(self) -> int:
        """Show current configuration."""
        self.emit(self.config_manager.display())
        return 0

    def set_config(self, key: str, value: str, scope: str = "project") -> int:
        """Set a configuration value."""
        error = self.config_manager.set(key, value, scope)
        if error:
            raise CommandError(error)

        if scope == "project":
            saved_to = self.config_manager.project_config_path
        else:
            saved_to = self.config_manager.user_config_path
        self.emit(f"Set {key} = {value}\nSaved to {saved_to}")
        return 0


# =============================================================================
# Command Registration (Self-Registration Pattern)
# =============================================================================

COMMAND_NAME = 'config'


def register_parser(subparsers):
    """Register config command parser."""
    p = subparsers.add_parser('config', help='View or set configuration')
    p.add_argument('--set', metavar='KEY=VALUE',
                   help='Set config value (e.g., wrap.width=60)')
    p.add_argument('--user', action='store_true',
                   help='Apply to user config instead of project')
    return p


def handle(cli, args):
    """Handle config command dispatch."""
    if not args.set:
        return cli._config_cmd.show_config()

    if '=' not in args.set:
        raise CommandError("Use format KEY=VALUE (e.g., wrap.width=60)")

    key, value = args.set.split('=', 1)
    scope = "user" if args.user else "project"
    return cli._config_cmd.set_config(key, value, scope)
