"""CLI command implementations for the worktops application.

This package contains subcommands for the worktops CLI, including:
- validate: Validate a configuration file
"""

from worktops.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
