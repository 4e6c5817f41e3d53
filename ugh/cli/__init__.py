"""CLI entry point for ugh.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

import typer

from ugh.cli.config import config_app
from ugh.cli.main import main_command
from ugh.cli.ticket import ticket_command

# Main application
app = typer.Typer(
    name="ugh",
    help="ugh: draft tickets and branches from local changes",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Add individual commands
app.command("ticket")(ticket_command)

# Set the main callback for default behavior (includes --version flag)
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_app",
    "main_command",
    "ticket_command",
]
