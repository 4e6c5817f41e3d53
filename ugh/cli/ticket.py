"""CLI command that turns local changes into a ticket and a branch."""

from pathlib import Path
from typing import Optional

import typer

from ugh.cli.init import run_setup_wizard
from ugh.config import AppConfig, missing_required_settings
from ugh.context import AppContext
from ugh.errors import ConfigurationError, UghError
from ugh.logging import configure_logging
from ugh.workflow import create_ticket_from_changes


def load_complete_config(workspace_root: Path, board: Optional[str]) -> AppConfig:
    """Load configuration, launching setup once if required settings are missing.

    Raises:
        ConfigurationError: If settings are still missing after setup.
    """
    config = AppConfig.load(workspace_root)

    missing = missing_required_settings(config, board)
    if missing:
        typer.echo(f"Configuration incomplete ({', '.join(missing)}). Launching setup...", err=True)
        run_setup_wizard()
        config = AppConfig.load(workspace_root)

        missing = missing_required_settings(config, board)
        if missing:
            raise ConfigurationError(
                f"Required settings still missing after setup ({', '.join(missing)}). "
                "Re-run `ugh config init` or set the appropriate environment variables."
            )

    return config


def ticket_command(
    board: Optional[str] = typer.Option(
        None,
        "--board",
        "-b",
        help="Override the default board configured in the CLI",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging",
    ),
) -> None:
    """Generate a ticket from local changes and create a matching branch."""
    configure_logging(verbose=verbose)

    try:
        config = load_complete_config(Path.cwd(), board)
        ctx = AppContext.from_config(config)
        outcome = create_ticket_from_changes(ctx, board)
    except UghError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Ticket {outcome.ticket.key} created. Branch ready: {outcome.branch.as_str()}")
    if outcome.ticket.url:
        typer.echo(f"View ticket: {outcome.ticket.url}")
