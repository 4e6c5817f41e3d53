"""Main CLI callback for ugh."""

import typer

from ugh import __version__


def main_command(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show the ugh version and exit",
    ),
) -> None:
    """Multi-agent developer CLI."""
    if version:
        typer.echo(f"ugh {__version__}")
        raise typer.Exit(0)

    # Without a subcommand, show help
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)
