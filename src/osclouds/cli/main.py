from __future__ import annotations

import os
from typing import Annotated

import typer

from osclouds.common import create_logger, setup_cli_logging
from osclouds.settings import settings

from .commands import clouds as clouds_commands

logger = create_logger("cli")

app = typer.Typer(help="Inspect OpenStack clouds.yaml credentials.")
app.add_typer(clouds_commands.app, name="clouds")


@app.callback(invoke_without_command=True)
def _root_callback(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output to stderr")] = False,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable colored output")] = False,
) -> None:
    # Respect NO_COLOR environment variable and --no-color flag
    if no_color or os.getenv("NO_COLOR"):
        ctx.color = False

    setup_cli_logging(app_info=settings.app, level="DEBUG" if verbose else "WARNING")
    logger.debug("CLI invoked", command=ctx.invoked_subcommand)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def main() -> None:
    """Entrypoint for the osclouds CLI."""
    app()
