from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
import yaml
from result import Result, is_err

from osclouds.config import CloudsConfig, ConfigError, load_config


class OutputFormat(str, Enum):
    YAML = "yaml"
    JSON = "json"


FormatOption = Annotated[
    OutputFormat,
    typer.Option("--format", "-f", show_default=True, case_sensitive=False, help="Output format (yaml or json)."),
]
FileOption = Annotated[
    Path | None,
    typer.Option(
        "--file",
        help="Read this clouds.yaml instead of searching the default locations.",
    ),
]

MASKED_PASSWORD = "********"

app = typer.Typer(help="Inspect configured clouds.")


@app.callback(invoke_without_command=True)
def _clouds_root(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("list")
def list_clouds(file: FileOption = None) -> None:
    config = _load_or_exit(file)
    for name in config.names():
        typer.echo(name)


@app.command("show")
def show(
    name: Annotated[str, typer.Argument(help="Cloud name as it appears under `clouds:`.")],
    file: FileOption = None,
    format: FormatOption = OutputFormat.YAML,
    show_password: Annotated[bool, typer.Option("--show-password", help="Print the password in clear text.")] = False,
) -> None:
    selected_format = format.value
    config = _load_or_exit(file)

    result = config.get(name).map(lambda options: options.model_dump())
    if is_err(result):
        _handle_error(result.err())
        raise typer.Exit(code=1)

    payload = result.unwrap()
    if payload["password"] and not show_password:
        payload["password"] = MASKED_PASSWORD

    typer.echo(_format_payload(payload, selected_format))


def _load_or_exit(file: Path | None) -> CloudsConfig:
    result: Result[CloudsConfig, ConfigError] = load_config([file] if file is not None else None)
    if is_err(result):
        _handle_error(result.err())
        raise typer.Exit(code=1)
    return result.unwrap()


def _format_payload(payload: dict[str, object], format: str) -> str:
    if format == "json":
        return json.dumps(payload, indent=2, sort_keys=True)
    return yaml.safe_dump(payload, sort_keys=True)


def _handle_error(error: ConfigError) -> None:
    message = error.message
    searched = getattr(error, "searched", None)
    if searched:
        message = f"{message} (searched {', '.join(str(p) for p in searched)})"

    typer.secho(message, err=True, fg=typer.colors.RED)
