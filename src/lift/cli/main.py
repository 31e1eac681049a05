"""Main CLI implementation using Typer."""

from pathlib import Path
from typing import Any, Callable

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from lift.cli.commands import (
    show_defaults,
    show_document,
    show_sshd_config,
    validate_document,
)
from lift.errors import DecodeError
from lift.loader import DataLoader
from lift.models.config import LiftOptions
from lift.utils.logging import setup_logging


app = typer.Typer(
    name="liftctl",
    help="Inspect and validate alpine-data first-boot documents",
    add_completion=False,
)

console = Console(stderr=True)


def _run_cli_command(handler: Callable[..., Any], options: LiftOptions, **kwargs: Any):
    """Helper to run a CLI command with a loader and error handling."""
    try:
        handler(DataLoader(options), **kwargs)
    except DecodeError as e:
        console.print(f"[red]Error:[/red] {escape(e.message)}")
        for path, msg in e.errors:
            console.print(f"  [yellow]{escape(path)}[/yellow]: {escape(msg)}")
        raise typer.Exit(1) from e
    except FileNotFoundError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e


@app.callback()
def main(
    ctx: typer.Context,
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only report errors"),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level"),
):
    """Inspect and validate alpine-data first-boot documents."""
    try:
        options = LiftOptions(quiet=quiet, log_level=log_level)
    except ValidationError as e:
        console.print(f"[red]Error:[/red] invalid log level: {log_level}")
        raise typer.Exit(2) from e

    setup_logging(options.log_level, quiet=options.quiet)
    ctx.obj = options


@app.command("validate")
def validate_command(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="alpine-data YAML file"),
):
    """Validate a document and summarize it."""
    _run_cli_command(validate_document, ctx.obj, path=path)


@app.command("show")
def show_command(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="alpine-data YAML file"),
    no_defaults: bool = typer.Option(
        False, "--no-defaults", help="Decode the document without the baseline defaults"
    ),
):
    """Print the effective document as YAML."""
    options = ctx.obj.model_copy(update={"merge_defaults": not no_defaults})
    _run_cli_command(show_document, options, path=path)


@app.command("defaults")
def defaults_command(ctx: typer.Context):
    """Print the baseline defaults as YAML."""
    _run_cli_command(show_defaults, ctx.obj)


@app.command("sshd-config")
def sshd_config_command(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="alpine-data YAML file"),
):
    """Print the sshd_config fragment for a document."""
    _run_cli_command(show_sshd_config, ctx.obj, path=path)


if __name__ == "__main__":
    app()
