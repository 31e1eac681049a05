"""Command implementations for CLI."""

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from lift.loader import DataLoader
from lift.models.alpine import AlpineData, init_alpine_data
from lift.renderers.sshd import render_sshd_config


console = Console()
stderr_console = Console(stderr=True)


def _summary_table(data: AlpineData) -> Table:
    """Build an overview table of a loaded document."""
    table = Table(title="alpine-data")
    table.add_column("Section", style="cyan")
    table.add_column("Value")

    hostname = data.network.hostname if data.network else "-"
    table.add_row("Hostname", hostname or "-")
    table.add_row("Timezone", data.timezone or "-")
    table.add_row("Groups", ", ".join(data.groups) or "-")
    table.add_row("Users", ", ".join(user.name for user in data.users) or "-")
    table.add_row("Packages", ", ".join(data.packages.install) if data.packages else "-")
    table.add_row("SSH port", str(data.sshd.port) if data.sshd else "-")
    table.add_row("Mail relay", data.mta.server if data.mta else "-")
    table.add_row("Disks", str(len(data.disks)))
    table.add_row("Files", str(len(data.write_files)))
    table.add_row("Boot commands", str(len(data.runcmd)))
    table.add_row("Unlift", "yes" if data.unlift else "no")
    return table


def validate_document(loader: DataLoader, path: Path):
    """Validate a document and print a summary."""
    data = loader.load_file(path)

    if loader.options.quiet:
        return
    console.print(f"[green]✓[/green] Document is valid: {path}")
    console.print(_summary_table(data))


def show_document(loader: DataLoader, path: Path):
    """Print a loaded document as YAML."""
    data = loader.load_file(path)
    typer.echo(loader.dump(data), nl=False)


def show_defaults(loader: DataLoader):
    """Print the baseline defaults as YAML."""
    typer.echo(loader.dump(init_alpine_data()), nl=False)


def show_sshd_config(loader: DataLoader, path: Path):
    """Print the sshd_config fragment for a document."""
    data = loader.load_file(path)
    if data.sshd is None:
        stderr_console.print("[red]Error:[/red] document has no sshd section")
        raise typer.Exit(1)
    typer.echo(render_sshd_config(data.sshd), nl=False)
