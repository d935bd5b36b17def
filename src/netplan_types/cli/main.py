"""Main CLI implementation using Typer."""

from pathlib import Path
from typing import Any, Callable, List

import typer
from rich.console import Console
from rich.markup import escape

from netplan_types.cli.commands import (
    decode_bool,
    dump_config,
    show_interfaces,
    validate_paths,
)
from netplan_types.loader import NetplanLoadError
from netplan_types.utils.logging import setup_logging
from netplan_types.yaml_bool import YamlBoolError


# Create Typer app
app = typer.Typer(
    name="netplanctl",
    help="Inspect and normalise netplan configuration files",
    add_completion=False,
)

# Console for rich output
console = Console()


def _run_cli_command(handler: Callable[..., Any], **kwargs: Any):
    """Helper to run a CLI command with error handling."""
    try:
        return handler(**kwargs)
    except (NetplanLoadError, YamlBoolError, FileNotFoundError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        "WARNING", "--log-level", "-l", help="Logging level"
    ),
):
    """Inspect and normalise netplan configuration files."""
    setup_logging(log_level)


@app.command("validate")
def validate_command(
    paths: List[Path] = typer.Argument(..., help="Netplan files or directories"),
):
    """Validate netplan files."""
    if not _run_cli_command(validate_paths, paths=paths):
        raise typer.Exit(1)


@app.command("show")
def show_command(
    path: Path = typer.Argument(..., help="Netplan file or directory"),
):
    """Show the interfaces defined in netplan files."""
    _run_cli_command(show_interfaces, path=path)


@app.command("dump")
def dump_command(
    path: Path = typer.Argument(..., help="Netplan file"),
):
    """Print the normalised YAML of a netplan file."""
    _run_cli_command(dump_config, path=path)


@app.command("bool")
def bool_command(
    value: str = typer.Argument(..., help="Literal to decode, e.g. yes, Off, N"),
):
    """Decode a YAML boolean literal."""
    _run_cli_command(decode_bool, value=value)


def main():
    """Main entry point for CLI."""
    app()
