"""Command implementations for CLI."""

from pathlib import Path
from typing import Dict, List

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from netplan_types.loader import NetplanLoadError, NetplanLoader, render_netplan
from netplan_types.models.network import NetplanConfig
from netplan_types.yaml_bool import decode_required


console = Console()


def _flag(value) -> str:
    """Format an optional boolean for display."""
    if value is None:
        return "[dim]-[/dim]"
    return "[green]yes[/green]" if value else "[red]no[/red]"


def _load(path: Path) -> Dict[str, NetplanConfig]:
    """Load a file, or every file of a directory, keyed by file name."""
    loader = NetplanLoader()
    if path.is_dir():
        configs = loader.load_directory(path)
        for name, error in loader.errors.items():
            console.print(f"[yellow]Skipped[/yellow] {name}: {escape(str(error))}")
        return configs
    return {str(path): loader.load_file(path)}


def validate_paths(paths: List[Path]) -> bool:
    """Validate netplan files and directories, return True if all are valid."""
    valid = True
    for path in paths:
        loader = NetplanLoader()
        if path.is_dir():
            loaded = loader.load_directory(path)
        else:
            try:
                loaded = {str(path): loader.load_file(path)}
            except NetplanLoadError as e:
                loader.errors[str(path)] = e
                loaded = {}

        for name in loaded:
            console.print(f"[green]✓[/green] {name}")
        for name, error in loader.errors.items():
            valid = False
            console.print(f"[red]✗[/red] {name}")
            for loc, msg in error.errors:
                console.print(f"    {loc}: {msg}" if loc else f"    {msg}", markup=False)
    return valid


def show_interfaces(path: Path):
    """Show the interfaces defined in netplan files."""
    table = Table(title="Interfaces")
    table.add_column("Name", style="cyan")
    table.add_column("Type", style="magenta")
    table.add_column("Renderer")
    table.add_column("DHCP4")
    table.add_column("DHCP6")
    table.add_column("Addresses", style="dim")

    for config in _load(path).values():
        network = config.network
        for device_type, name, device in network.interfaces():
            renderer = device.renderer or network.renderer
            addresses = []
            for address in device.addresses or []:
                addresses.extend([address] if isinstance(address, str) else address.keys())
            table.add_row(
                name,
                device_type.replace("_", "-"),
                renderer.value if renderer else "networkd",
                _flag(device.dhcp4),
                _flag(device.dhcp6),
                ", ".join(addresses),
            )

    console.print(table)


def dump_config(path: Path):
    """Print the normalised YAML of a netplan file."""
    config = NetplanLoader().load_file(path)
    typer.echo(render_netplan(config), nl=False)


def decode_bool(value: str):
    """Decode a YAML boolean literal."""
    console.print("true" if decode_required(value) else "false")
