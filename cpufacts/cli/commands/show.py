import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from cpufacts.cli.options import PlatformChoice, resolve_os_type, resolve_source
from cpufacts.core.errors import CpuFactsError
from cpufacts.core.records import SystemInfoRecord
from cpufacts.internal.logging import get_logger
from cpufacts.runtime.system import get_system_info

console = Console()
logger = get_logger(__name__)


def _format_bytes(value: int) -> str:
    if not value:
        return "0"
    for unit, size in (("GB", 1024 ** 3), ("MB", 1024 ** 2), ("KB", 1024)):
        if value >= size:
            return f"{value / size:.1f} {unit} ({value} bytes)"
    return f"{value} bytes"


def render_table(info: SystemInfoRecord) -> Table:
    table = Table(title="System Information")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value")

    table.add_row("Name", info.name or "-")
    table.add_row("Clock", info.clock)
    table.add_row("Cache", info.cache if isinstance(info.cache, str) else _format_bytes(info.cache))
    table.add_row("Sockets", str(info.num_sockets))
    table.add_row("Cores per socket", str(info.cores_per_socket))
    table.add_row("Total cores", str(info.total_cores))
    table.add_row("Total memory", _format_bytes(info.total_memory_bytes))
    table.add_row("Free memory", _format_bytes(info.free_memory_bytes))
    table.add_row("OS", f"{info.os_type.value} {info.os_version}".strip())
    return table


def show(
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON."),
    platform: Optional[PlatformChoice] = typer.Option(None, "--platform", help="Build the report for this platform instead of the running one."),
    from_dir: Optional[Path] = typer.Option(None, "--from-dir", help="Read captured source dumps from this directory.", exists=True, file_okay=False),
):
    """
    Print CPU, memory and OS facts for this machine.
    """
    try:
        info = get_system_info(os_type=resolve_os_type(platform), source=resolve_source(from_dir))
    except CpuFactsError as e:
        logger.error("Could not build system report", error=str(e))
        typer.echo(typer.style(f"Error: {e}", fg=typer.colors.RED), err=True)
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(info.to_dict(), indent=2))
    else:
        console.print(render_table(info))


if __name__ == "__main__":
    typer.run(show)
