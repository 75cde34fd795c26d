import sys
from pathlib import Path
from typing import Optional

import typer

from cpufacts.cli.options import PlatformChoice, resolve_os_type, resolve_source
from cpufacts.core.errors import CpuFactsError, IOUnavailable
from cpufacts.core.records import OSType
from cpufacts.internal import constants
from cpufacts.internal.logging import get_logger
from cpufacts.runtime import system

logger = get_logger(__name__)


def _source_checks(source, os_type: OSType):
    if os_type is OSType.LINUX:
        return [
            ("CPU pseudo-file", source.read_linux_cpuinfo),
            ("Version pseudo-file", source.read_linux_os_info),
            ("Memory pseudo-file", source.read_linux_meminfo),
        ]
    if os_type is OSType.MACOSX:
        return [
            (f"sysctl {constants.MAC_CPU_NAMESPACE}", lambda: source.query_mac_sysctl(constants.MAC_CPU_NAMESPACE)),
            (f"sysctl {constants.MAC_HW_NAMESPACE}", lambda: source.query_mac_sysctl(constants.MAC_HW_NAMESPACE)),
            ("sw_vers", source.query_mac_os_version),
        ]
    return [
        (f"wmic {alias}", lambda alias=alias: source.query_windows_wmic(alias))
        for alias in constants.WMIC_ALIASES
    ]


def doctor(
    platform: Optional[PlatformChoice] = typer.Option(None, "--platform", help="Check the sources of this platform instead of the running one."),
    from_dir: Optional[Path] = typer.Option(None, "--from-dir", help="Check captured source dumps in this directory.", exists=True, file_okay=False),
):
    """
    Check that every data source is readable and the report looks sane.
    """
    typer.echo("Running cpufacts doctor checks...\n")
    all_passed = True

    def check(description: str, func):
        nonlocal all_passed
        typer.echo(f"- {description}...", nl=False)
        result, message = func()
        if result:
            typer.echo(f" {typer.style('PASSED', fg=typer.colors.GREEN)}")
        else:
            typer.echo(f" {typer.style('FAILED', fg=typer.colors.RED)}")
            typer.echo(f"  Reason: {message}")
            all_passed = False

    typer.echo(typer.style("Environment:", fg=typer.colors.BLUE, bold=True))
    typer.echo(f"  Python Version: {sys.version.split()[0]}")
    typer.echo(f"  Architecture: {system.get_cpu_arch()}")

    try:
        os_type = resolve_os_type(platform) or system.detect_platform()
    except CpuFactsError as e:
        typer.echo(typer.style(f"Error: {e}", fg=typer.colors.RED), err=True)
        raise typer.Exit(1)
    typer.echo(f"  Platform: {os_type.value}")
    typer.echo("")

    source = resolve_source(from_dir)

    # --- Sources ---
    typer.echo(typer.style("Data Sources:", fg=typer.colors.BLUE, bold=True))
    for description, read in _source_checks(source, os_type):
        def check_source(read=read):
            try:
                blob = read()
            except IOUnavailable as e:
                return False, str(e)
            if not len(blob):
                return False, f"{blob.source} returned no output."
            return True, ""
        check(description, check_source)
    typer.echo("")

    # --- Report ---
    typer.echo(typer.style("Report:", fg=typer.colors.BLUE, bold=True))
    try:
        info = system.get_system_info(os_type=os_type, source=source)
    except CpuFactsError as e:
        logger.error("Doctor could not build a report", error=str(e))
        typer.echo(f"  Report: {typer.style('Not Available', fg=typer.colors.RED)}")
        typer.echo(f"  Reason: {e}")
        info = None
        all_passed = False

    if info is not None:
        check("CPU name present", lambda: (bool(info.name), "No CPU name in source output."))
        check("Core count present", lambda: (info.total_cores > 0, "No core count in source output."))

        # psutil only describes this machine
        if from_dir is None and platform is None:
            def check_cores():
                physical = system.get_physical_cores()
                if physical is None:
                    return True, ""
                return info.total_cores == physical, f"Parsed {info.total_cores} cores, psutil reports {physical}."
            check("Core count matches psutil", check_cores)

            def check_memory():
                if not info.total_memory_bytes:
                    return True, ""
                expected = system.get_total_ram_bytes()
                drift = abs(info.total_memory_bytes - expected) / max(expected, 1)
                return drift < 0.05, f"Parsed {info.total_memory_bytes} bytes, psutil reports {expected}."
            check("Total memory matches psutil", check_memory)

    typer.echo("\n--- Doctor Check Summary ---")
    if all_passed:
        typer.echo(typer.style("All checks PASSED!", fg=typer.colors.GREEN, bold=True))
    else:
        typer.echo(typer.style("Some checks FAILED. Please review the output above.", fg=typer.colors.RED, bold=True))
        raise typer.Exit(1)


if __name__ == "__main__":
    typer.run(doctor)
