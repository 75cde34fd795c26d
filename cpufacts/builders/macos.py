"""
Report builder for macOS, fed by `sysctl -a machdep.cpu`, `sysctl -a hw`
and `sw_vers`.
"""
from typing import Iterable

from cpufacts.core.keyvalue import lookup, parse_hierarchical, parse_key_values
from cpufacts.core.records import OSType, SystemInfoRecord
from cpufacts.core.units import normalize_memory_value, to_float, to_int
from cpufacts.internal.constants import MAC_CPU_NAMESPACE, MAC_HW_NAMESPACE
from cpufacts.internal.logging import get_logger

logger = get_logger(__name__)


def _hz_to_mhz(text: str) -> float:
    return to_float(text) / 1e6


def _format_mhz(mhz: float) -> str:
    return f"{mhz:g} MHz"


def parse_product_version(lines: Iterable[str]) -> str:
    """The ProductVersion field of sw_vers output."""
    for key, value in parse_key_values(lines, ":"):
        if key == "ProductVersion":
            return value
    return ""


def build_macos_report(machdep: Iterable[str], hw: Iterable[str], sw_vers: Iterable[str]) -> SystemInfoRecord:
    cpu = parse_hierarchical(machdep, MAC_CPU_NAMESPACE)
    hardware = parse_hierarchical(hw, MAC_HW_NAMESPACE)

    frequency = lookup(hardware, "cpufrequency_max") or lookup(hardware, "cpufrequency")
    clock_mhz = _hz_to_mhz(frequency)

    cache_kb = lookup(cpu, "cache.size")
    # sysctl reports the cache size in KB without a unit
    cache = int(normalize_memory_value(f"{cache_kb} KB")) if cache_kb else 0

    num_sockets = max(to_int(lookup(hardware, "packages"), default=1), 1)
    cores_per_socket = max(to_int(lookup(cpu, "core_count")), 0)

    if not frequency:
        logger.debug("No CPU frequency in sysctl output")

    return SystemInfoRecord(
        name=lookup(cpu, "brand_string"),
        clock=_format_mhz(clock_mhz),
        clock_mhz=clock_mhz,
        cache=cache,
        num_sockets=num_sockets,
        cores_per_socket=cores_per_socket,
        total_cores=num_sockets * cores_per_socket,
        total_memory_bytes=to_int(lookup(hardware, "memsize")),
        free_memory_bytes=0,
        os_type=OSType.MACOSX,
        os_version=parse_product_version(sw_vers),
    )
