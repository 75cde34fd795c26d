"""
Report builder for Linux, fed by /proc/cpuinfo, /proc/version and /proc/meminfo.
"""
from typing import Iterable

from cpufacts.core.keyvalue import parse_key_values
from cpufacts.core.records import OSType, SystemInfoRecord
from cpufacts.core.units import normalize_memory_value, read_labeled_value, to_float, to_int
from cpufacts.internal.logging import get_logger

logger = get_logger(__name__)

# cpuinfo field -> attribute collected by parse_cpuinfo (matched case-insensitively)
CPUINFO_FIELDS = {
    "model name": "name",
    "cpu mhz": "clock",
    "cpu cores": "cores_per_socket",
    "physical id": "physical_id",
    "cache size": "cache",
}

_VERSION_MARKER = "Linux version "
_VERSION_END = " ("


def parse_cpuinfo(lines: Iterable[str]) -> dict:
    """
    Collect the recognized cpuinfo fields. Later processors overwrite earlier
    ones except "physical id", where the highest id is kept.
    """
    info = {"name": "", "clock": "", "cores_per_socket": "", "cache": ""}
    max_physical_id = None
    for key, value in parse_key_values(lines, ":"):
        field = CPUINFO_FIELDS.get(key.casefold())
        if field is None:
            continue
        if field == "physical_id":
            physical_id = to_int(value, default=-1)
            if physical_id >= 0 and (max_physical_id is None or physical_id > max_physical_id):
                max_physical_id = physical_id
        else:
            info[field] = value

    # ids are zero-based
    info["num_sockets"] = 1 if max_physical_id is None else max_physical_id + 1
    return info


def parse_os_version(lines: Iterable[str]) -> str:
    """Text between "Linux version " and the following " (" in /proc/version."""
    for line in lines:
        start = line.find(_VERSION_MARKER)
        if start < 0:
            continue
        start += len(_VERSION_MARKER)
        end = line.find(_VERSION_END, start)
        return line[start:end] if end >= 0 else line[start:].strip()
    return ""


def parse_meminfo(lines: Iterable[str]) -> dict:
    lines = list(lines)
    return {
        "total": int(read_labeled_value(lines, "MemTotal")),
        "free": int(read_labeled_value(lines, "MemFree")),
        "available": int(read_labeled_value(lines, "MemAvailable")),
    }


def build_linux_report(cpuinfo: Iterable[str], version: Iterable[str], meminfo: Iterable[str]) -> SystemInfoRecord:
    cpu = parse_cpuinfo(cpuinfo)
    memory = parse_meminfo(meminfo)
    os_version = parse_os_version(version)

    num_sockets = cpu["num_sockets"]
    cores_per_socket = max(to_int(cpu["cores_per_socket"]), 0)

    logger.debug(
        "Built Linux report",
        sockets=num_sockets,
        cores_per_socket=cores_per_socket,
        mem_available=memory["available"],
    )
    return SystemInfoRecord(
        name=cpu["name"],
        clock=f"{cpu['clock']} MHz",
        clock_mhz=to_float(cpu["clock"]),
        cache=int(normalize_memory_value(cpu["cache"])),
        num_sockets=num_sockets,
        cores_per_socket=cores_per_socket,
        total_cores=num_sockets * cores_per_socket,
        total_memory_bytes=memory["total"],
        free_memory_bytes=memory["free"],
        os_type=OSType.LINUX,
        os_version=os_version,
    )
