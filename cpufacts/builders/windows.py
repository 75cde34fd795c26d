"""
Report builder for Windows, fed by `wmic cpu get /value` and `wmic os get /value`.
"""
from typing import Iterable

from cpufacts.core.keyvalue import parse_key_values
from cpufacts.core.records import OSType, SystemInfoRecord
from cpufacts.core.sockets import aggregate_sockets
from cpufacts.core.units import normalize_memory_value, to_float, to_int
from cpufacts.internal.constants import SUMMED_SOCKET_KEYS
from cpufacts.internal.logging import get_logger

logger = get_logger(__name__)


def _kb_to_bytes(text: str) -> int:
    return int(normalize_memory_value(f"{text} KB")) if text else 0


def build_windows_report(cpu: Iterable[str], os_info: Iterable[str]) -> SystemInfoRecord:
    processors = aggregate_sockets(parse_key_values(cpu, "="), SUMMED_SOCKET_KEYS)
    system = aggregate_sockets(parse_key_values(os_info, "="), summed_keys=())

    num_sockets = processors.socket_count
    total_cores = to_int(processors.get("NumberOfCores"))
    cores_per_socket = total_cores // num_sockets

    clock = processors.get("MaxClockSpeed")
    # L2CacheSize is left as WMIC reports it (KB), unlike the other platforms
    cache = f"{processors.get('L2CacheSize')} KB"

    logger.debug("Built Windows report", sockets=num_sockets, total_cores=total_cores)
    return SystemInfoRecord(
        name=processors.get("Name"),
        clock=f"{clock} MHz",
        clock_mhz=to_float(clock),
        cache=cache,
        num_sockets=num_sockets,
        cores_per_socket=cores_per_socket,
        total_cores=num_sockets * cores_per_socket,
        total_memory_bytes=_kb_to_bytes(system.get("TotalVisibleMemorySize")),
        free_memory_bytes=_kb_to_bytes(system.get("FreePhysicalMemory")),
        os_type=OSType.WINDOWS,
        os_version=system.get("Caption"),
    )
