"""
Platform detection and report dispatch.
"""
import platform
from typing import Optional

import psutil

from cpufacts.builders.linux import build_linux_report
from cpufacts.builders.macos import build_macos_report
from cpufacts.builders.windows import build_windows_report
from cpufacts.core.errors import UnsupportedPlatformError
from cpufacts.core.records import OSType, SystemInfoRecord
from cpufacts.internal import constants
from cpufacts.internal.logging import get_logger, setup_logging
from cpufacts.kernel.contracts import SystemSource

logger = get_logger(__name__)

_SYSTEM_TO_OS_TYPE = {
    "linux": OSType.LINUX,
    "darwin": OSType.MACOSX,
    "windows": OSType.WINDOWS,
}


def detect_platform(system_name: Optional[str] = None) -> OSType:
    """Map platform.system() (or `system_name`) onto an OSType."""
    name = system_name if system_name is not None else platform.system()
    try:
        return _SYSTEM_TO_OS_TYPE[name.lower()]
    except KeyError:
        raise UnsupportedPlatformError(name) from None


def _default_source() -> SystemSource:
    from cpufacts.adapters.local_source import LocalSystemSource
    return LocalSystemSource()


def get_system_info(os_type: Optional[OSType] = None, source: Optional[SystemSource] = None) -> SystemInfoRecord:
    """
    Read the sources for `os_type` (the running OS by default) and build its report.
    Raises IOUnavailable when a required source cannot be read.
    """
    os_type = os_type or detect_platform()
    source = source or _default_source()
    logger.info("Collecting system info", os_type=os_type.value, source=type(source).__name__)

    if os_type is OSType.LINUX:
        return build_linux_report(
            source.read_linux_cpuinfo(),
            source.read_linux_os_info(),
            source.read_linux_meminfo(),
        )
    if os_type is OSType.MACOSX:
        return build_macos_report(
            source.query_mac_sysctl(constants.MAC_CPU_NAMESPACE),
            source.query_mac_sysctl(constants.MAC_HW_NAMESPACE),
            source.query_mac_os_version(),
        )
    if os_type is OSType.WINDOWS:
        return build_windows_report(
            source.query_windows_wmic(constants.WMIC_CPU_ALIAS),
            source.query_windows_wmic(constants.WMIC_OS_ALIAS),
        )
    raise UnsupportedPlatformError(str(os_type))


# ---------------------------------------------------------------------
# psutil view, used to cross-check parsed reports
# ---------------------------------------------------------------------

def get_physical_cores() -> Optional[int]:
    return psutil.cpu_count(logical=False)


def get_total_ram_bytes() -> int:
    return psutil.virtual_memory().total


def get_cpu_arch() -> str:
    return platform.machine()


if __name__ == "__main__":
    setup_logging()
    info = get_system_info()
    for key, value in info.to_dict().items():
        print(f"{key}: {value}")
