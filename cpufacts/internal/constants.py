"""
Defaults shared across cpufacts. Environment overrides live in config.py.
"""

LOG_FILE_NAME = "cpufacts.log.json"

# ---------------------------------------------------------------------
# Environment variables
# ---------------------------------------------------------------------

ENV_LOG_LEVEL = "CPUFACTS_LOG_LEVEL"
ENV_PROC_ROOT = "CPUFACTS_PROC_ROOT"
ENV_COMMAND_TIMEOUT = "CPUFACTS_COMMAND_TIMEOUT"

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_PROC_ROOT = "/proc"
DEFAULT_COMMAND_TIMEOUT = 30.0  # seconds

# ---------------------------------------------------------------------
# Linux pseudo-files
# ---------------------------------------------------------------------

PROC_CPUINFO = "cpuinfo"
PROC_VERSION = "version"
PROC_MEMINFO = "meminfo"

# ---------------------------------------------------------------------
# macOS / Windows queries
# ---------------------------------------------------------------------

MAC_CPU_NAMESPACE = "machdep.cpu"
MAC_HW_NAMESPACE = "hw"
WMIC_CPU_ALIAS = "cpu"
WMIC_OS_ALIAS = "os"
WMIC_ALIASES = (WMIC_CPU_ALIAS, WMIC_OS_ALIAS)

# Keys whose values are summed across sockets in WMIC output
SUMMED_SOCKET_KEYS = ("NumberOfCores",)
