"""
SystemSource that replays captured text dumps from a directory, for
reporting on another machine's output or for tests.

Expected file names:
    cpuinfo, version, meminfo          (copies of the /proc files)
    sysctl-machdep.cpu.txt, sysctl-hw.txt, sw_vers.txt
    wmic-cpu.txt, wmic-os.txt
"""
from pathlib import Path

from cpufacts.core.errors import IOUnavailable
from cpufacts.core.records import RawTextBlob
from cpufacts.internal import constants
from cpufacts.internal.logging import get_logger

logger = get_logger(__name__)


class FixtureSystemSource:
    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def _read(self, name: str) -> RawTextBlob:
        path = self.directory / name
        if not path.is_file():
            raise IOUnavailable(str(path), "fixture file not found")
        logger.debug("Replaying fixture", path=str(path))
        return RawTextBlob.from_text(str(path), path.read_text(encoding="utf-8", errors="replace"))

    def read_linux_cpuinfo(self) -> RawTextBlob:
        return self._read(constants.PROC_CPUINFO)

    def read_linux_os_info(self) -> RawTextBlob:
        return self._read(constants.PROC_VERSION)

    def read_linux_meminfo(self) -> RawTextBlob:
        return self._read(constants.PROC_MEMINFO)

    def query_mac_sysctl(self, namespace: str) -> RawTextBlob:
        return self._read(f"sysctl-{namespace}.txt")

    def query_mac_os_version(self) -> RawTextBlob:
        return self._read("sw_vers.txt")

    def query_windows_wmic(self, alias: str) -> RawTextBlob:
        return self._read(f"wmic-{alias}.txt")
