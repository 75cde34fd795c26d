"""
SystemSource backed by this machine: /proc pseudo-files on Linux,
sysctl/sw_vers on macOS and WMIC on Windows.
"""
import subprocess
import tempfile
from pathlib import Path
from typing import List, Optional

from cpufacts.core.errors import IOUnavailable
from cpufacts.core.records import RawTextBlob
from cpufacts.internal import constants, paths
from cpufacts.internal.config import Settings, load_settings
from cpufacts.internal.logging import get_logger

logger = get_logger(__name__)


class LocalSystemSource:
    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or load_settings()

    # -----------------------------------------------------------------
    # Helpers
    # -----------------------------------------------------------------

    def _read_file(self, path: Path) -> RawTextBlob:
        try:
            text = path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.error("Could not read source file", path=str(path), error=str(e))
            raise IOUnavailable(str(path), f"could not open for reading: {e.strerror or e}") from e
        logger.debug("Read source file", path=str(path), bytes=len(text))
        return RawTextBlob.from_text(str(path), text)

    def _run(self, command: List[str], cwd: Optional[str] = None) -> RawTextBlob:
        source = " ".join(command)
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                errors="replace",
                check=True,
                cwd=cwd,
                timeout=self.settings.command_timeout,
            )
        except FileNotFoundError as e:
            raise IOUnavailable(source, f"command not found: {command[0]}") from e
        except subprocess.CalledProcessError as e:
            logger.error("Source command failed", command=source, returncode=e.returncode, stderr=e.stderr)
            raise IOUnavailable(source, f"exited with status {e.returncode}") from e
        except subprocess.TimeoutExpired as e:
            raise IOUnavailable(source, f"timed out after {e.timeout}s") from e
        except OSError as e:
            raise IOUnavailable(source, str(e)) from e
        logger.debug("Ran source command", command=source, bytes=len(result.stdout))
        return RawTextBlob.from_text(source, result.stdout)

    # -----------------------------------------------------------------
    # Linux
    # -----------------------------------------------------------------

    def read_linux_cpuinfo(self) -> RawTextBlob:
        return self._read_file(paths.get_proc_file(constants.PROC_CPUINFO, self.settings.proc_root))

    def read_linux_os_info(self) -> RawTextBlob:
        return self._read_file(paths.get_proc_file(constants.PROC_VERSION, self.settings.proc_root))

    def read_linux_meminfo(self) -> RawTextBlob:
        return self._read_file(paths.get_proc_file(constants.PROC_MEMINFO, self.settings.proc_root))

    # -----------------------------------------------------------------
    # macOS
    # -----------------------------------------------------------------

    def query_mac_sysctl(self, namespace: str) -> RawTextBlob:
        return self._run(["sysctl", "-a", namespace])

    def query_mac_os_version(self) -> RawTextBlob:
        return self._run(["sw_vers"])

    # -----------------------------------------------------------------
    # Windows
    # -----------------------------------------------------------------

    def query_windows_wmic(self, alias: str) -> RawTextBlob:
        if alias not in constants.WMIC_ALIASES:
            raise ValueError(f"Unknown WMIC alias: {alias!r}")
        # WMIC needs write access to its working directory
        return self._run(["wmic", alias, "get", "/value"], cwd=tempfile.gettempdir())
