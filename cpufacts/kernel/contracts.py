from typing import Protocol

from cpufacts.core.records import RawTextBlob


class SystemSource(Protocol):
    """
    Defines the contract for anything that can supply raw platform text.
    The report builders only ever see the blobs returned here.

    Every method either returns a RawTextBlob or raises IOUnavailable.
    """

    def read_linux_cpuinfo(self) -> RawTextBlob:
        """Contents of the CPU pseudo-file (/proc/cpuinfo)."""
        ...

    def read_linux_os_info(self) -> RawTextBlob:
        """Contents of the kernel version pseudo-file (/proc/version)."""
        ...

    def read_linux_meminfo(self) -> RawTextBlob:
        """Contents of the memory pseudo-file (/proc/meminfo)."""
        ...

    def query_mac_sysctl(self, namespace: str) -> RawTextBlob:
        """Output of `sysctl -a <namespace>`."""
        ...

    def query_mac_os_version(self) -> RawTextBlob:
        """Output of `sw_vers`."""
        ...

    def query_windows_wmic(self, alias: str) -> RawTextBlob:
        """Output of `wmic <alias> get /value`, alias being "cpu" or "os"."""
        ...
