"""
Data contracts shared by the parsers, the report builders and the dispatcher.
These are plain data holders; parsing logic lives in the sibling modules.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, NamedTuple, Union

from cpufacts.core.units import normalize_memory_value


class OSType(str, Enum):
    LINUX = "Linux"
    MACOSX = "Mac OS/X"
    WINDOWS = "Windows"


class KeyValueEntry(NamedTuple):
    key: str
    value: str


@dataclass(frozen=True)
class RawTextBlob:
    """
    The captured output of one external source, split into lines.
    `source` names where it came from (a file path or a command line).
    """
    source: str
    lines: tuple[str, ...]

    @classmethod
    def from_text(cls, source: str, text: str) -> "RawTextBlob":
        return cls(source=source, lines=tuple(line.rstrip("\r") for line in text.splitlines()))

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)


@dataclass(frozen=True)
class SystemInfoRecord:
    """
    Normalized CPU/OS facts for one machine.

    `cache` is a byte count on Linux and macOS but stays the raw "NNN KB"
    text reported by WMIC on Windows; use `cache_bytes` for a number.
    """
    name: str
    clock: str
    clock_mhz: float
    cache: Union[int, str]
    num_sockets: int
    cores_per_socket: int
    total_cores: int
    total_memory_bytes: int
    free_memory_bytes: int
    os_type: OSType
    os_version: str

    def __post_init__(self):
        if self.num_sockets < 1:
            raise ValueError("num_sockets must be at least 1")
        if self.cores_per_socket < 0:
            raise ValueError("cores_per_socket cannot be negative")
        if self.total_cores != self.num_sockets * self.cores_per_socket:
            raise ValueError("total_cores must equal num_sockets * cores_per_socket")

    @property
    def cache_bytes(self) -> int:
        if isinstance(self.cache, str):
            return int(normalize_memory_value(self.cache))
        return int(self.cache)

    def to_dict(self) -> dict:
        return {
            "Name": self.name,
            "Clock": self.clock,
            "ClockMHz": self.clock_mhz,
            "Cache": self.cache,
            "CacheBytes": self.cache_bytes,
            "NumSockets": self.num_sockets,
            "CoresPerSocket": self.cores_per_socket,
            "TotalCores": self.total_cores,
            "TotalMemoryBytes": self.total_memory_bytes,
            "FreeMemoryBytes": self.free_memory_bytes,
            "OSType": self.os_type.value,
            "OSVersionString": self.os_version,
        }
