"""
Options shared by the commands that build a report.
"""
from enum import Enum
from pathlib import Path
from typing import Optional

from cpufacts.core.records import OSType
from cpufacts.kernel.contracts import SystemSource


class PlatformChoice(str, Enum):
    linux = "linux"
    macos = "macos"
    windows = "windows"


_CHOICE_TO_OS_TYPE = {
    PlatformChoice.linux: OSType.LINUX,
    PlatformChoice.macos: OSType.MACOSX,
    PlatformChoice.windows: OSType.WINDOWS,
}


def resolve_os_type(choice: Optional[PlatformChoice]) -> Optional[OSType]:
    return _CHOICE_TO_OS_TYPE[choice] if choice is not None else None


def resolve_source(from_dir: Optional[Path]) -> SystemSource:
    if from_dir is not None:
        from cpufacts.adapters.fixture_source import FixtureSystemSource
        return FixtureSystemSource(from_dir)
    from cpufacts.adapters.local_source import LocalSystemSource
    return LocalSystemSource()
