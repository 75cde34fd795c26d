import shutil
from pathlib import Path

import pytest

from cpufacts.core.records import RawTextBlob

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(platform_dir: str, name: str) -> RawTextBlob:
    path = FIXTURES_DIR / platform_dir / name
    return RawTextBlob.from_text(str(path), path.read_text(encoding="utf-8"))


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def linux_blobs():
    """cpuinfo, version and meminfo of a dual-socket Xeon box."""
    return (
        load_fixture("linux-dual-socket", "cpuinfo"),
        load_fixture("linux-dual-socket", "version"),
        load_fixture("linux-dual-socket", "meminfo"),
    )


@pytest.fixture
def macos_blobs():
    return (
        load_fixture("macos-intel", "sysctl-machdep.cpu.txt"),
        load_fixture("macos-intel", "sysctl-hw.txt"),
        load_fixture("macos-intel", "sw_vers.txt"),
    )


@pytest.fixture
def windows_blobs():
    return (
        load_fixture("windows-dual-socket", "wmic-cpu.txt"),
        load_fixture("windows-dual-socket", "wmic-os.txt"),
    )


@pytest.fixture
def copy_fixture_dir(tmp_path):
    """
    Copy one of the fixture directories into tmp_path so a test can
    remove or edit files without touching the originals.
    """
    def _copy(platform_dir: str) -> Path:
        target = tmp_path / platform_dir
        shutil.copytree(FIXTURES_DIR / platform_dir, target)
        return target
    return _copy
