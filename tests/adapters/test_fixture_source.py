import pytest

from cpufacts.adapters.fixture_source import FixtureSystemSource
from cpufacts.core.errors import IOUnavailable


def test_replays_every_platform(fixtures_dir):
    assert len(FixtureSystemSource(fixtures_dir / "linux-dual-socket").read_linux_cpuinfo()) > 0
    assert len(FixtureSystemSource(fixtures_dir / "macos-intel").query_mac_sysctl("hw")) > 0
    assert len(FixtureSystemSource(fixtures_dir / "macos-intel").query_mac_os_version()) == 3
    assert len(FixtureSystemSource(fixtures_dir / "windows-dual-socket").query_windows_wmic("os")) > 0


def test_missing_fixture_raises_io_unavailable(tmp_path):
    source = FixtureSystemSource(tmp_path)
    with pytest.raises(IOUnavailable, match="fixture file not found"):
        source.read_linux_os_info()
