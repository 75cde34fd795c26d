import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from cpufacts.cli.main import app
from cpufacts.core.errors import IOUnavailable

runner = CliRunner()

BASE_ARGS = ["--no-log-file"]


def invoke(*args):
    return runner.invoke(app, BASE_ARGS + list(args))


@pytest.mark.parametrize("command, expected_output_substring", [
    (["--help"], "Usage:"),
    (["show", "--help"], "--json"),
    (["doctor", "--help"], "--from-dir"),
    (["version", "--help"], "Usage:"),
])
def test_valid_commands_help_output(command, expected_output_substring):
    result = invoke(*command)
    assert result.exit_code == 0
    assert expected_output_substring in result.output


def test_unknown_command_fails():
    result = invoke("nonexistent-command")
    assert result.exit_code != 0


@pytest.mark.parametrize("platform_dir, platform, expected", [
    ("linux-dual-socket", "linux", {"NumSockets": 2, "TotalCores": 12, "OSType": "Linux"}),
    ("macos-intel", "macos", {"ClockMHz": 2600.0, "CacheBytes": 262144, "OSType": "Mac OS/X"}),
    ("windows-dual-socket", "windows", {"Cache": "8192 KB", "TotalCores": 16, "OSType": "Windows"}),
])
def test_show_json_from_fixture_dir(fixtures_dir, platform_dir, platform, expected):
    result = invoke("show", "--json", "--platform", platform, "--from-dir", str(fixtures_dir / platform_dir))
    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    for key, value in expected.items():
        assert data[key] == value


def test_show_table(fixtures_dir):
    result = invoke("show", "--platform", "linux", "--from-dir", str(fixtures_dir / "linux-dual-socket"))
    assert result.exit_code == 0, result.output
    assert "System Information" in result.stdout
    assert "Total cores" in result.stdout


def test_show_reports_missing_source(copy_fixture_dir):
    directory = copy_fixture_dir("macos-intel")
    (directory / "sw_vers.txt").unlink()
    result = invoke("show", "--platform", "macos", "--from-dir", str(directory))
    assert result.exit_code == 1
    assert "unavailable" in result.output


def test_show_uses_running_platform_by_default():
    with patch("cpufacts.cli.commands.show.get_system_info", side_effect=IOUnavailable("/proc/cpuinfo", "gone")) as mock_info:
        result = invoke("show")
    assert result.exit_code == 1
    assert mock_info.call_args.kwargs["os_type"] is None


def test_doctor_passes_on_complete_fixture(fixtures_dir):
    result = invoke("doctor", "--platform", "windows", "--from-dir", str(fixtures_dir / "windows-dual-socket"))
    assert result.exit_code == 0, result.output
    assert "wmic cpu" in result.output
    assert "All checks PASSED!" in result.output


def test_doctor_fails_on_missing_source(copy_fixture_dir):
    directory = copy_fixture_dir("linux-dual-socket")
    (directory / "meminfo").unlink()
    result = invoke("doctor", "--platform", "linux", "--from-dir", str(directory))
    assert result.exit_code == 1
    assert "FAILED" in result.output
    assert "Some checks FAILED" in result.output


def test_version_command(mocker):
    mocker.patch("importlib.metadata.version", return_value="9.9.9")
    result = invoke("version")
    assert result.exit_code == 0
    assert "cpufacts version: 9.9.9" in result.output


def test_version_command_without_metadata(mocker):
    import importlib.metadata
    mocker.patch("importlib.metadata.version", side_effect=importlib.metadata.PackageNotFoundError("cpufacts"))
    result = invoke("version")
    assert result.exit_code == 1
    assert "not installed" in result.output
