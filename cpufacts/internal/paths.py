import os
from pathlib import Path


# ---------------------------------------------------------------------
# Base directories
# ---------------------------------------------------------------------

def get_app_data_dir() -> Path:
    """
    Returns the application data directory.

    - Windows: %APPDATA%\\cpufacts
    - Linux/macOS: ~/.cpufacts
    """
    if os.name == "nt":  # Windows
        base = os.environ.get("APPDATA", str(Path.home()))
        path = Path(base) / "cpufacts"
    else:  # Linux / macOS
        path = Path.home() / ".cpufacts"

    path.mkdir(parents=True, exist_ok=True)
    return path


def get_log_dir() -> Path:
    path = get_app_data_dir() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_log_file() -> Path:
    """
    JSON log file written by the CLI.
    """
    from cpufacts.internal.constants import LOG_FILE_NAME
    return get_log_dir() / LOG_FILE_NAME


# ---------------------------------------------------------------------
# Platform data sources
# ---------------------------------------------------------------------

def get_proc_file(name: str, proc_root: Path) -> Path:
    """
    Path to a Linux pseudo-file, e.g. /proc/cpuinfo.
    """
    return Path(proc_root) / name


if __name__ == "__main__":
    print("App Data Dir:", get_app_data_dir())
    print("Log Dir:", get_log_dir())
    print("Log File:", get_log_file())
