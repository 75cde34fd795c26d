class CpuFactsError(Exception):
    """Base class for cpufacts errors."""


class IOUnavailable(CpuFactsError):
    """
    A required data source (pseudo-file or command) could not be read.
    Fatal to the current report; never retried.
    """

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"{source} unavailable: {reason}")


class UnsupportedPlatformError(CpuFactsError):
    """No report builder exists for the running operating system."""

    def __init__(self, system: str):
        self.system = system
        super().__init__(f"Unsupported platform: {system!r}")
