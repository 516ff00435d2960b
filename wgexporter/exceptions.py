"""Exception hierarchy for the WireGuard exporter."""


class WgExporterError(Exception):
    """Base exception for all exporter errors."""


class ConfigUnreadableError(WgExporterError):
    """The WireGuard configuration file could not be opened or read."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class StatusCommandError(WgExporterError):
    """``wg show <interface> dump`` could not be launched or exited non-zero."""

    def __init__(self, message: str, returncode: int | None = None, output: str = ""):
        self.returncode = returncode
        self.output = output
        super().__init__(message)
