"""
Errors raised by the shim. All of them end the process with status 1.
"""


class PkgmgrError(Exception):
    """Base error for the shim."""

    pass


class LaunchError(PkgmgrError):
    """The package manager binary could not be started."""

    def __init__(self, binary: str, reason: str):
        super().__init__(f"failed to execute {binary}: {reason}")
        self.binary = binary
        self.reason = reason


class UnsupportedPackageManagerError(PkgmgrError, KeyError):
    """No exec command is known for the requested package manager."""

    def __init__(self, manager: str):
        super().__init__(manager)
        self.manager = manager

    def __str__(self) -> str:
        return f"no exec command for '{self.manager}'"
