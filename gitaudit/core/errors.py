"""Errors that abort a scan."""


class ScanError(RuntimeError):
    """Base class for fatal scan errors.

    Carries the directory and the operation that failed so the CLI can
    report both.
    """

    def __init__(self, path: str, operation: str, detail: str):
        self.path = path
        self.operation = operation
        self.detail = detail
        super().__init__(f"{operation} failed in {path}: {detail}")


class GitInvocationError(ScanError):
    """The git executable could not be started."""


class MalformedOutputError(ScanError):
    """git produced output that cannot be interpreted."""
