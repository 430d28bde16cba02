"""Exceptions raised by the restore pipeline."""


class ShadowRestoreError(Exception):
    """Base class for every failure the pipeline reports."""


class DateParseError(ShadowRestoreError, ValueError):
    def __init__(self, value: str, formats: list[str]):
        self.value = value
        self.formats = list(formats)
        super().__init__(
            f"Cannot parse date {value!r} (accepted formats: {', '.join(self.formats)})"
        )


class RemoteCallError(ShadowRestoreError):
    def __init__(self, host: str, detail: str, returncode: int = -1):
        self.host = host
        self.detail = detail
        self.returncode = returncode
        super().__init__(f"Snapshot listing on {host} failed ({returncode}): {detail}")


class NoSnapshotError(ShadowRestoreError):
    def __init__(self, host: str, target):
        self.host = host
        self.target = target
        super().__init__(f"No snapshot on {host} was taken at or before {target}")


class NotifierConfigError(ShadowRestoreError):
    """A notification was requested but the mail relay is not configured."""


class CopyError(ShadowRestoreError):
    def __init__(self, source: str, destination: str, cause: Exception):
        self.source = source
        self.destination = destination
        self.cause = cause
        super().__init__(f"Copy from {source} to {destination} failed: {cause}")
