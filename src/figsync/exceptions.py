"""Exception hierarchy for figsync."""


class FigsyncError(Exception):
    """Base exception for all figsync errors."""

    pass


class HostError(FigsyncError):
    """Errors raised at the host boundary."""

    pass


class HostQueryError(HostError):
    """A host query (node lookup, style enumeration) failed."""

    def __init__(self, query: str, reason: str) -> None:
        self.query = query
        self.reason = reason
        super().__init__(f"Host query '{query}' failed: {reason}")


class SnapshotError(FigsyncError):
    """Errors related to loading document snapshots."""

    pass


class SnapshotLoadError(SnapshotError):
    """Error reading a snapshot file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load snapshot '{path}': {reason}")


class SnapshotFormatError(SnapshotError):
    """Snapshot content does not have the expected shape."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid snapshot format '{path}': {details}")


class RequestError(FigsyncError):
    """Errors related to inbound session requests."""

    pass


class UnsupportedOperationError(RequestError):
    """Request named an operation the session does not handle."""

    def __init__(self, operation: str | None) -> None:
        self.operation = operation
        super().__init__(f"Unsupported operation: {operation}")


class InvalidScopeError(RequestError):
    """Export request carried an unknown scope selector."""

    def __init__(self, scope: str) -> None:
        self.scope = scope
        super().__init__(f"Invalid export scope: {scope}")


class SessionClosedError(RequestError):
    """Request arrived after the session was cancelled."""

    def __init__(self) -> None:
        super().__init__("Session is closed")


class ExportWriteError(FigsyncError):
    """Error writing an export document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write export '{path}': {reason}")
