"""Errors raised while recording or rendering download activity."""


class DownloadActivityError(Exception):
    """Base class for every error raised by this package."""


class NotFound(DownloadActivityError, LookupError):
    """Raised when a node cannot be located, directly or through a share."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Node '{path}' not found")
        self.path = path


class InvalidPath(DownloadActivityError, ValueError):
    """Raised when a path is structurally invalid."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Invalid path '{path}': {reason}")
        self.path = path
        self.reason = reason


class InvalidEvent(DownloadActivityError, ValueError):
    """Raised when an activity event is assembled with missing or bad fields."""


class UnsupportedEvent(DownloadActivityError, ValueError):
    """Raised when the renderer receives an event from another app or of an unknown kind."""


__all__ = [
    "DownloadActivityError",
    "NotFound",
    "InvalidPath",
    "InvalidEvent",
    "UnsupportedEvent",
]
