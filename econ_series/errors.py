"""Exception types raised by the series clients and cache."""

from pathlib import Path


class EconSeriesError(Exception):
    """Base class for all package errors."""


class ConfigurationError(EconSeriesError, ValueError):
    """A required credential or setting is missing."""


class RemoteServiceError(EconSeriesError):
    """An API call failed or returned a body we could not parse."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class CacheCorruptionError(EconSeriesError):
    """A cache snapshot exists but does not hold valid observations."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Corrupt cache snapshot {path}: {reason}")
        self.path = path
        self.reason = reason
