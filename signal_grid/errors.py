"""Typed failures raised by signal_grid.

Every failure that leaves the package is one of these, so callers can tell a
local input problem from a network hiccup, a missing resource or a backend
complaint.
"""

from __future__ import annotations


class SignalGridError(Exception):
    """Base class for all signal_grid failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(SignalGridError):
    """Input rejected locally; nothing was sent to the backend."""


class MalformedPayloadError(SignalGridError, ValueError):
    """A wire payload is not an object or carries a field of the wrong type."""


class NetworkError(SignalGridError):
    """The request timed out or never reached the backend."""

    def __init__(self, message: str = "Could not reach the server. Please check your connection and try again.") -> None:
        super().__init__(message)


class NotFoundError(SignalGridError):
    """The backend has no resource at the requested identifier."""


class NoBriefsYetError(NotFoundError):
    """No brief has been generated yet; an empty state, not a failure."""

    def __init__(self, message: str = "No briefs available yet") -> None:
        super().__init__(message)


class RemoteError(SignalGridError):
    """The backend answered with a non-success status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


__all__ = [
    "SignalGridError",
    "ValidationError",
    "MalformedPayloadError",
    "NetworkError",
    "NotFoundError",
    "NoBriefsYetError",
    "RemoteError",
]
