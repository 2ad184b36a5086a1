"""Shared HTTP session for SignalGrid backend calls."""

from __future__ import annotations

import threading

import requests

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}

_session: requests.Session | None = None
_lock = threading.Lock()


def get_backend_session() -> requests.Session:
    """Return a singleton :class:`requests.Session` with JSON headers set.

    Safe to call from several threads; only one session is ever created.
    """
    global _session
    with _lock:
        if _session is None:
            _session = requests.Session()
            _session.headers.update(DEFAULT_HEADERS)
        return _session


def close_backend_session() -> None:
    """Close the pooled connections; the next call opens a fresh session."""
    global _session
    with _lock:
        if _session is not None:
            _session.close()
            _session = None

__all__ = ["get_backend_session", "close_backend_session", "DEFAULT_HEADERS"]
