"""Convenience re-exports for the shared HTTP session accessor."""

from .backend_client import get_backend_session, close_backend_session  # noqa: F401

__all__ = ["get_backend_session", "close_backend_session"]
