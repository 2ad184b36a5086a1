"""Utility functions for working with dates and times."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

__all__ = [
    "get_current_timestamp",
    "parse_timestamp",
    "ensure_utc",
    "format_timestamp",
    "elapsed_since",
    "format_relative_time",
    "format_long_relative_time",
    "format_full_datetime",
]

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def get_current_timestamp() -> datetime:
    """Return the current UTC datetime with micro-second precision."""
    return datetime.now(tz=timezone.utc)


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 string into an aware datetime.

    Naive values are taken to be UTC, which is how the backend stores them.
    A trailing ``Z`` is accepted.
    """
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return ensure_utc(datetime.fromisoformat(text))


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to a naive datetime; aware values pass through unchanged."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def format_timestamp(value: datetime) -> str:
    """Return the ISO-8601 form used on the wire."""
    return value.isoformat()


def elapsed_since(timestamp: datetime, now: datetime | None = None) -> timedelta:
    """Return ``now - timestamp``; future timestamps count as no time elapsed."""
    current = ensure_utc(now or get_current_timestamp())
    delta = current - ensure_utc(timestamp)
    return delta if delta > timedelta(0) else timedelta(0)


def format_relative_time(timestamp: datetime, now: datetime | None = None) -> str:
    """Compact relative time: ``Just now``, ``5m ago``, ``3h ago``, ``2d ago``.

    Minutes, hours and days are floored, so exactly 60 minutes reads ``1h ago``.
    """
    seconds = int(elapsed_since(timestamp, now).total_seconds())
    minutes = seconds // 60
    hours = seconds // 3600
    if minutes < 1:
        return "Just now"
    if minutes < 60:
        return f"{minutes}m ago"
    if hours < 24:
        return f"{hours}h ago"
    return f"{seconds // 86400}d ago"


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'} ago"


def format_long_relative_time(timestamp: datetime, now: datetime | None = None) -> str:
    """Spelled-out variant used for briefs, e.g. ``1 minute ago``."""
    seconds = int(elapsed_since(timestamp, now).total_seconds())
    if seconds < 60:
        return "Just now"
    if seconds < 3600:
        return _plural(seconds // 60, "minute")
    if seconds < 86400:
        return _plural(seconds // 3600, "hour")
    return _plural(seconds // 86400, "day")


def format_full_datetime(value: datetime) -> str:
    """Return e.g. ``Jan 5, 2026 at 09:04``."""
    return f"{_MONTHS[value.month - 1]} {value.day}, {value.year} at {value.hour:02d}:{value.minute:02d}"
