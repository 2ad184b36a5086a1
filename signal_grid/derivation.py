"""Pure presentation-independent facts derived from entity fields.

Nothing here knows about rendering; the functions return labels, tokens and
booleans that any front end can map to its own widgets.
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta
from enum import Enum

from .utils.datetime_utils import elapsed_since

MIN_SEVERITY = 1
MAX_SEVERITY = 5
CRITICAL_SEVERITY = 4
HIGH_CONFIDENCE = 0.8
MEDIUM_CONFIDENCE = 0.6
STRONG_CONFIDENCE = 0.7


class SeverityBand(Enum):
    """Severity bucket shared by events and clusters."""

    LOW = ("Low", "green", "#4CAF50")
    MEDIUM = ("Medium", "yellow", "#FFC107")
    HIGH = ("High", "orange", "#FF9800")
    CRITICAL = ("Critical", "red", "#F44336")

    def __init__(self, label: str, color: str, hex_color: str) -> None:
        self.label = label
        self.color = color
        self.hex_color = hex_color


_SEVERITY_LEVEL_NAMES = {
    1: "Minimal",
    2: "Minor",
    3: "Moderate",
    4: "Major",
    5: "Critical",
}


def is_valid_severity(severity: object) -> bool:
    """``True`` for an integer (not a bool) in ``[1, 5]``."""
    return (
        isinstance(severity, int)
        and not isinstance(severity, bool)
        and MIN_SEVERITY <= severity <= MAX_SEVERITY
    )


def is_valid_confidence(confidence: object) -> bool:
    return (
        isinstance(confidence, (int, float))
        and not isinstance(confidence, bool)
        and 0.0 <= confidence <= 1.0
    )


def severity_band(severity: int) -> SeverityBand:
    """Map a 1-5 severity to its band.

    Raises
    ------
    ValueError
        If *severity* is outside ``[1, 5]``; values are never clamped.
    """
    if not is_valid_severity(severity):
        raise ValueError(f"Severity must be between {MIN_SEVERITY} and {MAX_SEVERITY}, got {severity!r}")
    if severity <= 2:
        return SeverityBand.LOW
    if severity == 3:
        return SeverityBand.MEDIUM
    if severity == 4:
        return SeverityBand.HIGH
    return SeverityBand.CRITICAL


def severity_level_name(severity: int) -> str:
    """Name shown next to the severity picker (``Minimal`` .. ``Critical``)."""
    if not is_valid_severity(severity):
        raise ValueError(f"Severity must be between {MIN_SEVERITY} and {MAX_SEVERITY}, got {severity!r}")
    return _SEVERITY_LEVEL_NAMES[severity]


def is_critical_severity(severity: int) -> bool:
    return severity >= CRITICAL_SEVERITY


def confidence_percentage(confidence: float) -> int:
    """``round(confidence * 100)`` with halves rounded up."""
    return int(math.floor(confidence * 100 + 0.5))


def format_confidence_percentage(confidence: float) -> str:
    return f"{confidence_percentage(confidence)}%"


def confidence_description(confidence: float) -> str:
    if confidence >= HIGH_CONFIDENCE:
        return "High confidence"
    if confidence >= MEDIUM_CONFIDENCE:
        return "Medium confidence"
    return "Low confidence"


def is_high_confidence(confidence: float) -> bool:
    return confidence >= STRONG_CONFIDENCE


def is_within(timestamp: datetime, window: timedelta, now: datetime | None = None) -> bool:
    """``True`` when less than *window* has elapsed since *timestamp*."""
    return elapsed_since(timestamp, now) < window


__all__ = [
    "SeverityBand",
    "is_valid_severity",
    "is_valid_confidence",
    "severity_band",
    "severity_level_name",
    "is_critical_severity",
    "confidence_percentage",
    "format_confidence_percentage",
    "confidence_description",
    "is_high_confidence",
    "is_within",
]
