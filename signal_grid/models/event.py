"""Definition of the `Event` dataclass: one structured extraction per report."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Dict, Optional

from ..config import DEFAULT_CONFIDENCE, DEFAULT_SEVERITY, EVENT_RECENT_MINUTES
from ..derivation import (
    SeverityBand,
    confidence_description,
    format_confidence_percentage,
    is_critical_severity,
    is_high_confidence,
    is_within,
    severity_band,
)
from ..utils.datetime_utils import format_relative_time, get_current_timestamp
from ..utils.text_cleaning import capitalize_first
from ._invariants import check_scores, normalize_timestamp

_EVENT_TYPE_ICONS = {
    "flooding": "🌊",
    "flood": "🌊",
    "fire": "🔥",
    "accident": "🚗",
    "crash": "🚗",
    "violence": "⚠️",
    "assault": "⚠️",
    "medical": "🏥",
    "health": "🏥",
    "theft": "🚨",
    "robbery": "🚨",
    "protest": "📢",
    "demonstration": "📢",
    "power outage": "💡",
    "blackout": "💡",
    "earthquake": "🌍",
    "storm": "⛈️",
    "weather": "⛈️",
}
_DEFAULT_EVENT_ICON = "📍"


@dataclass(frozen=True, slots=True)
class Event:
    """A single incident extracted from one report.

    ``location_hint`` and ``time_hint`` are free-form text written by the
    extractor, not parsed values.
    """

    id: str = ""
    report_id: str = ""
    event_type: str = "unknown"
    location_hint: str = "Location not specified"
    time_hint: str = "Time not specified"
    severity: int = DEFAULT_SEVERITY
    summary: str = ""
    confidence: float = DEFAULT_CONFIDENCE
    extracted_json: Optional[Dict[str, Any]] = field(default=None, compare=False, repr=False)
    created_at: datetime = field(default_factory=get_current_timestamp)

    def __post_init__(self) -> None:
        check_scores(self)
        normalize_timestamp(self, "created_at")

    def with_changes(self, **changes) -> "Event":
        return dataclasses.replace(self, **changes)

    # -- severity -----------------------------------------------------------

    def severity_band(self) -> SeverityBand:
        return severity_band(self.severity)

    def severity_description(self) -> str:
        return self.severity_band().label

    def severity_color(self) -> str:
        return self.severity_band().color

    def is_critical(self) -> bool:
        return is_critical_severity(self.severity)

    # -- confidence ---------------------------------------------------------

    def confidence_percentage(self) -> str:
        return format_confidence_percentage(self.confidence)

    def confidence_description(self) -> str:
        return confidence_description(self.confidence)

    def is_high_confidence(self) -> bool:
        return is_high_confidence(self.confidence)

    # -- type / time --------------------------------------------------------

    def formatted_event_type(self) -> str:
        return capitalize_first(self.event_type)

    def event_type_icon(self) -> str:
        return _EVENT_TYPE_ICONS.get(self.event_type.lower(), _DEFAULT_EVENT_ICON)

    def formatted_time(self, now: datetime | None = None) -> str:
        return format_relative_time(self.created_at, now)

    def is_recent(self, now: datetime | None = None) -> bool:
        """Extracted within the last 30 minutes."""
        return is_within(self.created_at, timedelta(minutes=EVENT_RECENT_MINUTES), now)

    def __str__(self) -> str:
        return (
            f"Event(id={self.id}, event_type={self.event_type}, "
            f"severity={self.severity}, location={self.location_hint})"
        )


__all__ = ["Event"]
