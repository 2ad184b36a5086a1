"""Definition of the `Cluster` dataclass."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Dict, Optional, Tuple

from ..config import CLUSTER_RECENT_HOURS, DEFAULT_CONFIDENCE, DEFAULT_SEVERITY
from ..derivation import (
    SeverityBand,
    confidence_description,
    format_confidence_percentage,
    is_critical_severity,
    is_within,
    severity_band,
)
from ..utils.datetime_utils import format_relative_time, get_current_timestamp
from ._invariants import check_scores, normalize_timestamp
from .enums import Trend


@dataclass(frozen=True, slots=True)
class Cluster:
    """A named group of related events with its own severity and trend.

    ``related_event_ids`` keeps the order the backend ranked them in.
    """

    id: str = ""
    cluster_id: str = ""
    label: str = "Unknown Event"
    summary: str = ""
    severity: int = DEFAULT_SEVERITY
    confidence: float = DEFAULT_CONFIDENCE
    trend: Trend = Trend.STABLE
    related_event_ids: Tuple[str, ...] = ()
    cluster_json: Optional[Dict[str, Any]] = field(default=None, compare=False, repr=False)
    updated_at: datetime = field(default_factory=get_current_timestamp)

    def __post_init__(self) -> None:
        check_scores(self)
        normalize_timestamp(self, "updated_at")
        if not isinstance(self.trend, Trend):
            object.__setattr__(self, "trend", Trend.parse(self.trend))
        if not isinstance(self.related_event_ids, tuple):
            object.__setattr__(self, "related_event_ids", tuple(self.related_event_ids))

    def with_changes(self, **changes) -> "Cluster":
        return dataclasses.replace(self, **changes)

    def severity_band(self) -> SeverityBand:
        return severity_band(self.severity)

    def severity_description(self) -> str:
        return self.severity_band().label

    def severity_color(self) -> str:
        return self.severity_band().color

    def is_critical(self) -> bool:
        return is_critical_severity(self.severity)

    def confidence_percentage(self) -> str:
        return format_confidence_percentage(self.confidence)

    def confidence_description(self) -> str:
        return confidence_description(self.confidence)

    def trend_icon(self) -> str:
        return self.trend.icon

    def trend_description(self) -> str:
        return self.trend.description

    def formatted_time(self, now: datetime | None = None) -> str:
        return format_relative_time(self.updated_at, now)

    def is_recent(self, now: datetime | None = None) -> bool:
        """Updated within the last hour."""
        return is_within(self.updated_at, timedelta(hours=CLUSTER_RECENT_HOURS), now)

    def __str__(self) -> str:
        return (
            f"Cluster(id={self.id}, cluster_id={self.cluster_id}, label={self.label}, "
            f"severity={self.severity}, trend={self.trend.value})"
        )


__all__ = ["Cluster"]
