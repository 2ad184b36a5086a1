"""Definition of the `Brief` dataclass and the cycle result."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from ..utils.datetime_utils import format_long_relative_time, get_current_timestamp
from ..utils.text_cleaning import pluralize
from ._invariants import normalize_timestamp
from .cluster import Cluster


@dataclass(frozen=True, slots=True)
class Brief:
    """A point-in-time situation summary.

    ``top_hotspots`` is in backend priority order and names clusters by label
    only; there is no structural link to cluster records.
    """

    id: Optional[str] = None
    headline: str = ""
    what_changed: Tuple[str, ...] = ()
    top_hotspots: Tuple[str, ...] = ()
    watch_next: str = ""
    confidence_notes: Optional[str] = None
    created_at: datetime = field(default_factory=get_current_timestamp)
    full_json: Optional[Dict[str, Any]] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        normalize_timestamp(self, "created_at")
        for name in ("what_changed", "top_hotspots"):
            value = getattr(self, name)
            if not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value))

    def with_changes(self, **changes) -> "Brief":
        return dataclasses.replace(self, **changes)

    def has_content(self) -> bool:
        """``False`` for an essentially empty brief (placeholder territory)."""
        return bool(self.headline or self.what_changed or self.top_hotspots)

    def total_items(self) -> int:
        return len(self.what_changed) + len(self.top_hotspots) + (1 if self.watch_next else 0)

    def has_critical_hotspots(self) -> bool:
        return bool(self.top_hotspots)

    def quick_summary(self) -> str:
        hotspots = len(self.top_hotspots)
        updates = len(self.what_changed)
        if not hotspots and not updates:
            return "No Active Incidents"
        parts = []
        if hotspots:
            parts.append(pluralize(hotspots, "Hotspot"))
        if updates:
            parts.append(pluralize(updates, "Update"))
        return ", ".join(parts)

    def time_ago(self, now: datetime | None = None) -> str:
        return format_long_relative_time(self.created_at, now)

    def __str__(self) -> str:
        return (
            f"Brief(id={self.id}, headline={self.headline}, hotspots={len(self.top_hotspots)}, "
            f"updates={len(self.what_changed)}, created_at={self.created_at.isoformat()})"
        )


@dataclass(frozen=True, slots=True)
class CycleResult:
    """Outcome of ``POST /api/cycle/run``."""

    clusters: Tuple[Cluster, ...] = ()
    brief: Optional[Brief] = None


__all__ = ["Brief", "CycleResult"]
