"""Closed variant types carried by the entities.

Raw strings from the wire are turned into one of these members once, in the
serialization layer; everything downstream works with the member.
"""

from __future__ import annotations

from enum import Enum


class EvidenceType(str, Enum):
    """Kind of evidence attached to a report."""

    TEXT = "text"
    AUDIO = "audio"
    IMAGE = "image"
    VIDEO = "video"

    @classmethod
    def parse(cls, value: object) -> "EvidenceType":
        """Case-insensitive lookup; unknown or missing values become ``TEXT``."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.TEXT

    @property
    def icon(self) -> str:
        return _EVIDENCE_ICONS[self]


_EVIDENCE_ICONS = {
    EvidenceType.TEXT: "📄",
    EvidenceType.AUDIO: "🎤",
    EvidenceType.IMAGE: "📷",
    EvidenceType.VIDEO: "🎥",
}


class Trend(str, Enum):
    """Qualitative direction of a cluster over time."""

    EMERGING = "emerging"
    STABLE = "stable"
    ESCALATING = "escalating"
    RESOLVING = "resolving"

    @classmethod
    def parse(cls, value: object) -> "Trend":
        """Case-insensitive lookup; unknown or missing values become ``STABLE``."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.STABLE

    @property
    def icon(self) -> str:
        return _TREND_PRESENTATION[self][0]

    @property
    def direction(self) -> str:
        """One-word direction: worsening, stable, improving, new."""
        return _TREND_PRESENTATION[self][1]

    @property
    def description(self) -> str:
        return _TREND_PRESENTATION[self][2]


# icon, direction, description
_TREND_PRESENTATION = {
    Trend.ESCALATING: ("↗️", "worsening", "Situation is worsening"),
    Trend.STABLE: ("→", "stable", "Situation is stable"),
    Trend.RESOLVING: ("↘️", "improving", "Situation is improving"),
    Trend.EMERGING: ("🆕", "new", "New situation developing"),
}

__all__ = ["EvidenceType", "Trend"]
