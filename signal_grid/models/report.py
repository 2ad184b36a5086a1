"""Raw citizen report and the outbound submission payload."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime, timedelta

from ..config import DEFAULT_SEVERITY, REPORT_RECENT_MINUTES
from ..derivation import is_within
from ..utils.datetime_utils import format_full_datetime, format_relative_time, get_current_timestamp
from ..utils.text_cleaning import capitalize_first, text_preview, word_count
from ..validation import is_valid_submission, submission_validation_error
from ._invariants import normalize_timestamp
from .enums import EvidenceType


@dataclass(frozen=True, slots=True)
class Report:
    """A stored submission as the backend echoes it back."""

    id: str = ""
    raw_text: str = ""
    evidence_type: EvidenceType = EvidenceType.TEXT
    created_at: datetime = field(default_factory=get_current_timestamp)

    def __post_init__(self) -> None:
        # Accept raw strings from callers but always store the variant.
        if not isinstance(self.evidence_type, EvidenceType):
            object.__setattr__(self, "evidence_type", EvidenceType.parse(self.evidence_type))
        normalize_timestamp(self, "created_at")

    def with_changes(self, **changes) -> "Report":
        return dataclasses.replace(self, **changes)

    def evidence_type_icon(self) -> str:
        return self.evidence_type.icon

    def formatted_evidence_type(self) -> str:
        return capitalize_first(self.evidence_type.value)

    def formatted_time(self, now: datetime | None = None) -> str:
        return format_relative_time(self.created_at, now)

    def full_formatted_datetime(self) -> str:
        return format_full_datetime(self.created_at)

    def text_preview(self, max_length: int = 100) -> str:
        return text_preview(self.raw_text, max_length)

    def word_count(self) -> int:
        return word_count(self.raw_text)

    def is_recent(self, now: datetime | None = None) -> bool:
        """Submitted within the last five minutes."""
        return is_within(self.created_at, timedelta(minutes=REPORT_RECENT_MINUTES), now)

    def is_valid(self) -> bool:
        return bool(self.raw_text)

    def is_multimodal(self) -> bool:
        return self.evidence_type is not EvidenceType.TEXT

    def __str__(self) -> str:
        return f"Report(id={self.id}, evidence_type={self.evidence_type.value}, preview={self.text_preview(50)})"


@dataclass(frozen=True, slots=True)
class ReportSubmission:
    """Caller input for ``POST /api/reports``.

    Fields hold what the caller typed; use :meth:`validation_error` before
    sending. ``evidence_type`` stays a string so an unknown value can be
    reported back instead of silently becoming ``text``.
    """

    text: str
    evidence_type: str = EvidenceType.TEXT.value
    location: str = ""
    severity: int = DEFAULT_SEVERITY

    @property
    def parsed_evidence_type(self) -> EvidenceType:
        return EvidenceType.parse(self.evidence_type)

    def with_changes(self, **changes) -> "ReportSubmission":
        return dataclasses.replace(self, **changes)

    def validation_error(self) -> str | None:
        return submission_validation_error(self)

    def is_valid(self) -> bool:
        return is_valid_submission(self)


__all__ = ["Report", "ReportSubmission"]
