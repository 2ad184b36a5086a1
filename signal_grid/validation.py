"""Pre-submission checks.

Every function here is a pure predicate or returns the message of the first
rule that fails; none of them raise.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .config import EVIDENCE_TYPES, MIN_DESCRIPTION_LENGTH

if TYPE_CHECKING:  # pragma: no cover
    from .models.report import ReportSubmission

EMPTY_TEXT = "Report text cannot be empty"
MISSING_EVIDENCE_TYPE = "Evidence type must be specified"
MISSING_LOCATION = "Location is required"
SEVERITY_OUT_OF_RANGE = "Severity must be between 1 and 5"
INVALID_EVIDENCE_TYPE = "Invalid evidence type. Must be text, audio, image, or video"

EMPTY_DESCRIPTION = "Please enter incident description"
SHORT_DESCRIPTION = f"Please provide more details (at least {MIN_DESCRIPTION_LENGTH} characters)"
MISSING_LOCATION_FIELD = "Location is required to submit report"


def _severity_in_range(severity: object) -> bool:
    return isinstance(severity, int) and not isinstance(severity, bool) and 1 <= severity <= 5


def submission_validation_error(submission: "ReportSubmission") -> Optional[str]:
    """Return the first violated rule's message, or ``None`` when valid.

    Rules run in a fixed order: text, evidence type present, location,
    severity range, evidence type known.
    """
    text = submission.text or ""
    evidence_type = submission.evidence_type or ""
    location = submission.location or ""

    if not text.strip():
        return EMPTY_TEXT
    if not evidence_type:
        return MISSING_EVIDENCE_TYPE
    if not location.strip():
        return MISSING_LOCATION
    if not _severity_in_range(submission.severity):
        return SEVERITY_OUT_OF_RANGE
    if evidence_type.lower() not in EVIDENCE_TYPES:
        return INVALID_EVIDENCE_TYPE
    return None


def is_valid_submission(submission: "ReportSubmission") -> bool:
    return submission_validation_error(submission) is None


def description_error(text: Optional[str]) -> Optional[str]:
    """Stricter gate for the description field of the report form.

    Kept apart from :func:`submission_validation_error`: the form asks for at
    least ten characters, the submission itself only for non-empty text.
    """
    trimmed = (text or "").strip()
    if not trimmed:
        return EMPTY_DESCRIPTION
    if len(trimmed) < MIN_DESCRIPTION_LENGTH:
        return SHORT_DESCRIPTION
    return None


def location_field_error(location: Optional[str]) -> Optional[str]:
    if not (location or "").strip():
        return MISSING_LOCATION_FIELD
    return None


__all__ = [
    "submission_validation_error",
    "is_valid_submission",
    "description_error",
    "location_field_error",
    "EMPTY_TEXT",
    "MISSING_EVIDENCE_TYPE",
    "MISSING_LOCATION",
    "SEVERITY_OUT_OF_RANGE",
    "INVALID_EVIDENCE_TYPE",
    "EMPTY_DESCRIPTION",
    "SHORT_DESCRIPTION",
    "MISSING_LOCATION_FIELD",
]
