"""Construction-time checks shared by the entity dataclasses."""

from __future__ import annotations

from datetime import datetime

from ..derivation import is_valid_confidence, is_valid_severity
from ..errors import ValidationError
from ..utils.datetime_utils import ensure_utc


def check_scores(entity: object) -> None:
    """Reject out-of-range ``severity``/``confidence`` on a frozen dataclass.

    Integer confidences are widened to float in place.
    """
    name = type(entity).__name__
    severity = getattr(entity, "severity")
    confidence = getattr(entity, "confidence")
    if not is_valid_severity(severity):
        raise ValidationError(f"{name} severity must be between 1 and 5, got {severity!r}")
    if not is_valid_confidence(confidence):
        raise ValidationError(f"{name} confidence must be between 0.0 and 1.0, got {confidence!r}")
    if not isinstance(confidence, float):
        object.__setattr__(entity, "confidence", float(confidence))


def normalize_timestamp(entity: object, name: str) -> None:
    """Store the datetime field *name* as UTC-aware; naive values are UTC."""
    value = getattr(entity, name)
    if isinstance(value, datetime) and value.tzinfo is None:
        object.__setattr__(entity, name, ensure_utc(value))
