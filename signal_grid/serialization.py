"""Mapping between entities and their wire JSON shape.

Decoders never fail on a missing or ``null`` field; each field's default is
spelled out in the decoder that reads it. They do fail, with
:class:`~signal_grid.errors.MalformedPayloadError`, when the payload is not an
object or when a present field has the wrong fundamental type.

Only :class:`Report` and :class:`ReportSubmission` have an outbound form;
events, clusters and briefs are read-only on this side.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .config import DEFAULT_CONFIDENCE, DEFAULT_SEVERITY
from .errors import MalformedPayloadError
from .models import Brief, Cluster, CycleResult, Event, EvidenceType, Report, ReportSubmission, Trend
from .utils.datetime_utils import format_timestamp, get_current_timestamp, parse_timestamp

logger = logging.getLogger(__name__)

_MISSING = object()

# ---------------------------------------------------------------------------
# Field readers
# ---------------------------------------------------------------------------

def _require_object(payload: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise MalformedPayloadError(f"{what} payload must be a JSON object, got {type(payload).__name__}")
    return payload


def _get(payload: Mapping[str, Any], key: str) -> Any:
    value = payload.get(key, _MISSING)
    return _MISSING if value is None else value


def _read_id(payload: Mapping[str, Any], default: Optional[str] = "") -> Optional[str]:
    """Identifier from ``_id``, falling back to ``id``."""
    for key in ("_id", "id"):
        value = _get(payload, key)
        if value is _MISSING:
            continue
        if isinstance(value, bool) or not isinstance(value, (str, int)):
            raise MalformedPayloadError(f"Field '{key}' must be a string, got {type(value).__name__}")
        return str(value)
    return default


def _read_str(payload: Mapping[str, Any], key: str, default: Optional[str] = "") -> Optional[str]:
    value = _get(payload, key)
    if value is _MISSING:
        return default
    if not isinstance(value, str):
        raise MalformedPayloadError(f"Field '{key}' must be a string, got {type(value).__name__}")
    return value


def _read_int(payload: Mapping[str, Any], key: str, default: int) -> int:
    value = _get(payload, key)
    if value is _MISSING:
        return default
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedPayloadError(f"Field '{key}' must be an integer, got {type(value).__name__}")
    return value


def _read_float(payload: Mapping[str, Any], key: str, default: float) -> float:
    value = _get(payload, key)
    if value is _MISSING:
        return default
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedPayloadError(f"Field '{key}' must be a number, got {type(value).__name__}")
    return float(value)


def _read_str_list(payload: Mapping[str, Any], key: str) -> Tuple[str, ...]:
    value = _get(payload, key)
    if value is _MISSING:
        return ()
    if not isinstance(value, list):
        raise MalformedPayloadError(f"Field '{key}' must be a list, got {type(value).__name__}")
    for index, item in enumerate(value):
        if not isinstance(item, str):
            raise MalformedPayloadError(
                f"Field '{key}' must contain only strings, item {index} is {type(item).__name__}"
            )
    return tuple(value)


def _read_timestamp(payload: Mapping[str, Any], key: str) -> datetime:
    value = _get(payload, key)
    if value is _MISSING:
        return get_current_timestamp()
    if not isinstance(value, str):
        raise MalformedPayloadError(f"Field '{key}' must be an ISO-8601 string, got {type(value).__name__}")
    try:
        return parse_timestamp(value)
    except ValueError as exc:
        raise MalformedPayloadError(f"Field '{key}' is not a valid timestamp: {value!r}") from exc


def _read_object(payload: Mapping[str, Any], key: str) -> Optional[Dict[str, Any]]:
    value = _get(payload, key)
    if value is _MISSING:
        return None
    if not isinstance(value, Mapping):
        raise MalformedPayloadError(f"Field '{key}' must be an object, got {type(value).__name__}")
    return dict(value)


def _read_list(payload: Any, what: str) -> List[Any]:
    if not isinstance(payload, list):
        raise MalformedPayloadError(f"{what} payload must be a JSON array, got {type(payload).__name__}")
    return payload

# ---------------------------------------------------------------------------
# Decoders
# ---------------------------------------------------------------------------

def report_from_wire(payload: Any) -> Report:
    data = _require_object(payload, "Report")
    return Report(
        id=_read_id(data),
        raw_text=_read_str(data, "raw_text"),
        evidence_type=EvidenceType.parse(_read_str(data, "evidence_type", EvidenceType.TEXT.value)),
        created_at=_read_timestamp(data, "created_at"),
    )


def submission_from_wire(payload: Any) -> ReportSubmission:
    data = _require_object(payload, "ReportSubmission")
    return ReportSubmission(
        text=_read_str(data, "text"),
        evidence_type=_read_str(data, "evidence_type", EvidenceType.TEXT.value),
        location=_read_str(data, "location"),
        severity=_read_int(data, "severity", DEFAULT_SEVERITY),
    )


def event_from_wire(payload: Any) -> Event:
    """Decode an extracted event.

    Raises
    ------
    MalformedPayloadError
        For a non-object payload or a wrongly typed field.
    ValidationError
        For a severity outside ``[1, 5]`` or a confidence outside ``[0, 1]``.
    """
    data = _require_object(payload, "Event")
    return Event(
        id=_read_id(data),
        report_id=_read_str(data, "report_id"),
        event_type=_read_str(data, "event_type", "unknown"),
        location_hint=_read_str(data, "location_hint", "Location not specified"),
        time_hint=_read_str(data, "time_hint", "Time not specified"),
        severity=_read_int(data, "severity", DEFAULT_SEVERITY),
        summary=_read_str(data, "summary"),
        confidence=_read_float(data, "confidence", DEFAULT_CONFIDENCE),
        extracted_json=_read_object(data, "extracted_json"),
        created_at=_read_timestamp(data, "created_at"),
    )


def cluster_from_wire(payload: Any) -> Cluster:
    data = _require_object(payload, "Cluster")
    trend_raw = _read_str(data, "trend", Trend.STABLE.value)
    trend = Trend.parse(trend_raw)
    if trend.value != trend_raw.strip().lower():
        logger.debug("Unknown trend %r treated as stable", trend_raw)
    return Cluster(
        id=_read_id(data),
        cluster_id=_read_str(data, "cluster_id"),
        label=_read_str(data, "label", "Unknown Event"),
        summary=_read_str(data, "summary"),
        severity=_read_int(data, "severity", DEFAULT_SEVERITY),
        confidence=_read_float(data, "confidence", DEFAULT_CONFIDENCE),
        trend=trend,
        related_event_ids=_read_str_list(data, "related_event_ids"),
        cluster_json=_read_object(data, "cluster_json"),
        updated_at=_read_timestamp(data, "updated_at"),
    )


def brief_from_wire(payload: Any) -> Brief:
    """Decode a brief, flat or with its body nested under ``brief_json``.

    The identifier always comes from the outer object.
    """
    data = _require_object(payload, "Brief")
    body = _read_object(data, "brief_json") or dict(data)
    created_source = body if _get(body, "created_at") is not _MISSING else data
    return Brief(
        id=_read_id(data, default=None),
        headline=_read_str(body, "headline"),
        what_changed=_read_str_list(body, "what_changed"),
        top_hotspots=_read_str_list(body, "top_hotspots"),
        watch_next=_read_str(body, "watch_next"),
        confidence_notes=_read_str(body, "confidence_notes", None),
        created_at=_read_timestamp(created_source, "created_at"),
        full_json=body,
    )


def clusters_from_wire(payload: Any) -> List[Cluster]:
    return [cluster_from_wire(item) for item in _read_list(payload, "Cluster list")]


def briefs_from_wire(payload: Any) -> List[Brief]:
    return [brief_from_wire(item) for item in _read_list(payload, "Brief list")]


def cycle_result_from_wire(payload: Any) -> CycleResult:
    """Decode ``{clusters, brief}``; ``latest_brief`` is accepted for the brief."""
    data = _require_object(payload, "Cycle result")
    clusters_raw = _get(data, "clusters")
    clusters = clusters_from_wire(clusters_raw) if clusters_raw is not _MISSING else []
    brief_raw = _get(data, "brief")
    if brief_raw is _MISSING:
        brief_raw = _get(data, "latest_brief")
    brief = brief_from_wire(brief_raw) if brief_raw is not _MISSING else None
    return CycleResult(clusters=tuple(clusters), brief=brief)

# ---------------------------------------------------------------------------
# Encoders
# ---------------------------------------------------------------------------

def report_to_wire(report: Report) -> Dict[str, Any]:
    return {
        "_id": report.id,
        "raw_text": report.raw_text,
        "evidence_type": report.evidence_type.value,
        "created_at": format_timestamp(report.created_at),
    }


def submission_to_wire(submission: ReportSubmission) -> Dict[str, Any]:
    """Body of ``POST /api/reports``; the evidence type is sent lower-cased."""
    return {
        "text": submission.text,
        "evidence_type": submission.evidence_type.strip().lower(),
        "location": submission.location,
        "severity": submission.severity,
    }


__all__ = [
    "report_from_wire",
    "submission_from_wire",
    "event_from_wire",
    "cluster_from_wire",
    "brief_from_wire",
    "clusters_from_wire",
    "briefs_from_wire",
    "cycle_result_from_wire",
    "report_to_wire",
    "submission_to_wire",
]
