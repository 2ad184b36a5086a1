"""Report intake: validate locally, then ``POST /api/reports``."""

from __future__ import annotations

import logging
from typing import Optional

from ..config import DEFAULT_SEVERITY, REPORTS_ENDPOINT, endpoint_url
from ..errors import ValidationError
from ..models import Event, ReportSubmission
from ..serialization import event_from_wire, submission_to_wire
from ._http import decode, send

logger = logging.getLogger(__name__)


def send_submission(submission: ReportSubmission, *, base_url: Optional[str] = None) -> Event:
    """Send an already built submission and return the extracted event.

    Raises
    ------
    ValidationError
        When the submission fails validation; nothing is sent.
    NetworkError, RemoteError, NotFoundError
        As classified by :func:`signal_grid.services._http.send`.
    """
    error = submission.validation_error()
    if error is not None:
        logger.warning("Report rejected before submission: %s", error)
        raise ValidationError(error)

    body = send(
        "POST",
        endpoint_url(REPORTS_ENDPOINT, base_url),
        action="Submit report",
        json=submission_to_wire(submission),
    )
    event = decode(body, event_from_wire, "Submit report")
    logger.info("Report extracted as %s event (severity %d)", event.event_type, event.severity)
    return event


def submit_report(
    text: str,
    evidence_type: str,
    location: str = "",
    severity: int = DEFAULT_SEVERITY,
    *,
    base_url: Optional[str] = None,
) -> Event:
    """Submit an incident report and return the event the backend extracted."""
    submission = ReportSubmission(
        text=text,
        evidence_type=evidence_type,
        location=location,
        severity=severity,
    )
    return send_submission(submission, base_url=base_url)

__all__ = ["submit_report", "send_submission"]
