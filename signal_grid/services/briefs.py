"""Situation brief lookups."""

from __future__ import annotations

import logging
from typing import List, Optional

from ..config import ALL_BRIEFS_ENDPOINT, LATEST_BRIEF_ENDPOINT, endpoint_url
from ..errors import NoBriefsYetError
from ..models import Brief
from ..serialization import brief_from_wire, briefs_from_wire
from ._http import decode, send

logger = logging.getLogger(__name__)


def get_latest_brief(*, base_url: Optional[str] = None) -> Brief:
    """Return the most recent brief.

    A 404 here means no brief has been generated yet and is raised as
    :class:`NoBriefsYetError` so callers can show an empty state.
    """
    body = send(
        "GET",
        endpoint_url(LATEST_BRIEF_ENDPOINT, base_url),
        action="Get latest brief",
        not_found=NoBriefsYetError,
        not_found_message="No briefs available yet",
    )
    return decode(body, brief_from_wire, "Get latest brief")


def get_all_briefs(*, base_url: Optional[str] = None) -> List[Brief]:
    """Return the brief history in backend order."""
    body = send("GET", endpoint_url(ALL_BRIEFS_ENDPOINT, base_url), action="Get briefs")
    briefs = decode(body, briefs_from_wire, "Get briefs")
    logger.info("Fetched %d briefs", len(briefs))
    return briefs

__all__ = ["get_latest_brief", "get_all_briefs"]
