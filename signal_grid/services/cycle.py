"""Trigger the backend's clustering + brief generation cycle."""

from __future__ import annotations

import logging
from typing import Optional

from ..config import CYCLE_ENDPOINT, endpoint_url
from ..models import CycleResult
from ..serialization import cycle_result_from_wire
from ._http import decode, send

logger = logging.getLogger(__name__)


def run_cycle(*, base_url: Optional[str] = None) -> CycleResult:
    """``POST /api/cycle/run`` and return the refreshed clusters and brief."""
    body = send("POST", endpoint_url(CYCLE_ENDPOINT, base_url), action="Run cycle")
    result = decode(body, cycle_result_from_wire, "Run cycle")
    logger.info(
        "Cycle produced %d clusters (%s brief)",
        len(result.clusters),
        "with" if result.brief is not None else "without",
    )
    return result

__all__ = ["run_cycle"]
