"""Backend liveness check."""

from __future__ import annotations

import logging
from typing import Optional

import requests

from ..clients.backend_client import get_backend_session
from ..config import HEALTH_ENDPOINT, HEALTH_TIMEOUT_SECONDS, STATUS_OK, endpoint_url

logger = logging.getLogger(__name__)


def health_check(*, base_url: Optional[str] = None) -> bool:
    """Return ``True`` when ``GET /health`` answers 200; never raises."""
    url = endpoint_url(HEALTH_ENDPOINT, base_url)
    try:
        response = get_backend_session().get(url, timeout=HEALTH_TIMEOUT_SECONDS)
    except requests.RequestException as exc:
        logger.warning("Health check failed for %s: %s", url, exc)
        return False
    return response.status_code == STATUS_OK

__all__ = ["health_check"]
