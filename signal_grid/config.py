"""Centralised configuration for signal_grid.

Environment variables are loaded once and all related constants are
grouped by concern for easier maintenance.
"""

from __future__ import annotations

import os
from dotenv import load_dotenv

# ---------------------------------------------------------------------------
# Load environment variables from `.env` (if present)
# ---------------------------------------------------------------------------
load_dotenv()

# ---------------------------------------------------------------------------
# Backend connection (from environment)
#   - "http://localhost:5000" when the backend runs on this machine
#   - "http://10.0.2.2:5000" from an Android emulator
# ---------------------------------------------------------------------------
BASE_URL: str = os.getenv("SIGNAL_GRID_BASE_URL", "http://localhost:5000").rstrip("/")
REQUEST_TIMEOUT_SECONDS: float = float(os.getenv("SIGNAL_GRID_TIMEOUT_SECONDS", "30"))
HEALTH_TIMEOUT_SECONDS: float = float(os.getenv("SIGNAL_GRID_HEALTH_TIMEOUT_SECONDS", "10"))

# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------
REPORTS_ENDPOINT: str = "/api/reports"
CYCLE_ENDPOINT: str = "/api/cycle/run"
CLUSTERS_ENDPOINT: str = "/api/clusters"
LATEST_BRIEF_ENDPOINT: str = "/api/briefs/latest"
ALL_BRIEFS_ENDPOINT: str = "/api/briefs"
HEALTH_ENDPOINT: str = "/health"

# ---------------------------------------------------------------------------
# HTTP status codes recognised by the client
# ---------------------------------------------------------------------------
STATUS_OK: int = 200
STATUS_CREATED: int = 201
STATUS_BAD_REQUEST: int = 400
STATUS_NOT_FOUND: int = 404
STATUS_INTERNAL_SERVER_ERROR: int = 500

# ---------------------------------------------------------------------------
# Domain constants
# ---------------------------------------------------------------------------
EVIDENCE_TYPES: tuple[str, ...] = ("text", "audio", "image", "video")
DEFAULT_SEVERITY: int = 3
DEFAULT_CONFIDENCE: float = 0.5
MIN_DESCRIPTION_LENGTH: int = 10

# Recency windows, one per entity kind
REPORT_RECENT_MINUTES: int = 5
EVENT_RECENT_MINUTES: int = 30
CLUSTER_RECENT_HOURS: int = 1


def endpoint_url(path: str, base_url: str | None = None) -> str:
    """Join *path* onto the configured (or given) backend base URL."""
    return f"{(base_url or BASE_URL).rstrip('/')}{path}"


def cluster_by_id_url(cluster_id: str, base_url: str | None = None) -> str:
    return endpoint_url(f"{CLUSTERS_ENDPOINT}/{cluster_id}", base_url)


# ---------------------------------------------------------------------------
# Re-exported names
# ---------------------------------------------------------------------------
__all__ = [
    # connection
    "BASE_URL",
    "REQUEST_TIMEOUT_SECONDS",
    "HEALTH_TIMEOUT_SECONDS",
    # endpoints
    "REPORTS_ENDPOINT",
    "CYCLE_ENDPOINT",
    "CLUSTERS_ENDPOINT",
    "LATEST_BRIEF_ENDPOINT",
    "ALL_BRIEFS_ENDPOINT",
    "HEALTH_ENDPOINT",
    "endpoint_url",
    "cluster_by_id_url",
    # status codes
    "STATUS_OK",
    "STATUS_CREATED",
    "STATUS_BAD_REQUEST",
    "STATUS_NOT_FOUND",
    "STATUS_INTERNAL_SERVER_ERROR",
    # domain
    "EVIDENCE_TYPES",
    "DEFAULT_SEVERITY",
    "DEFAULT_CONFIDENCE",
    "MIN_DESCRIPTION_LENGTH",
    "REPORT_RECENT_MINUTES",
    "EVENT_RECENT_MINUTES",
    "CLUSTER_RECENT_HOURS",
]
