"""Service layer modules grouping backend calls by resource.

This module provides convenience re-exports so that callers can simply do for
example `from signal_grid.services import get_clusters` without having to
know which underlying module provides the symbol.
"""

from .reports import submit_report, send_submission  # noqa: F401
from .cycle import run_cycle  # noqa: F401
from .clusters import get_clusters, get_cluster_by_id  # noqa: F401
from .briefs import get_latest_brief, get_all_briefs  # noqa: F401
from .health import health_check  # noqa: F401

__all__ = [
    "submit_report",
    "send_submission",
    "run_cycle",
    "get_clusters",
    "get_cluster_by_id",
    "get_latest_brief",
    "get_all_briefs",
    "health_check",
]
