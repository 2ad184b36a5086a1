"""Top-level package for the signal-grid client.

This package exposes the entity types and the backend calls so callers can do
`from signal_grid import submit_report, get_clusters`, or run the command
line client with `python -m signal_grid`.
"""

from importlib import metadata as _metadata

try:
    __version__: str = _metadata.version("signal-grid")
except _metadata.PackageNotFoundError:  # pragma: no cover – running from source
    __version__ = "0.0.0"

from .errors import (  # noqa: F401
    MalformedPayloadError,
    NetworkError,
    NoBriefsYetError,
    NotFoundError,
    RemoteError,
    SignalGridError,
    ValidationError,
)
from .models import Brief, Cluster, CycleResult, Event, EvidenceType, Report, ReportSubmission, Trend  # noqa: F401
from .services import (  # noqa: F401
    get_all_briefs,
    get_cluster_by_id,
    get_clusters,
    get_latest_brief,
    health_check,
    run_cycle,
    submit_report,
)

__all__ = [
    "__version__",
    "SignalGridError",
    "ValidationError",
    "MalformedPayloadError",
    "NetworkError",
    "NotFoundError",
    "NoBriefsYetError",
    "RemoteError",
    "Report",
    "ReportSubmission",
    "Event",
    "Cluster",
    "Brief",
    "CycleResult",
    "EvidenceType",
    "Trend",
    "submit_report",
    "run_cycle",
    "get_clusters",
    "get_cluster_by_id",
    "get_latest_brief",
    "get_all_briefs",
    "health_check",
]
