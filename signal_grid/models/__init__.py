"""Domain models used across the project."""

from .enums import EvidenceType, Trend  # noqa: F401
from .report import Report, ReportSubmission  # noqa: F401
from .event import Event  # noqa: F401
from .cluster import Cluster  # noqa: F401
from .brief import Brief, CycleResult  # noqa: F401

__all__ = [
    "EvidenceType",
    "Trend",
    "Report",
    "ReportSubmission",
    "Event",
    "Cluster",
    "Brief",
    "CycleResult",
]
