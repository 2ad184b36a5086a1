"""Multi-step flows over the service layer."""

from .situation import (  # noqa: F401
    BriefState,
    BriefView,
    DashboardSnapshot,
    IncidentOutcome,
    fetch_dashboard,
    load_brief_view,
    report_incident,
)

__all__ = [
    "BriefState",
    "BriefView",
    "DashboardSnapshot",
    "IncidentOutcome",
    "fetch_dashboard",
    "load_brief_view",
    "report_incident",
]
