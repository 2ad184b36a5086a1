"""Caller-facing flows built on the service layer.

The services raise typed errors; these helpers turn the outcomes a screen has
to distinguish (brief ready, no brief yet, failure) into plain values.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from ..logging_config import logging as _  # noqa: F401  # ensure config applied early
from ..config import DEFAULT_SEVERITY
from ..errors import NoBriefsYetError, SignalGridError
from ..models import Brief, Cluster, CycleResult, Event
from ..services.briefs import get_latest_brief
from ..services.clusters import get_clusters
from ..services.cycle import run_cycle
from ..services.reports import submit_report

logger = logging.getLogger(__name__)


class BriefState(str, Enum):
    READY = "ready"
    EMPTY = "empty"
    ERROR = "error"


@dataclass(frozen=True)
class BriefView:
    state: BriefState
    brief: Optional[Brief] = None
    message: str = ""


@dataclass(frozen=True)
class IncidentOutcome:
    event: Event
    cycle: Optional[CycleResult] = None


@dataclass(frozen=True)
class DashboardSnapshot:
    clusters: Tuple[Cluster, ...]
    brief_view: BriefView
    critical_count: int


def load_brief_view(*, base_url: Optional[str] = None) -> BriefView:
    """Fetch the latest brief, mapping "no briefs yet" to an empty state."""
    try:
        brief = get_latest_brief(base_url=base_url)
    except NoBriefsYetError as exc:
        logger.info("No brief generated yet")
        return BriefView(BriefState.EMPTY, message=exc.message)
    except SignalGridError as exc:
        logger.error("Could not load latest brief: %s", exc.message)
        return BriefView(BriefState.ERROR, message=exc.message)
    return BriefView(BriefState.READY, brief=brief)


def report_incident(
    text: str,
    evidence_type: str,
    location: str = "",
    severity: int = DEFAULT_SEVERITY,
    *,
    run_cycle_after: bool = False,
    base_url: Optional[str] = None,
) -> IncidentOutcome:
    """Submit a report and, if asked, run a cycle once the event is back."""
    event = submit_report(text, evidence_type, location, severity, base_url=base_url)
    cycle = run_cycle(base_url=base_url) if run_cycle_after else None
    return IncidentOutcome(event=event, cycle=cycle)


def fetch_dashboard(*, base_url: Optional[str] = None) -> DashboardSnapshot:
    """Fetch clusters and the latest brief concurrently.

    Results are read from the future that belongs to each call, so the order
    in which the two requests finish does not matter. Cluster failures
    propagate; brief failures end up in the brief view.
    """
    with ThreadPoolExecutor(max_workers=2) as pool:
        futures = {
            "clusters": pool.submit(get_clusters, base_url=base_url),
            "brief": pool.submit(load_brief_view, base_url=base_url),
        }
        clusters = tuple(futures["clusters"].result())
        brief_view = futures["brief"].result()

    critical = sum(1 for cluster in clusters if cluster.is_critical())
    _log_stats(len(clusters), critical, brief_view.state)
    return DashboardSnapshot(clusters=clusters, brief_view=brief_view, critical_count=critical)


def _log_stats(total: int, critical: int, brief_state: BriefState) -> None:
    logger.info("=== Situation Dashboard ===")
    logger.info("Active clusters: %d", total)
    logger.info("Critical clusters: %d", critical)
    logger.info("Brief: %s", brief_state.value)
    logger.info("===========================")

__all__ = [
    "BriefState",
    "BriefView",
    "IncidentOutcome",
    "DashboardSnapshot",
    "load_brief_view",
    "report_incident",
    "fetch_dashboard",
]
