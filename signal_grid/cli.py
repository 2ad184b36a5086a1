"""
SignalGrid command line interface
=================================

Run it like:

    python -m signal_grid submit "Heavy flooding on Main Street" --location "Main Street" --severity 4
    python -m signal_grid cycle
    python -m signal_grid clusters
    python -m signal_grid brief

Every command is one call against the backend configured by
``SIGNAL_GRID_BASE_URL`` (or ``--base-url``). Nothing is retried; run the
command again to retry.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from .logging_config import logging as _  # noqa: F401  # ensure config applied early
from .clients import close_backend_session
from .config import DEFAULT_SEVERITY, EVIDENCE_TYPES
from .derivation import is_valid_severity, severity_level_name
from .errors import SignalGridError
from .models import Brief, Cluster, Event
from .services import get_all_briefs, get_cluster_by_id, get_clusters, health_check, run_cycle
from .validation import description_error
from .workflows.situation import BriefState, load_brief_view, report_incident

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="signal_grid", description="SignalGrid incident intelligence client")
    ap.add_argument("--base-url", default=None, help="Backend base URL (default: SIGNAL_GRID_BASE_URL)")
    sub = ap.add_subparsers(dest="command", required=True)

    submit = sub.add_parser("submit", help="Submit an incident report")
    submit.add_argument("text", help="Incident description (at least 10 characters)")
    submit.add_argument("--evidence-type", default="text", choices=EVIDENCE_TYPES)
    submit.add_argument("--location", required=True)
    submit.add_argument("--severity", type=int, default=DEFAULT_SEVERITY)
    submit.add_argument("--run-cycle", action="store_true", help="Run a cycle after the report is accepted")

    sub.add_parser("cycle", help="Run clustering + brief generation")
    sub.add_parser("clusters", help="List active clusters")
    cluster = sub.add_parser("cluster", help="Show one cluster")
    cluster.add_argument("id")
    sub.add_parser("brief", help="Show the latest brief")
    sub.add_parser("briefs", help="List brief history")
    sub.add_parser("health", help="Check backend liveness")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return _dispatch(args)
    except SignalGridError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {exc.message}")
        return 1
    finally:
        close_backend_session()


def _dispatch(args: argparse.Namespace) -> int:
    base_url = args.base_url

    if args.command == "submit":
        problem = description_error(args.text)
        if problem:
            print(f"Error: {problem}")
            return 1
        if is_valid_severity(args.severity):
            print(f"Submitting {args.evidence_type} report, severity {args.severity} "
                  f"({severity_level_name(args.severity)})")
        outcome = report_incident(
            args.text,
            args.evidence_type,
            args.location,
            args.severity,
            run_cycle_after=args.run_cycle,
            base_url=base_url,
        )
        _print_event(outcome.event)
        if outcome.cycle is not None:
            _print_clusters(outcome.cycle.clusters)
            if outcome.cycle.brief is not None:
                _print_brief(outcome.cycle.brief)
        return 0

    if args.command == "cycle":
        result = run_cycle(base_url=base_url)
        _print_clusters(result.clusters)
        if result.brief is not None:
            _print_brief(result.brief)
        return 0

    if args.command == "clusters":
        _print_clusters(get_clusters(base_url=base_url))
        return 0

    if args.command == "cluster":
        _print_clusters([get_cluster_by_id(args.id, base_url=base_url)])
        return 0

    if args.command == "brief":
        view = load_brief_view(base_url=base_url)
        if view.state is BriefState.EMPTY:
            print("No briefs yet. Submit reports and run a cycle to generate one.")
            return 0
        if view.state is BriefState.ERROR:
            print(f"Error: {view.message}")
            return 1
        _print_brief(view.brief)
        return 0

    if args.command == "briefs":
        briefs = get_all_briefs(base_url=base_url)
        if not briefs:
            print("No briefs yet.")
        for brief in briefs:
            print(f"[{brief.time_ago()}] {brief.headline} ({brief.quick_summary()})")
        return 0

    if args.command == "health":
        healthy = health_check(base_url=base_url)
        print("Backend is up." if healthy else "Backend is unreachable.")
        return 0 if healthy else 1

    print("Unknown command.")
    return 1


def _print_event(event: Event) -> None:
    print(f"{event.event_type_icon()} {event.formatted_event_type()} | {event.location_hint} | {event.time_hint}")
    print(f"   severity {event.severity} ({event.severity_description()}) | "
          f"{event.confidence_percentage()} {event.confidence_description()}")
    if event.summary:
        print(f"   {event.summary}")


def _print_clusters(clusters) -> None:
    if not clusters:
        print("No active clusters.")
        return
    critical = sum(1 for c in clusters if c.is_critical())
    print(f"{len(clusters)} clusters, {critical} critical")
    for c in clusters:
        _print_cluster(c)


def _print_cluster(c: Cluster) -> None:
    print(f"[{c.cluster_id or c.id}] {c.label} | {c.severity_description()} | "
          f"{c.trend_icon()} {c.trend_description()} | {c.confidence_percentage()} | {c.formatted_time()}")


def _print_brief(brief: Brief) -> None:
    print(f"== {brief.headline or 'Situation brief'} ({brief.time_ago()})")
    for item in brief.what_changed:
        print(f"  * {item}")
    for rank, spot in enumerate(brief.top_hotspots, 1):
        print(f"  {rank}. {spot}")
    if brief.watch_next:
        print(f"  Watch next: {brief.watch_next}")
    if brief.confidence_notes:
        print(f"  Confidence: {brief.confidence_notes}")


if __name__ == "__main__":
    raise SystemExit(main())
