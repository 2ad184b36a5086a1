import unittest
from unittest.mock import patch
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from signal_grid.errors import NetworkError, NoBriefsYetError, RemoteError
from signal_grid.models import Brief, Cluster, CycleResult, Event
from signal_grid.workflows.situation import (
    BriefState,
    fetch_dashboard,
    load_brief_view,
    report_incident,
)


class TestBriefView(unittest.TestCase):

    @patch('signal_grid.workflows.situation.get_latest_brief')
    def test_no_briefs_renders_empty_state(self, mock_get_latest_brief):
        mock_get_latest_brief.side_effect = NoBriefsYetError()
        view = load_brief_view()
        self.assertIs(view.state, BriefState.EMPTY)
        self.assertIsNone(view.brief)
        self.assertEqual(view.message, "No briefs available yet")

    @patch('signal_grid.workflows.situation.get_latest_brief')
    def test_other_failures_render_error(self, mock_get_latest_brief):
        mock_get_latest_brief.side_effect = RemoteError("database unavailable", 500)
        view = load_brief_view()
        self.assertIs(view.state, BriefState.ERROR)
        self.assertEqual(view.message, "database unavailable")

    @patch('signal_grid.workflows.situation.get_latest_brief')
    def test_ready(self, mock_get_latest_brief):
        mock_get_latest_brief.return_value = Brief(id="b1", headline="Calm night")
        view = load_brief_view()
        self.assertIs(view.state, BriefState.READY)
        self.assertEqual(view.brief.headline, "Calm night")


class TestReportIncident(unittest.TestCase):

    @patch('signal_grid.workflows.situation.run_cycle')
    @patch('signal_grid.workflows.situation.submit_report')
    def test_cycle_only_when_asked(self, mock_submit_report, mock_run_cycle):
        mock_submit_report.return_value = Event(id="e1", severity=4)
        mock_run_cycle.return_value = CycleResult()

        outcome = report_incident("Heavy flooding on Main Street", "text", "Main Street", 4)
        self.assertEqual(outcome.event.id, "e1")
        self.assertIsNone(outcome.cycle)
        mock_run_cycle.assert_not_called()

        outcome = report_incident("Heavy flooding on Main Street", "text", "Main Street", 4, run_cycle_after=True)
        self.assertIsNotNone(outcome.cycle)
        mock_run_cycle.assert_called_once()


class TestDashboard(unittest.TestCase):

    @patch('signal_grid.workflows.situation.get_latest_brief')
    @patch('signal_grid.workflows.situation.get_clusters')
    def test_snapshot(self, mock_get_clusters, mock_get_latest_brief):
        mock_get_clusters.return_value = [
            Cluster(cluster_id="CL-001", severity=5),
            Cluster(cluster_id="CL-002", severity=2),
            Cluster(cluster_id="CL-003", severity=4),
        ]
        mock_get_latest_brief.side_effect = NoBriefsYetError()

        snapshot = fetch_dashboard()

        self.assertEqual([c.cluster_id for c in snapshot.clusters], ["CL-001", "CL-002", "CL-003"])
        self.assertEqual(snapshot.critical_count, 2)
        self.assertIs(snapshot.brief_view.state, BriefState.EMPTY)

    @patch('signal_grid.workflows.situation.get_latest_brief')
    @patch('signal_grid.workflows.situation.get_clusters')
    def test_cluster_failure_propagates(self, mock_get_clusters, mock_get_latest_brief):
        mock_get_clusters.side_effect = NetworkError()
        mock_get_latest_brief.return_value = Brief()
        with self.assertRaises(NetworkError):
            fetch_dashboard()


if __name__ == '__main__':
    unittest.main()
