import unittest
from datetime import datetime, timedelta, timezone
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from signal_grid.derivation import SeverityBand, confidence_percentage, severity_band, severity_level_name
from signal_grid.errors import ValidationError
from signal_grid.models import Brief, Cluster, Event, EvidenceType, Report, ReportSubmission, Trend
from signal_grid.utils.datetime_utils import format_relative_time

NOW = datetime(2026, 1, 5, 12, 0, tzinfo=timezone.utc)


class TestSeverity(unittest.TestCase):

    def test_bands(self):
        self.assertIs(severity_band(1), SeverityBand.LOW)
        self.assertIs(severity_band(2), SeverityBand.LOW)
        self.assertIs(severity_band(3), SeverityBand.MEDIUM)
        self.assertIs(severity_band(4), SeverityBand.HIGH)
        self.assertIs(severity_band(5), SeverityBand.CRITICAL)
        self.assertEqual(SeverityBand.HIGH.color, "orange")
        self.assertEqual(SeverityBand.CRITICAL.label, "Critical")

    def test_band_rejects_out_of_range(self):
        for bad in (0, 6, -1, True):
            with self.assertRaises(ValueError):
                severity_band(bad)

    def test_event_rejects_out_of_range_severity(self):
        for bad in (0, 6, 10):
            with self.assertRaises(ValidationError):
                Event(severity=bad)

    def test_cluster_rejects_out_of_range_severity_and_confidence(self):
        with self.assertRaises(ValidationError):
            Cluster(severity=7)
        with self.assertRaises(ValidationError):
            Cluster(confidence=1.5)
        with self.assertRaises(ValidationError):
            Event(confidence=-0.1)

    def test_with_changes_rechecks_invariants(self):
        event = Event(severity=2)
        with self.assertRaises(ValidationError):
            event.with_changes(severity=9)
        updated = event.with_changes(severity=5)
        self.assertEqual(updated.severity, 5)
        self.assertEqual(event.severity, 2)

    def test_level_names(self):
        self.assertEqual(severity_level_name(1), "Minimal")
        self.assertEqual(severity_level_name(5), "Critical")


class TestConfidence(unittest.TestCase):

    def test_percentage(self):
        self.assertEqual(confidence_percentage(0.0), 0)
        self.assertEqual(confidence_percentage(0.85), 85)
        self.assertEqual(confidence_percentage(1.0), 100)
        self.assertEqual(confidence_percentage(0.125), 13)

    def test_percentage_is_monotone(self):
        values = [i / 1000 for i in range(1001)]
        percents = [confidence_percentage(v) for v in values]
        self.assertEqual(percents, sorted(percents))

    def test_descriptions(self):
        self.assertEqual(Event(confidence=0.8).confidence_description(), "High confidence")
        self.assertEqual(Event(confidence=0.79).confidence_description(), "Medium confidence")
        self.assertEqual(Event(confidence=0.6).confidence_description(), "Medium confidence")
        self.assertEqual(Event(confidence=0.59).confidence_description(), "Low confidence")
        self.assertEqual(Event(confidence=0.92).confidence_percentage(), "92%")

    def test_integer_confidence_is_widened(self):
        self.assertIsInstance(Cluster(confidence=1).confidence, float)


class TestRelativeTime(unittest.TestCase):

    def _fmt(self, delta):
        return format_relative_time(NOW - delta, NOW)

    def test_boundaries(self):
        self.assertEqual(self._fmt(timedelta(0)), "Just now")
        self.assertEqual(self._fmt(timedelta(seconds=59)), "Just now")
        self.assertEqual(self._fmt(timedelta(seconds=60)), "1m ago")
        self.assertEqual(self._fmt(timedelta(minutes=59, seconds=59)), "59m ago")
        self.assertEqual(self._fmt(timedelta(minutes=60)), "1h ago")
        self.assertEqual(self._fmt(timedelta(hours=23, minutes=59)), "23h ago")
        self.assertEqual(self._fmt(timedelta(hours=24)), "1d ago")

    def test_future_timestamp_is_just_now(self):
        self.assertEqual(self._fmt(timedelta(minutes=-5)), "Just now")

    def test_recency_thresholds_differ_per_entity(self):
        at = NOW - timedelta(minutes=10)
        self.assertFalse(Report(created_at=at).is_recent(NOW))
        self.assertTrue(Event(created_at=at).is_recent(NOW))
        self.assertTrue(Cluster(updated_at=at).is_recent(NOW))

        self.assertTrue(Report(created_at=NOW - timedelta(minutes=4, seconds=59)).is_recent(NOW))
        self.assertFalse(Event(created_at=NOW - timedelta(minutes=30)).is_recent(NOW))
        self.assertTrue(Cluster(updated_at=NOW - timedelta(minutes=59)).is_recent(NOW))
        self.assertFalse(Cluster(updated_at=NOW - timedelta(hours=1)).is_recent(NOW))


class TestTrend(unittest.TestCase):

    def test_unknown_trend_reads_as_stable(self):
        unknown = Cluster(trend="foo")
        stable = Cluster(trend="stable")
        self.assertIs(unknown.trend, Trend.STABLE)
        self.assertEqual(unknown.trend_icon(), stable.trend_icon())
        self.assertEqual(unknown.trend_description(), stable.trend_description())

    def test_descriptions(self):
        self.assertEqual(Cluster(trend=Trend.ESCALATING).trend_description(), "Situation is worsening")
        self.assertEqual(Cluster(trend=Trend.RESOLVING).trend_description(), "Situation is improving")
        self.assertEqual(Cluster(trend=Trend.EMERGING).trend_description(), "New situation developing")
        self.assertEqual(Trend.ESCALATING.direction, "worsening")
        self.assertIs(Trend.parse("ESCALATING"), Trend.ESCALATING)


class TestReport(unittest.TestCase):

    def test_unknown_evidence_type_defaults_to_text(self):
        self.assertIs(Report(evidence_type="pdf").evidence_type, EvidenceType.TEXT)
        self.assertIs(Report(evidence_type="IMAGE").evidence_type, EvidenceType.IMAGE)

    def test_presentation_helpers(self):
        report = Report(
            id="r1",
            raw_text="Water rising fast near the market",
            evidence_type=EvidenceType.AUDIO,
            created_at=datetime(2026, 1, 5, 9, 4, tzinfo=timezone.utc),
        )
        self.assertEqual(report.formatted_evidence_type(), "Audio")
        self.assertEqual(report.evidence_type_icon(), "🎤")
        self.assertEqual(report.full_formatted_datetime(), "Jan 5, 2026 at 09:04")
        self.assertEqual(report.word_count(), 6)
        self.assertTrue(report.is_multimodal())
        self.assertEqual(report.text_preview(max_length=5), "Water...")
        self.assertEqual(report.formatted_time(NOW), "2h ago")

    def test_immutable(self):
        report = Report(raw_text="x")
        with self.assertRaises(Exception):
            report.raw_text = "y"

    def test_empty_text_counts_as_one_word(self):
        self.assertEqual(Report(raw_text="").word_count(), 1)
        self.assertEqual(Report(raw_text="  flood  ").word_count(), 1)

    def test_naive_timestamps_are_stored_as_utc(self):
        naive = datetime(2026, 1, 5, 9, 30)
        for entity in (Report(created_at=naive), Event(created_at=naive), Brief(created_at=naive)):
            self.assertIs(entity.created_at.tzinfo, timezone.utc)
        self.assertIs(Cluster(updated_at=naive).updated_at.tzinfo, timezone.utc)
        self.assertEqual(Report(created_at=naive).formatted_time(NOW), "2h ago")

    def test_submission_delegates_to_validation(self):
        self.assertTrue(ReportSubmission("Flooding on Main St", "image", "Main St", 4).is_valid())
        self.assertEqual(
            ReportSubmission("", "text", "Main St", 3).validation_error(),
            "Report text cannot be empty",
        )
        self.assertIs(ReportSubmission("x", "Video", "y", 3).parsed_evidence_type, EvidenceType.VIDEO)


class TestEvent(unittest.TestCase):

    def test_high_severity_event(self):
        event = Event(event_type="flooding", severity=4, confidence=0.9)
        self.assertEqual(event.severity_description(), "High")
        self.assertTrue(event.is_critical())
        self.assertEqual(event.severity_color(), "orange")
        self.assertEqual(event.formatted_event_type(), "Flooding")
        self.assertEqual(event.event_type_icon(), "🌊")
        self.assertTrue(event.is_high_confidence())

    def test_defaults(self):
        event = Event()
        self.assertEqual(event.severity, 3)
        self.assertEqual(event.confidence, 0.5)
        self.assertEqual(event.event_type_icon(), "📍")
        self.assertFalse(event.is_critical())
        self.assertEqual(Event(event_type="").formatted_event_type(), "Unknown")

    def test_hashable_despite_payload(self):
        event = Event(id="e1", extracted_json={"raw": [1, 2]}, created_at=NOW)
        same = Event(id="e1", extracted_json={"other": True}, created_at=NOW)
        self.assertEqual(event, same)
        self.assertEqual(len({event, same}), 1)


class TestBrief(unittest.TestCase):

    def test_quick_summary(self):
        self.assertEqual(Brief().quick_summary(), "No Active Incidents")
        brief = Brief(what_changed=["a"], top_hotspots=["x", "y"])
        self.assertEqual(brief.quick_summary(), "2 Hotspots, 1 Update")
        self.assertIsInstance(brief.top_hotspots, tuple)

    def test_content_and_items(self):
        self.assertFalse(Brief().has_content())
        brief = Brief(headline="Flooding spreads", what_changed=("a", "b"), top_hotspots=("x",), watch_next="River")
        self.assertTrue(brief.has_content())
        self.assertTrue(brief.has_critical_hotspots())
        self.assertEqual(brief.total_items(), 4)

    def test_time_ago(self):
        self.assertEqual(Brief(created_at=NOW - timedelta(seconds=61)).time_ago(NOW), "1 minute ago")
        self.assertEqual(Brief(created_at=NOW - timedelta(hours=3)).time_ago(NOW), "3 hours ago")
        self.assertEqual(Brief(created_at=NOW - timedelta(days=1)).time_ago(NOW), "1 day ago")


if __name__ == '__main__':
    unittest.main()
