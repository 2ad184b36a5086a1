import unittest
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from signal_grid.models import ReportSubmission
from signal_grid.validation import (
    description_error,
    is_valid_submission,
    location_field_error,
    submission_validation_error,
)


def _submission(**overrides):
    fields = {"text": "Flooding on Main St", "evidence_type": "image", "location": "Main St", "severity": 4}
    fields.update(overrides)
    return ReportSubmission(**fields)


class TestSubmissionValidation(unittest.TestCase):

    def test_valid(self):
        self.assertIsNone(submission_validation_error(_submission()))
        self.assertTrue(is_valid_submission(_submission(evidence_type="VIDEO")))
        self.assertTrue(is_valid_submission(_submission(severity=1)))
        self.assertTrue(is_valid_submission(_submission(severity=5)))

    def test_messages(self):
        self.assertEqual(submission_validation_error(_submission(text="")), "Report text cannot be empty")
        self.assertEqual(submission_validation_error(_submission(text="   ")), "Report text cannot be empty")
        self.assertEqual(submission_validation_error(_submission(evidence_type="")), "Evidence type must be specified")
        self.assertEqual(submission_validation_error(_submission(location="  ")), "Location is required")
        self.assertEqual(submission_validation_error(_submission(severity=6)), "Severity must be between 1 and 5")
        self.assertEqual(submission_validation_error(_submission(severity=0)), "Severity must be between 1 and 5")
        self.assertTrue(submission_validation_error(_submission(evidence_type="pdf")).startswith("Invalid evidence type"))

    def test_first_violation_wins(self):
        everything_wrong = _submission(text="", evidence_type="pdf", location="", severity=9)
        self.assertEqual(submission_validation_error(everything_wrong), "Report text cannot be empty")
        # severity range is checked before evidence type membership
        self.assertEqual(
            submission_validation_error(_submission(evidence_type="pdf", severity=9)),
            "Severity must be between 1 and 5",
        )
        self.assertEqual(
            submission_validation_error(_submission(evidence_type="", location="")),
            "Evidence type must be specified",
        )

    def test_never_raises_on_odd_severity(self):
        self.assertEqual(submission_validation_error(_submission(severity="4")), "Severity must be between 1 and 5")
        self.assertEqual(submission_validation_error(_submission(severity=None)), "Severity must be between 1 and 5")


class TestFormGates(unittest.TestCase):

    def test_description_needs_ten_characters(self):
        self.assertEqual(description_error(""), "Please enter incident description")
        self.assertEqual(description_error(None), "Please enter incident description")
        self.assertEqual(
            description_error("  too short  "),
            "Please provide more details (at least 10 characters)",
        )
        self.assertIsNone(description_error("Heavy flooding"))

    def test_description_gate_is_separate_from_submission_rule(self):
        self.assertIsNotNone(description_error("Fire"))
        self.assertTrue(is_valid_submission(_submission(text="Fire")))

    def test_location_field(self):
        self.assertEqual(location_field_error(" "), "Location is required to submit report")
        self.assertIsNone(location_field_error("Main Street"))


if __name__ == '__main__':
    unittest.main()
