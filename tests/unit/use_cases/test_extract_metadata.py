"""Unit tests for MetadataExtractor."""

import unittest
from unittest.mock import patch

from deprecated_after import DeprecatedAfter
from deprecated_after.domain.entities import Violation
from deprecated_after.use_cases.extract_metadata import MetadataExtractor


class LookalikeMarker:
    """Same shape as DeprecatedAfter, different type name."""

    threshold = "0.1"
    reason = ""
    replacement = ""


class BrokenReasonMarker:
    """Threshold readable, optional fields raise."""

    threshold = "1.0"

    @property
    def reason(self) -> str:
        raise RuntimeError("incompatible marker")

    @property
    def replacement(self) -> str:
        raise RuntimeError("incompatible marker")


class NoThresholdMarker:
    @property
    def threshold(self) -> str:
        raise AttributeError("threshold")


class TestMetadataExtractor(unittest.TestCase):

    def setUp(self) -> None:
        self.extractor = MetadataExtractor()

    def test_reached_threshold_yields_violation(self) -> None:
        markers = [DeprecatedAfter("2.0.0", reason="slow", replacement="pkg.new()")]
        result = self.extractor.extract(markers, "pkg.old()", "3.0.0")
        self.assertEqual(result, [Violation("pkg.old()", "2.0.0", "slow", "pkg.new()")])

    def test_threshold_boundary_is_inclusive(self) -> None:
        self.assertEqual(len(self.extractor.extract([DeprecatedAfter("1.0.0")], "x", "1.0.0")), 1)
        self.assertEqual(self.extractor.extract([DeprecatedAfter("1.0.1")], "x", "1.0.0"), [])

    def test_two_markers_yield_two_violations(self) -> None:
        markers = [DeprecatedAfter("1.0"), DeprecatedAfter("2.0", reason="again")]
        result = self.extractor.extract(markers, "pkg.Cls", "2.0")
        self.assertEqual([v.threshold_version for v in result], ["1.0", "2.0"])

    def test_markers_of_other_types_are_ignored(self) -> None:
        self.assertEqual(self.extractor.extract([LookalikeMarker(), "1.0", None], "x", "9.9"), [])

    def test_malformed_threshold_skips_only_that_marker(self) -> None:
        markers = [DeprecatedAfter("1.x"), DeprecatedAfter("1.0")]
        with patch("deprecated_after.use_cases.extract_metadata.logger") as mock_logger:
            result = self.extractor.extract(markers, "pkg.f()", "2.0")
        self.assertEqual([v.threshold_version for v in result], ["1.0"])
        mock_logger.warning.assert_called_once()

    def test_non_string_threshold_is_skipped(self) -> None:
        with patch("deprecated_after.use_cases.extract_metadata.logger") as mock_logger:
            result = self.extractor.extract([DeprecatedAfter(2)], "pkg.f()", "3.0")  # type: ignore[arg-type]
        self.assertEqual(result, [])
        mock_logger.warning.assert_called_once()

    def test_unreadable_optional_fields_become_empty(self) -> None:
        extractor = MetadataExtractor(marker_type_name=f"{__name__}.BrokenReasonMarker")
        result = extractor.extract([BrokenReasonMarker()], "pkg.f()", "1.0")
        self.assertEqual(result, [Violation("pkg.f()", "1.0", "", "")])

    def test_unreadable_threshold_is_skipped(self) -> None:
        extractor = MetadataExtractor(marker_type_name=f"{__name__}.NoThresholdMarker")
        self.assertEqual(extractor.extract([NoThresholdMarker()], "pkg.f()", "1.0"), [])
