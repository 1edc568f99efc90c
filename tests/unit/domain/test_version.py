"""Unit tests for VersionComparator."""

import unittest

from deprecated_after.domain.errors import MalformedVersionError
from deprecated_after.domain.version import Ordering, VersionComparator


class TestVersionComparator(unittest.TestCase):
    """Test dotted-numeric ordering."""

    def test_missing_segments_count_as_zero(self) -> None:
        self.assertEqual(VersionComparator.compare("1.2", "1.2.0"), Ordering.EQUAL)
        self.assertEqual(VersionComparator.compare("1.2.0.0", "1.2"), Ordering.EQUAL)

    def test_greater_and_less(self) -> None:
        self.assertEqual(VersionComparator.compare("2.0.0", "1.9.9"), Ordering.GREATER)
        self.assertEqual(VersionComparator.compare("1.2.3", "1.3.0"), Ordering.LESS)
        self.assertEqual(VersionComparator.compare("2", "1.9.9"), Ordering.GREATER)

    def test_segments_compare_numerically_not_lexically(self) -> None:
        self.assertEqual(VersionComparator.compare("1.10", "1.9"), Ordering.GREATER)
        self.assertEqual(VersionComparator.compare("1.02", "1.2"), Ordering.EQUAL)

    def test_antisymmetry_and_reflexivity(self) -> None:
        samples = ["0", "1", "1.0", "1.0.1", "1.2.3", "2.0", "10.0.0", "1.9.9"]
        for a in samples:
            self.assertEqual(VersionComparator.compare(a, a), Ordering.EQUAL)
            for b in samples:
                self.assertEqual(
                    VersionComparator.compare(a, b), -VersionComparator.compare(b, a), (a, b))

    def test_has_reached_is_inclusive(self) -> None:
        self.assertTrue(VersionComparator.has_reached("1.0.0", "1.0.0"))
        self.assertTrue(VersionComparator.has_reached("1.0.1", "1.0.0"))
        self.assertFalse(VersionComparator.has_reached("1.0.0", "1.0.1"))

    def test_non_numeric_segment_raises(self) -> None:
        for bad in ("1.x", "1.0-beta", "", "1..2", "v1", "-1", " 1"):
            with self.assertRaises(MalformedVersionError, msg=bad):
                VersionComparator.compare(bad, "1.0")

    def test_malformed_segment_is_rejected_even_after_a_decisive_segment(self) -> None:
        """A later bad segment still fails, even when the first segment already differs."""
        with self.assertRaises(MalformedVersionError):
            VersionComparator.compare("2.0", "1.x")

    def test_malformed_version_error_is_a_value_error(self) -> None:
        with self.assertRaises(ValueError) as ctx:
            VersionComparator.parse("1.rc1")
        self.assertIn("rc1", str(ctx.exception))
