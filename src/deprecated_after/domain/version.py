"""Dotted-numeric version comparison."""

import re
from enum import IntEnum
from itertools import zip_longest

from deprecated_after.domain.errors import MalformedVersionError

_NUMERIC_SEGMENT = re.compile(r"[0-9]+")


class Ordering(IntEnum):
    """Result of comparing two versions."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


class VersionComparator:
    """
    Compares strings such as ``1.2.10`` segment by segment.

    Missing trailing segments count as ``0``, so ``1.2`` equals ``1.2.0`` and
    ``2`` is greater than ``1.9.9``. Pre-release or build suffixes are not
    understood and are rejected as malformed.
    """

    @staticmethod
    def parse(version: str) -> list[int]:
        """Split a version into integer segments. Every segment is validated."""
        segments = []
        for segment in version.split("."):
            if not _NUMERIC_SEGMENT.fullmatch(segment):
                raise MalformedVersionError(version, segment)
            segments.append(int(segment))
        return segments

    @staticmethod
    def compare(left: str, right: str) -> Ordering:
        """Compare two dotted-numeric versions. Raises MalformedVersionError."""
        left_segments = VersionComparator.parse(left)
        right_segments = VersionComparator.parse(right)
        for a, b in zip_longest(left_segments, right_segments, fillvalue=0):
            if a != b:
                return Ordering.LESS if a < b else Ordering.GREATER
        return Ordering.EQUAL

    @staticmethod
    def has_reached(current: str, threshold: str) -> bool:
        """True when ``current`` is at or past ``threshold`` (inclusive)."""
        return VersionComparator.compare(current, threshold) >= Ordering.EQUAL
