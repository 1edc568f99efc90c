"""Turn the markers attached to one declaration into violations."""

import logging
from collections.abc import Iterable

from deprecated_after.domain.entities import Violation
from deprecated_after.domain.errors import MalformedVersionError
from deprecated_after.domain.marker import MARKER_TYPE_NAME
from deprecated_after.domain.version import VersionComparator

logger = logging.getLogger(__name__)


class MetadataExtractor:
    """
    Reads DeprecatedAfter markers and compares them against the current version.

    Markers are recognised by fully-qualified type name, not by shape, so an
    unrelated object that happens to have a ``threshold`` attribute is ignored.
    A marker whose threshold is unreadable or malformed is skipped with a
    warning; it never aborts the scan.
    """

    def __init__(self, marker_type_name: str = MARKER_TYPE_NAME) -> None:
        self._marker_type_name = marker_type_name

    def is_marker(self, candidate: object) -> bool:
        kind = type(candidate)
        return f"{kind.__module__}.{kind.__qualname__}" == self._marker_type_name

    def extract(
        self,
        markers: Iterable[object],
        element_name: str,
        current_version: str,
    ) -> list[Violation]:
        """Return one violation per marker whose threshold ``current_version`` has reached."""
        violations: list[Violation] = []
        for marker in markers:
            if not self.is_marker(marker):
                continue
            threshold = self._read_threshold(marker, element_name)
            if threshold is None:
                continue
            try:
                reached = VersionComparator.has_reached(current_version, threshold)
            except MalformedVersionError as exc:
                logger.warning("Skipping marker on %s: %s", element_name, exc)
                continue
            if reached:
                violations.append(
                    Violation(
                        element_name=element_name,
                        threshold_version=threshold,
                        reason=self._read_optional(marker, "reason"),
                        replacement=self._read_optional(marker, "replacement"),
                    )
                )
        return violations

    @staticmethod
    def _read_threshold(marker: object, element_name: str) -> str | None:
        try:
            threshold = getattr(marker, "threshold")
        except Exception as exc:  # marker shape differs at runtime
            logger.warning("Skipping marker on %s: threshold unreadable (%s)", element_name, exc)
            return None
        if not isinstance(threshold, str):
            logger.warning(
                "Skipping marker on %s: threshold %r is not a string", element_name, threshold)
            return None
        return threshold

    @staticmethod
    def _read_optional(marker: object, attribute: str) -> str:
        try:
            value = getattr(marker, attribute, "")
        except Exception as exc:
            logger.debug("Marker %s unreadable: %r", attribute, exc)
            return ""
        return value if isinstance(value, str) else ""
