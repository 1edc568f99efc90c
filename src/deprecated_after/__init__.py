"""Expiring deprecation markers and a build-time scanner that enforces them."""

import os

from deprecated_after.domain.entities import Violation
from deprecated_after.domain.errors import (
    DeprecatedAfterError,
    ExpiredDeprecationError,
    MalformedVersionError,
    ScanInfrastructureError,
)
from deprecated_after.domain.marker import DeprecatedAfter, deprecated_after

__all__ = [
    "DeprecatedAfter",
    "DeprecatedAfterError",
    "ExpiredDeprecationError",
    "MalformedVersionError",
    "ScanInfrastructureError",
    "Violation",
    "deprecated_after",
    "scan",
]


def scan(root_dir: str | os.PathLike[str], current_version: str) -> list[Violation]:
    """
    Scan ``root_dir`` and return every expired marker in discovery order.

    Raises MalformedVersionError if ``current_version`` is not dotted-numeric.
    """
    from deprecated_after.infrastructure.di.container import DeprecatedAfterContainer

    return DeprecatedAfterContainer.get_instance().get_scanner().scan(root_dir, current_version)
