"""Exception hierarchy for deprecation scanning."""


class DeprecatedAfterError(Exception):
    """Base class for every error raised by this package."""


class MalformedVersionError(DeprecatedAfterError, ValueError):
    """A version string contains a segment that is not a non-negative integer."""

    def __init__(self, version: str, segment: str) -> None:
        super().__init__(f"Malformed version {version!r}: segment {segment!r} is not numeric")
        self.version = version
        self.segment = segment


class ScanInfrastructureError(DeprecatedAfterError):
    """The artifact root exists but cannot be used to load anything."""


class ExpiredDeprecationError(DeprecatedAfterError):
    """Raised to halt a build when expired declarations are still present."""
