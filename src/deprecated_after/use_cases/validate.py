"""Validate a build against its DeprecatedAfter markers."""

from dataclasses import dataclass, field
from enum import Enum

from deprecated_after.domain.constants import UNSPECIFIED_VERSION
from deprecated_after.domain.entities import ScanReport, SkippedArtifact, Violation
from deprecated_after.domain.errors import ExpiredDeprecationError
from deprecated_after.domain.protocols import TelemetryPort
from deprecated_after.domain.version import VersionComparator
from deprecated_after.use_cases.scan_artifacts import ArtifactScanner


class ValidationStatus(Enum):
    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of one validation run."""
    status: ValidationStatus
    current_version: str
    root_dir: str
    violations: list[Violation] = field(default_factory=list)
    skipped: list[SkippedArtifact] = field(default_factory=list)

    def has_violations(self) -> bool:
        return self.status is ValidationStatus.FAILED

    def failure_message(self) -> str:
        """One line per violation followed by the current version."""
        lines = ["Found elements that should have been removed:"]
        lines.extend(f"  {violation.render()}" for violation in self.violations)
        lines.append(f"Current version: {self.current_version}")
        return "\n".join(lines)

    def raise_for_violations(self) -> None:
        """Halt the build with the itemized failure message when violations exist."""
        if self.has_violations():
            raise ExpiredDeprecationError(self.failure_message())


class ValidateDeprecatedAfterUseCase:
    """
    Orchestrates one validation: version gate, scan, result.

    A project without a version ("unspecified") is not scanned at all; the
    user gets a warning instead. A malformed version raises
    MalformedVersionError before anything is scanned.
    """

    def __init__(self, scanner: ArtifactScanner, telemetry: TelemetryPort) -> None:
        self.scanner = scanner
        self.telemetry = telemetry

    def execute(self, root_dir: str, current_version: str) -> ValidationResult:
        if current_version == UNSPECIFIED_VERSION:
            self.telemetry.warning(
                "Project version is unspecified; skipping DeprecatedAfter validation. "
                "Set [project].version or [tool.deprecated-after].version in pyproject.toml."
            )
            return ValidationResult(ValidationStatus.SKIPPED, current_version, root_dir)

        VersionComparator.parse(current_version)
        self.telemetry.step(f"Validating DeprecatedAfter markers in {root_dir} against version {current_version}")
        report: ScanReport = self.scanner.scan_report(root_dir, current_version)
        status = ValidationStatus.FAILED if report.has_violations() else ValidationStatus.PASSED
        return ValidationResult(
            status=status,
            current_version=current_version,
            root_dir=root_dir,
            violations=list(report.violations),
            skipped=list(report.skipped),
        )
