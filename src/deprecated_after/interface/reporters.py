"""Interface for validation reporting."""

from typing import TYPE_CHECKING, Protocol

import typer

if TYPE_CHECKING:
    from deprecated_after.use_cases.validate import ValidationResult


class ValidationReporter(Protocol):
    """Protocol for reporting validation results."""

    def report(self, result: "ValidationResult", show_skipped: bool = False) -> None:
        """Report a validation result to the user."""
        ...


class TerminalValidationReporter:
    """Prints the itemized failure message, or a one-line pass summary."""

    def report(self, result: "ValidationResult", show_skipped: bool = False) -> None:
        from deprecated_after.use_cases.validate import ValidationStatus

        if show_skipped and result.skipped:
            typer.echo(f"Skipped {len(result.skipped)} artifact(s):")
            for artifact in result.skipped:
                typer.echo(f"  - {artifact.describe()}")

        if result.status is ValidationStatus.SKIPPED:
            return
        if result.status is ValidationStatus.FAILED:
            typer.secho(result.failure_message(), fg=typer.colors.RED, err=True)
            return
        typer.secho(
            f"No expired DeprecatedAfter markers in {result.root_dir} "
            f"(current version {result.current_version}).",
            fg=typer.colors.GREEN,
        )
