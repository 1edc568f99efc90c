"""CLI entry points for deprecated-after - Thin Controller using Typer."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer

from deprecated_after.domain.config import ConfigurationLoader
from deprecated_after.domain.errors import MalformedVersionError, ScanInfrastructureError
from deprecated_after.domain.protocols import TelemetryPort
from deprecated_after.domain.version import Ordering, VersionComparator
from deprecated_after.interface.reporters import ValidationReporter
from deprecated_after.use_cases.validate import ValidateDeprecatedAfterUseCase

EXIT_VIOLATIONS = 1
EXIT_INFRASTRUCTURE = 2

_ORDERING_SYMBOLS = {Ordering.LESS: "<", Ordering.EQUAL: "=", Ordering.GREATER: ">"}


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    telemetry: TelemetryPort
    validate_use_case: ValidateDeprecatedAfterUseCase
    reporter: ValidationReporter


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def resolve_root(path: Optional[Path], config_loader: ConfigurationLoader) -> str:
        """Explicit path, else [tool.deprecated-after].artifact_root, else build/lib."""
        if path is not None:
            return str(path)
        return config_loader.artifact_root

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="deprecated-after",
            help="Fail the build when DeprecatedAfter markers have expired for the current project version.",
            add_completion=False,
        )

        @app.callback()
        def main(
            verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
        ) -> None:
            logging.basicConfig(
                level=logging.DEBUG if verbose else logging.WARNING,
                format="%(levelname)s %(name)s: %(message)s",
            )

        @app.command()
        def validate(
            path: Optional[Path] = typer.Argument(None, help="Artifact root (default: configured artifact_root)"),  # noqa: B008
            version: Optional[str] = typer.Option(
                None, "--version", "-V", help="Current project version (default: from pyproject.toml)"),
            show_skipped: bool = typer.Option(
                False, "--show-skipped", help="List artifacts that could not be inspected"),
        ) -> None:
            """Scan built artifacts and fail if any DeprecatedAfter threshold has been reached."""
            root = CLIAppFactory.resolve_root(path, deps.config_loader)
            current_version = version or deps.config_loader.current_version
            try:
                result = deps.validate_use_case.execute(root, current_version)
            except (MalformedVersionError, ScanInfrastructureError) as exc:
                deps.telemetry.error(str(exc))
                raise typer.Exit(code=EXIT_INFRASTRUCTURE) from exc
            deps.reporter.report(result, show_skipped=show_skipped)
            if result.has_violations():
                raise typer.Exit(code=EXIT_VIOLATIONS)

        @app.command()
        def compare(
            left: str = typer.Argument(..., help="First version"),
            right: str = typer.Argument(..., help="Second version"),
        ) -> None:
            """Print '<', '=' or '>' for two dotted-numeric versions."""
            try:
                ordering = VersionComparator.compare(left, right)
            except MalformedVersionError as exc:
                deps.telemetry.error(str(exc))
                raise typer.Exit(code=EXIT_INFRASTRUCTURE) from exc
            typer.echo(f"{left} {_ORDERING_SYMBOLS[ordering]} {right}")

        return app
