"""Terminal telemetry: user-facing progress lines, mirrored to the debug log."""

import logging

import typer

logger = logging.getLogger("deprecated_after")


class ProjectTelemetry:
    """TelemetryPort implementation that prints with typer.secho."""

    def __init__(self, project_name: str, color: str = typer.colors.CYAN, quiet: bool = False) -> None:
        self.project_name = project_name
        self.color = color
        self.quiet = quiet

    def _prefix(self) -> str:
        return f"[{self.project_name}]"

    def step(self, message: str) -> None:
        logger.debug(message)
        if not self.quiet:
            typer.secho(f"{self._prefix()} {message}", fg=self.color)

    def warning(self, message: str) -> None:
        logger.debug("warning: %s", message)
        typer.secho(f"{self._prefix()} WARNING: {message}", fg=typer.colors.YELLOW, err=True)

    def error(self, message: str) -> None:
        logger.debug("error: %s", message)
        typer.secho(f"{self._prefix()} ERROR: {message}", fg=typer.colors.RED, err=True)
