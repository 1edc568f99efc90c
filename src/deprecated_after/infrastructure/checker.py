"""
Pylint plugin entry point - composition root for the checker plugin.
Lives in infrastructure as it creates the container and wires dependencies.

    pylint --load-plugins=deprecated_after.infrastructure.checker src/
"""

import logging
from typing import TYPE_CHECKING

from pylint.checkers import BaseChecker

from deprecated_after.domain.config import ConfigurationLoader
from deprecated_after.domain.errors import MalformedVersionError, ScanInfrastructureError
from deprecated_after.infrastructure.di.container import DeprecatedAfterContainer
from deprecated_after.use_cases.validate import ValidateDeprecatedAfterUseCase

if TYPE_CHECKING:
    from pylint.lint import PyLinter

logger = logging.getLogger(__name__)


class DeprecatedAfterChecker(BaseChecker):
    """R9701: expired DeprecatedAfter markers. Runs one full scan when linting finishes."""

    name = "deprecated-after"
    msgs = {
        "R9701": (
            "Expired deprecation: %s. Current version is %s; remove the element.",
            "deprecated-after-expired",
            "Used when a declaration marked with DeprecatedAfter is still present although "
            "the project version has reached its removal threshold.",
        ),
    }
    options = (
        (
            "deprecated-after-root",
            {
                "default": "",
                "type": "string",
                "metavar": "<directory>",
                "help": "Directory of built artifacts to scan (default: [tool.deprecated-after].artifact_root).",
            },
        ),
        (
            "deprecated-after-version",
            {
                "default": "",
                "type": "string",
                "metavar": "<version>",
                "help": "Current project version (default: from pyproject.toml).",
            },
        ),
    )

    def __init__(
        self,
        linter: "PyLinter",
        config_loader: ConfigurationLoader,
        validate_use_case: ValidateDeprecatedAfterUseCase,
    ) -> None:
        super().__init__(linter)
        self._config_loader = config_loader
        self._validate_use_case = validate_use_case

    def _option(self, attribute: str) -> str:
        value = getattr(self.linter.config, attribute, "")
        return value if isinstance(value, str) else ""

    def close(self) -> None:
        """Scan once per lint run and report each violation via add_message."""
        root = self._option("deprecated_after_root") or self._config_loader.artifact_root
        version = self._option("deprecated_after_version") or self._config_loader.current_version
        try:
            result = self._validate_use_case.execute(root, version)
        except (MalformedVersionError, ScanInfrastructureError) as exc:
            logger.error("DeprecatedAfter scan of %s failed: %s", root, exc)
            return
        for violation in result.violations:
            self.add_message("deprecated-after-expired", args=(violation.render(), result.current_version))


def register(linter: "PyLinter") -> None:
    """Register checkers."""
    container = DeprecatedAfterContainer.get_instance()
    linter.register_checker(
        DeprecatedAfterChecker(
            linter,
            config_loader=container.get_config_loader(),
            validate_use_case=container.get_validate_use_case(),
        )
    )
