"""Unit tests for the pylint plugin."""

import unittest
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

from deprecated_after.domain.config import ConfigurationLoader
from deprecated_after.domain.entities import Violation
from deprecated_after.domain.errors import MalformedVersionError, ScanInfrastructureError
from deprecated_after.infrastructure.checker import DeprecatedAfterChecker, register
from deprecated_after.use_cases.validate import ValidationResult, ValidationStatus


class TestDeprecatedAfterChecker(unittest.TestCase):

    def setUp(self) -> None:
        self.linter = MagicMock()
        self.linter.config = SimpleNamespace(deprecated_after_root="", deprecated_after_version="")
        self.config_loader = ConfigurationLoader({"artifact_root": "out"}, {"version": "2.0"})
        self.use_case = MagicMock()
        self.checker = DeprecatedAfterChecker(
            self.linter, config_loader=self.config_loader, validate_use_case=self.use_case)

    def _added_messages(self) -> list[tuple[str, object]]:
        return [(c.args[0], c.args[3]) for c in self.linter.add_message.call_args_list]

    def test_close_reports_each_violation(self) -> None:
        self.use_case.execute.return_value = ValidationResult(
            ValidationStatus.FAILED, "2.0", "out",
            violations=[Violation("pkg.a()", "1.0"), Violation("pkg.B", "2.0", reason="gone")],
        )
        self.checker.close()
        self.use_case.execute.assert_called_once_with("out", "2.0")
        self.assertEqual(self._added_messages(), [
            ("deprecated-after-expired", ("pkg.a() (deprecated after version 1.0)", "2.0")),
            ("deprecated-after-expired", ("pkg.B (deprecated after version 2.0) - Reason: gone", "2.0")),
        ])

    def test_command_line_options_override_configuration(self) -> None:
        self.linter.config = SimpleNamespace(deprecated_after_root="dist", deprecated_after_version="5.1")
        self.use_case.execute.return_value = ValidationResult(ValidationStatus.PASSED, "5.1", "dist")
        self.checker.close()
        self.use_case.execute.assert_called_once_with("dist", "5.1")
        self.linter.add_message.assert_not_called()

    def test_infrastructure_failure_is_logged_not_raised(self) -> None:
        self.use_case.execute.side_effect = ScanInfrastructureError("not a directory")
        with patch("deprecated_after.infrastructure.checker.logger") as mock_logger:
            self.checker.close()
        mock_logger.error.assert_called_once()
        self.linter.add_message.assert_not_called()

    def test_malformed_version_is_logged_not_reported(self) -> None:
        self.linter.config = SimpleNamespace(deprecated_after_root="", deprecated_after_version="2.0-rc1")
        self.use_case.execute.side_effect = MalformedVersionError("2.0-rc1", "0-rc1")
        with patch("deprecated_after.infrastructure.checker.logger") as mock_logger:
            self.checker.close()
        mock_logger.error.assert_called_once()
        self.linter.add_message.assert_not_called()

    def test_message_definition(self) -> None:
        self.assertIn("R9701", DeprecatedAfterChecker.msgs)
        self.assertEqual(DeprecatedAfterChecker.msgs["R9701"][1], "deprecated-after-expired")


class TestRegister(unittest.TestCase):

    @patch("deprecated_after.infrastructure.checker.DeprecatedAfterContainer")
    def test_register_adds_checker(self, mock_container_cls: MagicMock) -> None:
        container = mock_container_cls.get_instance.return_value
        container.get_config_loader.return_value = ConfigurationLoader({}, {})
        linter = MagicMock()
        register(linter)
        linter.register_checker.assert_called_once()
        checker = linter.register_checker.call_args[0][0]
        self.assertIsInstance(checker, DeprecatedAfterChecker)
