from typing import Any, Optional, cast

from deprecated_after.domain.config import ConfigurationLoader
from deprecated_after.infrastructure.config_file_loader import ConfigFileLoader
from deprecated_after.infrastructure.gateways.introspection_gateway import DeclarationInspector
from deprecated_after.infrastructure.gateways.module_loader import ScopedModuleLoader
from deprecated_after.interface.reporters import TerminalValidationReporter
from deprecated_after.interface.telemetry import ProjectTelemetry
from deprecated_after.use_cases.extract_metadata import MetadataExtractor
from deprecated_after.use_cases.scan_artifacts import ArtifactScanner
from deprecated_after.use_cases.validate import ValidateDeprecatedAfterUseCase


class DeprecatedAfterContainer:
    """Dependency Injection Container for the DeprecatedAfter checker."""

    _instance: Optional["DeprecatedAfterContainer"] = None

    def __init__(self, config_loader: Optional[ConfigurationLoader] = None) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults(config_loader)

    @classmethod
    def get_instance(cls) -> "DeprecatedAfterContainer":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        cls._instance = None

    def _register_defaults(self, config_loader: Optional[ConfigurationLoader]) -> None:
        """Register default implementations for protocols."""
        if config_loader is None:
            config_dict, project_section = ConfigFileLoader.load_config_from_fs()
            config_loader = ConfigurationLoader(config_dict, project_section)
        self.register_singleton("ConfigurationLoader", config_loader)

        telemetry = ProjectTelemetry("deprecated-after")
        self.register_singleton("TelemetryPort", telemetry)
        self.register_singleton("MetadataExtractor", MetadataExtractor())
        self.register_singleton("DeclarationInspector", DeclarationInspector())
        self.register_singleton(
            "ArtifactScanner",
            ArtifactScanner(
                extractor=self.get("MetadataExtractor"),
                inspector=self.get("DeclarationInspector"),
                loader_factory=ScopedModuleLoader,
                unit_suffixes=config_loader.unit_suffixes,
            ),
        )
        self.register_singleton(
            "ValidateDeprecatedAfterUseCase",
            ValidateDeprecatedAfterUseCase(self.get("ArtifactScanner"), telemetry),
        )
        self.register_singleton("ValidationReporter", TerminalValidationReporter())

    def register_singleton(self, key: str, instance: Any) -> None:
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        if key not in self._singletons:
            raise ValueError(f"Dependency '{key}' not registered.")
        return self._singletons[key]

    def get_config_loader(self) -> ConfigurationLoader:
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_telemetry_port(self) -> ProjectTelemetry:
        return cast(ProjectTelemetry, self.get("TelemetryPort"))

    def get_scanner(self) -> ArtifactScanner:
        return cast(ArtifactScanner, self.get("ArtifactScanner"))

    def get_validate_use_case(self) -> ValidateDeprecatedAfterUseCase:
        return cast(ValidateDeprecatedAfterUseCase, self.get("ValidateDeprecatedAfterUseCase"))

    def get_reporter(self) -> TerminalValidationReporter:
        return cast(TerminalValidationReporter, self.get("ValidationReporter"))
