"""Configuration for deprecation scanning. Immutable value object created by Infrastructure."""

from __future__ import annotations

import logging

from deprecated_after.domain.constants import (
    DEFAULT_ARTIFACT_ROOT,
    DEFAULT_UNIT_SUFFIXES,
    UNSPECIFIED_VERSION,
)

logger = logging.getLogger(__name__)


class ConfigurationLoader:
    """
    Immutable configuration for the scanner and its callers.

    Created by Infrastructure from (config_dict, project_section): the
    ``[tool.deprecated-after]`` table and the ``[project]`` table of
    pyproject.toml. Domain does not read the filesystem.
    """

    def __init__(
        self,
        config_dict: dict[str, object],
        project_section: dict[str, object],
    ) -> None:
        self._config = dict(config_dict)
        self._project = dict(project_section)
        if config_dict:
            self.validate_config(config_dict)

    def validate_config(self, config: dict[str, object]) -> None:
        """Warn about values that will be ignored."""
        known = {"artifact_root", "version", "unit_suffixes"}
        for key in config:
            if key not in known:
                logger.warning("Configuration Warning: unknown key %r in [tool.deprecated-after] is ignored.", key)
        suffixes = config.get("unit_suffixes")
        if suffixes is not None and not isinstance(suffixes, list):
            logger.warning("Configuration Warning: 'unit_suffixes' must be a list; using defaults.")

    @property
    def artifact_root(self) -> str:
        raw = self._config.get("artifact_root")
        return raw if isinstance(raw, str) and raw else DEFAULT_ARTIFACT_ROOT

    @property
    def current_version(self) -> str:
        """
        The project's version: [tool.deprecated-after].version, else
        [project].version, else the "unspecified" sentinel.
        """
        for raw in (self._config.get("version"), self._project.get("version")):
            if isinstance(raw, str) and raw.strip():
                return raw.strip()
        return UNSPECIFIED_VERSION

    @property
    def unit_suffixes(self) -> tuple[str, ...]:
        raw = self._config.get("unit_suffixes")
        if isinstance(raw, list):
            suffixes = tuple(str(s) for s in raw if isinstance(s, str) and s)
            if suffixes:
                return suffixes
        return DEFAULT_UNIT_SUFFIXES
