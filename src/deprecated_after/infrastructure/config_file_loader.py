"""Load [tool.deprecated-after] and [project] from pyproject.toml. Infrastructure I/O only."""

import logging
import sys
from pathlib import Path
from typing import Optional

from deprecated_after.domain.constants import CONFIG_SECTION

if sys.version_info >= (3, 11):
    import tomllib as toml_lib
else:
    import tomli as toml_lib

logger = logging.getLogger(__name__)


class ConfigFileLoader:
    """
    Loads config from the nearest pyproject.toml, walking up from ``start``.
    """

    @staticmethod
    def find_pyproject(start: Optional[Path] = None) -> Optional[Path]:
        current_path = (start or Path.cwd()).resolve()
        for candidate_dir in (current_path, *current_path.parents):
            config_file = candidate_dir / "pyproject.toml"
            if config_file.is_file():
                return config_file
        return None

    @staticmethod
    def load_config_from_fs(
        start: Optional[Path] = None,
    ) -> tuple[dict[str, object], dict[str, object]]:
        """Returns (config_dict, project_section); both empty when nothing usable is found."""
        empty: dict[str, object] = {}
        config_file = ConfigFileLoader.find_pyproject(start)
        if config_file is None:
            return (empty, empty)
        try:
            with config_file.open("rb") as f:
                data = toml_lib.load(f)
        except (OSError, toml_lib.TOMLDecodeError) as exc:
            logger.warning("Could not read %s: %s", config_file, exc)
            return (empty, empty)
        tool_section = data.get("tool", {}) or {}
        config_dict = tool_section.get(CONFIG_SECTION, {}) or {}
        project_section = data.get("project", {}) or {}
        return (dict(config_dict), dict(project_section))
