import tempfile
import unittest
from pathlib import Path

from deprecated_after.infrastructure.config_file_loader import ConfigFileLoader


class TestConfigFileLoader(unittest.TestCase):

    def setUp(self) -> None:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.root = Path(tmp.name)

    def test_reads_tool_and_project_sections_from_parent(self) -> None:
        (self.root / "pyproject.toml").write_text(
            '[project]\nname = "demo"\nversion = "1.4.0"\n\n'
            '[tool.deprecated-after]\nartifact_root = "out"\n',
            encoding="utf-8",
        )
        nested = self.root / "src" / "demo"
        nested.mkdir(parents=True)
        config, project = ConfigFileLoader.load_config_from_fs(nested)
        self.assertEqual(config, {"artifact_root": "out"})
        self.assertEqual(project["version"], "1.4.0")

    def test_missing_section_gives_empty_config(self) -> None:
        (self.root / "pyproject.toml").write_text('[project]\nname = "demo"\n', encoding="utf-8")
        config, project = ConfigFileLoader.load_config_from_fs(self.root)
        self.assertEqual(config, {})
        self.assertEqual(project, {"name": "demo"})

    def test_invalid_toml_is_treated_as_missing(self) -> None:
        (self.root / "pyproject.toml").write_text("[project\n", encoding="utf-8")
        self.assertEqual(ConfigFileLoader.load_config_from_fs(self.root), ({}, {}))

    def test_find_pyproject_prefers_nearest(self) -> None:
        (self.root / "pyproject.toml").write_text("", encoding="utf-8")
        inner = self.root / "inner"
        inner.mkdir()
        (inner / "pyproject.toml").write_text("", encoding="utf-8")
        self.assertEqual(ConfigFileLoader.find_pyproject(inner), (inner / "pyproject.toml").resolve())
