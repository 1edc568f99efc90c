"""Defaults shared by configuration, scanner and orchestration."""

# Version reported when the project does not declare one; scanning is skipped.
UNSPECIFIED_VERSION: str = "unspecified"

DEFAULT_ARTIFACT_ROOT: str = "build/lib"

DEFAULT_UNIT_SUFFIXES: tuple[str, ...] = (".py", ".pyc")

# Compiler-generated directories that never hold importable units.
SYNTHETIC_DIRECTORIES: frozenset[str] = frozenset({"__pycache__"})

PACKAGE_INIT_STEM: str = "__init__"

CONFIG_SECTION: str = "deprecated-after"
