"""Helpers for writing throwaway artifact trees."""

import itertools
import textwrap
from pathlib import Path

_counter = itertools.count()


def unique_package(prefix: str = "artifacts") -> str:
    """A package name no other test uses, so sys.modules never collides across tests."""
    return f"{prefix}_{next(_counter)}"


def write_tree(root: Path, files: dict[str, str]) -> Path:
    """Write ``{relative path: source}`` under ``root`` and return ``root``."""
    for relative, source in files.items():
        target = root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(textwrap.dedent(source), encoding="utf-8")
    return root
