"""Scoped module loader - imports units from one artifact root and cleans up afterwards."""

import importlib
import logging
import os
import sys
import threading
from collections import Counter
from pathlib import Path
from types import ModuleType, TracebackType
from typing import Optional

from deprecated_after.domain.entities import LoadedUnit, LoadOutcome, SkippedArtifact, SkipReason
from deprecated_after.domain.errors import ScanInfrastructureError

logger = logging.getLogger(__name__)


class _SharedImportState:
    """
    Interpreter-wide settings owned jointly by every active loader.

    ``sys.dont_write_bytecode`` is saved by the first loader to enter and
    restored by the last one to exit. Modules imported from a root are
    evicted only when no loader for that root is active any more, measured
    against the ``sys.modules`` snapshot taken when the first of them entered.
    """

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self.depth = 0
        self.saved_dont_write_bytecode = False
        self.roots: Counter[str] = Counter()
        self.snapshots: dict[str, set[str]] = {}


_SHARED = _SharedImportState()


class ScopedModuleLoader:
    """
    Import machinery rooted at ``root_dir`` and chained to the ambient
    ``sys.path``.

    The root is placed first on ``sys.path`` for the lifetime of the context.
    Names already imported by the host process resolve to the host's module
    and are reported as shadowed. On exit every module imported from the
    root is evicted from ``sys.modules`` so the next scan starts fresh, and
    bytecode writing stays disabled so the artifact tree is never modified.
    Loaders may overlap, in one thread or several; the interpreter state is
    restored only when the last of them exits.
    """

    def __init__(self, root_dir: str) -> None:
        self.root = Path(root_dir).resolve()
        self._root_entry = str(self.root)
        self._active = False

    def __enter__(self) -> "ScopedModuleLoader":
        if not self.root.is_dir():
            raise ScanInfrastructureError(f"Artifact root {self.root} is not a directory")
        if not os.access(self.root, os.R_OK | os.X_OK):
            raise ScanInfrastructureError(f"Artifact root {self.root} is not readable")
        with _SHARED.lock:
            if _SHARED.depth == 0:
                _SHARED.saved_dont_write_bytecode = sys.dont_write_bytecode
                sys.dont_write_bytecode = True
            _SHARED.depth += 1
            if _SHARED.roots[self._root_entry] == 0:
                _SHARED.snapshots[self._root_entry] = set(sys.modules)
            _SHARED.roots[self._root_entry] += 1
            sys.path.insert(0, self._root_entry)
            importlib.invalidate_caches()
            self._active = True
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        with _SHARED.lock:
            if not self._active:
                return
            self._active = False
            _SHARED.roots[self._root_entry] -= 1
            if _SHARED.roots[self._root_entry] == 0:
                del _SHARED.roots[self._root_entry]
                self._evict(_SHARED.snapshots.pop(self._root_entry, set()))
            try:
                sys.path.remove(self._root_entry)
            except ValueError:
                logger.debug("Artifact root %s was already removed from sys.path", self._root_entry)
            if self._root_entry not in _SHARED.roots:
                sys.path_importer_cache.pop(self._root_entry, None)
            _SHARED.depth -= 1
            if _SHARED.depth == 0:
                sys.dont_write_bytecode = _SHARED.saved_dont_write_bytecode
            importlib.invalidate_caches()

    def _evict(self, modules_before: set[str]) -> None:
        # Runs while the root is still on sys.path: namespace package paths are recomputed from it.
        for name in set(sys.modules) - modules_before:
            module = sys.modules.get(name)
            if module is not None and self.originates_under_root(module):
                del sys.modules[name]

    def load(self, name: str, path: str) -> LoadOutcome:
        """Import ``name``. Any failure becomes a SkippedArtifact, never an exception."""
        if not self._active:
            raise ScanInfrastructureError("ScopedModuleLoader used outside its context")
        try:
            module = importlib.import_module(name)
        except Exception as exc:  # best-effort: the unit may need its original build context
            logger.debug("Could not load %s from %s: %r", name, path, exc)
            return SkippedArtifact(name, path, SkipReason.UNLOADABLE, f"{type(exc).__name__}: {exc}")
        if not self.originates_under_root(module):
            return SkippedArtifact(
                name, path, SkipReason.SHADOWED,
                f"resolved to {getattr(module, '__file__', None) or 'a built-in module'}")
        return LoadedUnit(name, path, module)

    def originates_under_root(self, module: ModuleType) -> bool:
        """True when the module's file, or any of its package paths, lies under the root."""
        locations: list[str] = []
        module_file = getattr(module, "__file__", None)
        if isinstance(module_file, str):
            locations.append(module_file)
        package_path = getattr(module, "__path__", None)
        if package_path is not None:
            try:
                locations.extend(str(p) for p in package_path)
            except TypeError:
                logger.debug("Unreadable __path__ on %s", getattr(module, "__name__", module))
        return any(self._is_under_root(location) for location in locations)

    def _is_under_root(self, location: str) -> bool:
        try:
            return Path(location).resolve().is_relative_to(self.root)
        except (OSError, ValueError):
            return False
