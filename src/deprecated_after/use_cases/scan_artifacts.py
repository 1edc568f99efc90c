"""Artifact Scanner: walk a build tree, load every unit, collect expired markers."""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from deprecated_after.domain.constants import (
    DEFAULT_UNIT_SUFFIXES,
    PACKAGE_INIT_STEM,
    SYNTHETIC_DIRECTORIES,
)
from deprecated_after.domain.entities import (
    LoadedUnit,
    ScanReport,
    SkippedArtifact,
    SkipReason,
    Violation,
)
from deprecated_after.domain.protocols import (
    DeclarationInspectorProtocol,
    ModuleLoaderFactory,
    ModuleLoaderProtocol,
)
from deprecated_after.domain.version import VersionComparator
from deprecated_after.use_cases.extract_metadata import MetadataExtractor

logger = logging.getLogger(__name__)


class ArtifactScanner:
    """
    Full, read-only re-scan of an artifact root.

    Discovery is depth-first: in every directory the subdirectories are
    visited first, then the files, each group in name order. The dotted
    prefix grows by one segment per directory. Stems that are not Python
    identifiers (``Outer$Inner``, ``mod.cpython-312``) are synthetic and
    skipped, as are nested classes further down in the inspector; markers
    on nested units are therefore never reported.
    """

    def __init__(
        self,
        extractor: MetadataExtractor,
        inspector: DeclarationInspectorProtocol,
        loader_factory: ModuleLoaderFactory,
        unit_suffixes: tuple[str, ...] = DEFAULT_UNIT_SUFFIXES,
    ) -> None:
        self._extractor = extractor
        self._inspector = inspector
        self._loader_factory = loader_factory
        self._unit_suffixes = unit_suffixes

    def scan(self, root_dir: str | os.PathLike[str], current_version: str) -> list[Violation]:
        """Return every violation under ``root_dir`` in discovery order."""
        return self.scan_report(root_dir, current_version).violations

    def scan_report(self, root_dir: str | os.PathLike[str], current_version: str) -> ScanReport:
        """
        Like scan(), but also returns the artifacts that were skipped and why.

        Raises MalformedVersionError when ``current_version`` itself is
        malformed: no comparison could be trusted, so nothing is scanned.
        """
        VersionComparator.parse(current_version)
        root = Path(root_dir)
        report = ScanReport()
        if not root.exists():
            logger.info("Artifact root %s does not exist; nothing to scan.", root)
            return report

        seen: set[str] = set()
        with self._loader_factory(str(root)) as loader:
            for name, path in self._discover(root, "", set()):
                outcome = self._load(loader, name, path, seen)
                if isinstance(outcome, SkippedArtifact):
                    logger.debug("Skipped %s", outcome.describe())
                    report.skipped.append(outcome)
                    continue
                report.violations.extend(self._check_unit(outcome, current_version))
        logger.info(
            "Scanned %s: %d violation(s), %d artifact(s) skipped.",
            root, len(report.violations), len(report.skipped))
        return report

    def _discover(
        self, directory: Path, prefix: str, visited: set[Path]
    ) -> Iterator[tuple[str, Path]]:
        """Yield (qualified name, path) for each candidate unit; name is "" for synthetic ones."""
        resolved = directory.resolve()
        if resolved in visited:
            logger.debug("Skipping %s: already visited as %s", directory, resolved)
            return
        visited.add(resolved)
        try:
            entries = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as exc:
            logger.warning("Cannot list %s: %s", directory, exc)
            return
        for entry in entries:
            if entry.is_dir() and entry.name not in SYNTHETIC_DIRECTORIES:
                yield from self._discover(entry, self._join(prefix, entry.name), visited)
        for entry in entries:
            if not entry.is_file() or entry.suffix not in self._unit_suffixes:
                continue
            yield self._qualified_name(prefix, entry.stem), entry

    @staticmethod
    def _join(prefix: str, segment: str) -> str:
        return f"{prefix}.{segment}" if prefix else segment

    @staticmethod
    def _qualified_name(prefix: str, stem: str) -> str:
        if not stem.isidentifier():
            return ""
        if stem == PACKAGE_INIT_STEM:
            return prefix
        return ArtifactScanner._join(prefix, stem)

    @staticmethod
    def _load(
        loader: ModuleLoaderProtocol, name: str, path: Path, seen: set[str]
    ) -> LoadedUnit | SkippedArtifact:
        if not name or not all(part.isidentifier() for part in name.split(".")):
            return SkippedArtifact(name, str(path), SkipReason.SYNTHETIC)
        if name in seen:
            return SkippedArtifact(name, str(path), SkipReason.DUPLICATE)
        seen.add(name)
        return loader.load(name, str(path))

    def _check_unit(self, unit: LoadedUnit, current_version: str) -> list[Violation]:
        violations: list[Violation] = []
        for declaration in self._inspector.declarations(unit.module):
            violations.extend(
                self._extractor.extract(
                    declaration.markers, declaration.display_name, current_version)
            )
        return violations
