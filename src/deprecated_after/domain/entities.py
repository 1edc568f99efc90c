from dataclasses import dataclass, field
from enum import Enum
from types import ModuleType
from typing import Union


class DeclarationKind(Enum):
    """Kinds of program elements that can carry a marker."""
    UNIT = "unit"
    ROUTINE = "routine"
    FIELD = "field"
    CONSTRUCTOR = "constructor"


CONSTRUCTOR_SUFFIX = ".<constructor>"
ROUTINE_SUFFIX = "()"


@dataclass(frozen=True)
class Declaration:
    """A named element discovered in a loaded module, with its raw markers."""
    qualified_name: str
    kind: DeclarationKind
    markers: tuple[object, ...] = ()

    @property
    def display_name(self) -> str:
        """Name used in violation messages. Constructors use their owner's name."""
        if self.kind is DeclarationKind.ROUTINE:
            return self.qualified_name + ROUTINE_SUFFIX
        if self.kind is DeclarationKind.CONSTRUCTOR:
            return self.qualified_name + CONSTRUCTOR_SUFFIX
        return self.qualified_name


@dataclass(frozen=True)
class Violation:
    """An element whose removal version has been reached."""
    element_name: str
    threshold_version: str
    reason: str = ""
    replacement: str = ""

    def render(self) -> str:
        message = f"{self.element_name} (deprecated after version {self.threshold_version})"
        if self.reason:
            message += f" - Reason: {self.reason}"
        if self.replacement:
            message += f" - Use: {self.replacement}"
        return message

    def __str__(self) -> str:
        return self.render()


class SkipReason(Enum):
    """Why a discovered artifact produced no declarations."""
    SYNTHETIC = "synthetic"
    UNLOADABLE = "unloadable"
    SHADOWED = "shadowed"
    DUPLICATE = "duplicate"


@dataclass(frozen=True)
class LoadedUnit:
    """An artifact that was imported successfully."""
    name: str
    path: str
    module: ModuleType


@dataclass(frozen=True)
class SkippedArtifact:
    """An artifact that was discovered but deliberately not inspected."""
    name: str
    path: str
    reason: SkipReason
    detail: str = ""

    def describe(self) -> str:
        label = self.name or self.path
        if self.detail:
            return f"{label} [{self.reason.value}]: {self.detail}"
        return f"{label} [{self.reason.value}]"


LoadOutcome = Union[LoadedUnit, SkippedArtifact]


@dataclass(frozen=True)
class ScanReport:
    """Everything one scan produced, in discovery order."""
    violations: list[Violation] = field(default_factory=list)
    skipped: list[SkippedArtifact] = field(default_factory=list)

    def has_violations(self) -> bool:
        return bool(self.violations)
