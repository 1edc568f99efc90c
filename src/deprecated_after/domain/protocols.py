from types import ModuleType, TracebackType
from typing import TYPE_CHECKING, Iterable, Optional, Protocol

if TYPE_CHECKING:
    from deprecated_after.domain.entities import Declaration, LoadOutcome


class TelemetryPort(Protocol):
    """User-facing progress output."""

    def step(self, message: str) -> None:
        ...

    def warning(self, message: str) -> None:
        ...

    def error(self, message: str) -> None:
        ...


class ModuleLoaderProtocol(Protocol):
    """A loader scoped to one artifact root. Acquired once per scan."""

    def __enter__(self) -> "ModuleLoaderProtocol":
        ...

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        ...

    def load(self, name: str, path: str) -> "LoadOutcome":
        """Import ``name`` (found at ``path``) and report success or a typed skip."""
        ...


class ModuleLoaderFactory(Protocol):
    def __call__(self, root_dir: str) -> ModuleLoaderProtocol:
        ...


class DeclarationInspectorProtocol(Protocol):
    """Reflection over a loaded module."""

    def declarations(self, module: ModuleType) -> Iterable["Declaration"]:
        """Yield the module, its members, and each top-level class with its members."""
        ...
