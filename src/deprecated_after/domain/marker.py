"""The DeprecatedAfter marker and the decorator that attaches it to declarations."""

from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")

MARKER_ATTRIBUTE = "__deprecated_after__"


@dataclass(frozen=True)
class DeprecatedAfter:
    """
    Indicates that the marked element is deprecated and must be removed once
    the project reaches ``threshold``.

    Use it directly as ``Annotated`` metadata for attributes, or through
    :func:`deprecated_after` for modules, classes, functions and methods.
    """

    threshold: str
    reason: str = ""
    replacement: str = ""

    @classmethod
    def qualified_type_name(cls) -> str:
        """Fully-qualified name used to recognise markers at scan time."""
        return f"{cls.__module__}.{cls.__qualname__}"


MARKER_TYPE_NAME = DeprecatedAfter.qualified_type_name()


class MarkerAttachment:
    """Stores markers on targets. No top-level mutable state."""

    @staticmethod
    def unwrap(target: object) -> object:
        """Return the object that actually carries the marker tuple."""
        if isinstance(target, (staticmethod, classmethod)):
            return target.__func__
        if isinstance(target, property):
            return target.fget
        return target

    @staticmethod
    def attach(target: T, marker: DeprecatedAfter) -> T:
        """Append ``marker`` to the target's own marker tuple and return the target."""
        holder = MarkerAttachment.unwrap(target)
        if holder is None:
            raise TypeError("Cannot mark a property without a getter")
        if isinstance(holder, type):
            existing = vars(holder).get(MARKER_ATTRIBUTE, ())
        else:
            existing = getattr(holder, MARKER_ATTRIBUTE, ())
        setattr(holder, MARKER_ATTRIBUTE, (*tuple(existing), marker))
        return target


def deprecated_after(threshold: str, reason: str = "", replacement: str = ""):
    """
    Mark a class, function, method, property or constructor as expiring after
    ``threshold``.

    Decorating the same declaration twice records two markers.
    """
    marker = DeprecatedAfter(threshold, reason, replacement)

    def decorate(target: T) -> T:
        return MarkerAttachment.attach(target, marker)

    return decorate
