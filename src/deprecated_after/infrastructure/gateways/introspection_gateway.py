"""Reflection over loaded modules - finds every declaration that may carry a marker."""

import inspect
import logging
from collections.abc import Iterator
from types import FunctionType, ModuleType
from typing import Annotated, get_args, get_origin

from deprecated_after.domain.entities import Declaration, DeclarationKind
from deprecated_after.domain.marker import MARKER_ATTRIBUTE

logger = logging.getLogger(__name__)

CONSTRUCTOR_NAMES = ("__init__", "__new__")

# Functions the compiler generates to evaluate annotations lazily.
GENERATED_MEMBERS = frozenset({"__annotate__", "__annotate_func__"})


class DeclarationInspector:
    """
    Enumerates declarations of a module in a fixed order.

    For the module: the module itself, its functions, its annotated
    attributes. Then, for every top-level class defined in the module: the
    class, its routines, its fields, its constructors. Only members defined
    directly on the owner are considered; inherited and imported objects are
    not. Nested classes are not visited.
    """

    def declarations(self, module: ModuleType) -> Iterator[Declaration]:
        module_name = module.__name__
        yield Declaration(module_name, DeclarationKind.UNIT, self.own_markers(module))
        namespace = vars(module)
        for attr_name, value in namespace.items():
            if attr_name in GENERATED_MEMBERS:
                continue
            if isinstance(value, FunctionType) and value.__module__ == module_name:
                yield Declaration(
                    f"{module_name}.{attr_name}", DeclarationKind.ROUTINE, self.own_markers(value))
        yield from self.annotated_fields(module, module_name)

        visited: set[int] = set()
        for value in list(namespace.values()):
            if not self.is_top_level_class(value, module_name) or id(value) in visited:
                continue
            visited.add(id(value))
            yield from self.class_declarations(value)

    @staticmethod
    def is_top_level_class(value: object, module_name: str) -> bool:
        """Classes defined at module level of ``module_name``; nested and local classes are excluded."""
        return (
            isinstance(value, type)
            and getattr(value, "__module__", None) == module_name
            and "." not in getattr(value, "__qualname__", ".")
        )

    def class_declarations(self, cls: type) -> Iterator[Declaration]:
        owner = f"{cls.__module__}.{cls.__qualname__}"
        yield Declaration(owner, DeclarationKind.UNIT, self.own_markers(cls))
        namespace = dict(vars(cls))

        constructors: list[Declaration] = []
        properties: list[Declaration] = []
        for attr_name, value in namespace.items():
            if attr_name in GENERATED_MEMBERS:
                continue
            target = self.routine_target(value)
            if target is not None:
                if attr_name in CONSTRUCTOR_NAMES:
                    constructors.append(
                        Declaration(owner, DeclarationKind.CONSTRUCTOR, self.own_markers(target)))
                else:
                    yield Declaration(
                        f"{owner}.{attr_name}", DeclarationKind.ROUTINE, self.own_markers(target))
            elif isinstance(value, property) and value.fget is not None:
                properties.append(
                    Declaration(f"{owner}.{attr_name}", DeclarationKind.FIELD, self.own_markers(value.fget)))

        yield from self.annotated_fields(cls, owner)
        yield from properties
        yield from constructors

    @staticmethod
    def routine_target(value: object) -> FunctionType | None:
        """The plain function behind a method, staticmethod or classmethod."""
        if isinstance(value, (staticmethod, classmethod)):
            value = value.__func__
        return value if isinstance(value, FunctionType) else None

    @staticmethod
    def own_markers(target: object) -> tuple[object, ...]:
        """Markers declared on ``target`` itself; a class does not inherit its bases' markers."""
        if isinstance(target, (type, ModuleType)):
            raw = vars(target).get(MARKER_ATTRIBUTE, ())
        else:
            raw = getattr(target, MARKER_ATTRIBUTE, ())
        if isinstance(raw, (tuple, list)):
            return tuple(raw)
        return (raw,)

    def annotated_fields(self, owner: object, owner_name: str) -> Iterator[Declaration]:
        """Fields declared as ``name: Annotated[T, DeprecatedAfter(...)]``."""
        for attr_name, annotation in self.own_annotations(owner).items():
            if get_origin(annotation) is not Annotated:
                continue
            metadata = tuple(get_args(annotation)[1:])
            yield Declaration(f"{owner_name}.{attr_name}", DeclarationKind.FIELD, metadata)

    @staticmethod
    def own_annotations(owner: object) -> dict[str, object]:
        """Evaluated annotations when possible; string annotations stay unevaluated otherwise."""
        try:
            return dict(inspect.get_annotations(owner, eval_str=True))
        except Exception as exc:
            logger.debug("Could not evaluate annotations of %r: %r", owner, exc)
        try:
            return dict(inspect.get_annotations(owner))
        except Exception as exc:
            logger.debug("Could not read annotations of %r: %r", owner, exc)
            return {}
