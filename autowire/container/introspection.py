"""Reflection behind the resolver: class lookup and constructor parameters.

The resolver only ever talks to ``TypeIntrospector``; ``ReflectionIntrospector``
is the runtime-backed implementation built on ``importlib``, ``inspect`` and
``typing.get_type_hints``.
"""

from __future__ import annotations

import importlib
import inspect
import types
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar, Union, get_origin, get_type_hints

from autowire.container.bindings import identifier_of
from autowire.container.errors import ContainerException

_UNION_ORIGINS = (Union, types.UnionType)
_SKIPPED_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


class ParameterKind(Enum):
    NO_TYPE = "no type"
    PRIMITIVE_TYPE = "primitive type"
    UNION_TYPE = "union type"
    NAMED_CLASS_TYPE = "named class type"


@dataclass(frozen=True)
class ParameterDescriptor:
    name: str
    kind: ParameterKind
    annotation: Any = None
    class_name: str | None = None
    keyword_only: bool = False


class TypeIntrospector(ABC):
    """What the resolver needs to know about classes."""

    @abstractmethod
    def find_class(self, identifier: str) -> type | None:
        """Return the class named by *identifier*, or None if there is none."""

    @abstractmethod
    def is_instantiable(self, cls: type) -> bool: ...

    @abstractmethod
    def has_constructor(self, cls: type) -> bool:
        """False when the class inherits ``object.__init__`` unchanged."""

    @abstractmethod
    def parameters(self, cls: type) -> list[ParameterDescriptor]:
        """Constructor parameters in declared order, without self/*args/**kwargs."""


class ReflectionIntrospector(TypeIntrospector):
    def find_class(self, identifier: str) -> type | None:
        parts = identifier.split(".")
        if len(parts) < 2 or not all(parts):
            return None
        # Longest importable module prefix wins; the rest are attribute hops
        # so nested classes (``mod.Outer.Inner``) resolve too.
        for split in range(len(parts) - 1, 0, -1):
            module_path = ".".join(parts[:split])
            try:
                obj: Any = importlib.import_module(module_path)
            except ImportError as exc:
                # Only a missing module on the path itself means "not here";
                # a module that exists but fails to import is broken.
                if isinstance(exc, ModuleNotFoundError) and _is_prefix(exc.name, module_path):
                    continue
                raise ContainerException(
                    f"Cannot import {module_path!r} while looking up {identifier!r}: {exc}",
                    identifier=identifier,
                ) from exc
            for attr in parts[split:]:
                obj = getattr(obj, attr, None)
                if obj is None:
                    return None
            return obj if isinstance(obj, type) else None
        return None

    def is_instantiable(self, cls: type) -> bool:
        if inspect.isabstract(cls):
            return False
        return not getattr(cls, "_is_protocol", False)

    def has_constructor(self, cls: type) -> bool:
        return cls.__init__ is not object.__init__

    def parameters(self, cls: type) -> list[ParameterDescriptor]:
        if not self.has_constructor(cls):
            return []
        try:
            hints = get_type_hints(cls.__init__)
        except Exception as exc:
            raise ContainerException(
                f"Cannot read type hints for {cls.__qualname__}.__init__: {exc}",
                identifier=identifier_of(cls),
            ) from exc
        hints.pop("return", None)

        params = list(inspect.signature(cls.__init__).parameters.values())[1:]
        return [
            _describe(param, hints.get(param.name))
            for param in params
            if param.kind not in _SKIPPED_KINDS
        ]


def classify(hint: Any) -> ParameterKind:
    """Classify a resolved annotation. ``None`` means no annotation at all."""
    if hint is None or hint is Any or isinstance(hint, TypeVar):
        return ParameterKind.NO_TYPE
    origin = get_origin(hint)
    if origin in _UNION_ORIGINS:
        return ParameterKind.UNION_TYPE
    if origin is not None:
        # list[int], Callable[..., X], type[X]
        return ParameterKind.PRIMITIVE_TYPE
    if not isinstance(hint, type):
        return ParameterKind.NO_TYPE
    if hint.__module__ == "builtins":
        return ParameterKind.PRIMITIVE_TYPE
    return ParameterKind.NAMED_CLASS_TYPE


def _is_prefix(missing: str | None, module_path: str) -> bool:
    """True when *missing* is *module_path* itself or one of its parent packages."""
    if not missing:
        return False
    return module_path == missing or module_path.startswith(missing + ".")


def _describe(param: inspect.Parameter, hint: Any) -> ParameterDescriptor:
    kind = classify(hint)
    return ParameterDescriptor(
        name=param.name,
        kind=kind,
        annotation=hint,
        class_name=identifier_of(hint) if kind is ParameterKind.NAMED_CLASS_TYPE else None,
        keyword_only=param.kind is inspect.Parameter.KEYWORD_ONLY,
    )
