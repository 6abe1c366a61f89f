"""Binding registry: identifier -> Factory | Alias.

Identifiers are plain strings. Classes are keyed by their dotted import path
(``module.QualName``) so ``set(SomeClass, ...)`` and
``set("pkg.mod.SomeClass", ...)`` address the same binding.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Union


@dataclass(frozen=True)
class Factory:
    """Zero-argument producer, invoked on every lookup."""

    producer: Callable[[], Any]


@dataclass(frozen=True)
class Alias:
    """Points one identifier at another, usually interface -> implementation.

    ``target_class`` is kept when the alias was made from a class object, so
    classes that are not importable by their dotted path still resolve.
    """

    target: str
    target_class: type | None = field(default=None, compare=False)


Binding = Union[Factory, Alias]


def identifier_of(key: str | type) -> str:
    """Normalize a class or string into a registry identifier."""
    if isinstance(key, type):
        return f"{key.__module__}.{key.__qualname__}"
    if not isinstance(key, str):
        raise TypeError(f"Identifier must be a str or a class, got {type(key).__name__}")
    if not key:
        raise ValueError("Identifier must be a non-empty string")
    return key


def as_binding(value: Any) -> Binding:
    """Turn a ``set`` value into an explicit binding."""
    if isinstance(value, (Factory, Alias)):
        return value
    if isinstance(value, str):
        return Alias(identifier_of(value))
    if isinstance(value, type):
        return Alias(identifier_of(value), target_class=value)
    if callable(value):
        return Factory(value)
    raise TypeError(
        f"Cannot bind value of type {type(value).__name__!r}: "
        "expected a zero-argument callable, an identifier string or a class"
    )


class BindingRegistry:
    def __init__(self) -> None:
        self._bindings: dict[str, Binding] = {}

    def bind(self, identifier: str | type, binding: Binding) -> None:
        self._bindings[identifier_of(identifier)] = binding

    def set(self, identifier: str | type, value: Any) -> None:
        self.bind(identifier, as_binding(value))

    def has(self, identifier: str | type) -> bool:
        return identifier_of(identifier) in self._bindings

    def lookup(self, identifier: str | type) -> Binding | None:
        return self._bindings.get(identifier_of(identifier))

    def identifiers(self) -> list[str]:
        return list(self._bindings)

    def __contains__(self, identifier: object) -> bool:
        if not isinstance(identifier, (str, type)) or identifier == "":
            return False
        return self.has(identifier)

    def __len__(self) -> int:
        return len(self._bindings)
