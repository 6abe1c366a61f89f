"""Turns identifiers into instances: bindings first, autowiring second."""

from __future__ import annotations

from typing import Any

from autowire.container.bindings import Alias, Binding, BindingRegistry, Factory, identifier_of
from autowire.container.errors import (
    CircularDependencyException,
    ContainerException,
    NotFoundException,
)
from autowire.container.introspection import ParameterKind, TypeIntrospector
from autowire.services.logger.interface import LoggingInterface

_UNRESOLVABLE = {
    ParameterKind.NO_TYPE: "it has no usable type hint",
    ParameterKind.UNION_TYPE: "union types are ambiguous",
    ParameterKind.PRIMITIVE_TYPE: "builtin and generic types are never guessed",
}


class Resolver:
    """Recursive resolution over a binding registry and a type introspector.

    The chain of identifiers under construction is passed down each call
    rather than stored, so one resolver can serve overlapping calls.
    """

    def __init__(
        self,
        registry: BindingRegistry,
        introspector: TypeIntrospector,
        logger: LoggingInterface,
    ) -> None:
        self._registry = registry
        self._introspector = introspector
        self._log = logger

    def resolve(self, key: str | type) -> Any:
        return self._resolve(key, [])

    def get(self, key: str | type) -> Any:
        """Binding-only lookup: follows aliases, never autowires."""
        seen: list[str] = []
        while True:
            identifier = identifier_of(key)
            if identifier in seen:
                raise CircularDependencyException([*seen, identifier])
            binding = self._registry.lookup(identifier)
            if binding is None:
                raise NotFoundException(f"No binding registered for {identifier!r}", identifier)
            if isinstance(binding, Factory):
                self._log.debug("Calling factory", identifier=identifier)
                return binding.producer()
            seen.append(identifier)
            key = binding.target

    def _resolve(self, key: str | type, chain: list[str]) -> Any:
        identifier = identifier_of(key)
        if identifier in chain:
            raise CircularDependencyException([*chain, identifier])

        binding = self._registry.lookup(identifier)
        if binding is not None:
            return self._from_binding(identifier, binding, chain)

        cls = key if isinstance(key, type) else self._introspector.find_class(identifier)
        if cls is None:
            raise NotFoundException(
                f"No binding registered for {identifier!r} and no such class exists",
                identifier,
            )
        return self._autowire(identifier, cls, [*chain, identifier])

    def _from_binding(self, identifier: str, binding: Binding, chain: list[str]) -> Any:
        match binding:
            case Factory(producer=producer):
                self._log.debug("Calling factory", identifier=identifier)
                return producer()
            case Alias(target=target, target_class=target_class):
                self._log.debug("Following alias", identifier=identifier, target=target)
                return self._resolve(target_class or target, [*chain, identifier])

    def _autowire(self, identifier: str, cls: type, chain: list[str]) -> Any:
        if not self._introspector.is_instantiable(cls):
            raise ContainerException(
                f"Class {identifier!r} is not instantiable (abstract or protocol)", identifier
            )

        params = self._introspector.parameters(cls)
        self._log.debug(
            "Autowiring class", identifier=identifier, parameters=[p.name for p in params]
        )

        args: list[Any] = []
        kwargs: dict[str, Any] = {}
        for param in params:
            reason = _UNRESOLVABLE.get(param.kind)
            if reason is not None:
                raise ContainerException(
                    f"Cannot resolve parameter '{param.name}' of {identifier}: {reason}",
                    identifier,
                )
            value = self._resolve(param.annotation, chain)
            if param.keyword_only:
                kwargs[param.name] = value
            else:
                args.append(value)

        # Dependencies are already resolved here, so anything raised below
        # comes from the constructor body itself.
        try:
            return cls(*args, **kwargs)
        except Exception as exc:
            raise ContainerException(
                f"Failed to instantiate {identifier!r}: {exc}", identifier
            ) from exc
