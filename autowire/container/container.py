from __future__ import annotations

from typing import Any, TypeVar, overload

from autowire.container.bindings import Binding, BindingRegistry, Factory, identifier_of
from autowire.container.errors import ContainerError
from autowire.container.introspection import ReflectionIntrospector, TypeIntrospector
from autowire.container.resolver import Resolver
from autowire.services.logger.interface import LoggingInterface
from autowire.services.logger.noop_logger import NoopLogger

T = TypeVar("T")


class Container:
    """Autowiring DI container.

    Bindings map identifiers (strings, or classes keyed by their dotted path)
    to a factory or an alias. ``resolve`` consults bindings first and falls
    back to constructing the class, injecting each constructor parameter by
    its type hint. ``get`` never falls back to construction.
    """

    def __init__(
        self,
        logger: LoggingInterface | None = None,
        introspector: TypeIntrospector | None = None,
    ) -> None:
        self._log = logger or NoopLogger()
        self._registry = BindingRegistry()
        self._resolver = Resolver(
            self._registry, introspector or ReflectionIntrospector(), self._log
        )

    def set(self, identifier: str | type, value: Any) -> None:
        """Bind *identifier* to a zero-argument callable or to another identifier."""
        self._registry.set(identifier, value)
        self._log.debug(
            "Binding registered",
            identifier=identifier_of(identifier),
            binding=repr(self._registry.lookup(identifier)),
        )

    def bind(self, identifier: str | type, binding: Binding) -> None:
        """Register an explicit ``Factory`` or ``Alias``."""
        self._registry.bind(identifier, binding)
        self._log.debug(
            "Binding registered", identifier=identifier_of(identifier), binding=repr(binding)
        )

    def instance(self, identifier: str | type, obj: Any) -> None:
        """Register a pre-built object, returned as is on every lookup."""
        self.bind(identifier, Factory(lambda: obj))

    def has(self, identifier: str | type) -> bool:
        return self._registry.has(identifier)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._registry

    @overload
    def get(self, identifier: type[T]) -> T: ...

    @overload
    def get(self, identifier: str) -> Any: ...

    def get(self, identifier: str | type) -> Any:
        try:
            return self._resolver.get(identifier)
        except ContainerError as exc:
            self._log.error("Lookup failed", identifier=identifier_of(identifier), error=str(exc))
            raise

    @overload
    def resolve(self, identifier: type[T]) -> T: ...

    @overload
    def resolve(self, identifier: str) -> Any: ...

    def resolve(self, identifier: str | type) -> Any:
        """Instantiate *identifier*, recursively satisfying its constructor."""
        try:
            return self._resolver.resolve(identifier)
        except ContainerError as exc:
            self._log.error(
                "Resolution failed", identifier=identifier_of(identifier), error=str(exc)
            )
            raise

    @property
    def identifiers(self) -> list[str]:
        return self._registry.identifiers()
