from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    CONSTRUCTION_FAILED = "construction_failed"


class ContainerError(Exception):
    """Base class for every failure raised while producing an identifier."""

    kind: ErrorKind

    def __init__(self, message: str, identifier: str | None = None) -> None:
        super().__init__(message)
        self.identifier = identifier


class NotFoundException(ContainerError):
    """No binding exists and the identifier does not name a class."""

    kind = ErrorKind.NOT_FOUND


class ContainerException(ContainerError):
    """The identifier names a class, but it cannot be constructed."""

    kind = ErrorKind.CONSTRUCTION_FAILED


class CircularDependencyException(ContainerException):
    """A class depends on itself through its constructor parameters."""

    def __init__(self, chain: list[str]) -> None:
        super().__init__(
            f"Circular dependency detected: {' -> '.join(chain)}",
            identifier=chain[0],
        )
        self.chain = chain
