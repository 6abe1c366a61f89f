from __future__ import annotations

from autowire.services.logger.interface import LEVELS, LoggingInterface
from autowire.services.logger.memory_logger import MemoryLogger
from autowire.services.logger.noop_logger import NoopLogger
from autowire.services.logger.pretty_logger import PrettyLogger


class LoggerFactory:
    """Creates and caches logger instances by implementation name."""

    _available = ("pretty", "memory", "noop")

    def __init__(self, default_impl: str = "noop", level: str = "INFO") -> None:
        self._check(default_impl)
        if level.upper() not in LEVELS:
            raise ValueError(f"Unknown log level: '{level}' (available: {', '.join(LEVELS)})")
        self._default_impl = default_impl
        self._level = level.upper()
        self._instances: dict[str, LoggingInterface] = {}

    def create(self, impl_name: str | None = None) -> LoggingInterface:
        """Return a logger instance, creating one if not yet cached."""
        name = impl_name or self._default_impl
        if name not in self._instances:
            self._check(name)
            self._instances[name] = self._build(name)
        return self._instances[name]

    def _build(self, name: str) -> LoggingInterface:
        match name:
            case "pretty":
                return PrettyLogger(level=self._level)
            case "memory":
                return MemoryLogger()
            case _:
                return NoopLogger()

    def _check(self, name: str) -> None:
        if name not in self._available:
            raise ValueError(
                f"Unknown logger implementation: '{name}' "
                f"(available: {', '.join(self._available)})"
            )
