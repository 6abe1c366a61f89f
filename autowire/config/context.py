import os

_PREFIX = "AUTOWIRE_"


class ContainerSettings:
    """Environment-based container settings with optional overrides.

    Keys are read with the ``AUTOWIRE_`` prefix, e.g. ``AUTOWIRE_LOG_IMPL``.
    """

    def __init__(self, overrides: dict[str, str] | None = None) -> None:
        self._env = dict(os.environ)
        if overrides:
            self._env.update(overrides)

    def get(self, key: str, default: str = "") -> str:
        return self._env.get(_PREFIX + key, default)

    @property
    def log_impl(self) -> str:
        return self.get("LOG_IMPL", "noop")

    @property
    def log_level(self) -> str:
        return self.get("LOG_LEVEL", "INFO").upper()

    @property
    def bindings_file(self) -> str | None:
        return self.get("BINDINGS_FILE") or None

    def __repr__(self) -> str:
        return (
            f"ContainerSettings(log_impl={self.log_impl!r}, log_level={self.log_level!r}, "
            f"bindings_file={self.bindings_file!r})"
        )
