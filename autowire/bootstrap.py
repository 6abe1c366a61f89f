"""Builds a ready-to-use container from environment settings."""

from __future__ import annotations

from pathlib import Path

from autowire.config.context import ContainerSettings
from autowire.config.env_loader import load_bindings_file, load_env_file
from autowire.container.bindings import Alias
from autowire.container.container import Container
from autowire.services.logger.factory import LoggerFactory
from autowire.services.logger.interface import LoggingInterface


def build_container(
    overrides: dict[str, str] | None = None,
    env_name: str | None = None,
    project_root: Path | None = None,
) -> Container:
    """Create a container wired with settings, logger and file-based aliases.

    Values from ``.env/<env_name>.env`` are lower priority than *overrides*.
    """
    env_overrides: dict[str, str] = {}
    if env_name:
        env_overrides.update(load_env_file(env_name, project_root=project_root))
    if overrides:
        env_overrides.update(overrides)

    settings = ContainerSettings(overrides=env_overrides)
    logger = LoggerFactory(default_impl=settings.log_impl, level=settings.log_level).create()
    container = Container(logger=logger)

    # Register the container itself so classes can depend on it
    container.instance(Container, container)
    container.instance(ContainerSettings, settings)
    container.instance(LoggingInterface, logger)

    if settings.bindings_file:
        bindings_path = Path(settings.bindings_file)
        if not bindings_path.is_absolute() and project_root is not None:
            bindings_path = project_root / bindings_path
        aliases = load_bindings_file(bindings_path)
        for identifier, target in aliases.items():
            container.bind(identifier, Alias(target))
        logger.info("Loaded bindings file", path=str(bindings_path), count=len(aliases))

    return container
