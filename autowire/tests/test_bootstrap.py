from pathlib import Path

import pytest

from autowire.bootstrap import build_container
from autowire.config.context import ContainerSettings
from autowire.container.container import Container
from autowire.container.errors import NotFoundException
from autowire.container.tests.fixtures import (
    MODULE,
    InvoiceService,
    PaymentGatewayInterface,
    PaymentGatewayService,
)
from autowire.services.logger.interface import LoggingInterface
from autowire.services.logger.memory_logger import MemoryLogger


def _memory_container(**overrides: str) -> Container:
    return build_container(overrides={"AUTOWIRE_LOG_IMPL": "memory", **overrides})


def test_registers_itself_and_settings():
    container = _memory_container()
    assert container.get(Container) is container
    assert isinstance(container.get(ContainerSettings), ContainerSettings)
    assert isinstance(container.get(LoggingInterface), MemoryLogger)


def test_classes_can_depend_on_the_container():
    class Dispatcher:
        def __init__(self, container: Container) -> None:
            self.container = container

    container = _memory_container()
    assert container.resolve(Dispatcher).container is container


def test_without_bindings_file_interfaces_stay_unbound():
    container = _memory_container()
    assert not container.has(PaymentGatewayInterface)


def test_loads_aliases_from_bindings_file(tmp_path: Path):
    path = tmp_path / "bindings.env"
    path.write_text(f"{MODULE}.PaymentGatewayInterface={MODULE}.PaymentGatewayService\n")

    container = _memory_container(AUTOWIRE_BINDINGS_FILE=str(path))

    assert container.has(PaymentGatewayInterface)
    invoice = container.resolve(InvoiceService)
    assert isinstance(invoice.gateway, PaymentGatewayService)
    logger = container.get(LoggingInterface)
    assert "Loaded bindings file" in logger.messages


def test_relative_bindings_file_uses_project_root(tmp_path: Path):
    (tmp_path / "bindings.env").write_text("mailer=missing.Mailer\n")
    container = build_container(
        overrides={"AUTOWIRE_LOG_IMPL": "memory", "AUTOWIRE_BINDINGS_FILE": "bindings.env"},
        project_root=tmp_path,
    )
    with pytest.raises(NotFoundException, match="missing.Mailer"):
        container.resolve("mailer")


def test_env_file_is_lower_priority_than_overrides(tmp_path: Path):
    env_dir = tmp_path / ".env"
    env_dir.mkdir()
    (env_dir / "test.env").write_text("AUTOWIRE_LOG_IMPL=pretty\nAUTOWIRE_LOG_LEVEL=ERROR\n")

    container = build_container(
        overrides={"AUTOWIRE_LOG_IMPL": "memory"}, env_name="test", project_root=tmp_path
    )

    settings = container.get(ContainerSettings)
    assert settings.log_impl == "memory"
    assert settings.log_level == "ERROR"


def test_invalid_log_level_rejected_with_default_logger():
    with pytest.raises(ValueError, match="Unknown log level"):
        build_container(overrides={"AUTOWIRE_LOG_IMPL": "noop", "AUTOWIRE_LOG_LEVEL": "bogus"})


def test_missing_bindings_file_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        _memory_container(AUTOWIRE_BINDINGS_FILE=str(tmp_path / "missing.env"))
