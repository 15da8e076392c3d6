import logging
import os

import pytest
from typer.testing import CliRunner

from casemenu.domain.models.document import Document
from casemenu.infrastructure.cli.display import ConsoleDisplay
from casemenu.infrastructure.config import settings


@pytest.fixture(scope="session")
def runner():
    """Provides a Typer CliRunner instance."""
    return CliRunner()


@pytest.fixture
def document():
    """A fresh receiver holding the text used throughout the tests."""
    return Document("great expectations")


@pytest.fixture
def mock_console_display(mocker):
    """Mocks the ConsoleDisplay built by the composition root in main.py."""
    mock = mocker.MagicMock(spec=ConsoleDisplay)
    mocker.patch('casemenu.main.ConsoleDisplay', return_value=mock)
    return mock


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keeps every test away from the user's config file, .env files and CASEMENU_* variables."""
    for name in list(os.environ):
        if name.startswith(settings.ENV_PREFIX):
            monkeypatch.delenv(name)
    monkeypatch.setattr(settings, "DEFAULT_CONFIG_FILE", tmp_path / "missing-config.yaml")
    monkeypatch.chdir(tmp_path)
    settings.reset_configuration()
    yield
    settings.reset_configuration()
    # .env loading writes straight into os.environ
    for name in list(os.environ):
        if name.startswith(settings.ENV_PREFIX):
            del os.environ[name]


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undoes setup_logging calls made by the composition root or the tests."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield root_logger
    # pytest manages its own capture handlers per test phase
    for handler in root_logger.handlers[:]:
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)
