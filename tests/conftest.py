import logging
import pytest
from datetime import date
from pathlib import Path
from typer.testing import CliRunner

from countdown.infrastructure.storage.yaml_store import YamlEventStore


@pytest.fixture(scope="session")
def runner():
    """Provides a Typer CliRunner instance."""
    return CliRunner()


@pytest.fixture
def countdown_home(tmp_path: Path, monkeypatch):
    """Points the application at a private home directory.

    Also moves the cwd there so no stray .env file is picked up.
    """
    home = tmp_path / "countdown_home"
    home.mkdir()
    for key in ("COUNTDOWN_EVENTS_FILE", "COUNTDOWN_CONFIG_FILE", "COUNTDOWN_LOG_LEVEL",
                "COUNTDOWN_LOG_FILE", "COUNTDOWN_LOG_FORMAT"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("COUNTDOWN_HOME", str(home))
    monkeypatch.chdir(tmp_path)
    return home


@pytest.fixture
def store(tmp_path: Path) -> YamlEventStore:
    return YamlEventStore(tmp_path / "events.yaml")


@pytest.fixture
def today() -> date:
    return date(2030, 6, 1)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging replaces root handlers; put the originals back after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
