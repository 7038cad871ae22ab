"""Pytest fixtures for deckhand tests."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog

from deckhand.logging import configure_default_logging


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Restore default structlog and root logger state after each test.

    The CLI configures logging against the stream of the test that ran it.
    """
    yield
    structlog.reset_defaults()
    configure_default_logging()
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.WARNING)


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Provide a temporary project directory."""
    project = tmp_path / "project"
    project.mkdir()
    return project


@pytest.fixture
def mock_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Provide a mock home directory and set HOME env var."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove deckhand-related environment variables."""
    env_vars = [
        "DECKHAND_CONFIG_HOME",
        "XDG_CONFIG_HOME",
        "DECKHAND_API_KEY",
        "DECKHAND_API_URL",
    ]
    for var in env_vars:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def config_home(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, clean_env: None
) -> Path:
    """Provide a mock DECKHAND_CONFIG_HOME directory.

    Depends on clean_env to ensure env is clean before setting
    DECKHAND_CONFIG_HOME.
    """
    config = tmp_path / "deckhand-config"
    config.mkdir()
    monkeypatch.setenv("DECKHAND_CONFIG_HOME", str(config))
    return config
