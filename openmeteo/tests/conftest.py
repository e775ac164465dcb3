"""Shared test fixtures."""

import logging
from pathlib import Path

import pytest

from openmeteo.config.schema import AppConfig


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config file at a temp path and clear variables that leak in."""
    path = tmp_path / "openmeteo" / "config.yaml"
    monkeypatch.setenv("OPENMETEO_CONFIG", str(path))
    monkeypatch.delenv("OPENMETEO_API_KEY", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    return path


@pytest.fixture(autouse=True)
def reset_cli_logging():
    """Drop the stderr handler main() installs so it does not outlive the test."""
    yield
    logger = logging.getLogger("openmeteo")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def config_file(isolated_env: Path) -> Path:
    """Path of the (not yet created) config file used by the CLI."""
    return isolated_env


@pytest.fixture
def app_config() -> AppConfig:
    return AppConfig()
