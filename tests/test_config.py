"""Tests for configuration adapter."""

import logging
from pathlib import Path

import pytest

from transit_network.adapters.config import AppConfig


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's .env and environment out of configuration tests."""
    monkeypatch.chdir(tmp_path)
    for name in ("NETWORK_FILE", "FILE_ENCODING", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_config_loads_defaults() -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    config = AppConfig()

    assert config.network_file is None
    assert config.file_encoding == "utf-8"
    assert config.log_level == "INFO"
    assert config.logging_level() == logging.INFO


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("NETWORK_FILE", "network.txt")
    monkeypatch.setenv("FILE_ENCODING", "latin-1")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = AppConfig()

    assert config.network_file == "network.txt"
    assert config.file_encoding == "latin-1"
    assert config.log_level == "DEBUG"
    assert config.logging_level() == logging.DEBUG


def test_config_loads_from_dotenv(tmp_path: Path) -> None:
    """Given a .env file in the working directory, when loading config, then it is used."""
    (tmp_path / ".env").write_text("NETWORK_FILE=from_dotenv.txt\n", encoding="utf-8")

    assert AppConfig().network_file == "from_dotenv.txt"


def test_config_validates_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given an unknown log level, when loading config, then validation error is raised."""
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ValueError, match="log_level must be one of"):
        AppConfig()


def test_config_validates_file_encoding(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given an unknown encoding, when loading config, then validation error is raised."""
    monkeypatch.setenv("FILE_ENCODING", "no-such-codec")

    with pytest.raises(ValueError, match="unknown file_encoding"):
        AppConfig()
