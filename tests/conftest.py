"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from connector_auth import ConnectorAuthSettings

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep tests independent of the developer's shell and any local .env file."""
    monkeypatch.delenv("CONNECTOR_AUTH_FILE_PATH", raising=False)
    monkeypatch.delenv("CONNECTOR_AUTH_DUMMY_CONNECTOR", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def sample_auth_path():
    return FIXTURES_DIR / "sample_auth.toml"


@pytest.fixture
def write_auth_file(tmp_path):
    """Return a helper writing TOML content to a temporary auth file."""

    def _write(content: str, name: str = "auth.toml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def settings_for():
    def _settings(path: Path, dummy_connector: bool = False) -> ConnectorAuthSettings:
        return ConnectorAuthSettings(file_path=path, dummy_connector=dummy_connector)

    return _settings
