"""Tests for runtime settings loading and port selection."""

import pytest

from greeting_service.config import AppSettings, SettingsLoadError, config_load_settings


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Run each test without inherited settings variables or dotenv file."""

    monkeypatch.chdir(tmp_path)
    for variable_name in ("PORT", "HOST", "LOG_LEVEL"):
        monkeypatch.delenv(variable_name, raising=False)


def test_config_defaults_to_port_8080_when_port_is_unset() -> None:
    """Bind on the default port when PORT is not present.

    Raises:
        AssertionError: Raised when default address differs.
    """

    settings = config_load_settings()

    assert settings.port == "8080"
    assert settings.bind_address == ":8080"
    assert settings.listen_url == "http://localhost:8080"


def test_config_defaults_to_port_8080_when_port_is_empty(monkeypatch: pytest.MonkeyPatch) -> None:
    """Treat an empty PORT value like an unset one."""

    monkeypatch.setenv("PORT", "")

    assert config_load_settings().bind_address == ":8080"


def test_config_uses_port_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Override the default port with the PORT variable."""

    monkeypatch.setenv("PORT", "9090")

    settings = config_load_settings()

    assert settings.bind_address == ":9090"
    assert settings.listen_url == "http://localhost:9090"


def test_config_passes_non_numeric_port_through(monkeypatch: pytest.MonkeyPatch) -> None:
    """Leave port validation to the listener."""

    monkeypatch.setenv("PORT", "http")

    assert config_load_settings().bind_address == ":http"


def test_config_reads_port_from_dotenv(tmp_path) -> None:
    """Load PORT from a `.env` file in the working directory."""

    (tmp_path / ".env").write_text("PORT=7070\n", encoding="utf-8")

    assert config_load_settings().port == "7070"


def test_config_normalizes_log_level() -> None:
    """Accept log levels case-insensitively."""

    assert AppSettings(log_level=" WARNING ").log_level == "warning"


def test_config_rejects_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Raise SettingsLoadError for an unsupported log level.

    Raises:
        AssertionError: Raised when invalid settings are accepted.
    """

    monkeypatch.setenv("LOG_LEVEL", "verbose")

    with pytest.raises(SettingsLoadError, match="Startup configuration validation failed"):
        config_load_settings()
