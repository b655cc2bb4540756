"""Settings — environment-driven configuration via pydantic-settings."""

import pytest
from pydantic import ValidationError

from continent_api.config import Settings, get_settings


def test_defaults(monkeypatch):
    for name in ("LOG_LEVEL", "LOG_FORMAT", "CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.log_level == "INFO"
    assert settings.log_format == "json"
    assert settings.cors_origins == ["http://localhost:5173"]


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("LOG_FORMAT", "text")
    monkeypatch.setenv("CORS_ORIGINS", '["https://maps.example.com"]')
    settings = Settings(_env_file=None)
    assert settings.log_level == "WARNING"
    assert settings.log_format == "text"
    assert settings.cors_origins == ["https://maps.example.com"]


def test_rejects_unknown_log_format(monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "xml")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
