"""Unit tests for src/core/config.py"""

import pytest

from src.core.config import Settings, get_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ["HOST", "PORT", "ALLOWED_ORIGINS", "STATIC_DIR", "GAME_STORE", "DATABASE_URL", "LOG_LEVEL", "DEBUG"]:
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()
    assert settings == Settings()
    assert settings.port == 3002
    assert settings.allowed_origins == ("*",)
    assert settings.game_store == "memory"
    assert settings.database_url == "sqlite:///:memory:"
    assert not settings.debug


def test_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://localhost:5173, http://127.0.0.1:5173")
    monkeypatch.setenv("GAME_STORE", "SQL")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("DEBUG", "true")

    settings = Settings.from_env()
    assert settings.port == 8080
    assert settings.allowed_origins == ("http://localhost:5173", "http://127.0.0.1:5173")
    assert settings.game_store == "sql"
    assert settings.log_level == "DEBUG"
    assert settings.debug


def test_unknown_game_store() -> None:
    with pytest.raises(ValueError):
        Settings(game_store="redis")


def test_settings_are_cached() -> None:
    assert get_settings() is get_settings()
