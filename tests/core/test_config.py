"""Unit tests for src/core/config.py"""

import pytest

from src.core.config import DEFAULT_DATABASE_URL, Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("OTHELLO_DATABASE_URL", "OTHELLO_LOG_LEVEL", "OTHELLO_SQL_ECHO"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings.from_env()
    assert settings == Settings()
    assert settings.database_url == DEFAULT_DATABASE_URL
    assert settings.log_level == "INFO"
    assert not settings.sql_echo


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OTHELLO_DATABASE_URL", "sqlite:///:memory:")
    monkeypatch.setenv("OTHELLO_LOG_LEVEL", "debug")
    monkeypatch.setenv("OTHELLO_SQL_ECHO", "true")
    settings = Settings.from_env()
    assert settings.database_url == "sqlite:///:memory:"
    assert settings.log_level == "DEBUG"
    assert settings.sql_echo
