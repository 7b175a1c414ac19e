from __future__ import annotations

from datetime import timedelta

import pytest

from config import Config, database_uri, session_lifetime
from secrets_app import create_app


def test_database_uri_from_pg_env(monkeypatch) -> None:
    monkeypatch.setenv("PG_HOST", "db")
    monkeypatch.setenv("PG_PORT", "5433")
    monkeypatch.setenv("PG_USER", "u")
    monkeypatch.setenv("PG_PASSWORD", "p@ss")
    monkeypatch.setenv("PG_DATABASE", "secrets")
    assert database_uri("sqlite://") == "postgresql+psycopg://u:p%40ss@db:5433/secrets"


def test_database_uri_fallbacks(monkeypatch) -> None:
    monkeypatch.delenv("PG_HOST", raising=False)
    monkeypatch.delenv("DATABASE_URI", raising=False)
    assert database_uri("sqlite:///default.db") == "sqlite:///default.db"

    monkeypatch.setenv("DATABASE_URI", "sqlite:///other.db")
    assert database_uri("sqlite:///default.db") == "sqlite:///other.db"


def test_session_lifetime_defaults_to_one_hour() -> None:
    assert Config.PERMANENT_SESSION_LIFETIME.total_seconds() == 3600
    assert Config.BCRYPT_ROUNDS == 10
    assert Config.PORT == 3000


def test_session_lifetime_from_env(monkeypatch) -> None:
    monkeypatch.setenv("SESSION_TTL_SECONDS", "600")
    assert session_lifetime() == timedelta(seconds=600)

    monkeypatch.delenv("SESSION_TTL_SECONDS")
    assert session_lifetime() == timedelta(hours=1)


def test_missing_session_secret_refuses_to_start(tmp_path) -> None:
    with pytest.raises(RuntimeError):
        create_app("production", overrides={"SECRET_KEY": None, "SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'p.db'}"})


def test_testing_config_selected(app) -> None:
    assert app.config["TESTING"] is True
    assert app.config["WTF_CSRF_ENABLED"] is False
