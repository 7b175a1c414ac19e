"""
Pytest config.

`config.py` lives at the repo root next to the `secrets_app/` package, so the
root has to be importable during collection even when a global `pytest`
entrypoint is used. Every test app gets its own SQLite file under `tmp_path`.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _ensure_repo_root_on_syspath() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    repo_root_str = str(repo_root)
    if repo_root_str not in sys.path:
        sys.path.insert(0, repo_root_str)


_ensure_repo_root_on_syspath()

from secrets_app import create_app  # noqa: E402
from secrets_app.models import User  # noqa: E402
from secrets_app.services import get_services  # noqa: E402


@pytest.fixture
def make_app(tmp_path):
    def _make(**overrides):
        cfg = {"SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'test.db'}"}
        cfg.update(overrides)
        return create_app("testing", overrides=cfg)

    return _make


@pytest.fixture
def app(make_app):
    return make_app()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def user_row(app):
    """Fetch a user as a plain dict (or None) outside any request."""

    def _fetch(email: str):
        with app.app_context():
            user = get_services().users.find_by_email(email)
            if user is None:
                return None
            return {"id": user.id, "email": user.email, "password": user.password, "secret": user.secret}

    return _fetch


@pytest.fixture
def user_count(app):
    def _count() -> int:
        with app.app_context():
            return get_services().users.session.query(User).count()

    return _count
