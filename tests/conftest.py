"""Shared pytest fixtures: an app wired to a throwaway SQLite database."""

import sqlite3
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_application

TEST_SECRET = "tests-secret-key-with-at-least-32-bytes"
PREFIX = "/api/v1"
REGISTER_URL = f"{PREFIX}/auth/register"
LOGIN_URL = f"{PREFIX}/auth/login"
PROFILE_URL = f"{PREFIX}/profile"


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "auth.sqlite3"


@pytest.fixture
def settings(db_path: Path) -> Settings:
    return Settings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{db_path}",
        jwt_secret=TEST_SECRET,
        create_tables_on_startup=True,
        api_v1_prefix=PREFIX,
    )


@pytest.fixture
def app(settings: Settings):
    return create_application(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def stored_password_hash(db_path: Path):
    """Read a user's stored hash straight from the database file."""

    def _read(email: str) -> str | None:
        with sqlite3.connect(db_path) as conn:
            row = conn.execute("SELECT password_hash FROM users WHERE email = ?", (email,)).fetchone()
        return row[0] if row else None

    return _read


@pytest.fixture
def registered_user(client):
    user = {"name": "Login Tester", "email": "logintester@logintest.com", "password": "Senha123"}
    response = client.post(REGISTER_URL, json=user)
    assert response.status_code == 201
    return {**user, "id": response.json()["user"]["id"]}
