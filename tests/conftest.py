"""Shared pytest fixtures for postboard tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine

from postboard.infrastructure.database import create_db_engine, init_schema
from postboard.infrastructure.security import Pbkdf2PasswordHasher
from postboard.interfaces.dependencies import get_engine, get_password_hasher
from postboard.main import app
from postboard.shared.security.rate_limiting import limiter


@pytest.fixture
def db_engine(tmp_path: Path) -> Engine:
    """SQLite engine on a temp file with all tables created."""
    engine = create_db_engine(f"sqlite:///{tmp_path / 'postboard.db'}")
    init_schema(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def client(db_engine: Engine) -> TestClient:
    """Test client for the real app, backed by the temp database."""
    limiter.reset()
    app.dependency_overrides[get_engine] = lambda: db_engine
    app.dependency_overrides[get_password_hasher] = lambda: Pbkdf2PasswordHasher(
        iterations=1_000
    )
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def register(client: TestClient) -> Callable[..., dict]:
    """Sign a user up and in; return their id, token and auth headers."""

    def _register(nickname: str, password: str = "secret") -> dict:
        email = f"{nickname}@example.com"
        response = client.post(
            "/sign-up",
            json={
                "credentials": {
                    "email": email,
                    "password": password,
                    "password_confirmation": password,
                    "nickname": nickname,
                }
            },
        )
        assert response.status_code == 201, response.text
        response = client.post(
            "/sign-in",
            json={"credentials": {"email": email, "password": password}},
        )
        assert response.status_code == 201, response.text
        user = response.json()["user"]
        return {
            "id": user["id"],
            "token": user["token"],
            "headers": {"Authorization": f"Bearer {user['token']}"},
        }

    return _register
