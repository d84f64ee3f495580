"""
Tests for the centralized error-to-HTTP mapping.

Uses a throwaway FastAPI app whose routes raise each error kind.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from postboard.domain.errors import (
    AuthenticationError,
    BadCredentialsError,
    BadParamsError,
    DocumentNotFoundError,
    OwnershipError,
    UserValidationError,
)
from postboard.shared.errors.handlers import register_error_handlers, status_for

RAISERS = {
    "ownership": OwnershipError,
    "user": UserValidationError,
    "missing": DocumentNotFoundError,
    "params": BadParamsError,
    "auth": AuthenticationError,
    "credentials": BadCredentialsError,
}


def _build_app() -> FastAPI:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/raise/{kind}")
    def raise_error(kind: str) -> None:
        if kind in RAISERS:
            raise RAISERS[kind]()
        raise RuntimeError("database password is hunter2")

    return app


@pytest.fixture
def client() -> TestClient:
    return TestClient(_build_app(), raise_server_exceptions=False)


class TestStatusFor:

    @pytest.mark.parametrize(
        "error, expected",
        [
            (OwnershipError(), 403),
            (UserValidationError(), 401),
            (DocumentNotFoundError(), 404),
            (BadParamsError(), 422),
            (AuthenticationError(), 401),
            (BadCredentialsError(), 401),
            (ValueError("boom"), 500),
        ],
    )
    def test_mapping_table(self, error, expected) -> None:
        assert status_for(error) == expected


class TestRegisteredHandlers:

    @pytest.mark.parametrize(
        "kind, status_code",
        [
            ("ownership", 403),
            ("user", 401),
            ("missing", 404),
            ("params", 422),
            ("auth", 401),
            ("credentials", 401),
        ],
    )
    def test_known_errors(self, client: TestClient, kind: str, status_code: int) -> None:
        response = client.get(f"/raise/{kind}")
        error = RAISERS[kind]()
        assert response.status_code == status_code
        assert response.json() == {"error": error.name, "detail": error.message}

    def test_unknown_error_hides_internals(self, client: TestClient) -> None:
        response = client.get("/raise/other")
        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}
        assert "hunter2" not in response.text
