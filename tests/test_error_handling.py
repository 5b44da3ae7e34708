"""
Error handling tests.

Routes are driven with monkeypatched service methods so each error class can
be checked against its HTTP status and the {error, details?} body shape.
"""

from datetime import datetime
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from test_fixtures import (  # noqa: F401
    auth_headers,
    client,
    database,
    uploader,
)
from api.middleware import describe_validation_errors, make_serializable
from app.config import settings
from app.exceptions import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ServiceError,
    ServiceValidationError,
    UnauthorizedError,
    UpstreamError,
)
from domain.enums import UserRole
from main import app
from services.auth_service import AuthService
from services.recipe_service import RecipeService

API = settings.api_prefix


def fake_user(user_id: int = 7):
    now = datetime.utcnow()
    return SimpleNamespace(
        id=user_id,
        first_name="Funke",
        last_name="Akindele",
        email="funke@example.com",
        role=UserRole.USER,
        created_at=now,
        updated_at=now,
    )


def bearer(user_id: int = 7) -> dict:
    return auth_headers(SimpleNamespace(id=user_id, email="funke@example.com", role="user"))


@pytest.mark.parametrize(
    "exc,status",
    [
        (ServiceValidationError("bad input"), 400),
        (UnauthorizedError("who are you"), 401),
        (ForbiddenError("not yours"), 403),
        (NotFoundError("Recipe not found"), 404),
        (ConflictError("taken"), 409),
        (UpstreamError("cdn down", details="timeout"), 502),
    ],
)
def test_service_errors_map_to_status(client, monkeypatch, exc, status):
    def raiser(db, recipe_id):
        raise exc

    monkeypatch.setattr(RecipeService, "get_recipe", raiser)

    r = client.get(f"{API}/recipes/1")

    assert r.status_code == status
    assert r.json() == exc.to_dict()
    assert r.json()["error"] == exc.message


def test_error_body_includes_details_only_when_present():
    assert ServiceValidationError("Nope").to_dict() == {"error": "Nope"}
    assert ForbiddenError("Nope", details="You can only update your own recipes").to_dict() == {
        "error": "Nope",
        "details": "You can only update your own recipes",
    }
    assert NotFoundError(details={"id": 3}).to_dict()["details"] == "{'id': 3}"
    assert NotFoundError().message == "Not found"
    assert issubclass(UpstreamError, ServiceError)


def test_login_route_uses_service(client, monkeypatch):
    user = fake_user()
    monkeypatch.setattr(AuthService, "login", lambda db, payload: (user, "tok-123"))

    r = client.post(f"{API}/auth/login", json={"email": user.email, "password": "x"})

    assert r.status_code == 200
    assert r.json()["token"] == "tok-123"
    assert r.json()["user"]["lastName"] == "Akindele"


def test_malformed_json_is_400(client):
    r = client.post(
        f"{API}/auth/login",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert r.status_code == 400
    assert r.json()["error"] == "Request validation failed"
    assert "details" in r.json()


def test_non_integer_path_id_is_400(client):
    r = client.get(f"{API}/recipes/abc")
    assert r.status_code == 400


def test_unknown_route_is_404_with_error_body(client):
    r = client.get(f"{API}/does-not-exist")
    assert r.status_code == 404
    assert r.json() == {"error": "Not Found"}


def test_unexpected_error_is_500(database, uploader, monkeypatch):
    from api.dependencies import get_database, get_media_uploader

    def boom(db, recipe_id):
        raise RuntimeError("kaboom")

    monkeypatch.setattr(RecipeService, "get_recipe", boom)
    app.dependency_overrides[get_database] = lambda: database
    app.dependency_overrides[get_media_uploader] = lambda: uploader
    try:
        r = TestClient(app, raise_server_exceptions=False).get(f"{API}/recipes/1")
    finally:
        app.dependency_overrides.clear()

    assert r.status_code == 500
    assert r.json()["error"] == "Internal server error"
    # Not production, so the cause is exposed
    assert r.json()["details"] == "kaboom"


def test_oversized_upload_is_400(client, monkeypatch):
    monkeypatch.setattr(settings, "max_upload_bytes", 10)

    r = client.put(
        f"{API}/users/me/avatar",
        files={"profileImage": ("big.png", b"x" * 11, "image/png")},
        headers=bearer(),
    )

    assert r.status_code == 400
    assert r.json()["error"] == "Image is too large"


def test_describe_validation_errors():
    errors = [
        {"loc": ("body", "email"), "msg": "Field required"},
        {"loc": ("query", "page"), "msg": "Input should be greater than or equal to 1"},
    ]
    assert describe_validation_errors(errors) == (
        "email: Field required; query.page: Input should be greater than or equal to 1"
    )


def test_make_serializable():
    from decimal import Decimal

    assert make_serializable({"a": [Decimal("1.5"), (1, "x")], "b": None}) == {
        "a": [1.5, [1, "x"]],
        "b": None,
    }
    assert make_serializable(ValueError("bad")) == "bad"
