from __future__ import annotations

from datetime import date
from types import SimpleNamespace
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import IntegrityError

from dating_app.api.routes import users as users_routes
from dating_app.main import app
from dating_app.services.user_accounts import EmailAlreadyRegisteredError, InvalidCredentialsError
from tests.api.api_fixtures import FakeSessionFactory, authenticate_as

REGISTER_PAYLOAD = {
    "email": "ana@example.com",
    "password": "s3cret-pass",
    "name": "Ana",
    "gender": "female",
    "date_of_birth": "1999-01-01",
}


@pytest.fixture(autouse=True)
def fake_session(monkeypatch) -> None:
    monkeypatch.setattr(users_routes, "SessionLocal", FakeSessionFactory())


def _user(**overrides) -> SimpleNamespace:
    fields = {
        "id": uuid4(),
        "email": "ana@example.com",
        "name": "Ana",
        "gender": "female",
        "date_of_birth": date(1999, 1, 1),
        "is_premium": False,
        "verified": False,
    }
    fields.update(overrides)
    return SimpleNamespace(**fields)


def test_register_user_created(monkeypatch) -> None:
    captured: dict[str, object] = {}

    async def _fake_register(session, **kwargs):
        captured.update(kwargs)
        return _user()

    monkeypatch.setattr(users_routes.UserAccountService, "register", _fake_register)

    client = TestClient(app)
    response = client.post("/users", json=REGISTER_PAYLOAD)

    assert response.status_code == 201
    payload = response.json()
    assert payload["email"] == "ana@example.com"
    assert payload["is_premium"] is False
    assert "password" not in payload
    assert "password_hash" not in payload
    assert captured["date_of_birth"] == date(1999, 1, 1)


@pytest.mark.parametrize("raw_date", ["1999/01/01", "1999/1/1", "1999/1/01"])
def test_register_accepts_slash_separated_birth_date(monkeypatch, raw_date: str) -> None:
    captured: dict[str, object] = {}

    async def _fake_register(session, **kwargs):
        captured.update(kwargs)
        return _user()

    monkeypatch.setattr(users_routes.UserAccountService, "register", _fake_register)

    client = TestClient(app)
    response = client.post("/users", json={**REGISTER_PAYLOAD, "date_of_birth": raw_date})

    assert response.status_code == 201
    assert captured["date_of_birth"] == date(1999, 1, 1)


@pytest.mark.parametrize(
    "override",
    [
        {"email": "not-an-email"},
        {"password": "short"},
        {"gender": "unknown"},
        {"date_of_birth": "yesterday"},
        {"date_of_birth": "1999/13/1"},
    ],
)
def test_register_rejects_invalid_payload(override: dict[str, str]) -> None:
    client = TestClient(app)
    response = client.post("/users", json={**REGISTER_PAYLOAD, **override})

    assert response.status_code == 422


@pytest.mark.parametrize(
    "error",
    [
        EmailAlreadyRegisteredError(),
        IntegrityError("INSERT INTO users", {}, RuntimeError("duplicate key")),
    ],
)
def test_register_conflict_on_taken_email(monkeypatch, error: Exception) -> None:
    async def _fake_register(session, **kwargs):
        raise error

    monkeypatch.setattr(users_routes.UserAccountService, "register", _fake_register)

    client = TestClient(app)
    response = client.post("/users", json=REGISTER_PAYLOAD)

    assert response.status_code == 409
    assert response.json()["detail"]["code"] == "E_EMAIL_TAKEN"


def test_login_returns_token(monkeypatch) -> None:
    async def _fake_login(session, **kwargs):
        return "signed-token"

    monkeypatch.setattr(users_routes.UserAccountService, "login", _fake_login)

    client = TestClient(app)
    response = client.post("/login", json={"email": "ana@example.com", "password": "s3cret-pass"})

    assert response.status_code == 200
    assert response.json() == {"token": "signed-token"}


def test_login_rejects_invalid_credentials(monkeypatch) -> None:
    async def _fake_login(session, **kwargs):
        raise InvalidCredentialsError

    monkeypatch.setattr(users_routes.UserAccountService, "login", _fake_login)

    client = TestClient(app)
    response = client.post("/login", json={"email": "ana@example.com", "password": "wrong"})

    assert response.status_code == 401
    assert response.json()["detail"]["code"] == "E_INVALID_CREDENTIALS"


def test_me_reports_live_premium_state(monkeypatch) -> None:
    current_user = authenticate_as()
    user = _user(id=current_user.id, is_premium=True)

    async def _fake_get_by_id(session, user_id):
        return user

    async def _fake_has_active(session, *, user_id, today):
        return False

    monkeypatch.setattr(users_routes.UserAccountService, "get_by_id", _fake_get_by_id)
    monkeypatch.setattr(users_routes.SubscriptionsRepo, "has_active", _fake_has_active)

    client = TestClient(app)
    response = client.get("/auth/me")

    assert response.status_code == 200
    payload = response.json()
    assert payload["id"] == str(current_user.id)
    assert payload["is_premium"] is True
    assert payload["premium_active"] is False
