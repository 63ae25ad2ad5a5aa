from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from dating_app.api.routes import subscriptions as subscriptions_routes
from dating_app.economy.subscriptions.errors import (
    AlreadySubscribedError,
    PremiumPackageNotFoundError,
    SubscriptionNotFoundError,
)
from dating_app.economy.subscriptions.types import (
    ActiveSubscription,
    PremiumPackageInfo,
    SubscriptionRecord,
)
from dating_app.main import app
from tests.api.api_fixtures import FakeSessionFactory, authenticate_as

GOLD = PremiumPackageInfo(
    id=uuid4(),
    name="Gold",
    description="Unlimited swipes",
    price=Decimal("100000.00"),
)


@pytest.fixture(autouse=True)
def fake_session(monkeypatch) -> None:
    monkeypatch.setattr(subscriptions_routes, "SessionLocal", FakeSessionFactory())


def _record(user_id) -> SubscriptionRecord:
    return SubscriptionRecord(
        id=uuid4(),
        user_id=user_id,
        premium_package_id=GOLD.id,
        start_date=date(2026, 10, 17),
        end_date=date(2026, 11, 17),
    )


def test_list_premium_packages_is_public(monkeypatch) -> None:
    async def _fake_list_packages(session):
        return [GOLD]

    monkeypatch.setattr(subscriptions_routes.SubscriptionService, "list_packages", _fake_list_packages)

    client = TestClient(app)
    response = client.get("/premium-packages")

    assert response.status_code == 200
    assert response.json() == {
        "packages": [
            {
                "id": str(GOLD.id),
                "name": "Gold",
                "description": "Unlimited swipes",
                "price": "100000.00",
            }
        ]
    }


def test_purchase_subscription_created(monkeypatch) -> None:
    current_user = authenticate_as()
    captured: dict[str, object] = {}

    async def _fake_purchase(session, **kwargs):
        captured.update(kwargs)
        return _record(kwargs["user_id"])

    monkeypatch.setattr(subscriptions_routes.SubscriptionService, "purchase", _fake_purchase)

    client = TestClient(app)
    response = client.post("/auth/subscriptions", json={"premium_package_id": str(GOLD.id)})

    assert response.status_code == 201
    payload = response.json()
    assert payload["user_id"] == str(current_user.id)
    assert payload["premium_package_id"] == str(GOLD.id)
    assert payload["start_date"] == "2026-10-17"
    assert payload["end_date"] == "2026-11-17"
    assert captured["premium_package_id"] == GOLD.id
    assert captured["months"] == 1


@pytest.mark.parametrize(
    ("error", "status_code", "code"),
    [
        (AlreadySubscribedError(), 400, "E_ALREADY_SUBSCRIBED"),
        (PremiumPackageNotFoundError(), 404, "E_PREMIUM_PACKAGE_NOT_FOUND"),
    ],
)
def test_purchase_subscription_maps_errors(monkeypatch, error: Exception, status_code: int, code: str) -> None:
    authenticate_as()

    async def _fake_purchase(session, **kwargs):
        raise error

    monkeypatch.setattr(subscriptions_routes.SubscriptionService, "purchase", _fake_purchase)

    client = TestClient(app)
    response = client.post("/auth/subscriptions", json={"premium_package_id": str(uuid4())})

    assert response.status_code == status_code
    assert response.json()["detail"]["code"] == code


def test_purchase_subscription_rejects_malformed_package_id() -> None:
    authenticate_as()

    client = TestClient(app)
    response = client.post("/auth/subscriptions", json={"premium_package_id": "gold"})

    assert response.status_code == 422


def test_get_active_subscription_includes_package(monkeypatch) -> None:
    current_user = authenticate_as()

    async def _fake_get_active(session, **kwargs):
        return ActiveSubscription(subscription=_record(kwargs["user_id"]), package=GOLD)

    monkeypatch.setattr(
        subscriptions_routes.SubscriptionService,
        "get_active_subscription",
        _fake_get_active,
    )

    client = TestClient(app)
    response = client.get("/auth/subscriptions")

    assert response.status_code == 200
    payload = response.json()
    assert payload["user_id"] == str(current_user.id)
    assert payload["premium_package"]["name"] == "Gold"


def test_get_active_subscription_not_found(monkeypatch) -> None:
    authenticate_as()

    async def _fake_get_active(session, **kwargs):
        raise SubscriptionNotFoundError

    monkeypatch.setattr(
        subscriptions_routes.SubscriptionService,
        "get_active_subscription",
        _fake_get_active,
    )

    client = TestClient(app)
    response = client.get("/auth/subscriptions")

    assert response.status_code == 404
    assert response.json()["detail"]["code"] == "E_SUBSCRIPTION_NOT_FOUND"
