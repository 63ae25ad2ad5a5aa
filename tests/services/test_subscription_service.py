from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal
from types import SimpleNamespace
from uuid import uuid4

import pytest

from dating_app.economy.subscriptions import service as subscription_service
from dating_app.economy.subscriptions.errors import (
    AlreadySubscribedError,
    PremiumPackageNotFoundError,
    SubscriptionNotFoundError,
    SubscriptionUserNotFoundError,
)

UTC = timezone.utc
# 2026-01-31 local date in Asia/Jakarta.
NOW_UTC = datetime(2026, 1, 31, 3, 0, tzinfo=UTC)


class _FakeSession:
    def __init__(self) -> None:
        self.flushed = 0

    async def flush(self) -> None:
        self.flushed += 1


def _gold_package() -> SimpleNamespace:
    return SimpleNamespace(
        id=uuid4(),
        name="Gold",
        description="Unlimited swipes",
        price=Decimal("100000.00"),
    )


def _patch_repos(monkeypatch, *, user, active=None, package=None, created: list | None = None) -> None:
    async def _get_by_id_for_update(session, user_id):
        return user

    async def _get_active_for_user(session, *, user_id, today):
        return active

    async def _get_package(session, package_id):
        if package is not None and package.id == package_id:
            return package
        return None

    async def _create(session, *, subscription):
        subscription.id = uuid4()
        if created is not None:
            created.append(subscription)
        return subscription

    monkeypatch.setattr(subscription_service.UsersRepo, "get_by_id_for_update", _get_by_id_for_update)
    monkeypatch.setattr(subscription_service.SubscriptionsRepo, "get_active_for_user", _get_active_for_user)
    monkeypatch.setattr(subscription_service.PremiumPackagesRepo, "get_by_id", _get_package)
    monkeypatch.setattr(subscription_service.SubscriptionsRepo, "create", _create)


@pytest.mark.asyncio
async def test_purchase_creates_one_month_subscription_and_sets_flag(monkeypatch) -> None:
    user = SimpleNamespace(id=uuid4(), is_premium=False, updated_at=None)
    package = _gold_package()
    created: list = []
    _patch_repos(monkeypatch, user=user, package=package, created=created)
    session = _FakeSession()

    record = await subscription_service.SubscriptionService.purchase(
        session,
        user_id=user.id,
        premium_package_id=package.id,
        now_utc=NOW_UTC,
        timezone_name="Asia/Jakarta",
    )

    assert record.user_id == user.id
    assert record.premium_package_id == package.id
    assert record.start_date == date(2026, 1, 31)
    assert record.end_date == date(2026, 2, 28)
    assert len(created) == 1
    assert user.is_premium is True
    assert user.updated_at == NOW_UTC
    assert session.flushed == 1


@pytest.mark.asyncio
async def test_purchase_rejected_while_subscription_active(monkeypatch) -> None:
    user = SimpleNamespace(id=uuid4(), is_premium=True, updated_at=None)
    active = SimpleNamespace(id=uuid4(), end_date=date(2026, 2, 10))
    created: list = []
    _patch_repos(monkeypatch, user=user, active=active, package=_gold_package(), created=created)

    with pytest.raises(AlreadySubscribedError):
        await subscription_service.SubscriptionService.purchase(
            _FakeSession(),
            user_id=user.id,
            premium_package_id=uuid4(),
            now_utc=NOW_UTC,
            timezone_name="Asia/Jakarta",
        )

    assert created == []


@pytest.mark.asyncio
async def test_purchase_unknown_package(monkeypatch) -> None:
    user = SimpleNamespace(id=uuid4(), is_premium=False, updated_at=None)
    created: list = []
    _patch_repos(monkeypatch, user=user, package=_gold_package(), created=created)

    with pytest.raises(PremiumPackageNotFoundError):
        await subscription_service.SubscriptionService.purchase(
            _FakeSession(),
            user_id=user.id,
            premium_package_id=uuid4(),
            now_utc=NOW_UTC,
            timezone_name="Asia/Jakarta",
        )

    assert created == []
    assert user.is_premium is False


@pytest.mark.asyncio
async def test_purchase_unknown_user(monkeypatch) -> None:
    _patch_repos(monkeypatch, user=None, package=_gold_package())

    with pytest.raises(SubscriptionUserNotFoundError):
        await subscription_service.SubscriptionService.purchase(
            _FakeSession(),
            user_id=uuid4(),
            premium_package_id=uuid4(),
            now_utc=NOW_UTC,
            timezone_name="Asia/Jakarta",
        )


@pytest.mark.asyncio
async def test_get_active_subscription_returns_package(monkeypatch) -> None:
    package = _gold_package()
    subscription = SimpleNamespace(
        id=uuid4(),
        user_id=uuid4(),
        premium_package_id=package.id,
        start_date=date(2026, 1, 15),
        end_date=date(2026, 2, 15),
    )
    captured: dict[str, object] = {}

    async def _get_active_with_package(session, *, user_id, today):
        captured["today"] = today
        return subscription, package

    monkeypatch.setattr(
        subscription_service.SubscriptionsRepo,
        "get_active_with_package",
        _get_active_with_package,
    )

    active = await subscription_service.SubscriptionService.get_active_subscription(
        object(),
        user_id=subscription.user_id,
        now_utc=NOW_UTC,
        timezone_name="Asia/Jakarta",
    )

    assert captured == {"today": date(2026, 1, 31)}
    assert active.subscription.id == subscription.id
    assert active.package.name == "Gold"
    assert active.package.price == Decimal("100000.00")


@pytest.mark.asyncio
async def test_get_active_subscription_missing(monkeypatch) -> None:
    async def _get_active_with_package(session, *, user_id, today):
        return None

    monkeypatch.setattr(
        subscription_service.SubscriptionsRepo,
        "get_active_with_package",
        _get_active_with_package,
    )

    with pytest.raises(SubscriptionNotFoundError):
        await subscription_service.SubscriptionService.get_active_subscription(
            object(),
            user_id=uuid4(),
            now_utc=NOW_UTC,
            timezone_name="Asia/Jakarta",
        )


@pytest.mark.asyncio
async def test_list_packages_maps_rows(monkeypatch) -> None:
    package = _gold_package()

    async def _list_all(session):
        return [package]

    monkeypatch.setattr(subscription_service.PremiumPackagesRepo, "list_all", _list_all)

    packages = await subscription_service.SubscriptionService.list_packages(object())

    assert [item.id for item in packages] == [package.id]
    assert packages[0].description == "Unlimited swipes"
