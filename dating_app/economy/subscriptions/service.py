from __future__ import annotations

from datetime import datetime
from uuid import UUID

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from dating_app.core.day_window import local_date_in
from dating_app.db.models.premium_packages import PremiumPackage
from dating_app.db.models.user_premium_subscriptions import UserPremiumSubscription
from dating_app.db.repo.premium_packages_repo import PremiumPackagesRepo
from dating_app.db.repo.subscriptions_repo import SubscriptionsRepo
from dating_app.db.repo.users_repo import UsersRepo
from dating_app.economy.subscriptions.errors import (
    AlreadySubscribedError,
    PremiumPackageNotFoundError,
    SubscriptionNotFoundError,
    SubscriptionUserNotFoundError,
)
from dating_app.economy.subscriptions.rules import subscription_period
from dating_app.economy.subscriptions.types import (
    ActiveSubscription,
    PremiumPackageInfo,
    SubscriptionRecord,
)

logger = structlog.get_logger(__name__)


def _record_from_model(subscription: UserPremiumSubscription) -> SubscriptionRecord:
    return SubscriptionRecord(
        id=subscription.id,
        user_id=subscription.user_id,
        premium_package_id=subscription.premium_package_id,
        start_date=subscription.start_date,
        end_date=subscription.end_date,
    )


def _package_from_model(package: PremiumPackage) -> PremiumPackageInfo:
    return PremiumPackageInfo(
        id=package.id,
        name=package.name,
        description=package.description,
        price=package.price,
    )


class SubscriptionService:
    @staticmethod
    async def purchase(
        session: AsyncSession,
        *,
        user_id: UUID,
        premium_package_id: UUID,
        now_utc: datetime,
        timezone_name: str,
        months: int = 1,
    ) -> SubscriptionRecord:
        # Locking the user row keeps two concurrent purchases from both seeing "no active".
        user = await UsersRepo.get_by_id_for_update(session, user_id)
        if user is None:
            raise SubscriptionUserNotFoundError

        today = local_date_in(now_utc, timezone_name)
        active = await SubscriptionsRepo.get_active_for_user(session, user_id=user_id, today=today)
        if active is not None:
            logger.info(
                "subscription_purchase_rejected",
                reason="already_subscribed",
                user_id=str(user_id),
                active_subscription_id=str(active.id),
                active_until=active.end_date.isoformat(),
            )
            raise AlreadySubscribedError

        package = await PremiumPackagesRepo.get_by_id(session, premium_package_id)
        if package is None:
            raise PremiumPackageNotFoundError

        start_date, end_date = subscription_period(today, months=months)
        subscription = await SubscriptionsRepo.create(
            session,
            subscription=UserPremiumSubscription(
                user_id=user_id,
                premium_package_id=package.id,
                start_date=start_date,
                end_date=end_date,
            ),
        )
        user.is_premium = True
        user.updated_at = now_utc
        await session.flush()

        logger.info(
            "subscription_purchased",
            user_id=str(user_id),
            subscription_id=str(subscription.id),
            premium_package=package.name,
            start_date=start_date.isoformat(),
            end_date=end_date.isoformat(),
        )
        return _record_from_model(subscription)

    @staticmethod
    async def get_active_subscription(
        session: AsyncSession,
        *,
        user_id: UUID,
        now_utc: datetime,
        timezone_name: str,
    ) -> ActiveSubscription:
        today = local_date_in(now_utc, timezone_name)
        row = await SubscriptionsRepo.get_active_with_package(session, user_id=user_id, today=today)
        if row is None:
            raise SubscriptionNotFoundError

        subscription, package = row
        return ActiveSubscription(
            subscription=_record_from_model(subscription),
            package=_package_from_model(package),
        )

    @staticmethod
    async def list_packages(session: AsyncSession) -> list[PremiumPackageInfo]:
        packages = await PremiumPackagesRepo.list_all(session)
        return [_package_from_model(package) for package in packages]
