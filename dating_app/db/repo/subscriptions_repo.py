from __future__ import annotations

from datetime import date
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from dating_app.db.models.premium_packages import PremiumPackage
from dating_app.db.models.user_premium_subscriptions import UserPremiumSubscription


class SubscriptionsRepo:
    @staticmethod
    def _active_stmt(user_id: UUID, today: date):
        return (
            select(UserPremiumSubscription)
            .where(
                UserPremiumSubscription.user_id == user_id,
                UserPremiumSubscription.end_date >= today,
            )
            .order_by(UserPremiumSubscription.end_date.desc())
            .limit(1)
        )

    @staticmethod
    async def get_active_for_user(
        session: AsyncSession,
        *,
        user_id: UUID,
        today: date,
    ) -> UserPremiumSubscription | None:
        result = await session.execute(SubscriptionsRepo._active_stmt(user_id, today))
        return result.scalar_one_or_none()

    @staticmethod
    async def has_active(session: AsyncSession, *, user_id: UUID, today: date) -> bool:
        subscription = await SubscriptionsRepo.get_active_for_user(
            session,
            user_id=user_id,
            today=today,
        )
        return subscription is not None

    @staticmethod
    async def get_active_with_package(
        session: AsyncSession,
        *,
        user_id: UUID,
        today: date,
    ) -> tuple[UserPremiumSubscription, PremiumPackage] | None:
        stmt = (
            select(UserPremiumSubscription, PremiumPackage)
            .join(PremiumPackage, PremiumPackage.id == UserPremiumSubscription.premium_package_id)
            .where(
                UserPremiumSubscription.user_id == user_id,
                UserPremiumSubscription.end_date >= today,
            )
            .order_by(UserPremiumSubscription.end_date.desc())
            .limit(1)
        )
        result = await session.execute(stmt)
        row = result.first()
        if row is None:
            return None
        return row[0], row[1]

    @staticmethod
    async def create(
        session: AsyncSession,
        *,
        subscription: UserPremiumSubscription,
    ) -> UserPremiumSubscription:
        session.add(subscription)
        await session.flush()
        return subscription
