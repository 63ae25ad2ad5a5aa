from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from dating_app.core.day_window import day_window
from dating_app.db.repo.daily_limits_repo import DailyLimitsRepo
from dating_app.db.repo.subscriptions_repo import SubscriptionsRepo
from dating_app.db.repo.swipes_repo import SwipesRepo
from dating_app.db.repo.users_repo import UsersRepo
from dating_app.matching.swipes.errors import (
    DuplicateSwipeError,
    SelfSwipeError,
    SwipeQuotaExceededError,
    SwipeTargetNotFoundError,
    SwipeUserNotFoundError,
)
from dating_app.matching.swipes.rules import (
    duplicate_lookup_bounds,
    is_quota_exhausted,
    remaining_swipes,
)
from dating_app.matching.swipes.types import SwipePolicy, SwipeQuotaSnapshot, SwipeResult, SwipeType

logger = structlog.get_logger(__name__)


class SwipeService:
    @staticmethod
    async def _premium_active(
        session: AsyncSession,
        *,
        user_id: UUID,
        cached_flag: bool,
        today: date,
    ) -> bool:
        premium_active = await SubscriptionsRepo.has_active(session, user_id=user_id, today=today)
        if premium_active != cached_flag:
            logger.info(
                "swipe_premium_flag_stale",
                user_id=str(user_id),
                cached_is_premium=cached_flag,
                premium_active=premium_active,
            )
        return premium_active

    @staticmethod
    async def record_swipe(
        session: AsyncSession,
        *,
        acting_user_id: UUID,
        target_user_id: UUID,
        swipe_type: SwipeType,
        now_utc: datetime,
        policy: SwipePolicy,
    ) -> SwipeResult:
        if target_user_id == acting_user_id:
            logger.info("swipe_rejected", reason="self_swipe", user_id=str(acting_user_id))
            raise SelfSwipeError

        # Row lock on the acting user serializes check-then-write per swiper.
        acting_user = await UsersRepo.get_by_id_for_update(session, acting_user_id)
        if acting_user is None:
            raise SwipeUserNotFoundError
        target_user = await UsersRepo.get_by_id(session, target_user_id)
        if target_user is None:
            raise SwipeTargetNotFoundError

        window = day_window(now_utc, policy.timezone_name)
        since_utc, until_utc = duplicate_lookup_bounds(policy.duplicate_scope, window)
        already_swiped = await SwipesRepo.exists_for_pair(
            session,
            swiper_id=acting_user_id,
            swiped_user_id=target_user_id,
            since_utc=since_utc,
            until_utc=until_utc,
        )
        if already_swiped:
            logger.info(
                "swipe_rejected",
                reason="duplicate",
                user_id=str(acting_user_id),
                target_user_id=str(target_user_id),
                duplicate_scope=policy.duplicate_scope.value,
            )
            raise DuplicateSwipeError

        daily_limit = await DailyLimitsRepo.get_for_day(
            session,
            user_id=acting_user_id,
            local_date=window.local_date,
        )
        swipes_today = daily_limit.swipe_count if daily_limit is not None else 0
        premium_active = await SwipeService._premium_active(
            session,
            user_id=acting_user_id,
            cached_flag=acting_user.is_premium,
            today=window.local_date,
        )
        if is_quota_exhausted(
            swipes_today=swipes_today,
            daily_limit=policy.daily_limit,
            premium_active=premium_active,
        ):
            logger.info(
                "swipe_rejected",
                reason="quota_exceeded",
                user_id=str(acting_user_id),
                swipes_today=swipes_today,
                daily_limit=policy.daily_limit,
            )
            raise SwipeQuotaExceededError

        swipe = await SwipesRepo.create(
            session,
            swiper_id=acting_user_id,
            swiped_user_id=target_user_id,
            swipe_type=swipe_type.value,
            swiped_at=now_utc,
        )
        swipes_today = await DailyLimitsRepo.increment_for_day(
            session,
            user_id=acting_user_id,
            local_date=window.local_date,
            now_utc=now_utc,
        )

        logger.info(
            "swipe_recorded",
            swipe_id=swipe.id,
            user_id=str(acting_user_id),
            target_user_id=str(target_user_id),
            swipe_type=swipe_type.value,
            local_date=window.local_date.isoformat(),
            swipes_today=swipes_today,
            premium_active=premium_active,
        )
        return SwipeResult(
            accepted=True,
            swipe_id=swipe.id,
            local_date=window.local_date,
            swipes_today=swipes_today,
            premium_active=premium_active,
            remaining_today=remaining_swipes(
                swipes_today=swipes_today,
                daily_limit=policy.daily_limit,
                premium_active=premium_active,
            ),
        )

    @staticmethod
    async def get_quota(
        session: AsyncSession,
        *,
        user_id: UUID,
        now_utc: datetime,
        policy: SwipePolicy,
    ) -> SwipeQuotaSnapshot:
        user = await UsersRepo.get_by_id(session, user_id)
        if user is None:
            raise SwipeUserNotFoundError

        window = day_window(now_utc, policy.timezone_name)
        daily_limit = await DailyLimitsRepo.get_for_day(
            session,
            user_id=user_id,
            local_date=window.local_date,
        )
        swipes_today = daily_limit.swipe_count if daily_limit is not None else 0
        premium_active = await SwipeService._premium_active(
            session,
            user_id=user_id,
            cached_flag=user.is_premium,
            today=window.local_date,
        )
        return SwipeQuotaSnapshot(
            local_date=window.local_date,
            swipes_today=swipes_today,
            daily_limit=policy.daily_limit,
            premium_active=premium_active,
            remaining_today=remaining_swipes(
                swipes_today=swipes_today,
                daily_limit=policy.daily_limit,
                premium_active=premium_active,
            ),
        )
