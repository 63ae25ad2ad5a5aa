from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from dating_app.db.models.daily_limits import DailyLimit


class DailyLimitsRepo:
    @staticmethod
    async def get_for_day(
        session: AsyncSession,
        *,
        user_id: UUID,
        local_date: date,
    ) -> DailyLimit | None:
        stmt = select(DailyLimit).where(
            DailyLimit.user_id == user_id,
            DailyLimit.local_date == local_date,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    async def increment_for_day(
        session: AsyncSession,
        *,
        user_id: UUID,
        local_date: date,
        now_utc: datetime,
    ) -> int:
        """Creates today's row with count 1 or adds 1 to it, in one statement."""
        table = DailyLimit.__table__
        insert_stmt = insert(table).values(
            user_id=user_id,
            date=local_date,
            swipe_count=1,
            updated_at=now_utc,
        )
        stmt = insert_stmt.on_conflict_do_update(
            constraint="uq_daily_limits_user_date",
            set_={
                "swipe_count": table.c.swipe_count + 1,
                "updated_at": insert_stmt.excluded.updated_at,
            },
        ).returning(table.c.swipe_count)
        result = await session.execute(stmt)
        return int(result.scalar_one())

    @staticmethod
    async def reset_counts(
        session: AsyncSession,
        *,
        now_utc: datetime,
        before_date: date | None = None,
    ) -> int:
        stmt = update(DailyLimit).values(swipe_count=0, updated_at=now_utc)
        if before_date is not None:
            stmt = stmt.where(DailyLimit.local_date < before_date)
        result = await session.execute(stmt.execution_options(synchronize_session=False))
        return result.rowcount or 0
