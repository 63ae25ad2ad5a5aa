from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import and_, exists, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from dating_app.db.models.swipes import Swipe
from dating_app.db.models.users import User


class SwipesRepo:
    @staticmethod
    async def exists_for_pair(
        session: AsyncSession,
        *,
        swiper_id: UUID,
        swiped_user_id: UUID,
        since_utc: datetime | None = None,
        until_utc: datetime | None = None,
    ) -> bool:
        stmt = select(Swipe.id).where(
            Swipe.swiper_id == swiper_id,
            Swipe.swiped_user_id == swiped_user_id,
        )
        if since_utc is not None:
            stmt = stmt.where(Swipe.swiped_at >= since_utc)
        if until_utc is not None:
            stmt = stmt.where(Swipe.swiped_at < until_utc)
        result = await session.execute(stmt.limit(1))
        return result.scalar_one_or_none() is not None

    @staticmethod
    async def create(
        session: AsyncSession,
        *,
        swiper_id: UUID,
        swiped_user_id: UUID,
        swipe_type: str,
        swiped_at: datetime,
    ) -> Swipe:
        swipe = Swipe(
            swiper_id=swiper_id,
            swiped_user_id=swiped_user_id,
            swipe_type=swipe_type,
            swiped_at=swiped_at,
        )
        session.add(swipe)
        await session.flush()
        return swipe

    @staticmethod
    async def list_mutual_likes(session: AsyncSession, *, user_id: UUID) -> list[tuple[User, datetime]]:
        """Returns (counterpart, liked_at) for every LIKE by user_id that was liked back.

        Rows follow the order of the user's own LIKEs; a counterpart liked on
        several days appears once per LIKE row.
        """
        liked_back = aliased(Swipe)
        reciprocal_like = exists().where(
            and_(
                liked_back.swiper_id == Swipe.swiped_user_id,
                liked_back.swiped_user_id == Swipe.swiper_id,
                liked_back.swipe_type == "LIKE",
            )
        )
        stmt = (
            select(User, Swipe.swiped_at)
            .join(User, User.id == Swipe.swiped_user_id)
            .where(
                Swipe.swiper_id == user_id,
                Swipe.swipe_type == "LIKE",
                reciprocal_like,
            )
            .order_by(Swipe.swiped_at.asc(), Swipe.id.asc())
        )
        result = await session.execute(stmt)
        return [(row[0], row[1]) for row in result.all()]
