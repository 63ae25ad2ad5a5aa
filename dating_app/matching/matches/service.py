from __future__ import annotations

from uuid import UUID

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from dating_app.db.repo.swipes_repo import SwipesRepo
from dating_app.matching.matches.types import MatchProfile

logger = structlog.get_logger(__name__)


class MatchService:
    @staticmethod
    async def find_matches(session: AsyncSession, *, user_id: UUID) -> list[MatchProfile]:
        """Users that LIKEd user_id back, in the order user_id first liked them.

        No day window applies: a LIKE from any day counts in both directions.
        """
        rows = await SwipesRepo.list_mutual_likes(session, user_id=user_id)

        matches: list[MatchProfile] = []
        seen: set[UUID] = set()
        for counterpart, liked_at in rows:
            if counterpart.id in seen:
                continue
            seen.add(counterpart.id)
            matches.append(
                MatchProfile(
                    matched_user_id=counterpart.id,
                    name=counterpart.name,
                    gender=counterpart.gender,
                    birth_date=counterpart.date_of_birth,
                    liked_at=liked_at,
                )
            )

        logger.debug("matches_listed", user_id=str(user_id), matches_total=len(matches))
        return matches
