from __future__ import annotations

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from dating_app.api.deps import CurrentUser, get_current_user
from dating_app.db.session import SessionLocal
from dating_app.matching.matches.service import MatchService

router = APIRouter(tags=["matches"])


class MatchResponse(BaseModel):
    matched_user_id: UUID
    name: str
    gender: str
    birth_date: date
    bio: str | None = None
    photo_url: str | None = None


class MatchListResponse(BaseModel):
    matches: list[MatchResponse]


@router.get("/auth/matches", response_model=MatchListResponse)
async def list_matches(current_user: CurrentUser = Depends(get_current_user)) -> MatchListResponse:
    async with SessionLocal() as session:
        matches = await MatchService.find_matches(session, user_id=current_user.id)
    return MatchListResponse(
        matches=[
            MatchResponse(
                matched_user_id=match.matched_user_id,
                name=match.name,
                gender=match.gender,
                birth_date=match.birth_date,
                bio=match.bio,
                photo_url=match.photo_url,
            )
            for match in matches
        ]
    )
