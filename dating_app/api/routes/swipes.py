from __future__ import annotations

from datetime import date, datetime, timezone
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from dating_app.api.deps import CurrentUser, get_current_user
from dating_app.core.config import get_settings
from dating_app.db.session import SessionLocal
from dating_app.matching.swipes.constants import (
    DUPLICATE_SWIPE_MESSAGE,
    QUOTA_EXCEEDED_MESSAGE,
    SELF_SWIPE_MESSAGE,
)
from dating_app.matching.swipes.errors import (
    DuplicateSwipeError,
    SelfSwipeError,
    SwipeQuotaExceededError,
    SwipeUserNotFoundError,
)
from dating_app.matching.swipes.service import SwipeService
from dating_app.matching.swipes.types import SwipePolicy, SwipeType

router = APIRouter(tags=["swipes"])


class SwipeRequest(BaseModel):
    swiped_user_id: UUID
    swipe_type: SwipeType


class SwipeResponse(BaseModel):
    success: bool


class SwipeQuotaResponse(BaseModel):
    local_date: date
    swipes_today: int
    daily_limit: int
    premium_active: bool
    remaining_today: int | None


def _bad_request(code: str, message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={"code": code, "message": message},
    )


def _user_not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={"code": "E_USER_NOT_FOUND", "message": "User not found"},
    )


@router.post("/auth/swipes", response_model=SwipeResponse)
async def create_swipe(
    payload: SwipeRequest,
    current_user: CurrentUser = Depends(get_current_user),
) -> SwipeResponse:
    policy = SwipePolicy.from_settings(get_settings())
    try:
        async with SessionLocal.begin() as session:
            await SwipeService.record_swipe(
                session,
                acting_user_id=current_user.id,
                target_user_id=payload.swiped_user_id,
                swipe_type=payload.swipe_type,
                now_utc=datetime.now(timezone.utc),
                policy=policy,
            )
    except SelfSwipeError as exc:
        raise _bad_request("E_SELF_SWIPE", SELF_SWIPE_MESSAGE) from exc
    except DuplicateSwipeError as exc:
        raise _bad_request("E_SWIPE_DUPLICATE", DUPLICATE_SWIPE_MESSAGE) from exc
    except SwipeQuotaExceededError as exc:
        raise _bad_request("E_SWIPE_QUOTA_EXCEEDED", QUOTA_EXCEEDED_MESSAGE) from exc
    except SwipeUserNotFoundError as exc:
        raise _user_not_found() from exc
    return SwipeResponse(success=True)


@router.get("/auth/swipes/quota", response_model=SwipeQuotaResponse)
async def get_swipe_quota(current_user: CurrentUser = Depends(get_current_user)) -> SwipeQuotaResponse:
    policy = SwipePolicy.from_settings(get_settings())
    try:
        async with SessionLocal() as session:
            snapshot = await SwipeService.get_quota(
                session,
                user_id=current_user.id,
                now_utc=datetime.now(timezone.utc),
                policy=policy,
            )
    except SwipeUserNotFoundError as exc:
        raise _user_not_found() from exc
    return SwipeQuotaResponse(
        local_date=snapshot.local_date,
        swipes_today=snapshot.swipes_today,
        daily_limit=snapshot.daily_limit,
        premium_active=snapshot.premium_active,
        remaining_today=snapshot.remaining_today,
    )
