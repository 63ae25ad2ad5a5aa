from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from dating_app.api.deps import CurrentUser, get_current_user
from dating_app.core.config import get_settings
from dating_app.db.session import SessionLocal
from dating_app.economy.subscriptions.errors import (
    AlreadySubscribedError,
    PremiumPackageNotFoundError,
    SubscriptionNotFoundError,
    SubscriptionUserNotFoundError,
)
from dating_app.economy.subscriptions.service import SubscriptionService
from dating_app.economy.subscriptions.types import PremiumPackageInfo, SubscriptionRecord

router = APIRouter(tags=["subscriptions"])


class SubscribeRequest(BaseModel):
    premium_package_id: UUID


class PremiumPackageResponse(BaseModel):
    id: UUID
    name: str
    description: str
    price: Decimal


class SubscriptionResponse(BaseModel):
    id: UUID
    user_id: UUID
    premium_package_id: UUID
    start_date: date
    end_date: date


class ActiveSubscriptionResponse(SubscriptionResponse):
    premium_package: PremiumPackageResponse


class PremiumPackageListResponse(BaseModel):
    packages: list[PremiumPackageResponse]


def _package_as_response(package: PremiumPackageInfo) -> PremiumPackageResponse:
    return PremiumPackageResponse(
        id=package.id,
        name=package.name,
        description=package.description,
        price=package.price,
    )


def _subscription_fields(record: SubscriptionRecord) -> dict[str, object]:
    return {
        "id": record.id,
        "user_id": record.user_id,
        "premium_package_id": record.premium_package_id,
        "start_date": record.start_date,
        "end_date": record.end_date,
    }


def _not_found(code: str, message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={"code": code, "message": message},
    )


@router.get("/premium-packages", response_model=PremiumPackageListResponse)
async def list_premium_packages() -> PremiumPackageListResponse:
    async with SessionLocal() as session:
        packages = await SubscriptionService.list_packages(session)
    return PremiumPackageListResponse(packages=[_package_as_response(package) for package in packages])


@router.post(
    "/auth/subscriptions",
    response_model=SubscriptionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def purchase_subscription(
    payload: SubscribeRequest,
    current_user: CurrentUser = Depends(get_current_user),
) -> SubscriptionResponse:
    settings = get_settings()
    try:
        async with SessionLocal.begin() as session:
            record = await SubscriptionService.purchase(
                session,
                user_id=current_user.id,
                premium_package_id=payload.premium_package_id,
                now_utc=datetime.now(timezone.utc),
                timezone_name=settings.reference_timezone,
                months=settings.subscription_months,
            )
    except AlreadySubscribedError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "code": "E_ALREADY_SUBSCRIBED",
                "message": "You already have an active subscription",
            },
        ) from exc
    except PremiumPackageNotFoundError as exc:
        raise _not_found("E_PREMIUM_PACKAGE_NOT_FOUND", "Premium package not found") from exc
    except SubscriptionUserNotFoundError as exc:
        raise _not_found("E_USER_NOT_FOUND", "User not found") from exc
    return SubscriptionResponse(**_subscription_fields(record))


@router.get("/auth/subscriptions", response_model=ActiveSubscriptionResponse)
async def get_active_subscription(
    current_user: CurrentUser = Depends(get_current_user),
) -> ActiveSubscriptionResponse:
    settings = get_settings()
    try:
        async with SessionLocal() as session:
            active = await SubscriptionService.get_active_subscription(
                session,
                user_id=current_user.id,
                now_utc=datetime.now(timezone.utc),
                timezone_name=settings.reference_timezone,
            )
    except SubscriptionNotFoundError as exc:
        raise _not_found("E_SUBSCRIPTION_NOT_FOUND", "No active subscription") from exc
    return ActiveSubscriptionResponse(
        **_subscription_fields(active.subscription),
        premium_package=_package_as_response(active.package),
    )
