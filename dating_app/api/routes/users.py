from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Literal
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, EmailStr, Field, field_validator
from sqlalchemy.exc import IntegrityError

from dating_app.api.deps import CurrentUser, get_current_user
from dating_app.core.config import get_settings
from dating_app.core.day_window import local_date_in
from dating_app.db.repo.subscriptions_repo import SubscriptionsRepo
from dating_app.db.session import SessionLocal
from dating_app.services.user_accounts import (
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    TokenSettings,
    UserAccountService,
)

router = APIRouter(tags=["users"])


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=8, max_length=128)
    name: str = Field(min_length=1, max_length=128)
    gender: Literal["male", "female", "other"]
    date_of_birth: date

    @field_validator("date_of_birth", mode="before")
    @classmethod
    def _accept_slash_dates(cls, value: object) -> object:
        # Also accepts "1999/01/01" and unpadded "1999/1/1".
        if isinstance(value, str) and "/" in value:
            parts = value.strip().split("/")
            if len(parts) == 3 and all(part.isdigit() for part in parts):
                year, month, day = parts
                return f"{year}-{month.zfill(2)}-{day.zfill(2)}"
        return value


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1, max_length=128)


class TokenResponse(BaseModel):
    token: str


class UserResponse(BaseModel):
    id: UUID
    email: str
    name: str
    gender: str
    date_of_birth: date
    is_premium: bool
    verified: bool


class MeResponse(UserResponse):
    premium_active: bool


def _as_user_response(user) -> UserResponse:
    return UserResponse(
        id=user.id,
        email=user.email,
        name=user.name,
        gender=user.gender,
        date_of_birth=user.date_of_birth,
        is_premium=user.is_premium,
        verified=user.verified,
    )


def _email_taken() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail={"code": "E_EMAIL_TAKEN", "message": "Email is already registered"},
    )


@router.post("/users", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register_user(payload: RegisterRequest) -> UserResponse:
    try:
        async with SessionLocal.begin() as session:
            user = await UserAccountService.register(
                session,
                email=payload.email,
                password=payload.password,
                name=payload.name,
                gender=payload.gender,
                date_of_birth=payload.date_of_birth,
            )
            response = _as_user_response(user)
    except EmailAlreadyRegisteredError as exc:
        raise _email_taken() from exc
    except IntegrityError as exc:
        # Concurrent registration with the same email lost the unique-index race.
        raise _email_taken() from exc
    return response


@router.post("/login", response_model=TokenResponse)
async def login(payload: LoginRequest) -> TokenResponse:
    settings = get_settings()
    try:
        async with SessionLocal() as session:
            token = await UserAccountService.login(
                session,
                email=payload.email,
                password=payload.password,
                token_settings=TokenSettings.from_settings(settings),
                now_utc=datetime.now(timezone.utc),
            )
    except InvalidCredentialsError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"code": "E_INVALID_CREDENTIALS", "message": "Invalid email/password"},
        ) from exc
    return TokenResponse(token=token)


@router.get("/auth/me", response_model=MeResponse)
async def get_me(current_user: CurrentUser = Depends(get_current_user)) -> MeResponse:
    settings = get_settings()
    today = local_date_in(datetime.now(timezone.utc), settings.reference_timezone)
    async with SessionLocal() as session:
        user = await UserAccountService.get_by_id(session, current_user.id)
        if user is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail={"code": "E_USER_NOT_FOUND", "message": "User not found"},
            )
        premium_active = await SubscriptionsRepo.has_active(session, user_id=user.id, today=today)
    return MeResponse(**_as_user_response(user).model_dump(), premium_active=premium_active)
