from __future__ import annotations

import asyncio
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from uuid import UUID

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from dating_app.core.security import hash_password, issue_access_token, verify_password
from dating_app.db.models.users import User
from dating_app.db.repo.users_repo import UsersRepo

logger = structlog.get_logger(__name__)


class UserAccountError(Exception):
    pass


class EmailAlreadyRegisteredError(UserAccountError):
    pass


class InvalidCredentialsError(UserAccountError):
    pass


@dataclass(frozen=True, slots=True)
class TokenSettings:
    secret: str
    algorithm: str
    ttl: timedelta

    @classmethod
    def from_settings(cls, settings) -> TokenSettings:
        return cls(
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            ttl=timedelta(minutes=settings.access_token_ttl_minutes),
        )


class UserAccountService:
    @staticmethod
    async def register(
        session: AsyncSession,
        *,
        email: str,
        password: str,
        name: str,
        gender: str,
        date_of_birth: date,
    ) -> User:
        existing = await UsersRepo.get_by_email(session, email)
        if existing is not None:
            raise EmailAlreadyRegisteredError

        password_hash = await asyncio.to_thread(hash_password, password)
        user = await UsersRepo.create(
            session,
            email=email,
            password_hash=password_hash,
            name=name,
            gender=gender,
            date_of_birth=date_of_birth,
        )
        logger.info("user_registered", user_id=str(user.id))
        return user

    @staticmethod
    async def login(
        session: AsyncSession,
        *,
        email: str,
        password: str,
        token_settings: TokenSettings,
        now_utc: datetime,
    ) -> str:
        user = await UsersRepo.get_by_email(session, email)
        if user is None:
            logger.info("user_login_failed", reason="unknown_email")
            raise InvalidCredentialsError

        password_ok = await asyncio.to_thread(verify_password, password, user.password_hash)
        if not password_ok:
            logger.info("user_login_failed", reason="wrong_password", user_id=str(user.id))
            raise InvalidCredentialsError

        return issue_access_token(
            user_id=user.id,
            email=user.email,
            secret=token_settings.secret,
            algorithm=token_settings.algorithm,
            ttl=token_settings.ttl,
            now_utc=now_utc,
        )

    @staticmethod
    async def get_by_id(session: AsyncSession, user_id: UUID) -> User | None:
        return await UsersRepo.get_by_id(session, user_id)
