from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

import structlog
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from dating_app.core.config import get_settings
from dating_app.core.security import InvalidTokenError, decode_access_token
from dating_app.db.repo.users_repo import UsersRepo
from dating_app.db.session import SessionLocal

logger = structlog.get_logger(__name__)
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True, slots=True)
class CurrentUser:
    id: UUID
    email: str
    is_premium: bool


def _unauthenticated(reason: str) -> HTTPException:
    logger.info("auth_rejected", reason=reason)
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail={"code": "E_UNAUTHENTICATED", "message": "Invalid or expired token"},
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> CurrentUser:
    if credentials is None or not credentials.credentials:
        raise _unauthenticated("missing_token")

    settings = get_settings()
    try:
        claims = decode_access_token(
            credentials.credentials,
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )
    except InvalidTokenError as exc:
        raise _unauthenticated("invalid_token") from exc

    async with SessionLocal() as session:
        user = await UsersRepo.get_by_id(session, claims.user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"code": "E_USER_NOT_FOUND", "message": "User not found"},
        )
    return CurrentUser(id=user.id, email=user.email, is_premium=user.is_premium)
