from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from uuid import UUID

import bcrypt
import jwt

BCRYPT_ROUNDS = 10


class InvalidTokenError(Exception):
    pass


@dataclass(frozen=True, slots=True)
class AccessTokenClaims:
    user_id: UUID
    email: str
    issued_at: datetime


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


def issue_access_token(
    *,
    user_id: UUID,
    email: str,
    secret: str,
    algorithm: str,
    ttl: timedelta,
    now_utc: datetime,
) -> str:
    payload = {
        "sub": str(user_id),
        "email": email,
        "iat": int(now_utc.timestamp()),
        "exp": int((now_utc + ttl).timestamp()),
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def decode_access_token(token: str, *, secret: str, algorithm: str) -> AccessTokenClaims:
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[algorithm],
            options={"require": ["sub", "exp", "iat"]},
        )
        user_id = UUID(str(payload["sub"]))
    except (jwt.PyJWTError, ValueError) as exc:
        raise InvalidTokenError from exc

    return AccessTokenClaims(
        user_id=user_id,
        email=str(payload.get("email", "")),
        issued_at=datetime.fromtimestamp(int(payload["iat"]), tz=timezone.utc),
    )
