from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID


@dataclass(frozen=True, slots=True)
class MatchProfile:
    matched_user_id: UUID
    name: str
    gender: str
    birth_date: date
    liked_at: datetime
    bio: str | None = None
    photo_url: str | None = None
