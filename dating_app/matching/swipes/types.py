from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum

from dating_app.matching.swipes.constants import DEFAULT_DAILY_SWIPE_LIMIT, DEFAULT_REFERENCE_TIMEZONE


class SwipeType(str, Enum):
    LIKE = "LIKE"
    PASS = "PASS"


class DuplicateSwipeScope(str, Enum):
    DAY = "DAY"
    FOREVER = "FOREVER"


@dataclass(frozen=True, slots=True)
class SwipePolicy:
    daily_limit: int = DEFAULT_DAILY_SWIPE_LIMIT
    duplicate_scope: DuplicateSwipeScope = DuplicateSwipeScope.DAY
    timezone_name: str = DEFAULT_REFERENCE_TIMEZONE

    @classmethod
    def from_settings(cls, settings) -> SwipePolicy:
        return cls(
            daily_limit=settings.daily_swipe_limit,
            duplicate_scope=DuplicateSwipeScope(settings.swipe_duplicate_scope),
            timezone_name=settings.reference_timezone,
        )


@dataclass(slots=True)
class SwipeResult:
    accepted: bool
    swipe_id: int
    local_date: date
    swipes_today: int
    premium_active: bool
    remaining_today: int | None


@dataclass(slots=True)
class SwipeQuotaSnapshot:
    local_date: date
    swipes_today: int
    daily_limit: int
    premium_active: bool
    remaining_today: int | None
