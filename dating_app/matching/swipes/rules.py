from __future__ import annotations

from datetime import datetime

from dating_app.core.day_window import DayWindow
from dating_app.matching.swipes.types import DuplicateSwipeScope


def duplicate_lookup_bounds(
    scope: DuplicateSwipeScope,
    window: DayWindow,
) -> tuple[datetime | None, datetime | None]:
    """Time bounds for the earlier-swipe lookup; (None, None) means any time."""
    if scope == DuplicateSwipeScope.FOREVER:
        return None, None
    return window.starts_at_utc, window.ends_at_utc


def is_quota_exhausted(*, swipes_today: int, daily_limit: int, premium_active: bool) -> bool:
    if premium_active:
        return False
    return swipes_today >= daily_limit


def remaining_swipes(*, swipes_today: int, daily_limit: int, premium_active: bool) -> int | None:
    if premium_active:
        return None
    return max(0, daily_limit - swipes_today)
