from __future__ import annotations

from datetime import datetime, timezone
from types import SimpleNamespace

from dating_app.core.day_window import day_window
from dating_app.matching.swipes.rules import (
    duplicate_lookup_bounds,
    is_quota_exhausted,
    remaining_swipes,
)
from dating_app.matching.swipes.types import DuplicateSwipeScope, SwipePolicy

UTC = timezone.utc
WINDOW = day_window(datetime(2026, 10, 17, 5, 0, tzinfo=UTC), "Asia/Jakarta")


def test_day_scope_limits_lookup_to_current_local_day() -> None:
    assert duplicate_lookup_bounds(DuplicateSwipeScope.DAY, WINDOW) == (
        WINDOW.starts_at_utc,
        WINDOW.ends_at_utc,
    )


def test_forever_scope_has_no_time_bounds() -> None:
    assert duplicate_lookup_bounds(DuplicateSwipeScope.FOREVER, WINDOW) == (None, None)


def test_quota_not_exhausted_below_limit() -> None:
    assert is_quota_exhausted(swipes_today=9, daily_limit=10, premium_active=False) is False


def test_quota_exhausted_at_limit() -> None:
    assert is_quota_exhausted(swipes_today=10, daily_limit=10, premium_active=False) is True


def test_premium_never_exhausts_quota() -> None:
    assert is_quota_exhausted(swipes_today=250, daily_limit=10, premium_active=True) is False


def test_zero_limit_blocks_first_swipe() -> None:
    assert is_quota_exhausted(swipes_today=0, daily_limit=0, premium_active=False) is True


def test_remaining_swipes_floor_at_zero_and_none_for_premium() -> None:
    assert remaining_swipes(swipes_today=3, daily_limit=10, premium_active=False) == 7
    assert remaining_swipes(swipes_today=12, daily_limit=10, premium_active=False) == 0
    assert remaining_swipes(swipes_today=12, daily_limit=10, premium_active=True) is None


def test_policy_from_settings() -> None:
    policy = SwipePolicy.from_settings(
        SimpleNamespace(
            daily_swipe_limit=5,
            swipe_duplicate_scope="FOREVER",
            reference_timezone="Europe/Berlin",
        )
    )

    assert policy == SwipePolicy(
        daily_limit=5,
        duplicate_scope=DuplicateSwipeScope.FOREVER,
        timezone_name="Europe/Berlin",
    )
