from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from zoneinfo import ZoneInfo


@dataclass(frozen=True, slots=True)
class DayWindow:
    local_date: date
    starts_at_utc: datetime
    ends_at_utc: datetime


def local_date_in(now_utc: datetime, timezone_name: str) -> date:
    """Converts a UTC instant to the calendar date of the reference timezone."""
    return now_utc.astimezone(ZoneInfo(timezone_name)).date()


def day_window(now_utc: datetime, timezone_name: str) -> DayWindow:
    """Returns the half-open [start, end) UTC bounds of the local day containing now_utc.

    Bounds come from the two local midnights, so 23h and 25h days around DST
    switches are handled by the zone rules rather than by adding 24 hours.
    """
    tz = ZoneInfo(timezone_name)
    local_date = now_utc.astimezone(tz).date()
    starts_local = datetime.combine(local_date, time.min, tzinfo=tz)
    ends_local = datetime.combine(local_date + timedelta(days=1), time.min, tzinfo=tz)
    return DayWindow(
        local_date=local_date,
        starts_at_utc=starts_local.astimezone(timezone.utc),
        ends_at_utc=ends_local.astimezone(timezone.utc),
    )
