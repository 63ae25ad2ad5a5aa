from __future__ import annotations

from datetime import datetime, timezone

import structlog

from dating_app.core.config import get_settings
from dating_app.core.day_window import local_date_in
from dating_app.db.repo.daily_limits_repo import DailyLimitsRepo
from dating_app.db.session import SessionLocal
from dating_app.workers.asyncio_runner import run_async_job
from dating_app.workers.celery_app import celery_app
from dating_app.workers.tasks.quota_reset_schedule import (
    QUOTA_RESET_TASK_NAME,
    configure_quota_reset_schedule,
)

logger = structlog.get_logger(__name__)


async def run_quota_reset_async(now_utc: datetime | None = None) -> dict[str, object]:
    settings = get_settings()
    now_utc = now_utc or datetime.now(timezone.utc)
    local_date = local_date_in(now_utc, settings.reference_timezone)
    # Single UPDATE; rows are zeroed in place, never read and written back.
    before_date = local_date if settings.quota_reset_scope == "BEFORE_TODAY" else None

    async with SessionLocal.begin() as session:
        reset_rows = await DailyLimitsRepo.reset_counts(
            session,
            now_utc=now_utc,
            before_date=before_date,
        )

    result: dict[str, object] = {
        "reset_rows": reset_rows,
        "scope": settings.quota_reset_scope,
        "local_date": local_date.isoformat(),
    }
    logger.info("quota_reset_finished", **result)
    return result


@celery_app.task(name=QUOTA_RESET_TASK_NAME)
def run_quota_reset() -> dict[str, object]:
    return run_async_job(run_quota_reset_async(), job_name="quota_reset")


_settings = get_settings()
configure_quota_reset_schedule(
    celery_app,
    hour=_settings.quota_reset_hour,
    minute=_settings.quota_reset_minute,
)
