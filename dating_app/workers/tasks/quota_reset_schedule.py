from __future__ import annotations

from celery.schedules import crontab

QUOTA_RESET_TASK_NAME = "dating_app.workers.tasks.quota_reset.run_quota_reset"


def configure_quota_reset_schedule(celery_app, *, hour: int, minute: int) -> None:
    celery_app.conf.beat_schedule = celery_app.conf.beat_schedule or {}
    celery_app.conf.beat_schedule.update(
        {
            "daily-swipe-quota-reset": {
                "task": QUOTA_RESET_TASK_NAME,
                "schedule": crontab(hour=hour, minute=minute),
                "options": {"queue": "q_normal"},
            },
        }
    )
