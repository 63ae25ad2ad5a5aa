from celery import Celery

from dating_app.core.config import get_settings

settings = get_settings()

celery_app = Celery(
    "dating_app",
    broker=settings.celery_broker_url,
    backend=settings.celery_result_backend,
    include=[
        "dating_app.workers.tasks.quota_reset",
    ],
)

# Beat crontabs are evaluated in the reference timezone, so hour=0 is local midnight.
celery_app.conf.update(
    task_default_queue="q_normal",
    task_acks_late=True,
    worker_prefetch_multiplier=1,
    task_serializer="json",
    result_serializer="json",
    accept_content=["json"],
    timezone=settings.reference_timezone,
    enable_utc=True,
)


@celery_app.task(name="dating_app.workers.celery_app.ping")
def ping() -> str:
    return "pong"
