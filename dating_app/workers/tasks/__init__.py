from dating_app.workers.tasks.quota_reset import run_quota_reset

__all__ = [
    "run_quota_reset",
]
