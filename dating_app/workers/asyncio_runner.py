from __future__ import annotations

import asyncio
from collections.abc import Awaitable
from time import perf_counter
from typing import TypeVar

import structlog

from dating_app.db.session import dispose_engine

T = TypeVar("T")
logger = structlog.get_logger(__name__)


async def _run_with_fresh_db_pool(awaitable: Awaitable[T]) -> T:
    # asyncpg connections are bound to the loop that opened them; each job gets a new loop.
    await dispose_engine()
    try:
        return await awaitable
    finally:
        await dispose_engine()


def run_async_job(awaitable: Awaitable[T], *, job_name: str | None = None) -> T:
    started_at = perf_counter()
    try:
        return asyncio.run(_run_with_fresh_db_pool(awaitable))
    finally:
        if job_name is not None:
            logger.debug(
                "worker_job_finished",
                job=job_name,
                duration_ms=int((perf_counter() - started_at) * 1000),
            )
