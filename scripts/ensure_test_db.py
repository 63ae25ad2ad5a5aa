from __future__ import annotations

import asyncio
import re

import asyncpg
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import create_async_engine

from dating_app.core.config import get_settings
from dating_app.core.integration_db_safety import assert_safe_integration_db
from dating_app.db.models.base import Base

IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


async def _create_database_if_missing(database_url: str) -> bool:
    parsed = make_url(database_url)
    if parsed.username is None:
        raise RuntimeError("DATABASE_URL username is required.")
    if IDENTIFIER_RE.fullmatch(parsed.database or "") is None:
        raise RuntimeError(f"Unsupported database name '{parsed.database}'.")

    conn = await asyncpg.connect(
        host=parsed.host or "localhost",
        port=int(parsed.port or 5432),
        user=parsed.username,
        password=parsed.password,
        database="postgres",
    )
    try:
        if await conn.fetchval("SELECT 1 FROM pg_database WHERE datname = $1", parsed.database):
            return False
        await conn.execute(f'CREATE DATABASE "{parsed.database}"')
        return True
    finally:
        await conn.close()


async def _create_tables(database_url: str) -> None:
    engine = create_async_engine(database_url)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    finally:
        await engine.dispose()


async def _ensure_test_db(database_url: str) -> None:
    assert_safe_integration_db(database_url)
    created = await _create_database_if_missing(database_url)
    await _create_tables(database_url)
    db_name = make_url(database_url).database
    print(f"ensure_test_db: {'created' if created else 'exists'} db={db_name}")  # noqa: T201


def main() -> int:
    asyncio.run(_ensure_test_db(get_settings().database_url))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
