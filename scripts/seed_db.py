from __future__ import annotations

import argparse
import asyncio
from datetime import date
from decimal import Decimal

from dating_app.core.security import hash_password
from dating_app.db.repo.premium_packages_repo import PremiumPackagesRepo
from dating_app.db.repo.users_repo import UsersRepo
from dating_app.db.session import SessionLocal, dispose_engine

DEFAULT_PACKAGES = (
    ("Gold", "Gold membership package: unlimited daily swipes", Decimal("100000")),
)
DEMO_USER_EMAIL = "testuser@example.com"


async def _seed(*, with_demo_user: bool, demo_password: str) -> dict[str, int]:
    created_packages = 0
    created_users = 0
    async with SessionLocal.begin() as session:
        for name, description, price in DEFAULT_PACKAGES:
            if await PremiumPackagesRepo.get_by_name(session, name) is not None:
                continue
            await PremiumPackagesRepo.create(session, name=name, description=description, price=price)
            created_packages += 1

        if with_demo_user and await UsersRepo.get_by_email(session, DEMO_USER_EMAIL) is None:
            await UsersRepo.create(
                session,
                email=DEMO_USER_EMAIL,
                password_hash=hash_password(demo_password),
                name="Test User",
                gender="male",
                date_of_birth=date(1998, 1, 1),
            )
            created_users += 1
    await dispose_engine()
    return {"created_packages": created_packages, "created_users": created_users}


def main() -> int:
    parser = argparse.ArgumentParser(description="Insert premium packages and an optional demo user.")
    parser.add_argument("--no-demo-user", action="store_true")
    parser.add_argument("--demo-password", default="hashedpassword")
    args = parser.parse_args()

    result = asyncio.run(_seed(with_demo_user=not args.no_demo_user, demo_password=args.demo_password))
    print(  # noqa: T201
        f"seed_db: created_packages={result['created_packages']} created_users={result['created_users']}"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
