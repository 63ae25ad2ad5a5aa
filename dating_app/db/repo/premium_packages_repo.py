from __future__ import annotations

from decimal import Decimal
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from dating_app.db.models.premium_packages import PremiumPackage


class PremiumPackagesRepo:
    @staticmethod
    async def get_by_id(session: AsyncSession, package_id: UUID) -> PremiumPackage | None:
        return await session.get(PremiumPackage, package_id)

    @staticmethod
    async def get_by_name(session: AsyncSession, name: str) -> PremiumPackage | None:
        stmt = select(PremiumPackage).where(PremiumPackage.name == name)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    async def list_all(session: AsyncSession) -> list[PremiumPackage]:
        stmt = select(PremiumPackage).order_by(PremiumPackage.price.asc(), PremiumPackage.name.asc())
        result = await session.execute(stmt)
        return list(result.scalars().all())

    @staticmethod
    async def create(
        session: AsyncSession,
        *,
        name: str,
        description: str,
        price: Decimal,
    ) -> PremiumPackage:
        package = PremiumPackage(name=name, description=description, price=price)
        session.add(package)
        await session.flush()
        return package
