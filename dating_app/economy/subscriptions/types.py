from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID


@dataclass(frozen=True, slots=True)
class PremiumPackageInfo:
    id: UUID
    name: str
    description: str
    price: Decimal


@dataclass(frozen=True, slots=True)
class SubscriptionRecord:
    id: UUID
    user_id: UUID
    premium_package_id: UUID
    start_date: date
    end_date: date


@dataclass(frozen=True, slots=True)
class ActiveSubscription:
    subscription: SubscriptionRecord
    package: PremiumPackageInfo
