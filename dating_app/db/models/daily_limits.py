from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    Date,
    DateTime,
    ForeignKey,
    Identity,
    Index,
    Integer,
    UniqueConstraint,
    text,
)
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import Mapped, mapped_column

from dating_app.db.models.base import Base


class DailyLimit(Base):
    __tablename__ = "daily_limits"
    __table_args__ = (
        CheckConstraint("swipe_count >= 0", name="ck_daily_limits_swipe_count_non_negative"),
        UniqueConstraint("user_id", "date", name="uq_daily_limits_user_date"),
        Index("idx_daily_limits_date", "date"),
    )

    id: Mapped[int] = mapped_column(BigInteger, Identity(always=False), primary_key=True)
    user_id: Mapped[UUID] = mapped_column(
        PG_UUID(as_uuid=True),
        ForeignKey("users.id"),
        nullable=False,
    )
    local_date: Mapped[date] = mapped_column("date", Date, nullable=False)
    swipe_count: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default=text("0"),
    )
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
