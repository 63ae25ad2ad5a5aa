from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import BigInteger, CheckConstraint, DateTime, ForeignKey, Identity, Index, String, text
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import Mapped, mapped_column

from dating_app.db.models.base import Base


class Swipe(Base):
    __tablename__ = "swipes"
    __table_args__ = (
        CheckConstraint("swipe_type IN ('LIKE','PASS')", name="ck_swipes_type"),
        CheckConstraint("swiper_id <> swiped_user_id", name="ck_swipes_not_self"),
        Index("idx_swipes_pair_swiped_at", "swiper_id", "swiped_user_id", "swiped_at"),
        Index(
            "idx_swipes_likes_received",
            "swiped_user_id",
            "swiper_id",
            postgresql_where=text("swipe_type = 'LIKE'"),
        ),
    )

    id: Mapped[int] = mapped_column(BigInteger, Identity(always=False), primary_key=True)
    swiper_id: Mapped[UUID] = mapped_column(
        PG_UUID(as_uuid=True),
        ForeignKey("users.id"),
        nullable=False,
    )
    swiped_user_id: Mapped[UUID] = mapped_column(
        PG_UUID(as_uuid=True),
        ForeignKey("users.id"),
        nullable=False,
    )
    swipe_type: Mapped[str] = mapped_column(String(8), nullable=False)
    swiped_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
