"""m1_core_data_model

Revision ID: 3c1d2e4f5a60
Revises:
Create Date: 2026-10-17 09:00:00.000000
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision: str = "3c1d2e4f5a60"
down_revision: str | None = None
branch_labels: Sequence[str] | None = None
depends_on: Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("gender", sa.String(16), nullable=False),
        sa.Column("date_of_birth", sa.Date(), nullable=False),
        sa.Column("is_premium", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("verified", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.CheckConstraint("gender IN ('male','female','other')", name="ck_users_gender"),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )
    op.create_index("idx_users_created_at", "users", ["created_at"])

    op.create_table(
        "premium_packages",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(64), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=sa.text("''")),
        sa.Column("price", sa.Numeric(12, 2), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.CheckConstraint("price >= 0", name="ck_premium_packages_price_non_negative"),
        sa.UniqueConstraint("name", name="uq_premium_packages_name"),
    )

    op.create_table(
        "swipes",
        sa.Column("id", sa.BigInteger(), sa.Identity(always=False), primary_key=True),
        sa.Column("swiper_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("swiped_user_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("swipe_type", sa.String(8), nullable=False),
        sa.Column("swiped_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("swipe_type IN ('LIKE','PASS')", name="ck_swipes_type"),
        sa.CheckConstraint("swiper_id <> swiped_user_id", name="ck_swipes_not_self"),
        sa.ForeignKeyConstraint(["swiper_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["swiped_user_id"], ["users.id"]),
    )
    op.create_index(
        "idx_swipes_pair_swiped_at",
        "swipes",
        ["swiper_id", "swiped_user_id", "swiped_at"],
    )
    op.create_index(
        "idx_swipes_likes_received",
        "swipes",
        ["swiped_user_id", "swiper_id"],
        postgresql_where=sa.text("swipe_type = 'LIKE'"),
    )

    op.create_table(
        "daily_limits",
        sa.Column("id", sa.BigInteger(), sa.Identity(always=False), primary_key=True),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("swipe_count", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("swipe_count >= 0", name="ck_daily_limits_swipe_count_non_negative"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.UniqueConstraint("user_id", "date", name="uq_daily_limits_user_date"),
    )
    op.create_index("idx_daily_limits_date", "daily_limits", ["date"])

    op.create_table(
        "user_premium_subscriptions",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("premium_package_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.CheckConstraint("end_date >= start_date", name="ck_user_premium_subscriptions_period"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["premium_package_id"], ["premium_packages.id"]),
    )
    op.create_index(
        "idx_user_premium_subscriptions_user_end",
        "user_premium_subscriptions",
        ["user_id", "end_date"],
    )
    op.create_index(
        "idx_user_premium_subscriptions_package",
        "user_premium_subscriptions",
        ["premium_package_id"],
    )


def downgrade() -> None:
    op.drop_index("idx_user_premium_subscriptions_package", table_name="user_premium_subscriptions")
    op.drop_index("idx_user_premium_subscriptions_user_end", table_name="user_premium_subscriptions")
    op.drop_table("user_premium_subscriptions")
    op.drop_index("idx_daily_limits_date", table_name="daily_limits")
    op.drop_table("daily_limits")
    op.drop_index("idx_swipes_likes_received", table_name="swipes")
    op.drop_index("idx_swipes_pair_swiped_at", table_name="swipes")
    op.drop_table("swipes")
    op.drop_table("premium_packages")
    op.drop_index("idx_users_created_at", table_name="users")
    op.drop_table("users")
