"""create users table

Revision ID: 20251213214500
Revises: None
Create Date: 2025-12-13
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision = "20251213214500"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')
    op.execute('CREATE EXTENSION IF NOT EXISTS "pg_trgm"')

    op.create_table(
        "users",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("phone", sa.String(20), nullable=False),
        sa.Column("phone_formatted", sa.String(20), nullable=False),
        sa.Column("name", sa.String(100), nullable=True),
        sa.Column("email", sa.String(100), nullable=True),
        sa.Column(
            "subscription_status",
            postgresql.ENUM(
                "active",
                "inactive",
                "expired",
                "pending",
                "failed",
                "cancelled",
                name="enum_users_subscription_status",
            ),
            nullable=False,
            server_default="inactive",
        ),
        sa.Column(
            "subscription_plan",
            postgresql.ENUM("daily", "weekly", "monthly", name="enum_users_subscription_plan"),
            nullable=True,
        ),
        sa.Column("subscription_end_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("daily_streak", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("last_workout_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("total_workouts", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("total_minutes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "gender_preference",
            postgresql.ENUM("male", "female", "both", name="enum_users_gender_preference"),
            nullable=False,
            server_default="both",
        ),
        sa.Column(
            "fitness_level",
            postgresql.ENUM("beginner", "intermediate", "advanced", name="enum_users_fitness_level"),
            nullable=False,
            server_default="beginner",
        ),
        sa.Column("equipment_available", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("has_completed_welcome_video", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("timezone", sa.String(50), nullable=True, server_default="Africa/Lagos"),
        sa.Column("metadata", postgresql.JSONB(astext_type=sa.Text()), nullable=False, server_default=sa.text("'{}'::jsonb")),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
    )

    op.create_index("users_phone_formatted_unique", "users", ["phone_formatted"], unique=True)
    op.create_index("users_subscription_status_idx", "users", ["subscription_status"])
    op.create_index("users_subscription_end_date_idx", "users", ["subscription_end_date"])
    op.create_index("users_phone_idx", "users", ["phone"])
    # Many users sign up by phone only; uniqueness applies to present emails.
    op.create_index(
        "users_email_idx",
        "users",
        ["email"],
        unique=True,
        postgresql_where=sa.text("email IS NOT NULL"),
    )
    op.create_index(
        "users_name_idx",
        "users",
        ["name"],
        postgresql_using="gin",
        postgresql_ops={"name": "gin_trgm_ops"},
    )


def downgrade() -> None:
    op.drop_index("users_name_idx", table_name="users")
    op.drop_index("users_email_idx", table_name="users")
    op.drop_index("users_phone_idx", table_name="users")
    op.drop_index("users_subscription_end_date_idx", table_name="users")
    op.drop_index("users_subscription_status_idx", table_name="users")
    op.drop_index("users_phone_formatted_unique", table_name="users")
    op.drop_table("users")

    op.execute("DROP TYPE IF EXISTS enum_users_subscription_status")
    op.execute("DROP TYPE IF EXISTS enum_users_subscription_plan")
    op.execute("DROP TYPE IF EXISTS enum_users_gender_preference")
    op.execute("DROP TYPE IF EXISTS enum_users_fitness_level")
