"""create subscriptions table

Revision ID: 20251213214506
Revises: 20251213214505
Create Date: 2025-12-13
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision = "20251213214506"
down_revision = "20251213214505"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "subscriptions",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("aggregator_product_id", sa.Integer(), nullable=True),
        sa.Column("aggregator_transaction_id", sa.String(100), nullable=True),
        sa.Column("telco_ref", sa.String(100), nullable=True),
        sa.Column(
            "plan_type",
            postgresql.ENUM("daily", "weekly", "monthly", name="enum_subscriptions_plan_type"),
            nullable=False,
        ),
        # Minor currency units (kobo).
        sa.Column("amount", sa.Integer(), nullable=False),
        sa.Column(
            "status",
            postgresql.ENUM(
                "active",
                "pending",
                "cancelled",
                "expired",
                "failed",
                "suspended",
                name="enum_subscriptions_status",
            ),
            nullable=False,
            server_default="pending",
        ),
        sa.Column(
            "channel",
            postgresql.ENUM("SMS", "USSD", "WEB", "APP", name="enum_subscriptions_channel"),
            nullable=False,
            server_default="SMS",
        ),
        sa.Column(
            "telco",
            postgresql.ENUM("MTN", "AIRTEL", "NINEMOBILE", name="enum_subscriptions_telco"),
            nullable=False,
            server_default="MTN",
        ),
        sa.Column("phone", sa.String(20), nullable=False),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("auto_renewal", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("telco_status_code", sa.String(10), nullable=True),
        sa.Column("telco_status_message", sa.String(255), nullable=True),
        sa.Column(
            "aggregator_response",
            postgresql.JSONB(astext_type=sa.Text()),
            nullable=False,
            server_default=sa.text("'{}'::jsonb"),
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
    )

    op.create_index(
        "subscriptions_aggregator_transaction_id",
        "subscriptions",
        ["aggregator_transaction_id"],
        unique=True,
    )
    op.create_index("subscriptions_telco_ref", "subscriptions", ["telco_ref"])
    op.create_index("subscriptions_user_id_status", "subscriptions", ["user_id", "status"])
    op.create_index("subscriptions_phone", "subscriptions", ["phone"])
    op.create_index("subscriptions_status", "subscriptions", ["status"])
    op.create_index("subscriptions_end_date", "subscriptions", ["end_date"])


def downgrade() -> None:
    op.drop_table("subscriptions")
    op.execute("DROP TYPE IF EXISTS enum_subscriptions_plan_type")
    op.execute("DROP TYPE IF EXISTS enum_subscriptions_status")
    op.execute("DROP TYPE IF EXISTS enum_subscriptions_channel")
    op.execute("DROP TYPE IF EXISTS enum_subscriptions_telco")
