"""create admin_activity_logs table

Revision ID: 20251213214508
Revises: 20251213214507
Create Date: 2025-12-13
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision = "20251213214508"
down_revision = "20251213214507"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "admin_activity_logs",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("admin_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column(
            "action_type",
            postgresql.ENUM(
                "login",
                "logout",
                "create",
                "update",
                "delete",
                "upload",
                "download",
                "export",
                "import",
                "approve",
                "reject",
                "system_action",
                name="enum_admin_activity_logs_action_type",
            ),
            nullable=False,
        ),
        sa.Column("description", sa.String(200), nullable=False),
        sa.Column("entity_type", sa.String(100), nullable=True),
        sa.Column("entity_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("old_values", postgresql.JSONB(astext_type=sa.Text()), nullable=True),
        sa.Column("new_values", postgresql.JSONB(astext_type=sa.Text()), nullable=True),
        sa.Column("metadata", postgresql.JSONB(astext_type=sa.Text()), nullable=True),
        sa.Column("ip_address", sa.String(45), nullable=True),
        sa.Column("user_agent", sa.String(500), nullable=True),
        sa.Column("was_successful", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("error_message", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
    )

    op.create_index("admin_activity_logs_admin_id", "admin_activity_logs", ["admin_id"])
    op.create_index("admin_activity_logs_action_type", "admin_activity_logs", ["action_type"])
    op.create_index("admin_activity_logs_created_at", "admin_activity_logs", ["created_at"])
    op.create_index("admin_activity_logs_ip_address", "admin_activity_logs", ["ip_address"])
    op.create_index("admin_activity_logs_entity_type_entity_id", "admin_activity_logs", ["entity_type", "entity_id"])


def downgrade() -> None:
    op.drop_table("admin_activity_logs")
    op.execute("DROP TYPE IF EXISTS enum_admin_activity_logs_action_type")
