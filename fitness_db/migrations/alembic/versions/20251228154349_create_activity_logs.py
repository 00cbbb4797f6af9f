"""create activity_logs table

End-user audit trail (logins, profile updates, ...).

Revision ID: 20251228154349
Revises: 20251228154348
Create Date: 2025-12-28
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision = "20251228154349"
down_revision = "20251228154348"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "activity_logs",
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            primary_key=True,
            server_default=sa.text("uuid_generate_v4()"),
        ),
        sa.Column(
            "user_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("users.id", name="fk_activity_logs_user", onupdate="CASCADE", ondelete="CASCADE"),
            nullable=False,
        ),
        # LOGIN, LOGOUT, PROFILE_UPDATED, ...
        sa.Column("action", sa.String(50), nullable=False),
        sa.Column("entity_type", sa.String(100), nullable=True),
        sa.Column("entity_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("details", postgresql.JSONB(astext_type=sa.Text()), nullable=False, server_default=sa.text("'{}'::jsonb")),
        sa.Column("ip_address", sa.String(50), nullable=True),
        sa.Column("user_agent", sa.String(255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
    )

    op.create_index("activity_logs_user_id_created_at", "activity_logs", ["user_id", "created_at"])
    op.create_index("activity_logs_action", "activity_logs", ["action"])
    op.create_index("activity_logs_entity_type_entity_id", "activity_logs", ["entity_type", "entity_id"])
    op.create_index("activity_logs_user_id", "activity_logs", ["user_id"])


def downgrade() -> None:
    op.drop_table("activity_logs")
