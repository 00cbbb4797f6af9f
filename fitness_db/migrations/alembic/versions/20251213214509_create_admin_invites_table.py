"""create admin_invites table

Revision ID: 20251213214509
Revises: 20251213214508
Create Date: 2025-12-13
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision = "20251213214509"
down_revision = "20251213214508"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "admin_invites",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("invited_by", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("email", sa.String(100), nullable=False),
        sa.Column("name", sa.String(100), nullable=True),
        sa.Column("token", sa.String(100), nullable=False),
        sa.Column(
            "role",
            postgresql.ENUM(
                "super_admin",
                "content_manager",
                "video_editor",
                "support",
                "viewer",
                name="enum_admin_invites_role",
            ),
            nullable=False,
            server_default="content_manager",
        ),
        sa.Column("permissions", postgresql.JSONB(astext_type=sa.Text()), nullable=False, server_default=sa.text("'[]'::jsonb")),
        sa.Column(
            "status",
            postgresql.ENUM("pending", "accepted", "expired", "revoked", name="enum_admin_invites_status"),
            nullable=False,
            server_default="pending",
        ),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("accepted_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("accepted_by_admin_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
    )

    op.create_index("admin_invites_token", "admin_invites", ["token"], unique=True)
    op.create_index("admin_invites_status", "admin_invites", ["status"])
    op.create_index("admin_invites_email", "admin_invites", ["email"])
    op.create_index("admin_invites_invited_by", "admin_invites", ["invited_by"])
    op.create_index("admin_invites_expires_at", "admin_invites", ["expires_at"])


def downgrade() -> None:
    op.drop_table("admin_invites")
    op.execute("DROP TYPE IF EXISTS enum_admin_invites_role")
    op.execute("DROP TYPE IF EXISTS enum_admin_invites_status")
