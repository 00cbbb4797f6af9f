"""create programs table

Revision ID: 20251213214502
Revises: 20251213214501
Create Date: 2025-12-13
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision = "20251213214502"
down_revision = "20251213214501"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "programs",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("slug", sa.String(100), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("duration", sa.Integer(), nullable=False, server_default="30"),
        sa.Column(
            "difficulty",
            postgresql.ENUM("beginner", "intermediate", "advanced", name="enum_programs_difficulty"),
            nullable=False,
            server_default="beginner",
        ),
        sa.Column(
            "gender_target",
            postgresql.ENUM("male", "female", "both", name="enum_programs_gender_target"),
            nullable=False,
            server_default="both",
        ),
        sa.Column("equipment_required", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("cover_image_url", sa.String(500), nullable=True),
        sa.Column(
            "status",
            postgresql.ENUM("draft", "published", "archived", name="enum_programs_status"),
            nullable=False,
            server_default="draft",
        ),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("enrollment_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
    )

    op.create_index("programs_slug", "programs", ["slug"], unique=True)
    op.create_index("programs_status_is_active", "programs", ["status", "is_active"])
    op.create_index("programs_difficulty", "programs", ["difficulty"])
    op.create_index("programs_sort_order", "programs", ["sort_order"])


def downgrade() -> None:
    op.drop_table("programs")
    op.execute("DROP TYPE IF EXISTS enum_programs_difficulty")
    op.execute("DROP TYPE IF EXISTS enum_programs_gender_target")
    op.execute("DROP TYPE IF EXISTS enum_programs_status")
