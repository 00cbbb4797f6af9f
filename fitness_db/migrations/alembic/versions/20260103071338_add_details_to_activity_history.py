"""add details and program_id to activity_history

Revision ID: 20260103071338
Revises: 20260103071337
Create Date: 2026-01-03
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision = "20260103071338"
down_revision = "20260103071337"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.add_column(
        "activity_history",
        sa.Column("details", postgresql.JSONB(astext_type=sa.Text()), nullable=True, server_default=sa.text("'{}'::jsonb")),
    )
    op.add_column("activity_history", sa.Column("program_id", postgresql.UUID(as_uuid=True), nullable=True))
    op.create_foreign_key(
        "fk_activity_history_program",
        "activity_history",
        "programs",
        ["program_id"],
        ["id"],
        onupdate="CASCADE",
        ondelete="CASCADE",
    )

    # Existing rows inherit the program of the video they point at.
    op.execute(
        """
        UPDATE activity_history ah
        SET program_id = wv.program_id
        FROM workout_videos wv
        WHERE ah.workout_video_id = wv.id
          AND ah.program_id IS NULL
        """
    )
    op.alter_column("activity_history", "program_id", existing_type=postgresql.UUID(as_uuid=True), nullable=False)

    op.create_index("activity_history_program_id", "activity_history", ["program_id"])


def downgrade() -> None:
    op.drop_index("activity_history_program_id", table_name="activity_history")
    op.drop_constraint("fk_activity_history_program", "activity_history", type_="foreignkey")
    op.drop_column("activity_history", "program_id")
    op.drop_column("activity_history", "details")
