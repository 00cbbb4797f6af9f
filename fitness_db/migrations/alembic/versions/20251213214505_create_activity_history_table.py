"""create activity_history table

Revision ID: 20251213214505
Revises: 20251213214504
Create Date: 2025-12-13
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision = "20251213214505"
down_revision = "20251213214504"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "activity_history",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("workout_video_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("day", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("watched_duration", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_completed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("rating", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
    )

    op.create_index("activity_history_user_id_workout_video_id", "activity_history", ["user_id", "workout_video_id"])
    op.create_index("activity_history_user_id_day", "activity_history", ["user_id", "day"])
    op.create_index("activity_history_user_id_created_at", "activity_history", ["user_id", "created_at"])
    op.create_index("activity_history_is_completed", "activity_history", ["is_completed"])
    op.create_index("activity_history_user_id", "activity_history", ["user_id"])
    op.create_index("activity_history_workout_video_id", "activity_history", ["workout_video_id"])


def downgrade() -> None:
    op.drop_table("activity_history")
