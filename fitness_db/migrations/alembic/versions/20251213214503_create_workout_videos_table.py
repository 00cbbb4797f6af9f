"""create workout_videos table

Revision ID: 20251213214503
Revises: 20251213214502
Create Date: 2025-12-13
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision = "20251213214503"
down_revision = "20251213214502"
branch_labels = None
depends_on = None


def upgrade() -> None:
    # program_id, original_video_asset_id and thumbnail_asset_id get their
    # constraints in 20251213214510, once media_assets exists.
    op.create_table(
        "workout_videos",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("program_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("day", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("video_key", sa.String(100), nullable=False),
        sa.Column("thumbnail_key", sa.String(100), nullable=True),
        sa.Column("duration", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "difficulty",
            postgresql.ENUM("beginner", "intermediate", "advanced", name="enum_workout_videos_difficulty"),
            nullable=False,
            server_default="beginner",
        ),
        sa.Column("calories_burned", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_welcome_video", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "muscle_groups",
            postgresql.ARRAY(sa.String(255)),
            nullable=False,
            server_default=sa.text("ARRAY[]::varchar[]"),
        ),
        sa.Column("has_adaptive_streaming", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("streaming_manifest_key", sa.String(100), nullable=True),
        sa.Column("original_video_asset_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("thumbnail_asset_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
    )

    op.create_index("workout_videos_program_id_day", "workout_videos", ["program_id", "day"])
    op.create_index("workout_videos_is_active", "workout_videos", ["is_active"])
    op.create_index("workout_videos_is_welcome_video", "workout_videos", ["is_welcome_video"])
    op.create_index("workout_videos_day", "workout_videos", ["day"])
    op.create_index("workout_videos_program_id", "workout_videos", ["program_id"])


def downgrade() -> None:
    op.drop_table("workout_videos")
    op.execute("DROP TYPE IF EXISTS enum_workout_videos_difficulty")
