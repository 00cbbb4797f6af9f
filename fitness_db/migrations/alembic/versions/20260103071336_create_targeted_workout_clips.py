"""create targeted_workout_clips table

Revision ID: 20260103071336
Revises: 20260103071335
Create Date: 2026-01-03
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision = "20260103071336"
down_revision = "20260103071335"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "targeted_workout_clips",
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            primary_key=True,
            server_default=sa.text("uuid_generate_v4()"),
        ),
        sa.Column(
            "targeted_workout_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey(
                "targeted_workouts.id",
                name="fk_targeted_workout_clips_workout",
                onupdate="CASCADE",
                ondelete="CASCADE",
            ),
            nullable=False,
        ),
        sa.Column("clip_order", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("exercise", sa.String(100), nullable=False),
        sa.Column("duration", sa.Integer(), nullable=False, server_default="30"),
        sa.Column("video_key", sa.String(100), nullable=False),
        sa.Column("thumbnail_key", sa.String(100), nullable=True),
        sa.Column("instructions", sa.Text(), nullable=True),
        sa.Column("tips", sa.Text(), nullable=True),
        sa.Column("calories_burned", sa.Integer(), server_default="5"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column(
            "original_video_asset_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey(
                "media_assets.id",
                name="fk_targeted_workout_clips_original_asset",
                onupdate="CASCADE",
                ondelete="SET NULL",
            ),
            nullable=True,
        ),
        sa.Column(
            "thumbnail_asset_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey(
                "media_assets.id",
                name="fk_targeted_workout_clips_thumbnail_asset",
                onupdate="CASCADE",
                ondelete="SET NULL",
            ),
            nullable=True,
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
    )

    op.create_index("targeted_workout_clips_targeted_workout_id", "targeted_workout_clips", ["targeted_workout_id"])
    op.create_index("targeted_workout_clips_clip_order", "targeted_workout_clips", ["clip_order"])
    op.create_index("targeted_workout_clips_is_active", "targeted_workout_clips", ["is_active"])
    op.create_index(
        "targeted_workout_clips_workout_order_unique",
        "targeted_workout_clips",
        ["targeted_workout_id", "clip_order"],
        unique=True,
    )


def downgrade() -> None:
    op.drop_table("targeted_workout_clips")
