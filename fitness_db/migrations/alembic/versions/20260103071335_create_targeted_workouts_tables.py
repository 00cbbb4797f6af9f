"""create targeted_workouts table

Short body-part workouts assembled from 30-second clips.

Revision ID: 20260103071335
Revises: 20260103071334
Create Date: 2026-01-03
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision = "20260103071335"
down_revision = "20260103071334"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "targeted_workouts",
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            primary_key=True,
            server_default=sa.text("uuid_generate_v4()"),
        ),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        # Seconds, sum of all clips.
        sa.Column("total_duration", sa.Integer(), nullable=False, server_default="180"),
        # chest, arms, abs, legs, glutes, shoulders, back, full_body
        sa.Column("body_part", sa.String(100), nullable=False),
        sa.Column(
            "gender_target",
            postgresql.ENUM("male", "female", "both", name="enum_targeted_workouts_gender_target"),
            server_default="both",
        ),
        # belly_fat, toning, strength, cardio, flexibility
        sa.Column("category", sa.String(100), nullable=False),
        sa.Column(
            "difficulty",
            postgresql.ENUM("beginner", "intermediate", "advanced", name="enum_targeted_workouts_difficulty"),
            server_default="beginner",
        ),
        sa.Column("calories_burned", sa.Integer(), server_default="40"),
        sa.Column("clip_count", sa.Integer(), server_default="6"),
        sa.Column("thumbnail_key", sa.String(100), nullable=False),
        sa.Column("equipment_required", sa.Boolean(), server_default=sa.false()),
        sa.Column("focus_areas", postgresql.ARRAY(sa.String(255)), server_default=sa.text("ARRAY[]::varchar[]")),
        sa.Column("tags", postgresql.ARRAY(sa.String(255)), server_default=sa.text("ARRAY[]::varchar[]")),
        sa.Column("view_count", sa.Integer(), server_default="0"),
        sa.Column("rating", sa.Float(), server_default="0"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("sort_order", sa.Integer(), server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
    )

    op.create_index("targeted_workouts_body_part", "targeted_workouts", ["body_part"])
    op.create_index("targeted_workouts_gender_target", "targeted_workouts", ["gender_target"])
    op.create_index("targeted_workouts_difficulty", "targeted_workouts", ["difficulty"])
    op.create_index("targeted_workouts_category", "targeted_workouts", ["category"])
    op.create_index("targeted_workouts_is_active", "targeted_workouts", ["is_active"])


def downgrade() -> None:
    op.drop_table("targeted_workouts")
    op.execute("DROP TYPE IF EXISTS enum_targeted_workouts_gender_target")
    op.execute("DROP TYPE IF EXISTS enum_targeted_workouts_difficulty")
