"""add nutrition facts fields to nutrition

Revision ID: 20260103071340
Revises: 20260103071339
Create Date: 2026-01-03
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

from fitness_db.enums import create_type_if_missing, pg_enum


revision = "20260103071340"
down_revision = "20260103071339"
branch_labels = None
depends_on = None


NUTRITION_DIFFICULTY = pg_enum("enum_nutrition_difficulty")


def upgrade() -> None:
    # add_column does not emit CREATE TYPE.
    op.execute(create_type_if_missing("enum_nutrition_difficulty"))

    # Grams per serving.
    op.add_column("nutrition", sa.Column("protein_g", sa.Integer(), nullable=True))
    op.add_column("nutrition", sa.Column("carbs_g", sa.Integer(), nullable=True))
    op.add_column("nutrition", sa.Column("fat_g", sa.Integer(), nullable=True))
    op.add_column("nutrition", sa.Column("fiber_g", sa.Integer(), nullable=True))
    op.add_column("nutrition", sa.Column("servings", sa.Integer(), nullable=True))
    op.add_column(
        "nutrition",
        sa.Column("difficulty", NUTRITION_DIFFICULTY, nullable=True, server_default="intermediate"),
    )

    op.create_index("nutrition_servings_idx", "nutrition", ["servings"])
    op.create_index("nutrition_difficulty_idx", "nutrition", ["difficulty"])


def downgrade() -> None:
    op.drop_index("nutrition_difficulty_idx", table_name="nutrition")
    op.drop_index("nutrition_servings_idx", table_name="nutrition")

    op.drop_column("nutrition", "difficulty")
    op.drop_column("nutrition", "servings")
    op.drop_column("nutrition", "fiber_g")
    op.drop_column("nutrition", "fat_g")
    op.drop_column("nutrition", "carbs_g")
    op.drop_column("nutrition", "protein_g")

    op.execute("DROP TYPE IF EXISTS enum_nutrition_difficulty")
