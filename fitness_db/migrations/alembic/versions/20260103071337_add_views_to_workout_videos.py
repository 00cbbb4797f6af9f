"""add views to workout_videos

Revision ID: 20260103071337
Revises: 20260103071336
Create Date: 2026-01-03
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


revision = "20260103071337"
down_revision = "20260103071336"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.add_column("workout_videos", sa.Column("views", sa.Integer(), nullable=False, server_default="0"))


def downgrade() -> None:
    op.drop_column("workout_videos", "views")
