"""add targeted workout support to activity_history

A history row now points at either a program video or a targeted workout,
discriminated by activity_type. The exactly-one rule is enforced by
fitness_db.activity, not by a CHECK constraint.

Revision ID: 20260103071339
Revises: 20260103071338
Create Date: 2026-01-03
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from fitness_db.enums import create_type_if_missing, pg_enum


revision = "20260103071339"
down_revision = "20260103071338"
branch_labels = None
depends_on = None


ACTIVITY_TYPE = pg_enum("enum_activity_history_activity_type")


def upgrade() -> None:
    op.execute(create_type_if_missing("enum_activity_history_activity_type"))

    op.add_column("activity_history", sa.Column("targeted_workout_id", postgresql.UUID(as_uuid=True), nullable=True))
    op.create_foreign_key(
        "fk_activity_history_targeted_workout",
        "activity_history",
        "targeted_workouts",
        ["targeted_workout_id"],
        ["id"],
        onupdate="CASCADE",
        ondelete="SET NULL",
    )
    op.add_column(
        "activity_history",
        sa.Column("activity_type", ACTIVITY_TYPE, nullable=False, server_default="PROGRAM_WORKOUT"),
    )

    op.alter_column("activity_history", "workout_video_id", existing_type=postgresql.UUID(as_uuid=True), nullable=True)
    op.alter_column("activity_history", "program_id", existing_type=postgresql.UUID(as_uuid=True), nullable=True)
    op.alter_column("activity_history", "day", existing_type=sa.Integer(), nullable=True)

    op.create_index("idx_activity_history_targeted_workout_id", "activity_history", ["targeted_workout_id"])
    op.create_index("idx_activity_history_activity_type", "activity_history", ["activity_type"])

    # Normalization only; the server default already covers existing rows.
    op.execute(
        """
        UPDATE activity_history
        SET activity_type = 'PROGRAM_WORKOUT'
        WHERE activity_type IS NULL
        """
    )


def downgrade() -> None:
    # The normalization UPDATE above has nothing to undo.
    # Restoring NOT NULL fails while TARGETED_WORKOUT rows exist; remove them first.
    op.drop_index("idx_activity_history_activity_type", table_name="activity_history")
    op.drop_index("idx_activity_history_targeted_workout_id", table_name="activity_history")
    op.drop_constraint("fk_activity_history_targeted_workout", "activity_history", type_="foreignkey")
    op.drop_column("activity_history", "targeted_workout_id")
    op.drop_column("activity_history", "activity_type")

    op.alter_column("activity_history", "workout_video_id", existing_type=postgresql.UUID(as_uuid=True), nullable=False)
    op.alter_column("activity_history", "program_id", existing_type=postgresql.UUID(as_uuid=True), nullable=False)
    op.alter_column("activity_history", "day", existing_type=sa.Integer(), nullable=False)

    op.execute("DROP TYPE IF EXISTS enum_activity_history_activity_type")
