"""create foreign keys

workout_videos and media_assets reference each other, so every base table is
created first and all relationships are added here in one pass.

Revision ID: 20251213214510
Revises: 20251213214509
Create Date: 2025-12-13
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy.exc import SQLAlchemyError

from fitness_db.logging import logger


revision = "20251213214510"
down_revision = "20251213214509"
branch_labels = None
depends_on = None


# (constraint, source table, local column, referent table, ON DELETE)
FOREIGN_KEYS: list[tuple[str, str, str, str, str]] = [
    ("fk_workout_videos_program", "workout_videos", "program_id", "programs", "SET NULL"),
    ("fk_workout_videos_original_asset", "workout_videos", "original_video_asset_id", "media_assets", "SET NULL"),
    ("fk_workout_videos_thumbnail_asset", "workout_videos", "thumbnail_asset_id", "media_assets", "SET NULL"),
    # An uploader cannot be removed while their assets exist.
    ("fk_media_assets_admin", "media_assets", "uploaded_by", "admins", "RESTRICT"),
    ("fk_media_assets_workout_video", "media_assets", "workout_video_id", "workout_videos", "SET NULL"),
    ("fk_media_assets_program", "media_assets", "program_id", "programs", "SET NULL"),
    ("fk_activity_history_user", "activity_history", "user_id", "users", "CASCADE"),
    ("fk_activity_history_workout_video", "activity_history", "workout_video_id", "workout_videos", "CASCADE"),
    ("fk_subscriptions_user", "subscriptions", "user_id", "users", "CASCADE"),
    ("fk_processing_queue_media_asset", "video_processing_queue", "media_asset_id", "media_assets", "CASCADE"),
    ("fk_processing_queue_admin", "video_processing_queue", "processed_by", "admins", "SET NULL"),
    ("fk_admin_activity_logs_admin", "admin_activity_logs", "admin_id", "admins", "CASCADE"),
    ("fk_admin_invites_inviter", "admin_invites", "invited_by", "admins", "CASCADE"),
    ("fk_admin_invites_acceptor", "admin_invites", "accepted_by_admin_id", "admins", "SET NULL"),
]


def upgrade() -> None:
    for name, source, column, referent, ondelete in FOREIGN_KEYS:
        op.create_foreign_key(
            name,
            source,
            referent,
            [column],
            ["id"],
            onupdate="CASCADE",
            ondelete=ondelete,
        )


def downgrade() -> None:
    # Best effort: a constraint that is already gone must not block the rest.
    bind = op.get_bind()
    for name, source, _column, _referent, _ondelete in reversed(FOREIGN_KEYS):
        try:
            with bind.begin_nested():
                bind.execute(sa.text(f'ALTER TABLE "{source}" DROP CONSTRAINT IF EXISTS "{name}"'))
        except SQLAlchemyError as exc:
            logger.warning("constraint_drop_failed", constraint=name, table=source, error=str(exc))
