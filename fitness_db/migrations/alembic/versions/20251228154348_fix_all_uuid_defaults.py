"""fix all uuid defaults

Base tables were created with client-generated ids. Give every existing
table a server-side default so raw SQL inserts work too.

Revision ID: 20251228154348
Revises: 20251213214512
Create Date: 2025-12-28
"""

from __future__ import annotations

from alembic import op


revision = "20251228154348"
down_revision = "20251213214512"
branch_labels = None
depends_on = None


TABLES = [
    "users",
    "admins",
    "programs",
    "workout_videos",
    "media_assets",
    "activity_history",
    "subscriptions",
    "video_processing_queue",
    "admin_activity_logs",
    "admin_invites",
    "nutrition",
]


def upgrade() -> None:
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')
    for table in TABLES:
        op.execute(f'ALTER TABLE "{table}" ALTER COLUMN "id" SET DEFAULT uuid_generate_v4()')


def downgrade() -> None:
    for table in reversed(TABLES):
        op.execute(f'ALTER TABLE "{table}" ALTER COLUMN "id" DROP DEFAULT')
