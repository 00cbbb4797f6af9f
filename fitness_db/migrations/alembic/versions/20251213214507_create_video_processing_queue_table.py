"""create video_processing_queue table

Revision ID: 20251213214507
Revises: 20251213214506
Create Date: 2025-12-13
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision = "20251213214507"
down_revision = "20251213214506"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "video_processing_queue",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("media_asset_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("processed_by", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("status", sa.String(50), nullable=False, server_default="pending"),
        sa.Column("priority", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "processing_options",
            postgresql.JSONB(astext_type=sa.Text()),
            nullable=False,
            server_default=sa.text("'{}'::jsonb"),
        ),
        sa.Column("retry_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("error_message", sa.Text(), nullable=True),
        sa.Column(
            "processing_result",
            postgresql.JSONB(astext_type=sa.Text()),
            nullable=False,
            server_default=sa.text("'{}'::jsonb"),
        ),
        sa.Column("started_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("next_retry_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
    )

    op.create_index("video_processing_queue_status", "video_processing_queue", ["status"])
    op.create_index("video_processing_queue_priority_created_at", "video_processing_queue", ["priority", "created_at"])
    op.create_index("video_processing_queue_media_asset_id", "video_processing_queue", ["media_asset_id"])
    op.create_index("video_processing_queue_processed_by", "video_processing_queue", ["processed_by"])
    op.create_index("video_processing_queue_next_retry_at", "video_processing_queue", ["next_retry_at"])


def downgrade() -> None:
    op.drop_table("video_processing_queue")
