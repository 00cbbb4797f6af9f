"""create media_assets table

Revision ID: 20251213214504
Revises: 20251213214503
Create Date: 2025-12-13
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision = "20251213214504"
down_revision = "20251213214503"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "media_assets",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("uploaded_by", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("workout_video_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("program_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("storage_key", sa.String(255), nullable=False),
        sa.Column("filename", sa.String(50), nullable=False),
        sa.Column("file_extension", sa.String(50), nullable=False),
        sa.Column("file_size", sa.BigInteger(), nullable=False),
        sa.Column("mime_type", sa.String(100), nullable=False),
        sa.Column(
            "asset_type",
            postgresql.ENUM("video", "image", "audio", "document", name="enum_media_assets_asset_type"),
            nullable=False,
        ),
        sa.Column("metadata", postgresql.JSONB(astext_type=sa.Text()), nullable=False, server_default=sa.text("'{}'::jsonb")),
        sa.Column("processing_status", sa.String(50), nullable=False, server_default="pending"),
        sa.Column(
            "file_purpose",
            postgresql.ENUM(
                "original",
                "thumbnail",
                "hls_manifest",
                "hls_segment",
                "dash_manifest",
                "preview",
                "transcoded",
                name="enum_media_assets_file_purpose",
            ),
            nullable=False,
        ),
        sa.Column("cdn_url", sa.String(500), nullable=True),
        sa.Column("direct_url", sa.String(1000), nullable=True),
        sa.Column("processing_log", sa.Text(), nullable=True),
        sa.Column("duration", sa.Integer(), nullable=True),
        sa.Column("width", sa.Integer(), nullable=True),
        sa.Column("height", sa.Integer(), nullable=True),
        sa.Column("is_archived", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("processed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
    )

    op.create_index("media_assets_storage_key", "media_assets", ["storage_key"], unique=True)
    op.create_index("media_assets_uploaded_by", "media_assets", ["uploaded_by"])
    op.create_index("media_assets_asset_type_processing_status", "media_assets", ["asset_type", "processing_status"])
    op.create_index("media_assets_workout_video_id", "media_assets", ["workout_video_id"])
    op.create_index("media_assets_program_id", "media_assets", ["program_id"])
    op.create_index("media_assets_file_purpose", "media_assets", ["file_purpose"])


def downgrade() -> None:
    op.drop_table("media_assets")
    op.execute("DROP TYPE IF EXISTS enum_media_assets_asset_type")
    op.execute("DROP TYPE IF EXISTS enum_media_assets_file_purpose")
