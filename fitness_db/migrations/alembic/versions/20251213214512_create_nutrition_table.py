"""create nutrition table

Revision ID: 20251213214512
Revises: 20251213214510
Create Date: 2025-12-13
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision = "20251213214512"
down_revision = "20251213214510"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "nutrition",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        # Program day; NULL for general tips.
        sa.Column("day", sa.Integer(), nullable=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("detailed_content", sa.Text(), nullable=True),
        sa.Column("image_url", sa.String(500), nullable=True),
        sa.Column("video_url", sa.String(500), nullable=True),
        sa.Column(
            "category",
            postgresql.ENUM(
                "breakfast",
                "lunch",
                "dinner",
                "snack",
                "general",
                "recipe",
                "tip",
                name="enum_nutrition_category",
            ),
            nullable=False,
            server_default="general",
        ),
        sa.Column("calories", sa.Integer(), nullable=True),
        sa.Column(
            "ingredients",
            postgresql.ARRAY(sa.String(255)),
            nullable=False,
            server_default=sa.text("ARRAY[]::varchar[]"),
        ),
        sa.Column(
            "preparation_steps",
            postgresql.ARRAY(sa.Text()),
            nullable=False,
            server_default=sa.text("ARRAY[]::text[]"),
        ),
        sa.Column("prep_time", sa.String(50), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
    )

    op.create_index("nutrition_category_idx", "nutrition", ["category"])
    op.create_index("nutrition_day_idx", "nutrition", ["day"])
    op.create_index("nutrition_is_active_idx", "nutrition", ["is_active"])
    op.create_index("nutrition_day_sort_order_idx", "nutrition", ["day", "sort_order"])
    op.create_index("nutrition_sort_order_idx", "nutrition", ["sort_order"])


def downgrade() -> None:
    op.drop_index("nutrition_sort_order_idx", table_name="nutrition")
    op.drop_index("nutrition_day_sort_order_idx", table_name="nutrition")
    op.drop_index("nutrition_is_active_idx", table_name="nutrition")
    op.drop_index("nutrition_day_idx", table_name="nutrition")
    op.drop_index("nutrition_category_idx", table_name="nutrition")
    op.drop_table("nutrition")
    op.execute("DROP TYPE IF EXISTS enum_nutrition_category")
