"""add renewal_count to subscriptions

Revision ID: 20260103061914
Revises: 20251228154349
Create Date: 2026-01-03
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


revision = "20260103061914"
down_revision = "20251228154349"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.add_column("subscriptions", sa.Column("renewal_count", sa.Integer(), nullable=False, server_default="0"))


def downgrade() -> None:
    op.drop_column("subscriptions", "renewal_count")
