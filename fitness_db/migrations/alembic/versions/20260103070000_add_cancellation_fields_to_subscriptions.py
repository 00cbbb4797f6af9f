"""add cancellation fields to subscriptions

Revision ID: 20260103070000
Revises: 20260103061914
Create Date: 2026-01-03
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


revision = "20260103070000"
down_revision = "20260103061914"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.add_column("subscriptions", sa.Column("cancelled_at", sa.DateTime(timezone=True), nullable=True))
    op.add_column("subscriptions", sa.Column("cancellation_reason", sa.String(255), nullable=True))


def downgrade() -> None:
    op.drop_column("subscriptions", "cancellation_reason")
    op.drop_column("subscriptions", "cancelled_at")
