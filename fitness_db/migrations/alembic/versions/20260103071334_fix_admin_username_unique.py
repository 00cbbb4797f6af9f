"""fix admin username unique

Revision ID: 20260103071334
Revises: 20260103070000
Create Date: 2026-01-03
"""

from __future__ import annotations

from alembic import op


revision = "20260103071334"
down_revision = "20260103070000"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_unique_constraint("admins_username_unique", "admins", ["username"])


def downgrade() -> None:
    op.drop_constraint("admins_username_unique", "admins", type_="unique")
