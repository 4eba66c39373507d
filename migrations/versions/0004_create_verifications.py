"""create verifications

Revision ID: 0004_create_verifications
Revises: 0003_create_accounts
Create Date: 2024-01-01
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0004_create_verifications"
down_revision = "0003_create_accounts"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "verifications",
        sa.Column("id", sa.String(), primary_key=True, nullable=False),
        sa.Column("identifier", sa.String(), nullable=False),
        sa.Column("value", sa.String(), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("idx_verifications_identifier", "verifications", ["identifier"], unique=False)
    op.create_index("idx_verifications_expires_at", "verifications", ["expires_at"], unique=False)


def downgrade() -> None:
    op.drop_index("idx_verifications_expires_at", table_name="verifications")
    op.drop_index("idx_verifications_identifier", table_name="verifications")
    op.drop_table("verifications")
