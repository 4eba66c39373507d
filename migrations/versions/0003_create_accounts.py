"""create accounts

Revision ID: 0003_create_accounts
Revises: 0002_create_sessions
Create Date: 2024-01-01
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0003_create_accounts"
down_revision = "0002_create_sessions"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "accounts",
        sa.Column("id", sa.String(), primary_key=True, nullable=False),
        sa.Column(
            "user_id",
            sa.String(),
            sa.ForeignKey("users.id", name="fk_accounts_user_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("account_id", sa.String(), nullable=False),
        sa.Column("provider_id", sa.String(), nullable=False),
        sa.Column("access_token", sa.String(), nullable=True),
        sa.Column("refresh_token", sa.String(), nullable=True),
        sa.Column("access_token_expires_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("refresh_token_expires_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("scope", sa.String(), nullable=True),
        sa.Column("id_token", sa.String(), nullable=True),
        sa.Column("password", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index(
        "idx_accounts_provider_account",
        "accounts",
        ["provider_id", "account_id"],
        unique=True,
    )
    op.create_index("idx_accounts_user_id", "accounts", ["user_id"], unique=False)


def downgrade() -> None:
    op.drop_index("idx_accounts_user_id", table_name="accounts")
    op.drop_index("idx_accounts_provider_account", table_name="accounts")
    op.drop_table("accounts")
