"""initial wallet schema: users, wallets, cards, categories, transactions

Revision ID: 3f9c1d2e7a10
Revises: 
Create Date: 2026-10-19 09:30:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

from digiwallet.infrastructure.database.types import Money


# revision identifiers, used by Alembic.
revision = "3f9c1d2e7a10"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "user_table",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(length=50), nullable=False),
        sa.Column("full_name", sa.String(length=100)),
        sa.Column("email", sa.String(length=100)),
        sa.Column("role", sa.String(length=20), nullable=False, server_default="USER"),
        sa.Column("status", sa.String(length=20), nullable=False, server_default="ACTIVE"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_user_table_username", "user_table", ["username"], unique=True)

    op.create_table(
        "wallet",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("user_table.id"), nullable=False),
        sa.Column("balance", Money(), nullable=False, server_default="0"),
        sa.Column("currency", sa.String(length=3), nullable=False, server_default="INR"),
        sa.Column("status", sa.String(length=20), nullable=False, server_default="ACTIVE"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True)),
    )
    op.create_index("ix_wallet_user_id", "wallet", ["user_id"], unique=True)

    op.create_table(
        "card",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("wallet_id", sa.Integer(), sa.ForeignKey("wallet.id"), nullable=False),
        sa.Column("card_number", sa.String(length=16), nullable=False, unique=True),
        sa.Column("card_type", sa.String(length=20), nullable=False),
        sa.Column("expiry_date", sa.Date()),
        sa.Column("status", sa.String(length=20), nullable=False, server_default="ACTIVE"),
        sa.Column("issued_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_card_wallet_id", "card", ["wallet_id"])

    op.create_table(
        "category",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=100), nullable=False, unique=True),
    )

    op.create_table(
        "transaction",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("wallet_id", sa.Integer(), sa.ForeignKey("wallet.id"), nullable=False),
        sa.Column("category_id", sa.Integer(), sa.ForeignKey("category.id")),
        sa.Column("amount", Money(), nullable=False),
        sa.Column("type", sa.String(length=10), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False, server_default="COMPLETED"),
        sa.Column("reference_id", sa.String(length=100)),
        sa.Column("transaction_date", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_transaction_wallet_id", "transaction", ["wallet_id"])
    op.create_index("ix_transaction_transaction_date", "transaction", ["transaction_date"])


def downgrade() -> None:
    op.drop_index("ix_transaction_transaction_date", table_name="transaction")
    op.drop_index("ix_transaction_wallet_id", table_name="transaction")
    op.drop_table("transaction")
    op.drop_table("category")
    op.drop_index("ix_card_wallet_id", table_name="card")
    op.drop_table("card")
    op.drop_index("ix_wallet_user_id", table_name="wallet")
    op.drop_table("wallet")
    op.drop_index("ix_user_table_username", table_name="user_table")
    op.drop_table("user_table")
