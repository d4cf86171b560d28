"""initial schema

Revision ID: 0001_initial
Revises: 
Create Date: 2025-03-02 00:00:00

"""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # stores
    op.create_table(
        "stores",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("rate_factor", sa.Float(), nullable=False, server_default=sa.text("0")),
        sa.Column("requires_sale_amount", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("user_id", sa.String(), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("custom_client_name_text", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()")),
        sa.CheckConstraint("rate_factor >= 0", name="ck_stores_rate_factor_non_negative"),
    )
    op.create_index("ix_stores_user_id", "stores", ["user_id"])

    # quotes
    op.create_table(
        "quotes",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("store_id", sa.String(), sa.ForeignKey("stores.id", ondelete="CASCADE"), nullable=False),
        sa.Column("client_name", sa.Text(), nullable=False),
        sa.Column("number_of_spaces", sa.Integer(), nullable=False),
        sa.Column("sale_amount", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("rate_amount", sa.Integer(), nullable=True),
        sa.Column("is_confirmed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("status", sa.String(), nullable=True),
        sa.Column("created_by", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()")),
    )
    op.create_index("ix_quotes_store_id", "quotes", ["store_id"])
    op.create_index("ix_quotes_created_at", "quotes", ["created_at"])

    # user_metadata
    op.create_table(
        "user_metadata",
        sa.Column("user_id", sa.String(), primary_key=True),
        sa.Column("is_admin", sa.Boolean(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()")),
    )


def downgrade() -> None:
    op.drop_table("user_metadata")
    op.drop_index("ix_quotes_created_at", table_name="quotes")
    op.drop_index("ix_quotes_store_id", table_name="quotes")
    op.drop_table("quotes")
    op.drop_index("ix_stores_user_id", table_name="stores")
    op.drop_table("stores")
