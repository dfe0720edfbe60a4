"""Initial schema for accounts, catalog items and contacts.

Revision ID: 0001_seed_entities
Revises:
Create Date: 2026-10-17
"""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa

# revision identifiers
revision = '0001_seed_entities'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Create the account, catalog_item and contact tables."""

    # =========================================================================
    # Table: account
    # =========================================================================
    op.create_table(
        'account',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('hashed_password', sa.String(255), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('role', sa.String(20), nullable=False, server_default='user'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.current_timestamp()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.current_timestamp()),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_account_email', 'account', ['email'], unique=True)

    # =========================================================================
    # Table: catalog_item
    # =========================================================================
    op.create_table(
        'catalog_item',
        sa.Column('id', sa.String(64), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('price', sa.Numeric(12, 2), nullable=False),
        sa.Column('cost', sa.Numeric(12, 2), nullable=False),
        sa.Column('stock_current', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('stock_minimum', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.current_timestamp()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.current_timestamp()),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('price >= 0', name='ck_catalog_item_price_non_negative'),
        sa.CheckConstraint('cost >= 0', name='ck_catalog_item_cost_non_negative'),
        sa.CheckConstraint('stock_current >= 0', name='ck_catalog_item_stock_current_non_negative'),
        sa.CheckConstraint('stock_minimum >= 0', name='ck_catalog_item_stock_minimum_non_negative'),
    )

    # =========================================================================
    # Table: contact
    # =========================================================================
    op.create_table(
        'contact',
        sa.Column('id', sa.String(64), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('phone', sa.String(32), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.current_timestamp()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.current_timestamp()),
        sa.PrimaryKeyConstraint('id'),
    )


def downgrade() -> None:
    """Drop the seed tables."""
    op.drop_table('contact')
    op.drop_table('catalog_item')
    op.drop_index('ix_account_email', table_name='account')
    op.drop_table('account')
