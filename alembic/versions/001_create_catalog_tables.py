"""Create categories, products and options tables.

Revision ID: 001
Revises:
Create Date: 2026-10-16

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create categories, products and options tables."""
    # Categories table
    op.create_table(
        'categories',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(50), nullable=False),
        sa.Column('color', sa.String(7), nullable=False),
        sa.Column('image_url', sa.String(1000), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
    )
    op.create_unique_constraint('uq_categories_name', 'categories', ['name'])

    # Products table
    op.create_table(
        'products',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(15), nullable=False),
        sa.Column('price', sa.Integer(), nullable=False),
        sa.Column('image_url', sa.String(1000), nullable=False),
        sa.Column('category_id', sa.Integer(),
                  sa.ForeignKey('categories.id'), nullable=False, index=True),
    )

    # Options table
    op.create_table(
        'options',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(50), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('product_id', sa.Integer(),
                  sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=False, index=True),
    )
    op.create_unique_constraint(
        'uq_options_product_name',
        'options',
        ['product_id', 'name'],
    )


def downgrade() -> None:
    """Drop options, products and categories tables."""
    op.drop_table('options')
    op.drop_table('products')
    op.drop_table('categories')
