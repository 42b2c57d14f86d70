"""Create cities table: tenant identity, branding and data-plane pointer.

Revision ID: 001_create_cities
Revises:
Create Date: 2026-10-19

One row per city. slug is unique across active and inactive rows;
styling columns and db_url are nullable.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001_create_cities'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'cities',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('slug', sa.String(100), nullable=False),
        sa.Column('logo_url', sa.Text(), nullable=True),
        sa.Column('primary_color', sa.String(32), nullable=True),
        sa.Column('secondary_color', sa.String(32), nullable=True),
        sa.Column('accent_color', sa.String(32), nullable=True),
        sa.Column('db_url', sa.Text(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
    )
    op.create_index('ix_cities_slug', 'cities', ['slug'], unique=True)


def downgrade() -> None:
    op.drop_index('ix_cities_slug', table_name='cities')
    op.drop_table('cities')
