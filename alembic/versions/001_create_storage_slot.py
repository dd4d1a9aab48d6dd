"""Create storage_slot table

Revision ID: 001_create_storage_slot
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001_create_storage_slot'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Create storage_slot table holding serialized progress."""
    op.create_table(
        'storage_slot',
        sa.Column('key', sa.String(length=100), nullable=False),
        sa.Column('value', sa.Text(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('key')
    )


def downgrade() -> None:
    """Drop storage_slot table."""
    op.drop_table('storage_slot')
