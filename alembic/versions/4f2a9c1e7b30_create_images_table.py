"""create images table

Revision ID: 4f2a9c1e7b30
Revises:
Create Date: 2026-10-18 00:00:00.000000
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '4f2a9c1e7b30'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'images',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('description', sa.String(length=500), nullable=True),
        sa.Column('storage_key', sa.String(length=1024), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )
    op.create_index('ix_images_storage_key', 'images', ['storage_key'], unique=True)
    op.create_index('ix_images_created_at', 'images', ['created_at'], unique=False)


def downgrade() -> None:
    op.drop_index('ix_images_created_at', table_name='images')
    op.drop_index('ix_images_storage_key', table_name='images')
    op.drop_table('images')
