"""Initial migration - create author table

Revision ID: 001
Revises:
Create Date: 2026-10-18 09:00:00.000000

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
    """Create author table."""
    op.create_table(
        'author',
        sa.Column('authorId', sa.LargeBinary(16), nullable=False),
        sa.Column('authorAvatarUrl', sa.String(255), nullable=False),
        sa.Column('authorActivationToken', sa.String(32), nullable=False),
        sa.Column('authorEmail', sa.String(128), nullable=False),
        sa.Column('authorHash', sa.String(97), nullable=False),
        sa.Column('authorUsername', sa.String(32), nullable=False),
        sa.PrimaryKeyConstraint('authorId')
    )


def downgrade() -> None:
    """Drop author table."""
    op.drop_table('author')
