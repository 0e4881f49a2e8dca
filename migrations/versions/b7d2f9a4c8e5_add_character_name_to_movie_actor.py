"""Add character name to movie_actor

Revision ID: b7d2f9a4c8e5
Revises: a1c4e7f20d31
Create Date: 2026-10-19 09:30:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "b7d2f9a4c8e5"
down_revision: str | Sequence[str] | None = "a1c4e7f20d31"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Add the nullable movie_actor.character_name column."""
    with op.batch_alter_table("movie_actor", schema=None) as batch_op:
        batch_op.add_column(sa.Column("character_name", sa.String(length=255), nullable=True))


def downgrade() -> None:
    """Drop movie_actor.character_name."""
    # For SQLite, batch_alter_table recreates the table without the column
    with op.batch_alter_table("movie_actor", schema=None) as batch_op:
        batch_op.drop_column("character_name")
