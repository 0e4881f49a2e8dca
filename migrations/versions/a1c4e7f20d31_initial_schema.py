"""Initial schema

Revision ID: a1c4e7f20d31
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "a1c4e7f20d31"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""
    # Create base tables (no dependencies)
    op.create_table(
        "genre",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "actor",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("bio", sa.Text(), nullable=False),
        sa.Column("born_at", sa.Date(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    # Tables with foreign keys
    op.create_table(
        "movie",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("synopsis", sa.Text(), nullable=True),
        sa.Column("released_at", sa.Date(), nullable=False),
        sa.Column("runtime_in_minutes", sa.Integer(), nullable=False),
        sa.Column("genre_id", sa.Integer(), nullable=True),
        sa.CheckConstraint("runtime_in_minutes > 0", name="ck_movie_runtime_positive"),
        sa.ForeignKeyConstraint(["genre_id"], ["genre.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    with op.batch_alter_table("movie", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_movie_genre_id"), ["genre_id"], unique=False)

    op.create_table(
        "movie_actor",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("movie_id", sa.Integer(), nullable=False),
        sa.Column("actor_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["actor_id"], ["actor.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["movie_id"], ["movie.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("movie_id", "actor_id", name="uq_movie_actor"),
    )
    with op.batch_alter_table("movie_actor", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_movie_actor_actor_id"), ["actor_id"], unique=False)
        batch_op.create_index(batch_op.f("ix_movie_actor_movie_id"), ["movie_id"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    # Drop in reverse order of creation (respecting foreign keys)
    with op.batch_alter_table("movie_actor", schema=None) as batch_op:
        batch_op.drop_index(batch_op.f("ix_movie_actor_movie_id"))
        batch_op.drop_index(batch_op.f("ix_movie_actor_actor_id"))
    op.drop_table("movie_actor")

    with op.batch_alter_table("movie", schema=None) as batch_op:
        batch_op.drop_index(batch_op.f("ix_movie_genre_id"))
    op.drop_table("movie")

    op.drop_table("actor")
    op.drop_table("genre")
