"""Actor and movie credits ORM models."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from movie_catalog.database import Base

if TYPE_CHECKING:
    from movie_catalog.models.movie import Movie


class Actor(Base):
    """An actor. Names are not unique."""

    __tablename__ = "actor"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255))
    bio: Mapped[str] = mapped_column(Text)
    born_at: Mapped[date] = mapped_column(Date)

    # Relationships
    movie_credits: Mapped[list[MovieActor]] = relationship(
        back_populates="actor", cascade="all, delete-orphan", passive_deletes=True
    )


class MovieActor(Base):
    """Association between a movie and an actor, with the character played.

    Rows are only inserted or deleted, never updated in place.
    """

    __tablename__ = "movie_actor"
    __table_args__ = (UniqueConstraint("movie_id", "actor_id", name="uq_movie_actor"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    movie_id: Mapped[int] = mapped_column(ForeignKey("movie.id", ondelete="CASCADE"), index=True)
    actor_id: Mapped[int] = mapped_column(ForeignKey("actor.id", ondelete="CASCADE"), index=True)
    character_name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Relationships
    movie: Mapped[Movie] = relationship(back_populates="cast")
    actor: Mapped[Actor] = relationship(back_populates="movie_credits")
