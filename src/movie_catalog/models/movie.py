"""Movie ORM model."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, Date, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from movie_catalog.database import Base

if TYPE_CHECKING:
    from movie_catalog.models.actor import MovieActor
    from movie_catalog.models.genre import Genre


class Movie(Base):
    """A movie in the catalog."""

    __tablename__ = "movie"
    __table_args__ = (
        CheckConstraint("runtime_in_minutes > 0", name="ck_movie_runtime_positive"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255), unique=True)
    synopsis: Mapped[str | None] = mapped_column(Text, nullable=True)
    released_at: Mapped[date] = mapped_column(Date)
    runtime_in_minutes: Mapped[int] = mapped_column()
    genre_id: Mapped[int | None] = mapped_column(
        ForeignKey("genre.id"), nullable=True, index=True
    )

    # Relationships
    genre: Mapped[Genre | None] = relationship(back_populates="movies")
    cast: Mapped[list[MovieActor]] = relationship(
        back_populates="movie", cascade="all, delete-orphan", passive_deletes=True
    )
