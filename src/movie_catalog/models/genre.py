"""Genre ORM model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from movie_catalog.database import Base

if TYPE_CHECKING:
    from movie_catalog.models.movie import Movie


class Genre(Base):
    """Movie genre. Rows are provisioned by migrations and only read here."""

    __tablename__ = "genre"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255))

    # Relationships
    movies: Mapped[list[Movie]] = relationship(back_populates="genre")
