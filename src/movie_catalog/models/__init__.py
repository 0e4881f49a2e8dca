"""SQLAlchemy ORM models."""

from movie_catalog.models.actor import Actor, MovieActor
from movie_catalog.models.genre import Genre
from movie_catalog.models.movie import Movie

__all__ = [
    "Actor",
    "Genre",
    "Movie",
    "MovieActor",
]
