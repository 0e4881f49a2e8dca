"""Movie repository."""

from movie_catalog.models.movie import Movie
from movie_catalog.repositories.base import BaseRepository


class MovieRepository(BaseRepository[Movie]):
    """CRUD over the ``movie`` table.

    Movie names are unique; a clashing create or update raises
    ConstraintViolationError.
    """

    model = Movie
