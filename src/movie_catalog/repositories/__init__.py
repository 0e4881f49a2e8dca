"""Data access for the movie catalog.

Every repository is constructed with the AsyncSession it should use, so
callers decide the session scope (one per request in the API, one per test
in the test suite).

Usage:
    async with async_session() as session:
        actors = ActorRepository(session)
        actor_id = await actors.create({"name": "...", "bio": "...", "born_at": date(...)})
        favorite = await RelationQueries(session).favorite_genre(actor_id)
"""

from movie_catalog.repositories.actors import ActorRepository
from movie_catalog.repositories.associations import (
    AssociationFailure,
    AssociationManager,
    AssociationResult,
)
from movie_catalog.repositories.base import (
    BaseRepository,
    CatalogError,
    ConstraintViolationError,
    DiagnosticSink,
    log_diagnostic,
)
from movie_catalog.repositories.movies import MovieRepository
from movie_catalog.repositories.relations import RelationQueries

__all__ = [
    # Base
    "BaseRepository",
    "CatalogError",
    "ConstraintViolationError",
    "DiagnosticSink",
    "log_diagnostic",
    # Entities
    "ActorRepository",
    "MovieRepository",
    # Associations and derived queries
    "AssociationFailure",
    "AssociationManager",
    "AssociationResult",
    "RelationQueries",
]
