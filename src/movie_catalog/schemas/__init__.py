"""Pydantic schemas for request/response validation."""

from movie_catalog.schemas.actor import (
    ActorCreate,
    ActorMovie,
    ActorResponse,
    ActorUpdate,
    ActorWithMovies,
    AddMovieToActor,
    CharacterNamesResponse,
    FavoriteGenre,
)
from movie_catalog.schemas.movie import (
    CreatedResponse,
    MovieCreate,
    MovieResponse,
    MovieUpdate,
)

__all__ = [
    # Movie schemas
    "MovieCreate",
    "MovieUpdate",
    "MovieResponse",
    "CreatedResponse",
    # Actor schemas
    "ActorCreate",
    "ActorUpdate",
    "ActorResponse",
    # Derived actor views
    "ActorMovie",
    "ActorWithMovies",
    "AddMovieToActor",
    "CharacterNamesResponse",
    "FavoriteGenre",
]
