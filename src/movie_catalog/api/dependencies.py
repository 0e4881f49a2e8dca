"""FastAPI dependencies that bind repositories to the request session."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from movie_catalog.database import get_db
from movie_catalog.repositories import (
    ActorRepository,
    AssociationManager,
    MovieRepository,
    RelationQueries,
)


async def get_movie_repository(db: AsyncSession = Depends(get_db)) -> MovieRepository:
    """Movie repository on the request session."""
    return MovieRepository(db)


async def get_actor_repository(db: AsyncSession = Depends(get_db)) -> ActorRepository:
    """Actor repository on the request session."""
    return ActorRepository(db)


async def get_association_manager(db: AsyncSession = Depends(get_db)) -> AssociationManager:
    """Association manager on the request session."""
    return AssociationManager(db)


async def get_relation_queries(
    db: AsyncSession = Depends(get_db),
    actors: ActorRepository = Depends(get_actor_repository),
) -> RelationQueries:
    """Relation queries sharing the request's actor repository."""
    return RelationQueries(db, actors=actors)


Movies = Annotated[MovieRepository, Depends(get_movie_repository)]
Actors = Annotated[ActorRepository, Depends(get_actor_repository)]
Associations = Annotated[AssociationManager, Depends(get_association_manager)]
Relations = Annotated[RelationQueries, Depends(get_relation_queries)]
