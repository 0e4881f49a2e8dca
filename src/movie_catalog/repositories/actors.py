"""Actor repository."""

from movie_catalog.models.actor import Actor
from movie_catalog.repositories.base import BaseRepository


class ActorRepository(BaseRepository[Actor]):
    """CRUD over the ``actor`` table."""

    model = Actor

    async def exists(self, id: int) -> bool:
        """Check whether an actor with this ID is stored."""
        return await self.find(id) is not None
