"""Read-only queries derived from actors, movies and their associations."""

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from movie_catalog.models.actor import MovieActor
from movie_catalog.models.genre import Genre
from movie_catalog.models.movie import Movie
from movie_catalog.repositories.actors import ActorRepository
from movie_catalog.repositories.base import DiagnosticSink, log_diagnostic
from movie_catalog.schemas.actor import (
    ActorMovie,
    ActorResponse,
    ActorWithMovies,
    FavoriteGenre,
)


class RelationQueries:
    """Derived views of an actor's movies.

    Each query resolves the actor first and returns None when it does not
    exist, without touching ``movie_actor``. Once the actor is known, a
    failing association query (for example while the table has not been
    migrated yet) degrades to an empty result and the error is passed to
    the diagnostic sink.
    """

    def __init__(
        self,
        session: AsyncSession,
        actors: ActorRepository | None = None,
        on_error: DiagnosticSink = log_diagnostic,
    ) -> None:
        self.session = session
        self.actors = actors if actors is not None else ActorRepository(session)
        self._on_error = on_error

    async def _degrade(self, message: str, exc: SQLAlchemyError) -> None:
        # Leave the session usable for the rest of the request
        await self.session.rollback()
        self._on_error(message, exc)

    async def movies_for_actor(self, actor_id: int) -> ActorWithMovies | None:
        """Get an actor together with the movies they appear in.

        Movies come in association order and carry the character played.
        An existing actor is always returned; if the join fails, with no
        movies.
        """
        actor = await self.actors.find(actor_id)
        if actor is None:
            return None

        # Copy the actor out before a rollback can expire it
        profile = ActorResponse.model_validate(actor).model_dump()

        stmt = (
            select(Movie, MovieActor.character_name)
            .join(MovieActor, MovieActor.movie_id == Movie.id)
            .where(MovieActor.actor_id == actor_id)
            .order_by(MovieActor.id)
        )
        try:
            result = await self.session.execute(stmt)
            rows = result.all()
        except SQLAlchemyError as e:
            await self._degrade(f"Could not load movies for actor {actor_id}", e)
            rows = []

        movies = [
            ActorMovie(
                id=movie.id,
                name=movie.name,
                synopsis=movie.synopsis,
                released_at=movie.released_at,
                runtime_in_minutes=movie.runtime_in_minutes,
                genre_id=movie.genre_id,
                character_name=character_name,
            )
            for movie, character_name in rows
        ]
        return ActorWithMovies(**profile, movies=movies)

    async def favorite_genre(self, actor_id: int) -> FavoriteGenre | None:
        """Get the genre the actor has the most movies in.

        Movies without a genre are ignored. Equal counts go to the lowest
        genre ID. Returns None if the actor does not exist, has no movie
        with a genre, or the query fails.
        """
        if not await self.actors.exists(actor_id):
            return None

        movie_count = func.count(Movie.id).label("movie_count")
        stmt = (
            select(Genre.id, Genre.name, movie_count)
            .select_from(MovieActor)
            .join(Movie, Movie.id == MovieActor.movie_id)
            .join(Genre, Genre.id == Movie.genre_id)
            .where(MovieActor.actor_id == actor_id)
            .group_by(Genre.id, Genre.name)
            .order_by(movie_count.desc(), Genre.id.asc())
            .limit(1)
        )
        try:
            result = await self.session.execute(stmt)
            row = result.first()
        except SQLAlchemyError as e:
            await self._degrade(f"Could not compute favorite genre for actor {actor_id}", e)
            return None

        if row is None:
            return None

        # Some drivers hand back COUNT() as a string or Decimal
        return FavoriteGenre(id=row.id, name=row.name, movie_count=int(row.movie_count))

    async def character_names(self, actor_id: int) -> list[str] | None:
        """Get every character name the actor played, in association order.

        Unnamed roles are skipped and duplicates across movies are kept.
        Returns None if the actor does not exist and an empty list if there
        are no names or the query fails.
        """
        if not await self.actors.exists(actor_id):
            return None

        stmt = (
            select(MovieActor.character_name)
            .where(
                MovieActor.actor_id == actor_id,
                MovieActor.character_name.is_not(None),
            )
            .order_by(MovieActor.id)
        )
        try:
            result = await self.session.execute(stmt)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            await self._degrade(f"Could not load character names for actor {actor_id}", e)
            return []
