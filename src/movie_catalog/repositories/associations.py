"""Association manager for the movie <-> actor join table."""

import enum
import logging
from dataclasses import dataclass

from sqlalchemy import delete, insert
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from movie_catalog.models.actor import MovieActor
from movie_catalog.repositories.base import DiagnosticSink, log_diagnostic

logger = logging.getLogger(__name__)


class AssociationFailure(enum.StrEnum):
    """Why linking an actor to a movie failed."""

    FOREIGN_KEY_MISSING = "foreign_key_missing"
    DUPLICATE_ASSOCIATION = "duplicate_association"
    OTHER = "other"


@dataclass(frozen=True)
class AssociationResult:
    """Outcome of a link attempt. ``failure`` is None on success."""

    failure: AssociationFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None


def classify_failure(exc: Exception) -> AssociationFailure:
    """Map a store error raised by an insert onto an AssociationFailure.

    Driver messages differ (SQLite, PostgreSQL and MySQL all word these
    differently), so this matches on the common fragments.
    """
    if not isinstance(exc, IntegrityError):
        return AssociationFailure.OTHER

    message = str(exc.orig).lower()
    if "foreign key" in message:
        return AssociationFailure.FOREIGN_KEY_MISSING
    if "unique" in message or "duplicate" in message:
        return AssociationFailure.DUPLICATE_ASSOCIATION
    return AssociationFailure.OTHER


class AssociationManager:
    """Creates and removes ``movie_actor`` rows.

    Existence of the actor and the movie is not checked up front: the
    foreign keys and the unique (movie_id, actor_id) pair are enforced by
    the store, and any failure comes back as a falsy result instead of an
    exception. Rows are never updated; to change the character name,
    remove the link and add it again.
    """

    def __init__(self, session: AsyncSession, on_error: DiagnosticSink = log_diagnostic) -> None:
        self.session = session
        self._on_error = on_error

    async def link(
        self, actor_id: int, movie_id: int, character_name: str | None = None
    ) -> AssociationResult:
        """Insert an association row and report why it failed, if it did."""
        stmt = insert(MovieActor).values(
            actor_id=actor_id,
            movie_id=movie_id,
            character_name=character_name,
        )
        try:
            await self.session.execute(stmt)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            failure = classify_failure(e)
            self._on_error(
                f"Could not add movie {movie_id} to actor {actor_id} ({failure})", e
            )
            return AssociationResult(failure=failure)

        logger.debug("Added movie %s to actor %s", movie_id, actor_id)
        return AssociationResult()

    async def add_movie_to_actor(
        self, actor_id: int, movie_id: int, character_name: str | None = None
    ) -> bool:
        """Link a movie to an actor.

        Returns:
            True if the row was inserted. False if either side does not
            exist, the pair is already linked, or the store failed.
        """
        result = await self.link(actor_id, movie_id, character_name)
        return result.ok

    async def remove_movie_from_actor(self, actor_id: int, movie_id: int) -> bool:
        """Unlink a movie from an actor.

        Returns:
            True if the link existed and was deleted. Store errors are
            reported to the diagnostic sink and count as not found.
        """
        stmt = delete(MovieActor).where(
            MovieActor.actor_id == actor_id,
            MovieActor.movie_id == movie_id,
        )
        try:
            result = await self.session.execute(stmt)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            self._on_error(f"Could not remove movie {movie_id} from actor {actor_id}", e)
            return False

        return result.rowcount > 0
