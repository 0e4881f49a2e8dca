"""Base repository, domain errors and the diagnostic sink."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from movie_catalog.database import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

# Receives non-fatal store errors that were converted to a sentinel result.
DiagnosticSink = Callable[[str, Exception], None]


def log_diagnostic(message: str, exc: Exception) -> None:
    """Default diagnostic sink: log the swallowed error as a warning."""
    logger.warning("%s: %s", message, exc, exc_info=exc)


class CatalogError(Exception):
    """Base exception for catalog errors."""


class ConstraintViolationError(CatalogError):
    """Raised when a write breaks a store constraint (unique name, FK, check)."""

    def __init__(self, message: str, table: str | None = None) -> None:
        super().__init__(message)
        self.table = table


class BaseRepository(Generic[ModelT]):
    """CRUD over a single table keyed by an integer ``id``.

    Every method issues exactly one statement. Mutations are committed
    immediately, so each call is atomic on its own and nothing spans calls.
    Reads always go to the store and refresh any instance already held by
    the session.
    """

    model: ClassVar[type[Base]]

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @property
    def table_name(self) -> str:
        return self.model.__tablename__

    async def list(self) -> list[ModelT]:
        """Return every row in the store's natural order."""
        result = await self.session.execute(
            select(self.model).execution_options(populate_existing=True)
        )
        return list(result.scalars().all())

    async def find(self, id: int) -> ModelT | None:
        """Return the row with this ID, or None."""
        result = await self.session.execute(
            select(self.model)
            .where(self.model.id == id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def create(self, fields: Mapping[str, Any]) -> int:
        """Insert a row and return its generated ID.

        Raises:
            ConstraintViolationError: If the row breaks a store constraint.
        """
        instance = self.model(**fields)
        self.session.add(instance)
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise ConstraintViolationError(
                f"Could not create {self.table_name}: {e.orig}", table=self.table_name
            ) from e

        logger.debug("Created %s %s", self.table_name, instance.id)
        return instance.id

    async def update(self, id: int, fields: Mapping[str, Any]) -> bool:
        """Write the given fields to the row with this ID.

        Returns:
            True if a row with this ID matched, False otherwise.

        Raises:
            ConstraintViolationError: If the new values break a store constraint.
        """
        if not fields:
            # Nothing to write; report whether the row is there
            return await self.find(id) is not None

        stmt = update(self.model).where(self.model.id == id).values(**fields)
        try:
            result = await self.session.execute(stmt)
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise ConstraintViolationError(
                f"Could not update {self.table_name} {id}: {e.orig}", table=self.table_name
            ) from e

        logger.debug("Updated %s %s (%d row(s))", self.table_name, id, result.rowcount)
        return result.rowcount > 0

    async def remove(self, id: int) -> bool:
        """Delete the row with this ID.

        Returns:
            True if a row was deleted, False if none had this ID.
        """
        result = await self.session.execute(delete(self.model).where(self.model.id == id))
        await self.session.commit()

        logger.debug("Removed %s %s (%d row(s))", self.table_name, id, result.rowcount)
        return result.rowcount > 0
