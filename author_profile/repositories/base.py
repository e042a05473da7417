"""
Base repository over a single SQLModel table.

Reads go through the session as-is. Every write runs inside ``_writing``,
which rolls the session back on failure and turns constraint violations
into ``ConflictError`` so callers never handle driver exceptions for a
duplicate key.

Example:
    ```python
    from author_profile.repositories.base import BaseRepository
    from author_profile.storage.records import AuthorRecord


    class AuthorRecordRepository(BaseRepository[AuthorRecord]):
        def __init__(self, session: AsyncSession):
            super().__init__(session, AuthorRecord)
    ```
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Generic, Type, TypeVar

from sqlalchemy import ColumnElement
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from author_profile.exceptions import ConflictError
from author_profile.logging import logger

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Record-level access to one table.

    Type Parameters:
        T: The SQLModel table type this repository manages.

    Attributes:
        session: The database session for executing queries.
        model: The SQLModel class this repository manages.
    """

    def __init__(self, session: AsyncSession, model: Type[T]):
        self.session = session
        self.model = model

    @asynccontextmanager
    async def _writing(self, action: str) -> AsyncIterator[None]:
        """
        Guard a unit of writes on the session.

        Args:
            action: Verb used in log lines and error messages.

        Raises:
            ConflictError: If the write violates a constraint (e.g., a
                duplicate primary key). Chained from the IntegrityError.
            SQLAlchemyError: If the write fails for any other reason.
        """
        name = self.model.__name__
        try:
            yield
        except IntegrityError as e:
            await self.session.rollback()
            logger.warning(f"Conflict while trying to {action} {name}: {e.orig}")
            raise ConflictError(
                f"Cannot {action} {name}: conflicts with an existing row"
            ) from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error while trying to {action} {name}: {e}")
            raise

    async def get_by_id(self, id: Any) -> T | None:
        """Get a row by primary key, or None."""
        return await self.session.get(self.model, id)

    async def get_all(self, *criteria: ColumnElement[bool]) -> list[T]:
        """
        Get all rows matching every criterion.

        Args:
            *criteria: SQLAlchemy boolean expressions, combined with AND.
                Example: get_all(AuthorRecord.email.ilike("%@test.com"))

        Returns:
            Matching rows, every row when no criteria are given.

        Raises:
            SQLAlchemyError: If the query fails.
        """
        stmt = select(self.model)
        if criteria:
            stmt = stmt.where(*criteria)
        try:
            result = await self.session.exec(stmt)
        except SQLAlchemyError as e:
            logger.error(f"Error retrieving {self.model.__name__}: {e}")
            raise
        return list(result.all())

    async def save(self, record: T, action: str = "save") -> T:
        """
        Insert or update a row and reload it from the database.

        Args:
            record: A new row, or one loaded through this session.
            action: Verb used in log lines and error messages.

        Returns:
            The row, refreshed.

        Raises:
            ConflictError: If the row violates a constraint.
            SQLAlchemyError: If the write fails for any other reason.
        """
        async with self._writing(action):
            self.session.add(record)
            await self.session.flush()
            await self.session.refresh(record)
        return record

    async def delete(self, record: T) -> None:
        """
        Delete a row.

        Raises:
            SQLAlchemyError: If the delete fails.
        """
        async with self._writing("delete"):
            await self.session.delete(record)
            await self.session.flush()
