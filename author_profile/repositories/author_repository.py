"""
Repository for Author entities with substring search.

This repository stores ``Author`` entities as ``AuthorRecord`` rows and
rebuilds every row it reads through the ``Author`` constructor, so stored
values are re-validated on the way out. It satisfies the ``AuthorStorage``
protocol.

Example:
    ```python
    from author_profile.repositories.author_repository import AuthorRepository
    from author_profile.storage.db import async_session

    async with async_session() as session:
        repo = AuthorRepository(session)
        await repo.create(author)
        found = await repo.get_by_id("d441c4d8-efd0-4898-876a-1c39f94dc197")
        matches = await repo.search_by_email("@test.com")
        await session.commit()
    ```
"""

from uuid import UUID

from sqlmodel.ext.asyncio.session import AsyncSession

from author_profile.constants import LIKE_ESCAPE_CHAR
from author_profile.exceptions import (
    DatabaseError,
    EmptyOrUnsafeValue,
    NotFoundError,
    ValidationError,
)
from author_profile.logging import logger
from author_profile.models.author import Author, validate_id
from author_profile.repositories.base import BaseRepository
from author_profile.sanitize import sanitize_text
from author_profile.storage.records import AuthorRecord


def escape_like(term: str) -> str:
    """
    Escape LIKE wildcards so a term matches literally.

    Args:
        term: Text to search for.

    Returns:
        The term with the escape character, ``%`` and ``_`` escaped.
    """
    return (
        term.replace(LIKE_ESCAPE_CHAR, LIKE_ESCAPE_CHAR * 2)
        .replace("%", f"{LIKE_ESCAPE_CHAR}%")
        .replace("_", f"{LIKE_ESCAPE_CHAR}_")
    )


class AuthorRepository(BaseRepository[AuthorRecord]):
    """
    Repository for Author entity operations.

    Wraps the record-level CRUD of BaseRepository with an entity-level
    API and adds substring search on each text attribute.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize Author repository.

        Args:
            session: Database session for executing queries.
        """
        super().__init__(session, AuthorRecord)

    @staticmethod
    def _to_entity(record: AuthorRecord) -> Author:
        try:
            return record.to_entity()
        except ValidationError as ex:
            logger.error(
                f"Stored author {record.id} failed validation: {ex.message}",
                extra={"field": ex.field},
            )
            raise DatabaseError(
                f"stored author {record.id} is invalid: {ex.message}"
            ) from ex

    async def _get_record(self, author_id: UUID | str | bytes) -> AuthorRecord | None:
        return await super().get_by_id(validate_id(author_id))

    async def create(self, author: Author) -> Author:  # type: ignore[override]
        """
        Insert a new author.

        Args:
            author: The author to store.

        Returns:
            The stored author, as read back from the row.

        Raises:
            ConflictError: If an author with the same id already exists.
            SQLAlchemyError: If the insert fails for any other reason.
        """
        record = await super().save(AuthorRecord.from_entity(author), "create")
        return self._to_entity(record)

    async def get_by_id(  # type: ignore[override]
        self, author_id: UUID | str | bytes
    ) -> Author | None:
        """
        Get an author by primary key.

        Args:
            author_id: Anything the entity accepts as an id.

        Returns:
            The author if found, None otherwise.

        Raises:
            InvalidIdentifier: If author_id is malformed.
            DatabaseError: If the stored row fails validation.
        """
        record = await self._get_record(author_id)
        if record is None:
            return None
        return self._to_entity(record)

    async def get_all(self) -> list[Author]:  # type: ignore[override]
        """
        Get every stored author.

        Returns:
            List of all authors.

        Raises:
            DatabaseError: If a stored row fails validation.
        """
        records = await super().get_all()
        return [self._to_entity(record) for record in records]

    async def update(self, author: Author) -> Author:  # type: ignore[override]
        """
        Overwrite the stored attributes of an existing author.

        Args:
            author: The author with updated values.

        Returns:
            The updated author, as read back from the row.

        Raises:
            NotFoundError: If no row has the author's id.
        """
        record = await self._get_record(author.id)
        if record is None:
            raise NotFoundError(f"Author with ID {author.id} not found")

        record.apply(author)
        return self._to_entity(await super().save(record, "update"))

    async def delete(self, author: Author) -> None:  # type: ignore[override]
        """
        Delete an author.

        Args:
            author: The author to remove.

        Raises:
            NotFoundError: If no row has the author's id.
        """
        record = await self._get_record(author.id)
        if record is None:
            raise NotFoundError(f"Author with ID {author.id} not found")

        await super().delete(record)

    async def _search(self, field: str, term: str) -> list[Author]:
        term = sanitize_text(term)
        if not term:
            raise EmptyOrUnsafeValue(field)

        logger.debug(f"Searching authors by {field} containing {term!r}")
        column = getattr(AuthorRecord, field)
        records = await super().get_all(
            column.ilike(f"%{escape_like(term)}%", escape=LIKE_ESCAPE_CHAR)
        )
        return [self._to_entity(record) for record in records]

    async def search_by_avatar_url(self, term: str) -> list[Author]:
        """
        Search authors whose avatar URL contains term (case-insensitive).

        Args:
            term: Text to look for. Normalized like any author text;
                LIKE wildcards in it match literally.

        Returns:
            List of matching authors.

        Raises:
            EmptyOrUnsafeValue: If term is empty once normalized.
        """
        return await self._search("avatar_url", term)

    async def search_by_activation_token(self, term: str) -> list[Author]:
        """Search authors whose activation token contains term."""
        return await self._search("activation_token", term)

    async def search_by_email(self, term: str) -> list[Author]:
        """Search authors whose email contains term."""
        return await self._search("email", term)

    async def search_by_hash(self, term: str) -> list[Author]:
        """Search authors whose hash contains term."""
        return await self._search("hash", term)

    async def search_by_username(self, term: str) -> list[Author]:
        """Search authors whose username contains term."""
        return await self._search("username", term)
