"""
Protocol classes for structural subtyping (duck typing with type safety).

``AuthorStorage`` is the narrow storage interface the entity expects from a
persistence component. Any class that implements these methods can store
authors, regardless of inheritance or backing store.

Example:
    ```python
    from author_profile.protocols import AuthorStorage


    async def rename(storage: AuthorStorage, author_id: str, name: str) -> None:
        author = await storage.get_by_id(author_id)
        author.username = name
        await storage.update(author)
    ```
"""

from typing import Protocol, runtime_checkable
from uuid import UUID

from author_profile.models.author import Author


@runtime_checkable
class AuthorStorage(Protocol):
    """
    Protocol for author persistence.

    Every read operation must rebuild authors through the six-argument
    ``Author`` constructor so that stored values are re-validated.
    """

    async def create(self, author: Author) -> Author:
        """
        Store a new author.

        Raises:
            ConflictError: If an author with the same id already exists.
        """
        ...

    async def get_by_id(self, author_id: UUID | str | bytes) -> Author | None:
        """
        Get an author by primary key.

        Returns:
            The author if found, None otherwise.
        """
        ...

    async def get_all(self) -> list[Author]:
        """Get every stored author."""
        ...

    async def update(self, author: Author) -> Author:
        """Overwrite the stored attributes of an existing author."""
        ...

    async def delete(self, author: Author) -> None:
        """Remove an author."""
        ...

    async def search_by_avatar_url(self, term: str) -> list[Author]:
        """Authors whose avatar URL contains term."""
        ...

    async def search_by_activation_token(self, term: str) -> list[Author]:
        """Authors whose activation token contains term."""
        ...

    async def search_by_email(self, term: str) -> list[Author]:
        """Authors whose email contains term."""
        ...

    async def search_by_hash(self, term: str) -> list[Author]:
        """Authors whose hash contains term."""
        ...

    async def search_by_username(self, term: str) -> list[Author]:
        """Authors whose username contains term."""
        ...
