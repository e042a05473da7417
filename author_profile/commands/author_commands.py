"""
Commands for Author business operations.

Example:
    ```python
    from author_profile.commands.author_commands import (
        CreateAuthorCommand,
        CreateAuthorInput,
    )
    from author_profile.repositories.author_repository import AuthorRepository
    from author_profile.storage.db import async_session

    async with async_session() as session:
        command = CreateAuthorCommand(AuthorRepository(session))
        author = await command.execute(
            CreateAuthorInput(
                avatar_url="www.google.com",
                activation_token="abcdefghijklmnopqrstuvwxyzabcdef",
                email="test@test.com",
                hash=password_hash,
                username="Testuser",
            )
        )
        await session.commit()
    ```
"""

from typing import Literal, Self
from uuid import uuid4

from pydantic import BaseModel, Field, model_validator

from author_profile.commands.base import BaseCommand
from author_profile.exceptions import NotFoundError
from author_profile.logging import logger
from author_profile.models.author import Author
from author_profile.protocols import AuthorStorage

SearchField = Literal[
    "avatar_url", "activation_token", "email", "hash", "username"
]


# ============================================================================
# Input Models
# ============================================================================


class GetAuthorsInput(BaseModel):  # type: ignore[misc]
    """Input model for getting authors."""

    id: str | None = Field(default=None, description="Fetch a single author")
    field: SearchField | None = Field(
        default=None, description="Attribute to search"
    )
    term: str | None = Field(
        default=None,
        description="Substring to look for in field (case-insensitive)",
    )

    @model_validator(mode="after")
    def check_search_pair(self) -> Self:
        if (self.field is None) != (self.term is None):
            raise ValueError("field and term must be given together")
        if self.id is not None and self.field is not None:
            raise ValueError("id cannot be combined with a field search")
        return self


class CreateAuthorInput(BaseModel):  # type: ignore[misc]
    """Input model for creating an author. Omit id to generate one."""

    id: str | None = Field(default=None, description="Author ID (UUID)")
    avatar_url: str
    activation_token: str
    email: str
    hash: str
    username: str


class UpdateAuthorInput(BaseModel):  # type: ignore[misc]
    """Input model for updating an author. Unset fields keep their value."""

    id: str = Field(..., description="Author ID to update")
    avatar_url: str | None = None
    activation_token: str | None = None
    email: str | None = None
    hash: str | None = None
    username: str | None = None


# ============================================================================
# Commands
# ============================================================================


class GetAuthorsCommand(BaseCommand[GetAuthorsInput, list[Author]]):
    """
    Command to get authors.

    Fetches by id when one is given, otherwise searches one attribute when
    field and term are given, otherwise returns every author.
    """

    def __init__(self, repository: AuthorStorage):
        self.repository = repository

    async def execute(self, input_data: GetAuthorsInput) -> list[Author]:
        if input_data.id is not None:
            author = await self.repository.get_by_id(input_data.id)
            return [author] if author is not None else []

        if input_data.field is not None:
            search = getattr(self.repository, f"search_by_{input_data.field}")
            return await search(input_data.term)

        return await self.repository.get_all()


class CreateAuthorCommand(BaseCommand[CreateAuthorInput, Author]):
    """
    Command to create a new author.

    The entity is built, and therefore validated, before storage is
    touched. Duplicate ids are rejected by the storage layer.
    """

    def __init__(self, repository: AuthorStorage):
        self.repository = repository

    async def execute(self, input_data: CreateAuthorInput) -> Author:
        """
        Execute command to create author.

        Args:
            input_data: Author data to create.

        Returns:
            The stored author.

        Raises:
            ValidationError: If any attribute is invalid.
            ConflictError: If an author with the same id already exists.
        """
        author = Author(
            input_data.id if input_data.id is not None else uuid4(),
            input_data.avatar_url,
            input_data.activation_token,
            input_data.email,
            input_data.hash,
            input_data.username,
        )

        created = await self.repository.create(author)
        logger.info(f"Created author {created.id}")
        return created


class UpdateAuthorCommand(BaseCommand[UpdateAuthorInput, Author]):
    """
    Command to update an existing author.

    All supplied values are validated together on a fresh entity, so a
    rejected value leaves both the stored and the loaded author unchanged.
    """

    def __init__(self, repository: AuthorStorage):
        self.repository = repository

    async def execute(self, input_data: UpdateAuthorInput) -> Author:
        """
        Execute command to update author.

        Args:
            input_data: Author ID and the values to change.

        Returns:
            Updated author.

        Raises:
            NotFoundError: If author not found.
            ValidationError: If a supplied value is invalid.
        """
        current = await self.repository.get_by_id(input_data.id)
        if current is None:
            raise NotFoundError(f"Author with ID {input_data.id} not found")

        changes = input_data.model_dump(exclude={"id"}, exclude_none=True)
        updated = Author(
            current.id,
            changes.get("avatar_url", current.avatar_url),
            changes.get("activation_token", current.activation_token),
            changes.get("email", current.email),
            changes.get("hash", current.hash),
            changes.get("username", current.username),
        )

        result = await self.repository.update(updated)
        logger.info(f"Updated author {result.id}: {sorted(changes)}")
        return result


class DeleteAuthorCommand(BaseCommand[str, None]):
    """Command to delete an author by id."""

    def __init__(self, repository: AuthorStorage):
        self.repository = repository

    async def execute(self, author_id: str) -> None:
        """
        Execute command to delete author.

        Args:
            author_id: ID of author to delete.

        Raises:
            NotFoundError: If author not found.
        """
        author = await self.repository.get_by_id(author_id)
        if author is None:
            raise NotFoundError(f"Author with ID {author_id} not found")

        await self.repository.delete(author)
        logger.info(f"Deleted author {author.id}")
