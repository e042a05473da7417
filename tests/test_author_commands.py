"""
Tests for Author commands.

These tests verify that commands correctly encapsulate business logic
and can be tested independently of any storage backend.
"""

from uuid import UUID

import pytest
from pydantic import ValidationError as PydanticValidationError

from author_profile.commands.author_commands import (
    CreateAuthorCommand,
    CreateAuthorInput,
    DeleteAuthorCommand,
    GetAuthorsCommand,
    GetAuthorsInput,
    UpdateAuthorCommand,
    UpdateAuthorInput,
)
from author_profile.exceptions import (
    ConflictError,
    EmptyOrUnsafeValue,
    InvalidIdentifier,
    NotFoundError,
    ValueTooLong,
)
from tests.mocks.author_data import AUTHOR_ID, make_author_values
from tests.mocks.repository_mocks import create_mock_author_repository


class TestGetAuthorsCommand:
    """Tests for GetAuthorsCommand."""

    @pytest.mark.asyncio
    async def test_get_all_authors(self, author):
        mock_repo = create_mock_author_repository()
        mock_repo.get_all.return_value = [author]

        result = await GetAuthorsCommand(mock_repo).execute(GetAuthorsInput())

        assert result == [author]
        mock_repo.get_all.assert_called_once_with()

    @pytest.mark.asyncio
    async def test_get_by_id(self, author):
        mock_repo = create_mock_author_repository()
        mock_repo.get_by_id.return_value = author

        result = await GetAuthorsCommand(mock_repo).execute(
            GetAuthorsInput(id=AUTHOR_ID)
        )

        assert result == [author]
        mock_repo.get_by_id.assert_called_once_with(AUTHOR_ID)
        mock_repo.get_all.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_by_id_missing(self):
        mock_repo = create_mock_author_repository()

        result = await GetAuthorsCommand(mock_repo).execute(
            GetAuthorsInput(id=AUTHOR_ID)
        )

        assert result == []

    @pytest.mark.asyncio
    async def test_search_dispatches_on_field(self, author):
        mock_repo = create_mock_author_repository()
        mock_repo.search_by_email.return_value = [author]

        result = await GetAuthorsCommand(mock_repo).execute(
            GetAuthorsInput(field="email", term="@test.com")
        )

        assert result == [author]
        mock_repo.search_by_email.assert_called_once_with("@test.com")

    def test_field_without_term_rejected(self):
        with pytest.raises(PydanticValidationError):
            GetAuthorsInput(field="email")

    def test_unknown_field_rejected(self):
        with pytest.raises(PydanticValidationError):
            GetAuthorsInput(field="password", term="x")

    def test_id_with_search_rejected(self):
        with pytest.raises(PydanticValidationError):
            GetAuthorsInput(id=AUTHOR_ID, field="email", term="@test.com")


class TestCreateAuthorCommand:
    """Tests for CreateAuthorCommand."""

    @pytest.mark.asyncio
    async def test_create_author(self, author):
        mock_repo = create_mock_author_repository()

        result = await CreateAuthorCommand(mock_repo).execute(
            CreateAuthorInput(**make_author_values())
        )

        assert result == author
        mock_repo.create.assert_called_once()

    @pytest.mark.asyncio
    async def test_create_generates_id(self):
        mock_repo = create_mock_author_repository()
        values = make_author_values()
        del values["id"]

        result = await CreateAuthorCommand(mock_repo).execute(
            CreateAuthorInput(**values)
        )

        assert isinstance(result.id, UUID)
        assert result.id.version == 4

    @pytest.mark.asyncio
    async def test_create_duplicate_id(self):
        mock_repo = create_mock_author_repository()
        mock_repo.create.side_effect = ConflictError("duplicate author")

        with pytest.raises(ConflictError):
            await CreateAuthorCommand(mock_repo).execute(
                CreateAuthorInput(**make_author_values())
            )

        mock_repo.get_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_invalid_values_never_reach_storage(self):
        mock_repo = create_mock_author_repository()

        with pytest.raises(ValueTooLong):
            await CreateAuthorCommand(mock_repo).execute(
                CreateAuthorInput(**make_author_values(username="x" * 33))
            )

        mock_repo.get_by_id.assert_not_called()
        mock_repo.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_malformed_id(self):
        mock_repo = create_mock_author_repository()

        with pytest.raises(InvalidIdentifier):
            await CreateAuthorCommand(mock_repo).execute(
                CreateAuthorInput(**make_author_values(id="not-a-uuid"))
            )


class TestUpdateAuthorCommand:
    """Tests for UpdateAuthorCommand."""

    @pytest.mark.asyncio
    async def test_update_some_fields(self, author):
        mock_repo = create_mock_author_repository()
        mock_repo.get_by_id.return_value = author

        result = await UpdateAuthorCommand(mock_repo).execute(
            UpdateAuthorInput(id=AUTHOR_ID, email=" new@test.com ")
        )

        assert result.email == "new@test.com"
        assert result.username == "Testuser"
        mock_repo.update.assert_called_once()

    @pytest.mark.asyncio
    async def test_update_missing(self):
        mock_repo = create_mock_author_repository()

        with pytest.raises(NotFoundError):
            await UpdateAuthorCommand(mock_repo).execute(
                UpdateAuthorInput(id=AUTHOR_ID, username="Other")
            )

        mock_repo.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_rejected_value_leaves_author_unchanged(self, author):
        mock_repo = create_mock_author_repository()
        mock_repo.get_by_id.return_value = author

        with pytest.raises(EmptyOrUnsafeValue):
            await UpdateAuthorCommand(mock_repo).execute(
                UpdateAuthorInput(
                    id=AUTHOR_ID, username="Other", email="   "
                )
            )

        assert author.username == "Testuser"
        assert author.email == "test@test.com"
        mock_repo.update.assert_not_called()


class TestDeleteAuthorCommand:
    """Tests for DeleteAuthorCommand."""

    @pytest.mark.asyncio
    async def test_delete(self, author):
        mock_repo = create_mock_author_repository()
        mock_repo.get_by_id.return_value = author

        await DeleteAuthorCommand(mock_repo).execute(AUTHOR_ID)

        mock_repo.delete.assert_called_once_with(author)

    @pytest.mark.asyncio
    async def test_delete_missing(self):
        mock_repo = create_mock_author_repository()

        with pytest.raises(NotFoundError):
            await DeleteAuthorCommand(mock_repo).execute(AUTHOR_ID)

        mock_repo.delete.assert_not_called()
