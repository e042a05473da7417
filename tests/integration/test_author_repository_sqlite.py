"""
Round-trip tests for AuthorRepository against an in-memory SQLite database.

These tests exercise the real column types, the raw-bytes identifier and
the escaped case-insensitive substring search.
"""

from uuid import UUID, uuid4

import pytest
from sqlalchemy import text

from author_profile.exceptions import ConflictError, DatabaseError
from author_profile.models.author import Author
from author_profile.repositories.author_repository import AuthorRepository
from tests.mocks.author_data import AUTHOR_ID, make_author_values

pytestmark = pytest.mark.integration


def make_author(**overrides) -> Author:
    values = make_author_values(id=uuid4(), **overrides)
    return Author(**values)


class TestAuthorRepositoryRoundTrip:
    @pytest.mark.asyncio
    async def test_create_and_get(self, sqlite_session, author):
        repo = AuthorRepository(sqlite_session)

        await repo.create(author)
        await sqlite_session.commit()
        sqlite_session.expunge_all()

        found = await repo.get_by_id(AUTHOR_ID)

        assert found == author

    @pytest.mark.asyncio
    async def test_id_stored_as_raw_bytes(self, sqlite_session, author):
        repo = AuthorRepository(sqlite_session)
        await repo.create(author)
        await sqlite_session.commit()

        result = await sqlite_session.execute(
            text('SELECT "authorId" FROM author')
        )

        assert result.scalar_one() == UUID(AUTHOR_ID).bytes

    @pytest.mark.asyncio
    async def test_duplicate_id_rejected(self, sqlite_session, author):
        repo = AuthorRepository(sqlite_session)
        await repo.create(author)
        await sqlite_session.commit()
        sqlite_session.expunge_all()

        with pytest.raises(ConflictError) as exc_info:
            await repo.create(Author(**make_author_values()))

        assert exc_info.value.__cause__ is not None
        sqlite_session.expunge_all()
        assert len(await repo.get_all()) == 1

    @pytest.mark.asyncio
    async def test_get_missing(self, sqlite_session):
        repo = AuthorRepository(sqlite_session)

        assert await repo.get_by_id(uuid4()) is None

    @pytest.mark.asyncio
    async def test_get_all(self, sqlite_session):
        repo = AuthorRepository(sqlite_session)
        first = make_author(username="first")
        second = make_author(username="second")
        await repo.create(first)
        await repo.create(second)

        authors = await repo.get_all()

        assert sorted(a.username for a in authors) == ["first", "second"]

    @pytest.mark.asyncio
    async def test_update(self, sqlite_session, author):
        repo = AuthorRepository(sqlite_session)
        await repo.create(author)
        await sqlite_session.commit()

        author.username = "Renamed"
        await repo.update(author)
        await sqlite_session.commit()
        sqlite_session.expunge_all()

        found = await repo.get_by_id(author.id)
        assert found.username == "Renamed"

    @pytest.mark.asyncio
    async def test_delete(self, sqlite_session, author):
        repo = AuthorRepository(sqlite_session)
        await repo.create(author)
        await sqlite_session.commit()

        await repo.delete(author)
        await sqlite_session.commit()

        assert await repo.get_by_id(author.id) is None

    @pytest.mark.asyncio
    async def test_invalid_stored_row(self, sqlite_session, author):
        repo = AuthorRepository(sqlite_session)
        await repo.create(author)
        await sqlite_session.commit()
        sqlite_session.expunge_all()
        await sqlite_session.execute(
            text('UPDATE author SET "authorEmail" = :email'),
            {"email": "<br>"},
        )

        with pytest.raises(DatabaseError):
            await repo.get_all()


class TestAuthorRepositorySearchSqlite:
    @pytest.mark.asyncio
    async def test_search_by_email_substring(self, sqlite_session):
        repo = AuthorRepository(sqlite_session)
        await repo.create(make_author(email="alice@example.com"))
        await repo.create(make_author(email="bob@test.com"))

        found = await repo.search_by_email("EXAMPLE")

        assert [a.email for a in found] == ["alice@example.com"]

    @pytest.mark.asyncio
    async def test_search_treats_wildcards_literally(self, sqlite_session):
        repo = AuthorRepository(sqlite_session)
        await repo.create(make_author(username="a_b"))
        await repo.create(make_author(username="axb"))

        found = await repo.search_by_username("a_b")

        assert [a.username for a in found] == ["a_b"]

    @pytest.mark.asyncio
    async def test_search_percent_literally(self, sqlite_session):
        repo = AuthorRepository(sqlite_session)
        await repo.create(make_author(activation_token="100%done"))
        await repo.create(make_author(activation_token="100 done"))

        found = await repo.search_by_activation_token("0%d")

        assert [a.activation_token for a in found] == ["100%done"]

    @pytest.mark.asyncio
    async def test_search_no_match(self, sqlite_session, author):
        repo = AuthorRepository(sqlite_session)
        await repo.create(author)

        assert await repo.search_by_avatar_url("bing") == []
