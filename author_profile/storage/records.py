from uuid import UUID

from sqlmodel import Field, SQLModel

from author_profile.constants import (
    ACTIVATION_TOKEN_MAX_LENGTH,
    AUTHOR_COLUMNS,
    AUTHOR_TABLE_NAME,
    AVATAR_URL_MAX_LENGTH,
    EMAIL_MAX_LENGTH,
    HASH_MAX_LENGTH,
    USERNAME_MAX_LENGTH,
)
from author_profile.fields.uuid_bytes import UUIDBytesField
from author_profile.models.author import Author


class AuthorRecord(SQLModel, table=True):
    """
    SQLModel representing a row of the author table.

    This is a plain data model with no validation of its own. Rows are
    turned into ``Author`` entities with ``to_entity``, which re-runs every
    entity check.

    Attributes:
        id: Primary key, stored as 16 raw bytes in ``authorId``
        avatar_url: ``authorAvatarUrl``, VARCHAR(255)
        activation_token: ``authorActivationToken``, VARCHAR(32)
        email: ``authorEmail``, VARCHAR(128)
        hash: ``authorHash``, VARCHAR(97)
        username: ``authorUsername``, VARCHAR(32)
    """

    __tablename__ = AUTHOR_TABLE_NAME
    __table_args__ = {"extend_existing": True}

    id: UUID = UUIDBytesField(name=AUTHOR_COLUMNS["id"], primary_key=True)
    avatar_url: str = Field(
        max_length=AVATAR_URL_MAX_LENGTH,
        sa_column_kwargs={"name": AUTHOR_COLUMNS["avatar_url"]},
    )
    activation_token: str = Field(
        max_length=ACTIVATION_TOKEN_MAX_LENGTH,
        sa_column_kwargs={"name": AUTHOR_COLUMNS["activation_token"]},
    )
    email: str = Field(
        max_length=EMAIL_MAX_LENGTH,
        sa_column_kwargs={"name": AUTHOR_COLUMNS["email"]},
    )
    hash: str = Field(
        max_length=HASH_MAX_LENGTH,
        sa_column_kwargs={"name": AUTHOR_COLUMNS["hash"]},
    )
    username: str = Field(
        max_length=USERNAME_MAX_LENGTH,
        sa_column_kwargs={"name": AUTHOR_COLUMNS["username"]},
    )

    @classmethod
    def from_entity(cls, author: Author) -> "AuthorRecord":
        return cls(
            id=author.id,
            avatar_url=author.avatar_url,
            activation_token=author.activation_token,
            email=author.email,
            hash=author.hash,
            username=author.username,
        )

    def apply(self, author: Author) -> None:
        """Copy the entity's text attributes onto this row."""
        self.avatar_url = author.avatar_url
        self.activation_token = author.activation_token
        self.email = author.email
        self.hash = author.hash
        self.username = author.username

    def to_entity(self) -> Author:
        """
        Rebuild the entity through its six-argument constructor.

        Raises:
            ValidationError: If the stored values no longer pass the
                entity's checks.
        """
        return Author(
            self.id,
            self.avatar_url,
            self.activation_token,
            self.email,
            self.hash,
            self.username,
        )
