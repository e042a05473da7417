from typing import Self
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from author_profile.models.author import Author


class AuthorSchema(BaseModel):
    """
    External presentation of an author.

    The identifier is rendered in its canonical string form and every other
    attribute as plain text. Keys are aliased to the storage column names.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: UUID = Field(alias="authorId")
    avatar_url: str = Field(alias="authorAvatarUrl")
    activation_token: str = Field(alias="authorActivationToken")
    email: str = Field(alias="authorEmail")
    hash: str = Field(alias="authorHash")
    username: str = Field(alias="authorUsername")

    @field_serializer("id")
    def serialize_id(self, value: UUID) -> str:
        return str(value)

    @classmethod
    def from_entity(cls, author: Author) -> Self:
        return cls(
            id=author.id,
            avatar_url=author.avatar_url,
            activation_token=author.activation_token,
            email=author.email,
            hash=author.hash,
            username=author.username,
        )

    def to_entity(self) -> Author:
        """Rebuild a validated entity from the presented values."""
        return Author(
            self.id,
            self.avatar_url,
            self.activation_token,
            self.email,
            self.hash,
            self.username,
        )
