"""
The Author entity: a small cross section of an author profile.

Each attribute has a pure validation function that returns the normalized
value or raises a ``ValidationError`` subclass. The entity's property setters
call these functions before assigning, so a rejected value never replaces a
valid one. The constructor runs the setters in column order and stops at the
first error.
"""

from uuid import UUID

from author_profile.constants import (
    ACTIVATION_TOKEN_MAX_LENGTH,
    AUTHOR_ID_BYTES,
    AUTHOR_ID_PATTERN,
    AVATAR_URL_MAX_LENGTH,
    EMAIL_MAX_LENGTH,
    HASH_MAX_LENGTH,
    USERNAME_MAX_LENGTH,
)
from author_profile.exceptions import (
    EmptyOrUnsafeValue,
    InvalidIdentifier,
    ValueTooLong,
)
from author_profile.sanitize import sanitize_text


def validate_id(value: UUID | str | bytes) -> UUID:
    """
    Parse an author identifier.

    Args:
        value: A UUID, its canonical 36-character textual form, or the
            16 raw bytes read back from storage.

    Returns:
        The identifier as a UUID.

    Raises:
        InvalidIdentifier: If value is not a well-formed identifier.
    """
    if isinstance(value, UUID):
        return value

    if isinstance(value, (bytes, bytearray, memoryview)):
        raw = bytes(value)
        if len(raw) != AUTHOR_ID_BYTES:
            raise InvalidIdentifier(
                "id", f"invalid uuid: expected {AUTHOR_ID_BYTES} bytes"
            )
        return UUID(bytes=raw)

    if isinstance(value, str):
        if not AUTHOR_ID_PATTERN.match(value):
            raise InvalidIdentifier("id", f"invalid uuid: {value!r}")
        return UUID(value)

    raise InvalidIdentifier(
        "id", f"invalid uuid: unsupported type {type(value).__name__}"
    )


def validate_text(field: str, value: str, max_length: int) -> str:
    """
    Normalize a text attribute and check it fits its column.

    Args:
        field: Attribute name, reported in errors.
        value: Raw text.
        max_length: Column width in characters.

    Returns:
        The normalized text.

    Raises:
        EmptyOrUnsafeValue: If nothing is left after normalization.
        ValueTooLong: If the normalized text exceeds max_length.
        TypeError: If value is not a string.
    """
    value = sanitize_text(value)
    if not value:
        raise EmptyOrUnsafeValue(field)

    if len(value) > max_length:
        raise ValueTooLong(field, max_length)

    return value


def validate_avatar_url(value: str) -> str:
    return validate_text("avatar_url", value, AVATAR_URL_MAX_LENGTH)


def validate_activation_token(value: str) -> str:
    return validate_text(
        "activation_token", value, ACTIVATION_TOKEN_MAX_LENGTH
    )


def validate_email(value: str) -> str:
    return validate_text("email", value, EMAIL_MAX_LENGTH)


def validate_hash(value: str) -> str:
    return validate_text("hash", value, HASH_MAX_LENGTH)


def validate_username(value: str) -> str:
    return validate_text("username", value, USERNAME_MAX_LENGTH)


class Author:
    """
    Author profile entity.

    All six attributes are validated on construction and on every
    reassignment. An instance is always fully valid.

    Attributes:
        id: Primary key of the author.
        avatar_url: URL of the author's avatar (max 255 characters).
        activation_token: Token for initial profile activation
            (max 32 characters).
        email: Email address of the author (max 128 characters).
        hash: Password hash for the profile (max 97 characters).
        username: Profile user name (max 32 characters).

    Example:
        ```python
        author = Author(
            "d441c4d8-efd0-4898-876a-1c39f94dc197",
            "www.google.com",
            "abcdefghijklmnopqrstuvwxyzabcdef",
            "test@test.com",
            password_hash,
            "Testuser",
        )
        author.email = "new@test.com"  # re-validated
        ```
    """

    __slots__ = (
        "_id",
        "_avatar_url",
        "_activation_token",
        "_email",
        "_hash",
        "_username",
    )

    def __init__(
        self,
        id: UUID | str | bytes,
        avatar_url: str,
        activation_token: str,
        email: str,
        hash: str,
        username: str,
    ):
        """
        Build an author, validating every attribute in column order.

        Raises:
            InvalidIdentifier: If id is malformed.
            EmptyOrUnsafeValue: If a text attribute is empty once normalized.
            ValueTooLong: If a text attribute exceeds its column width.
        """
        self.id = id
        self.avatar_url = avatar_url
        self.activation_token = activation_token
        self.email = email
        self.hash = hash
        self.username = username

    @property
    def id(self) -> UUID:
        return self._id

    @id.setter
    def id(self, value: UUID | str | bytes) -> None:
        self._id = validate_id(value)

    @property
    def avatar_url(self) -> str:
        return self._avatar_url

    @avatar_url.setter
    def avatar_url(self, value: str) -> None:
        self._avatar_url = validate_avatar_url(value)

    @property
    def activation_token(self) -> str:
        return self._activation_token

    @activation_token.setter
    def activation_token(self, value: str) -> None:
        self._activation_token = validate_activation_token(value)

    @property
    def email(self) -> str:
        return self._email

    @email.setter
    def email(self, value: str) -> None:
        self._email = validate_email(value)

    @property
    def hash(self) -> str:
        return self._hash

    @hash.setter
    def hash(self, value: str) -> None:
        self._hash = validate_hash(value)

    @property
    def username(self) -> str:
        return self._username

    @username.setter
    def username(self, value: str) -> None:
        self._username = validate_username(value)

    def _values(self) -> tuple[UUID, str, str, str, str, str]:
        return (
            self._id,
            self._avatar_url,
            self._activation_token,
            self._email,
            self._hash,
            self._username,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Author):
            return NotImplemented
        return self._values() == other._values()

    # Mutable, so not hashable
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Author(id={str(self._id)!r}, username={self._username!r})"

    def __str__(self) -> str:
        from author_profile.schemas.author import AuthorSchema

        return AuthorSchema.from_entity(self).model_dump_json(by_alias=True)
