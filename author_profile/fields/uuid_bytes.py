"""
Custom SQLModel field for UUIDs stored as raw bytes.

The author table keeps its primary key as a 16-byte binary column rather
than a 36-character string. This field converts between ``uuid.UUID`` in
Python code and the raw bytes in the database, on every backend.
"""

from typing import Any
from uuid import UUID

from sqlalchemy import LargeBinary, TypeDecorator
from sqlmodel import Field

from author_profile.constants import AUTHOR_ID_BYTES


class UUIDBytesType(TypeDecorator):  # type: ignore[misc]
    """
    SQLAlchemy type decorator for UUIDs stored as 16 raw bytes.

    Example:
        Column definition in database: VARBINARY(16) / BYTEA / BLOB
        Python value: UUID("d441c4d8-efd0-4898-876a-1c39f94dc197")
        Database value: b"\\xd4A\\xc4\\xd8\\xef\\xd0H\\x98\\x87j\\x1c9\\xf9M\\xc1\\x97"
    """

    impl = LargeBinary
    cache_ok = True

    def process_bind_param(
        self, value: UUID | str | bytes | None, dialect: Any
    ) -> bytes | None:
        """
        Convert a UUID to raw bytes when saving to database.

        Args:
            value: UUID, textual UUID or raw bytes (None allowed)
            dialect: SQLAlchemy dialect (unused)

        Returns:
            The 16 raw bytes, or None if value is None
        """
        if value is None:
            return None

        if isinstance(value, UUID):
            return value.bytes

        if isinstance(value, str):
            return UUID(value).bytes

        return bytes(value)

    def process_result_value(
        self, value: bytes | None, dialect: Any
    ) -> UUID | None:
        """
        Convert raw bytes to a UUID when loading from database.

        Args:
            value: Raw bytes (None allowed)
            dialect: SQLAlchemy dialect (unused)

        Returns:
            UUID, or None if value is None
        """
        if value is None:
            return None

        return UUID(bytes=bytes(value))


def UUIDBytesField(
    *,
    name: str | None = None,
    primary_key: bool = False,
    nullable: bool = False,
    **kwargs: Any,
) -> UUID:
    """
    Create a raw-bytes UUID field for SQLModel.

    Args:
        name: Column name in the database, when it differs from the
            attribute name
        primary_key: Whether the column is the primary key
        nullable: Whether the field can be NULL (default: False)
        **kwargs: Additional Field arguments (description, etc.)

    Returns:
        A Field configured for raw-bytes UUID storage

    Example:
        author_id: UUID = UUIDBytesField(name="authorId", primary_key=True)
    """
    column_kwargs: dict[str, Any] = {"nullable": nullable}
    if name is not None:
        column_kwargs["name"] = name

    return Field(
        sa_type=UUIDBytesType(AUTHOR_ID_BYTES),
        primary_key=primary_key,
        sa_column_kwargs=column_kwargs,
        **kwargs,
    )
