"""Author profile entity with validated fields and an async storage layer."""

from author_profile.exceptions import (
    EmptyOrUnsafeValue,
    InvalidIdentifier,
    ValidationError,
    ValueTooLong,
)
from author_profile.models.author import Author
from author_profile.sanitize import sanitize_text

__all__ = [
    "Author",
    "EmptyOrUnsafeValue",
    "InvalidIdentifier",
    "ValidationError",
    "ValueTooLong",
    "sanitize_text",
]
