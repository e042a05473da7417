"""
Custom exception classes for the application.

This module defines the exception hierarchy used across the entity, the
repository layer and the commands. Every exception carries a human-readable
``message``; validation errors additionally name the offending field.
"""


class AppException(Exception):
    """
    Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
    """

    def __init__(self, message: str):
        """
        Initialize the exception with a message.

        Args:
            message: Human-readable error description.
        """
        self.message = message
        super().__init__(message)


class ValidationError(AppException):
    """
    Data validation failed.

    Raised when input data fails validation checks before processing.
    Callers are expected to correct the input and try again.

    Attributes:
        field: Name of the attribute that failed validation.
    """

    def __init__(self, field: str, message: str):
        """
        Initialize the exception.

        Args:
            field: Name of the attribute that failed validation.
            message: Human-readable error description.
        """
        self.field = field
        super().__init__(message)


class InvalidIdentifier(ValidationError):
    """Identifier is not a syntactically valid UUID."""

    def __init__(self, field: str, message: str = "invalid uuid"):
        super().__init__(field, message)


class EmptyOrUnsafeValue(ValidationError):
    """Text is empty once trimmed and stripped of unsafe content."""

    def __init__(self, field: str, message: str | None = None):
        super().__init__(
            field, message or f"{field.replace('_', ' ')} is empty or insecure"
        )


class ValueTooLong(ValidationError):
    """
    Text exceeds the maximum length of its storage column.

    Attributes:
        max_length: The column width that was exceeded.
    """

    def __init__(self, field: str, max_length: int):
        self.max_length = max_length
        super().__init__(
            field,
            f"{field.replace('_', ' ')} too large "
            f"(maximum {max_length} characters)",
        )


class NotFoundError(AppException):
    """
    Resource not found.

    Raised when a requested resource does not exist.
    """

    pass


class ConflictError(AppException):
    """
    Resource conflict.

    Raised when an operation conflicts with existing state (e.g., duplicate
    entry).
    """

    pass


class DatabaseError(AppException):
    """
    Database operation failed.

    Raised when a database operation encounters an error that should be
    handled at the application level, such as a stored row that no longer
    passes entity validation.
    """

    pass
