"""
Base command pattern for reusable business logic.

Commands encapsulate business operations so they can be reused by any entry
point (CLI, service layer, scripts) and tested independently of them.

Example:
    ```python
    class CreateAuthorInput(BaseModel):
        username: str


    class CreateAuthorCommand(BaseCommand[CreateAuthorInput, Author]):
        def __init__(self, repository: AuthorStorage):
            self.repository = repository

        async def execute(self, input_data: CreateAuthorInput) -> Author:
            ...
    ```
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

TInput = TypeVar("TInput")
TOutput = TypeVar("TOutput")


class BaseCommand(ABC, Generic[TInput, TOutput]):
    """
    Base command for business operations.

    Commands depend on a storage implementation for data access and on the
    entity for validation.

    Type Parameters:
        TInput: Input data type (usually a Pydantic model).
        TOutput: Output data type.
    """

    @abstractmethod
    async def execute(self, input_data: TInput) -> TOutput:
        """
        Execute the command.

        Args:
            input_data: Input data for the command.

        Returns:
            Result of the command execution.

        Raises:
            AppException: For validation and business rule failures.
        """
        pass
