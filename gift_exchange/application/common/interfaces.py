"""
Base interfaces for CQRS pattern.

Handlers return Result[T]: either Success(value) or Failure(ValidationError).

Usage:
    @dataclass(frozen=True)
    class DeleteUserCommand(Command[Room]):
        user_code: UserCode
        user_id: Optional[UserId]

    class DeleteUserHandler(CommandHandler[Room]):
        def __init__(self, room_repository: RoomRepository):
            self._room_repository = room_repository

        async def execute(self, command: DeleteUserCommand) -> Result[Room]:
            ...
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

from gift_exchange.domain.shared import Result

T = TypeVar("T")
class Command(ABC, Generic[T]):
    """Base class for write operations"""
    pass

class CommandHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, command: Command[T]) -> Result[T]:
        """Execute the command and return a Result wrapping T"""
        ...

class Query(ABC, Generic[T]):
    """Base class for read operations"""
    pass

class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, query: Query[T]) -> Result[T]:
        """Execute the query and return a Result wrapping T"""
        ...
