"""
Room Repository Port - Interface for loading and saving the Room aggregate.
Implementation: gift_exchange/infrastructure/persistence/in_memory_room_repository.py
"""

from abc import ABC, abstractmethod

from gift_exchange.domain.entities.room import Room
from gift_exchange.domain.shared import Result
from gift_exchange.domain.value_objects.user_code import UserCode


class RoomRepository(ABC):
    @abstractmethod
    async def get_by_user_code(self, code: UserCode) -> Result[Room]:
        """Load the room the user with this code belongs to, users included."""
        ...

    @abstractmethod
    async def update(self, room: Room) -> Result[None]: ...
