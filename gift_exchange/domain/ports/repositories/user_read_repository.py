"""
User Read Repository Port - Read-only access to participants.
Implementation: gift_exchange/infrastructure/persistence/in_memory_user_repository.py

include_room / include_wishes mirror eager-loading hints of a real store.
An adapter that ignores them is still correct.
"""

from abc import ABC, abstractmethod

from gift_exchange.domain.entities.user import User
from gift_exchange.domain.shared import Result
from gift_exchange.domain.value_objects.room_id import RoomId
from gift_exchange.domain.value_objects.user_code import UserCode
from gift_exchange.domain.value_objects.user_id import UserId


class UserReadRepository(ABC):
    @abstractmethod
    async def get_by_code(
        self,
        code: UserCode,
        include_room: bool = False,
        include_wishes: bool = False,
    ) -> Result[User]: ...

    @abstractmethod
    async def get_by_id(
        self,
        user_id: UserId,
        include_room: bool = False,
        include_wishes: bool = False,
    ) -> Result[User]: ...

    @abstractmethod
    async def get_many_by_room_id(self, room_id: RoomId) -> Result[list[User]]: ...
