"""
In-memory User Read Repository Implementation.

include_wishes=False strips wishes, as a lazy-loading store would.
include_room is accepted for interface parity; users only carry the room id.
"""

from dataclasses import replace

from gift_exchange.domain.entities.user import User
from gift_exchange.domain.ports.repositories import UserReadRepository
from gift_exchange.domain.shared import Failure, NotFoundError, Result, Success
from gift_exchange.domain.value_objects.room_id import RoomId
from gift_exchange.domain.value_objects.user_code import UserCode
from gift_exchange.domain.value_objects.user_id import UserId
from gift_exchange.infrastructure.persistence.in_memory_store import InMemoryRoomStore


class InMemoryUserReadRepository(UserReadRepository):
    def __init__(self, store: InMemoryRoomStore):
        self._store = store

    def _shape(self, user: User, include_wishes: bool) -> User:
        return user if include_wishes else replace(user, wishes=())

    async def get_by_code(
        self,
        code: UserCode,
        include_room: bool = False,
        include_wishes: bool = False,
    ) -> Result[User]:
        user = self._store.get_user_by_code(code)
        if user is None:
            return Failure(
                NotFoundError.single("userCode", "User with such code not found.")
            )
        return Success(self._shape(user, include_wishes))

    async def get_by_id(
        self,
        user_id: UserId,
        include_room: bool = False,
        include_wishes: bool = False,
    ) -> Result[User]:
        user = self._store.get_user_by_id(user_id)
        if user is None:
            return Failure(NotFoundError.single("id", f"User with id {user_id} not found."))
        return Success(self._shape(user, include_wishes))

    async def get_many_by_room_id(self, room_id: RoomId) -> Result[list[User]]:
        room = self._store.get_room(room_id)
        if room is None:
            return Failure(NotFoundError.single("roomId", f"Room {room_id} not found."))
        return Success(list(room.users))
