"""
In-memory Room Repository Implementation.

Implements RoomRepository on top of InMemoryRoomStore.
"""

from gift_exchange.domain.entities.room import Room
from gift_exchange.domain.ports.repositories import RoomRepository
from gift_exchange.domain.shared import Failure, NotFoundError, Result, Success
from gift_exchange.domain.value_objects.user_code import UserCode
from gift_exchange.infrastructure.persistence.in_memory_store import InMemoryRoomStore


class InMemoryRoomRepository(RoomRepository):
    _store: InMemoryRoomStore

    def __init__(self, store: InMemoryRoomStore):
        self._store = store

    async def get_by_user_code(self, code: UserCode) -> Result[Room]:
        room = self._store.get_room_by_user_code(code)
        if room is None:
            return Failure(
                NotFoundError.single("userCode", "User with such code not found.")
            )
        return Success(room)

    async def update(self, room: Room) -> Result[None]:
        if not await self._store.replace_room(room):
            return Failure(NotFoundError.single("room.Id", f"Room {room.id} not found."))
        return Success(None)
