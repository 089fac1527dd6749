"""
In-memory room store shared by the in-memory repositories.

- One instance per application (Scope.APP in the DI container)
- Stores copies: callers never hold a reference into storage
- Writes are serialized with an asyncio.Lock; reads see whole rooms only
"""

import asyncio
import logging
from copy import deepcopy
from typing import Iterable, Optional

from gift_exchange.domain.entities.room import Room
from gift_exchange.domain.entities.user import User
from gift_exchange.domain.value_objects.room_id import RoomId
from gift_exchange.domain.value_objects.user_code import UserCode
from gift_exchange.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


class InMemoryRoomStore:
    def __init__(self, rooms: Iterable[Room] = ()):
        self._rooms: dict[RoomId, Room] = {}
        self._lock = asyncio.Lock()
        for room in rooms:
            self.add_room(room)

    def add_room(self, room: Room) -> None:
        if room.id in self._rooms:
            raise ValueError(f"Room {room.id} already exists")
        seen_codes: set[UserCode] = set()
        for user in room.users:
            if user.auth_code in seen_codes:
                raise ValueError(f"Auth code of user {user.id} is used twice in room {room.id}")
            seen_codes.add(user.auth_code)
            if self._find_user(lambda u: u.id == user.id or u.auth_code == user.auth_code):
                raise ValueError(f"User {user.id} or its code is already taken")
        self._rooms[room.id] = deepcopy(room)

    def get_room(self, room_id: RoomId) -> Optional[Room]:
        room = self._rooms.get(room_id)
        return deepcopy(room) if room else None

    def get_room_by_user_code(self, code: UserCode) -> Optional[Room]:
        user = self._find_user(lambda u: u.auth_code == code)
        return self.get_room(user.room_id) if user else None

    def get_user_by_code(self, code: UserCode) -> Optional[User]:
        user = self._find_user(lambda u: u.auth_code == code)
        return deepcopy(user) if user else None

    def get_user_by_id(self, user_id: UserId) -> Optional[User]:
        user = self._find_user(lambda u: u.id == user_id)
        return deepcopy(user) if user else None

    async def replace_room(self, room: Room) -> bool:
        """Overwrite a stored room. Returns False if the room does not exist."""
        async with self._lock:
            if room.id not in self._rooms:
                return False
            self._rooms[room.id] = deepcopy(room)
        logger.debug(f"[InMemoryStore] Stored room {room.id} with {len(room.users)} users")
        return True

    def _find_user(self, predicate) -> Optional[User]:
        for room in self._rooms.values():
            for user in room.users:
                if predicate(user):
                    return user
        return None
