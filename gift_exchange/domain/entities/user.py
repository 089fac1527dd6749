"""
User Entity - A participant enrolled in exactly one room.
"""

from dataclasses import dataclass, field
from typing import Optional

from gift_exchange.domain.entities.wish import Wish
from gift_exchange.domain.value_objects.room_id import RoomId
from gift_exchange.domain.value_objects.user_code import UserCode
from gift_exchange.domain.value_objects.user_id import UserId


@dataclass
class User:
    # Required fields (no defaults) - must come first
    id: UserId
    room_id: RoomId
    auth_code: UserCode
    # Optional fields (with defaults) - must come last
    is_admin: bool = False
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    wishes: tuple[Wish, ...] = field(default_factory=tuple)

    def __post_init__(self):
        self.wishes = tuple(self.wishes)

    def belongs_to(self, room_id: RoomId) -> bool:
        return self.room_id == room_id
