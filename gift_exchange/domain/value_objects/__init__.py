"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass)
- Validates itself on creation
- Pure Python (no framework dependencies)
"""

from gift_exchange.domain.value_objects.user_id import UserId
from gift_exchange.domain.value_objects.room_id import RoomId
from gift_exchange.domain.value_objects.user_code import UserCode

__all__ = [
    "UserId",
    "RoomId",
    "UserCode",
]
