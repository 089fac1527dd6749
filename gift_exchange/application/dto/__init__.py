"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- user.py   → UserDTO, WishDTO
- room.py   → RoomDTO
- errors.py → ErrorDTO, FieldFailureDTO

Note: These are different from domain entities.
DTOs are for API input/output, entities are for business logic.
"""

from gift_exchange.application.dto.user import UserDTO, WishDTO
from gift_exchange.application.dto.room import RoomDTO
from gift_exchange.application.dto.errors import ErrorDTO, FieldFailureDTO

__all__ = [
    "UserDTO",
    "WishDTO",
    "RoomDTO",
    "ErrorDTO",
    "FieldFailureDTO",
]
