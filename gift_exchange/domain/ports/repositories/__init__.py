"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Returns Result values, never raises for a missing entity
- Does NOT specify implementation

Infrastructure layer provides implementations.
"""

from gift_exchange.domain.ports.repositories.room_repository import RoomRepository
from gift_exchange.domain.ports.repositories.user_read_repository import (
    UserReadRepository,
)

__all__ = [
    "RoomRepository",
    "UserReadRepository",
]
