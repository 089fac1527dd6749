"""
Persistence Layer - Storage implementations.

Contains in-memory repository implementations for domain ports.
"""

from gift_exchange.infrastructure.persistence.in_memory_store import InMemoryRoomStore
from gift_exchange.infrastructure.persistence.in_memory_room_repository import (
    InMemoryRoomRepository,
)
from gift_exchange.infrastructure.persistence.in_memory_user_repository import (
    InMemoryUserReadRepository,
)
from gift_exchange.infrastructure.persistence.seed import load_rooms, parse_rooms

__all__ = [
    "InMemoryRoomStore",
    "InMemoryRoomRepository",
    "InMemoryUserReadRepository",
    "load_rooms",
    "parse_rooms",
]
