"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Has behavior (methods)
- Can change state over time
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from gift_exchange.domain.entities.wish import Wish
from gift_exchange.domain.entities.user import User
from gift_exchange.domain.entities.room import Room, evaluate_deletion

__all__ = [
    "Wish",
    "User",
    "Room",
    "evaluate_deletion",
]
