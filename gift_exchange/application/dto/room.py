"""Room DTOs for API responses."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from gift_exchange.application.dto.user import UserDTO
from gift_exchange.domain.entities.room import Room


class RoomDTO(BaseModel):
    id: int
    name: str
    closed_on: Optional[datetime] = None
    users: list[UserDTO]

    @classmethod
    def from_entity(cls, room: Room) -> "RoomDTO":
        return cls(
            id=room.id.value,
            name=room.name,
            closed_on=room.closed_on,
            users=[UserDTO.from_entity(user) for user in room.users],
        )
