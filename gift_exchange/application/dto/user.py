"""User DTOs for API responses."""

from typing import Optional

from pydantic import BaseModel

from gift_exchange.domain.entities.user import User
from gift_exchange.domain.entities.wish import Wish


class WishDTO(BaseModel):
    name: str
    info_link: Optional[str] = None

    @classmethod
    def from_entity(cls, wish: Wish) -> "WishDTO":
        return cls(name=wish.name, info_link=wish.info_link)


class UserDTO(BaseModel):
    """
    Participant as seen by other participants.

    The auth code is never exposed.
    """

    id: int
    room_id: int
    is_admin: bool
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    wishes: list[WishDTO] = []

    @classmethod
    def from_entity(cls, user: User) -> "UserDTO":
        return cls(
            id=user.id.value,
            room_id=user.room_id.value,
            is_admin=user.is_admin,
            first_name=user.first_name,
            last_name=user.last_name,
            wishes=[WishDTO.from_entity(wish) for wish in user.wishes],
        )
