"""
Room Aggregate - A group of participants with an open/closed lifecycle.

The room is the only place where membership changes are decided. Rules are
evaluated in a fixed order and the first failing rule wins; callers assert on
the field path, so the order is part of the contract:

    1. room closed               → BadRequestError     "room.ClosedOn"
    2. target not in room        → NotFoundError       "userId"
    3. acting user not in room   → NotFoundError       "userCode"
    4. acting user not admin     → NotAuthorizedError  "UserCode"
    5. target is the acting user → BadRequestError     "userId"

Decisions never mutate the loaded room: a successful deletion returns a new
Room value that the caller persists.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Optional

from gift_exchange.domain.entities.user import User
from gift_exchange.domain.shared import (
    BadRequestError,
    Failure,
    NotAuthorizedError,
    NotFoundError,
    Result,
    Success,
)
from gift_exchange.domain.value_objects.room_id import RoomId
from gift_exchange.domain.value_objects.user_code import UserCode
from gift_exchange.domain.value_objects.user_id import UserId


@dataclass
class Room:
    id: RoomId
    name: str
    users: list[User] = field(default_factory=list)
    closed_on: Optional[datetime] = None

    def __post_init__(self):
        self.users = list(self.users)
        seen: set[UserId] = set()
        seen_codes: set[UserCode] = set()
        for user in self.users:
            if not user.belongs_to(self.id):
                raise ValueError(
                    f"User {user.id} belongs to room {user.room_id}, not {self.id}"
                )
            if user.id in seen:
                raise ValueError(f"Duplicate user {user.id} in room {self.id}")
            if user.auth_code in seen_codes:
                raise ValueError(f"User {user.id} shares its auth code in room {self.id}")
            seen.add(user.id)
            seen_codes.add(user.auth_code)

    @property
    def is_closed(self) -> bool:
        return self.closed_on is not None

    @property
    def admins(self) -> list[User]:
        return [user for user in self.users if user.is_admin]

    def find_user(self, user_id: Optional[UserId]) -> Optional[User]:
        if user_id is None:
            return None
        return next((user for user in self.users if user.id == user_id), None)

    def find_user_by_code(self, code: UserCode) -> Optional[User]:
        return next((user for user in self.users if user.auth_code == code), None)

    def delete_user(
        self, user_id: Optional[UserId], acting_user: Optional[User]
    ) -> Result[Room]:
        """Remove a participant on behalf of acting_user. See module docstring."""
        return evaluate_deletion(self, acting_user, user_id)


def evaluate_deletion(
    room: Room, acting_user: Optional[User], target_id: Optional[UserId]
) -> Result[Room]:
    """
    Decide whether acting_user may remove target_id from room.

    Pure function: the given room is left untouched.

    Returns:
        Success with a new Room without the target, or Failure with the
        first rule that rejected the request.
    """
    if room.is_closed:
        return Failure(
            BadRequestError.single("room.ClosedOn", "Room is already closed.")
        )

    target = room.find_user(target_id)
    if target is None:
        return Failure(
            NotFoundError.single("userId", f"User with id {target_id} not found in room.")
        )

    if acting_user is None or room.find_user(acting_user.id) is None:
        return Failure(
            NotFoundError.single("userCode", "Acting user is not a member of this room.")
        )

    if not acting_user.is_admin:
        return Failure(
            NotAuthorizedError.single(
                "UserCode", "Only the room admin can remove participants."
            )
        )

    if target.id == acting_user.id:
        return Failure(
            BadRequestError.single("userId", "User cannot delete themselves.")
        )

    remaining = [user for user in room.users if user.id != target.id]
    return Success(replace(room, users=remaining))
