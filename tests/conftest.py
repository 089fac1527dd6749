import os
import sys
from itertools import count

import pytest

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + "/.."))

from gift_exchange.domain.entities.room import Room
from gift_exchange.domain.entities.user import User
from gift_exchange.domain.entities.wish import Wish
from gift_exchange.domain.value_objects.room_id import RoomId
from gift_exchange.domain.value_objects.user_code import UserCode
from gift_exchange.domain.value_objects.user_id import UserId
from gift_exchange.infrastructure.persistence import InMemoryRoomStore


@pytest.fixture()
def make_user():
    """Factory for users with unique ids and auth codes."""
    ids = count(1)

    def _make_user(room_id: int = 1, is_admin: bool = False, user_id: int | None = None, wishes=()):
        uid = user_id if user_id is not None else next(ids)
        return User(
            id=UserId(uid),
            room_id=RoomId(room_id),
            auth_code=UserCode(f"code-{room_id}-{uid}"),
            is_admin=is_admin,
            first_name=f"First{uid}",
            last_name=f"Last{uid}",
            wishes=tuple(wishes),
        )

    return _make_user


@pytest.fixture()
def make_room():
    def _make_room(users=(), room_id: int = 1, closed_on=None, name: str = "Test room"):
        return Room(id=RoomId(room_id), name=name, users=list(users), closed_on=closed_on)

    return _make_room


@pytest.fixture()
def admin(make_user):
    return make_user(room_id=1, is_admin=True, user_id=1, wishes=[Wish("Board game")])


@pytest.fixture()
def member(make_user):
    return make_user(room_id=1, user_id=2, wishes=[Wish("Scarf", "https://example.com/scarf")])


@pytest.fixture()
def outsider(make_user):
    return make_user(room_id=2, is_admin=True, user_id=3)


@pytest.fixture()
def room(make_room, admin, member):
    """Open room 1 with an admin (id=1) and a member (id=2)."""
    return make_room([admin, member], room_id=1)


@pytest.fixture()
def store(room, make_room, outsider):
    """Store with the open room 1 and a second room holding the outsider."""
    return InMemoryRoomStore([room, make_room([outsider], room_id=2, name="Other room")])
