"""
Seed loader - Builds Room aggregates from a JSON file.

Format:
{
    "rooms": [
        {
            "id": 1,
            "name": "Office party",
            "closed_on": null,
            "users": [
                {
                    "id": 1,
                    "auth_code": "a1b2c3",
                    "is_admin": true,
                    "first_name": "Alex",
                    "last_name": "Doe",
                    "wishes": [{"name": "Book", "info_link": "https://..."}]
                }
            ]
        }
    ]
}
"""

import json
import logging
from datetime import datetime
from pathlib import Path

from gift_exchange.domain.entities.room import Room
from gift_exchange.domain.entities.user import User
from gift_exchange.domain.entities.wish import Wish
from gift_exchange.domain.value_objects.room_id import RoomId
from gift_exchange.domain.value_objects.user_code import UserCode
from gift_exchange.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


def _to_user(record: dict, room_id: RoomId) -> User:
    return User(
        id=UserId(record["id"]),
        room_id=room_id,
        auth_code=UserCode(record["auth_code"]),
        is_admin=bool(record.get("is_admin", False)),
        first_name=record.get("first_name"),
        last_name=record.get("last_name"),
        wishes=tuple(
            Wish(name=wish["name"], info_link=wish.get("info_link"))
            for wish in record.get("wishes", [])
        ),
    )


def _to_room(record: dict) -> Room:
    room_id = RoomId(record["id"])
    closed_on = record.get("closed_on")
    return Room(
        id=room_id,
        name=record.get("name", ""),
        users=[_to_user(user, room_id) for user in record.get("users", [])],
        closed_on=datetime.fromisoformat(closed_on) if closed_on else None,
    )


def parse_rooms(data: dict) -> list[Room]:
    return [_to_room(record) for record in data.get("rooms", [])]


def load_rooms(path: str | Path) -> list[Room]:
    """Read rooms from a JSON seed file. Raises on unreadable or malformed files."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    rooms = parse_rooms(data)
    logger.info(f"[Seed] Loaded {len(rooms)} rooms from {path}")
    return rooms
