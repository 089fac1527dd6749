"""
Delete User Command - Room admin removes a participant.

Steps:
1. Load the room of the acting user (by user code)
2. Ask the Room aggregate to remove the target
3. Persist the new room state
4. Reload the room so the caller sees what was actually stored

Failures from steps 1, 2 and 4 are returned unchanged. A failure while
persisting is normalized into a BadRequestError with an empty field path.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from gift_exchange.application.common.interfaces import Command, CommandHandler
from gift_exchange.domain.entities.room import Room
from gift_exchange.domain.ports.repositories import RoomRepository
from gift_exchange.domain.shared import BadRequestError, Failure, Result
from gift_exchange.domain.value_objects.user_code import UserCode
from gift_exchange.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteUserCommand(Command[Room]):
    user_code: UserCode
    user_id: Optional[UserId]


class DeleteUserHandler(CommandHandler[Room]):
    _room_repository: RoomRepository

    def __init__(self, room_repository: RoomRepository):
        self._room_repository = room_repository

    async def execute(self, command: DeleteUserCommand) -> Result[Room]:
        # 1. Get room by user code
        room_result = await self._room_repository.get_by_user_code(command.user_code)
        if room_result.is_failure:
            return room_result

        # 2. Decide on a copy of the room, acting user resolved from the same load
        room = room_result.value
        acting_user = room.find_user_by_code(command.user_code)
        delete_result = room.delete_user(command.user_id, acting_user)
        if delete_result.is_failure:
            logger.info(
                f"[DeleteUser] Rejected removal of user {command.user_id} "
                f"from room {room.id}: {delete_result.error.fields}"
            )
            return delete_result

        # 3. Persist
        update_result = await self._update(delete_result.value)
        if update_result.is_failure:
            return update_result

        logger.info(f"[DeleteUser] Removed user {command.user_id} from room {room.id}")

        # 4. Return the stored state
        return await self._room_repository.get_by_user_code(command.user_code)

    async def _update(self, room: Room) -> Result[None]:
        try:
            update_result = await self._room_repository.update(room)
        except Exception as e:
            logger.exception(f"[DeleteUser] Repository error while updating room {room.id}")
            return Failure(BadRequestError.single("", str(e) or type(e).__name__))

        if update_result.is_failure:
            logger.warning(
                f"[DeleteUser] Failed to update room {room.id}: {update_result.error.message}"
            )
            return Failure(BadRequestError.single("", update_result.error.message))

        return update_result
