"""
GetUsers Query - Participants visible to the acting user.

Without user_id: every member of the acting user's room.
With user_id:    [target, acting user], provided both share a room.

Callers must not assume a fixed list length.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from gift_exchange.application.common.interfaces import Query, QueryHandler
from gift_exchange.domain.entities.user import User
from gift_exchange.domain.ports.repositories import UserReadRepository
from gift_exchange.domain.shared import Failure, NotAuthorizedError, Result, Success
from gift_exchange.domain.value_objects.user_code import UserCode
from gift_exchange.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GetUsersQuery(Query[list[User]]):
    user_code: UserCode
    user_id: Optional[UserId] = None


class GetUsersHandler(QueryHandler[list[User]]):
    def __init__(self, user_repository: UserReadRepository):
        self._user_repository = user_repository

    async def execute(self, query: GetUsersQuery) -> Result[list[User]]:
        """
        Resolve the acting user, then list the room or fetch one member.

        Returns:
            Success with a list of users, or the first Failure encountered.
            Failure kinds:
                NotFoundError: acting user or requested user does not exist
                NotAuthorizedError ("id"): requested user is in another room
        """
        auth_user_result = await self._user_repository.get_by_code(
            query.user_code, include_room=True, include_wishes=True
        )
        if auth_user_result.is_failure:
            return auth_user_result
        auth_user = auth_user_result.value

        if query.user_id is None:
            # All users in the room
            return await self._user_repository.get_many_by_room_id(auth_user.room_id)

        requested_user_result = await self._user_repository.get_by_id(
            query.user_id, include_room=False, include_wishes=True
        )
        if requested_user_result.is_failure:
            return requested_user_result
        requested_user = requested_user_result.value

        if requested_user.room_id != auth_user.room_id:
            logger.info(
                f"[GetUsers] User {auth_user.id} asked for user {requested_user.id} "
                f"from another room"
            )
            return Failure(
                NotAuthorizedError.single(
                    "id",
                    "User with userCode and user with Id belongs to different rooms.",
                )
            )

        return Success([requested_user, auth_user])
