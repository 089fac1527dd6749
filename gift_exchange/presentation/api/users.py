"""
Users API Router - Participant listing and removal.

- Thin layer: builds a Command/Query, calls handler.execute()
- Handlers are injected by Dishka
- A Failure result is turned into a JSON error via errors.error_response

Flow:
  HTTP Request → Router → Command → Handler → Repository → Store
                                 ↓
  HTTP Response ← Router ← Result ←
"""

import logging
from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Query, status

from gift_exchange.application.commands.users import (
    DeleteUserCommand,
    DeleteUserHandler,
)
from gift_exchange.application.dto.errors import ErrorDTO
from gift_exchange.application.dto.room import RoomDTO
from gift_exchange.application.dto.user import UserDTO
from gift_exchange.application.queries.users import GetUsersHandler, GetUsersQuery
from gift_exchange.config.settings import Config
from gift_exchange.domain.shared import BadRequestError
from gift_exchange.domain.value_objects.user_code import UserCode
from gift_exchange.domain.value_objects.user_id import UserId
from gift_exchange.presentation.api.errors import error_response

logger = logging.getLogger(__name__)

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorDTO},
    status.HTTP_403_FORBIDDEN: {"model": ErrorDTO},
    status.HTTP_404_NOT_FOUND: {"model": ErrorDTO},
}

router = APIRouter(prefix=f"{Config.API_PREFIX}/users", tags=["users"])


@router.get(
    "",
    response_model=list[UserDTO],
    status_code=status.HTTP_200_OK,
    responses=ERROR_RESPONSES,
)
@inject
async def get_users(
    handler: FromDishka[GetUsersHandler],
    user_code: str = Query(..., alias="userCode"),
    user_id: Optional[int] = Query(None, alias="id"),
):
    """
    List the acting user's room, or fetch one member of it.

    GET /api/users?userCode=...          → every member of the room
    GET /api/users?userCode=...&id=42    → [user 42, acting user]
    """
    try:
        target_id = UserId(user_id) if user_id is not None else None
    except ValueError as e:
        return error_response(BadRequestError.single("id", str(e)))

    query = GetUsersQuery(user_code=UserCode(user_code), user_id=target_id)
    result = await handler.execute(query)
    if result.is_failure:
        return error_response(result.error)

    return [UserDTO.from_entity(user) for user in result.value]


@router.delete(
    "/{user_id}",
    response_model=RoomDTO,
    status_code=status.HTTP_200_OK,
    responses=ERROR_RESPONSES,
)
@inject
async def delete_user(
    user_id: int,
    handler: FromDishka[DeleteUserHandler],
    user_code: str = Query(..., alias="userCode"),
):
    """
    Remove a participant from the acting user's room (admin only).

    DELETE /api/users/42?userCode=...
    Response: the room as stored after the removal.
    """
    try:
        target_id = UserId(user_id)
    except ValueError as e:
        return error_response(BadRequestError.single("userId", str(e)))

    command = DeleteUserCommand(user_code=UserCode(user_code), user_id=target_id)
    result = await handler.execute(command)
    if result.is_failure:
        return error_response(result.error)

    return RoomDTO.from_entity(result.value)
