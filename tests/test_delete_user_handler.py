"""
Unit tests for DeleteUserHandler.

The room repository is mocked; the handler and the Room aggregate are real.
"""

import asyncio
from dataclasses import replace
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from gift_exchange.application.commands.users import (
    DeleteUserCommand,
    DeleteUserHandler,
)
from gift_exchange.domain.ports.repositories import RoomRepository
from gift_exchange.domain.shared import (
    BadRequestError,
    Failure,
    NotAuthorizedError,
    NotFoundError,
    Success,
)
from gift_exchange.domain.value_objects.user_code import UserCode
from gift_exchange.domain.value_objects.user_id import UserId


def _make_repository(*rooms_or_results):
    """RoomRepository mock returning the given values from get_by_user_code, in order."""
    repository = AsyncMock(spec=RoomRepository)
    repository.get_by_user_code.side_effect = [
        item if isinstance(item, (Success, Failure)) else Success(item)
        for item in rooms_or_results
    ]
    repository.update.return_value = Success(None)
    return repository


class TestDeleteUserHandlerFailures:
    @pytest.mark.asyncio
    async def test_room_not_found_is_returned_verbatim(self, member):
        not_found = Failure(NotFoundError.single("userCode", ""))
        repository = _make_repository(not_found)
        handler = DeleteUserHandler(repository)

        result = await handler.execute(DeleteUserCommand(UserCode(""), member.id))

        assert result is not_found
        repository.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_closed_room(self, make_room, member):
        room = make_room([member], closed_on=datetime(2026, 1, 1, tzinfo=timezone.utc))
        repository = _make_repository(room)
        handler = DeleteUserHandler(repository)

        result = await handler.execute(DeleteUserCommand(UserCode(""), member.id))

        assert isinstance(result.error, BadRequestError)
        assert result.error.has_field("room.ClosedOn")
        repository.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_user_to_delete_not_in_room(self, make_room, admin):
        repository = _make_repository(make_room([admin]))
        handler = DeleteUserHandler(repository)

        result = await handler.execute(DeleteUserCommand(admin.auth_code, None))

        assert isinstance(result.error, NotFoundError)
        assert result.error.has_field("userId")

    @pytest.mark.asyncio
    async def test_not_admin_tries_to_delete_user(self, room, member):
        repository = _make_repository(room)
        handler = DeleteUserHandler(repository)

        result = await handler.execute(DeleteUserCommand(member.auth_code, member.id))

        assert isinstance(result.error, NotAuthorizedError)
        assert result.error.has_field("UserCode")
        repository.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_id_and_user_code_refer_to_same_admin(self, make_room, admin):
        repository = _make_repository(make_room([admin]))
        handler = DeleteUserHandler(repository)

        result = await handler.execute(DeleteUserCommand(admin.auth_code, admin.id))

        assert isinstance(result.error, BadRequestError)
        assert result.error.has_field("userId")

    @pytest.mark.asyncio
    async def test_update_failure_becomes_bad_request(self, room, admin, member):
        repository = _make_repository(room)
        repository.update.return_value = Failure(
            NotFoundError.single("room.Id", "Room 1 not found.")
        )
        handler = DeleteUserHandler(repository)

        result = await handler.execute(DeleteUserCommand(admin.auth_code, member.id))

        assert isinstance(result.error, BadRequestError)
        assert result.error.fields == [""]
        assert result.error.message == "Room 1 not found."
        assert repository.get_by_user_code.await_count == 1

    @pytest.mark.asyncio
    async def test_update_exception_becomes_bad_request(self, room, admin, member):
        repository = _make_repository(room)
        repository.update.side_effect = ConnectionError("database unavailable")
        handler = DeleteUserHandler(repository)

        result = await handler.execute(DeleteUserCommand(admin.auth_code, member.id))

        assert isinstance(result.error, BadRequestError)
        assert result.error.fields == [""]
        assert "database unavailable" in result.error.message

    @pytest.mark.asyncio
    async def test_cancellation_is_not_swallowed(self, room, admin, member):
        repository = _make_repository(room)
        repository.update.side_effect = asyncio.CancelledError()
        handler = DeleteUserHandler(repository)

        with pytest.raises(asyncio.CancelledError):
            await handler.execute(DeleteUserCommand(admin.auth_code, member.id))


class TestDeleteUserHandlerSuccess:
    @pytest.mark.asyncio
    async def test_admin_deletes_user(self, room, admin, member):
        reloaded = replace(room, users=[admin])
        repository = _make_repository(room, reloaded)
        handler = DeleteUserHandler(repository)

        result = await handler.execute(DeleteUserCommand(admin.auth_code, member.id))

        assert result.is_success
        assert all(user.id != member.id for user in result.value.users)

    @pytest.mark.asyncio
    async def test_persists_room_without_target(self, room, admin, member):
        repository = _make_repository(room, replace(room, users=[admin]))
        handler = DeleteUserHandler(repository)

        await handler.execute(DeleteUserCommand(admin.auth_code, member.id))

        repository.update.assert_awaited_once()
        saved_room = repository.update.await_args.args[0]
        assert [user.id for user in saved_room.users] == [admin.id]

    @pytest.mark.asyncio
    async def test_returns_reloaded_room(self, room, admin, member):
        reloaded = replace(room, name="Renamed by store", users=[admin])
        repository = _make_repository(room, reloaded)
        handler = DeleteUserHandler(repository)

        result = await handler.execute(DeleteUserCommand(admin.auth_code, member.id))

        assert result.value is reloaded
        assert repository.get_by_user_code.await_count == 2

    @pytest.mark.asyncio
    async def test_reload_failure_is_returned_verbatim(self, room, admin, member):
        reload_failure = Failure(NotFoundError.single("userCode", "gone"))
        repository = _make_repository(room, reload_failure)
        handler = DeleteUserHandler(repository)

        result = await handler.execute(DeleteUserCommand(admin.auth_code, member.id))

        assert result is reload_failure

    @pytest.mark.asyncio
    async def test_unknown_user_id_value(self, room, admin):
        repository = _make_repository(room)
        handler = DeleteUserHandler(repository)

        result = await handler.execute(DeleteUserCommand(admin.auth_code, UserId(42)))

        assert isinstance(result.error, NotFoundError)
