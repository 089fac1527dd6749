"""
Unit tests for GetUsersHandler with a mocked UserReadRepository.
"""

from unittest.mock import AsyncMock

import pytest

from gift_exchange.application.queries.users import GetUsersHandler, GetUsersQuery
from gift_exchange.domain.ports.repositories import UserReadRepository
from gift_exchange.domain.shared import Failure, NotAuthorizedError, NotFoundError, Success
from gift_exchange.domain.value_objects.user_code import UserCode


def _make_repository(auth_user):
    repository = AsyncMock(spec=UserReadRepository)
    repository.get_by_code.return_value = Success(auth_user)
    return repository


class TestGetUsersHandler:
    @pytest.mark.asyncio
    async def test_acting_user_not_found(self):
        not_found = Failure(NotFoundError.single("userCode", "missing"))
        repository = AsyncMock(spec=UserReadRepository)
        repository.get_by_code.return_value = not_found
        handler = GetUsersHandler(repository)

        result = await handler.execute(GetUsersQuery(UserCode("missing")))

        assert result is not_found
        repository.get_many_by_room_id.assert_not_called()
        repository.get_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_loads_acting_user_with_room_and_wishes(self, admin):
        repository = _make_repository(admin)
        repository.get_many_by_room_id.return_value = Success([admin])
        handler = GetUsersHandler(repository)

        await handler.execute(GetUsersQuery(admin.auth_code))

        repository.get_by_code.assert_awaited_once_with(
            admin.auth_code, include_room=True, include_wishes=True
        )

    @pytest.mark.asyncio
    async def test_without_id_returns_room_members(self, admin, member):
        repository = _make_repository(member)
        repository.get_many_by_room_id.return_value = Success([admin, member])
        handler = GetUsersHandler(repository)

        result = await handler.execute(GetUsersQuery(member.auth_code))

        assert result.value == [admin, member]
        repository.get_many_by_room_id.assert_awaited_once_with(member.room_id)

    @pytest.mark.asyncio
    async def test_without_id_empty_room(self, member):
        repository = _make_repository(member)
        repository.get_many_by_room_id.return_value = Success([])
        handler = GetUsersHandler(repository)

        result = await handler.execute(GetUsersQuery(member.auth_code))

        assert result.is_success
        assert result.value == []

    @pytest.mark.asyncio
    async def test_requested_user_not_found(self, admin, member):
        not_found = Failure(NotFoundError.single("id", "missing"))
        repository = _make_repository(admin)
        repository.get_by_id.return_value = not_found
        handler = GetUsersHandler(repository)

        result = await handler.execute(GetUsersQuery(admin.auth_code, member.id))

        assert result is not_found

    @pytest.mark.asyncio
    async def test_user_from_other_room_not_authorized(self, admin, outsider):
        repository = _make_repository(admin)
        repository.get_by_id.return_value = Success(outsider)
        handler = GetUsersHandler(repository)

        result = await handler.execute(GetUsersQuery(admin.auth_code, outsider.id))

        assert isinstance(result.error, NotAuthorizedError)
        assert result.error.has_field("id")

    @pytest.mark.asyncio
    async def test_same_room_returns_target_and_acting_user(self, admin, member):
        repository = _make_repository(admin)
        repository.get_by_id.return_value = Success(member)
        handler = GetUsersHandler(repository)

        result = await handler.execute(GetUsersQuery(admin.auth_code, member.id))

        assert result.value == [member, admin]
        repository.get_by_id.assert_awaited_once_with(
            member.id, include_room=False, include_wishes=True
        )
        repository.get_many_by_room_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_requesting_self_returns_two_entries(self, admin):
        repository = _make_repository(admin)
        repository.get_by_id.return_value = Success(admin)
        handler = GetUsersHandler(repository)

        result = await handler.execute(GetUsersQuery(admin.auth_code, admin.id))

        assert len(result.value) == 2
