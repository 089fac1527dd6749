"""
Dishka DI Container Setup.

- Registers the room store, repositories and handlers
- Maps abstract ports to concrete implementations
- Scope.APP = created ONCE, shared across requests (the store)
- Scope.REQUEST = new instance per HTTP request (repositories, handlers)

Flow:
  Container → provides → InMemoryRoomRepository → to → DeleteUserHandler
                                    ↓
                            uses RoomRepository interface
"""

import logging
from typing import Optional

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide

from gift_exchange.application.commands.users import DeleteUserHandler
from gift_exchange.application.queries.users import GetUsersHandler
from gift_exchange.config.settings import Config
from gift_exchange.domain.ports.repositories import RoomRepository, UserReadRepository
from gift_exchange.infrastructure.persistence import (
    InMemoryRoomRepository,
    InMemoryRoomStore,
    InMemoryUserReadRepository,
    load_rooms,
)

logger = logging.getLogger(__name__)


class AppProvider(Provider):
    """
    Application dependency provider.

    A pre-built store can be passed in (tests, scripts); otherwise one is
    created from Config.ROOMS_SEED_FILE, or empty.
    """

    def __init__(self, store: Optional[InMemoryRoomStore] = None):
        super().__init__()
        self._store = store

    # ==================== STORAGE ====================

    @provide(scope=Scope.APP)
    def get_room_store(self) -> InMemoryRoomStore:
        if self._store is not None:
            return self._store
        if Config.ROOMS_SEED_FILE:
            return InMemoryRoomStore(load_rooms(Config.ROOMS_SEED_FILE))
        logger.warning("No ROOMS_SEED_FILE configured, starting with an empty store")
        return InMemoryRoomStore()

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.REQUEST)
    def get_room_repository(self, store: InMemoryRoomStore) -> RoomRepository:
        return InMemoryRoomRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_user_read_repository(self, store: InMemoryRoomStore) -> UserReadRepository:
        return InMemoryUserReadRepository(store)

    # ==================== HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_delete_user_handler(
        self, room_repository: RoomRepository
    ) -> DeleteUserHandler:
        return DeleteUserHandler(room_repository)

    @provide(scope=Scope.REQUEST)
    def get_get_users_handler(
        self, user_repository: UserReadRepository
    ) -> GetUsersHandler:
        return GetUsersHandler(user_repository)


def create_container(store: Optional[InMemoryRoomStore] = None) -> AsyncContainer:
    """Create the DI container. Call once per application instance."""
    return make_async_container(AppProvider(store))
