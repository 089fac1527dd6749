"""User-related queries."""

from gift_exchange.application.queries.users.get_users import (
    GetUsersQuery,
    GetUsersHandler,
)

__all__ = [
    "GetUsersQuery",
    "GetUsersHandler",
]
