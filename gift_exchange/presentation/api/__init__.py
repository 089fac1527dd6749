"""
API Routers - FastAPI endpoint definitions.
"""

from gift_exchange.presentation.api.users import router as users_router

__all__ = [
    "users_router",
]
