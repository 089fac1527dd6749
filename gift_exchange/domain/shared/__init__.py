"""
SHARED KERNEL - Result container and validation error taxonomy.

Used by entities, ports and handlers alike. Expected failures are returned,
never raised.
"""

from gift_exchange.domain.shared.result import Failure, Result, Success
from gift_exchange.domain.shared.validation_errors import (
    BadRequestError,
    FieldFailure,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)

__all__ = [
    "Result",
    "Success",
    "Failure",
    "FieldFailure",
    "ValidationError",
    "NotFoundError",
    "BadRequestError",
    "NotAuthorizedError",
]
