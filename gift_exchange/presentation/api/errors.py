"""
Maps the validation error taxonomy to HTTP responses.
"""

from fastapi import status
from fastapi.responses import JSONResponse

from gift_exchange.application.dto.errors import ErrorDTO
from gift_exchange.domain.shared import (
    BadRequestError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)


def status_code_for(error: ValidationError) -> int:
    if isinstance(error, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(error, NotAuthorizedError):
        return status.HTTP_403_FORBIDDEN
    if isinstance(error, BadRequestError):
        return status.HTTP_400_BAD_REQUEST
    raise TypeError(f"Unknown validation error kind: {type(error).__name__}")


def error_response(error: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status_code_for(error),
        content=ErrorDTO.from_error(error).model_dump(),
    )
