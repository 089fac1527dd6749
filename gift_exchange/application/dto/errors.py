"""Error DTOs - JSON shape of a ValidationError."""

from pydantic import BaseModel

from gift_exchange.domain.shared import ValidationError


class FieldFailureDTO(BaseModel):
    field: str
    message: str


class ErrorDTO(BaseModel):
    """
    {
        "error": "NotFoundError",
        "errors": [{"field": "userId", "message": "..."}]
    }
    """

    error: str
    errors: list[FieldFailureDTO]

    @classmethod
    def from_error(cls, error: ValidationError) -> "ErrorDTO":
        return cls(
            error=type(error).__name__,
            errors=[
                FieldFailureDTO(field=failure.field, message=failure.message)
                for failure in error.errors
            ],
        )
