"""
Validation Errors - Closed taxonomy of expected failures.

Each error kind carries an ordered list of field failures so that callers
can tell WHICH rule fired, not only that one did.

Kinds:
- NotFoundError      → referenced entity absent or unreachable
- BadRequestError    → request violates a state invariant
- NotAuthorizedError → acting user lacks the required privilege

Maps to: HTTP 404 / 400 / 403 (decided by the presentation layer)
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldFailure:
    field: str  # property path, e.g. "userId" or "room.ClosedOn"
    message: str


@dataclass(frozen=True)
class ValidationError:
    """Base class for the three failure kinds. Never instantiated directly."""

    errors: tuple[FieldFailure, ...]

    def __post_init__(self):
        if type(self) is ValidationError:
            raise TypeError("ValidationError is abstract, use one of its kinds")
        if not self.errors:
            raise ValueError(f"{type(self).__name__} needs at least one field failure")
        # Accept lists from callers but store an immutable tuple
        object.__setattr__(self, "errors", tuple(self.errors))

    @classmethod
    def single(cls, field: str, message: str) -> "ValidationError":
        return cls(errors=(FieldFailure(field, message),))

    @property
    def fields(self) -> list[str]:
        return [failure.field for failure in self.errors]

    @property
    def message(self) -> str:
        return "; ".join(failure.message for failure in self.errors)

    def has_field(self, field: str) -> bool:
        return any(failure.field == field for failure in self.errors)


@dataclass(frozen=True)
class NotFoundError(ValidationError):
    pass


@dataclass(frozen=True)
class BadRequestError(ValidationError):
    pass


@dataclass(frozen=True)
class NotAuthorizedError(ValidationError):
    pass
