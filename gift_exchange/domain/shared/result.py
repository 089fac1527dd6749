"""
Result - Success/failure container returned by every fallible operation.

Usage:
    result = await room_repository.get_by_user_code(code)
    if result.is_failure:
        return result
    room = result.value
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from gift_exchange.domain.shared.validation_errors import ValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    @property
    def error(self) -> ValidationError:
        raise ValueError("Success has no error")


@dataclass(frozen=True)
class Failure:
    error: ValidationError

    def __post_init__(self):
        if not isinstance(self.error, ValidationError):
            raise TypeError(
                f"Failure expects a ValidationError, got {type(self.error).__name__}"
            )

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    @property
    def value(self):
        raise ValueError(f"Failure has no value: {self.error.message}")


Result = Union[Success[T], Failure]
