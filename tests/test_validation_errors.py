"""
Unit tests for the Result container and the validation error taxonomy.

Run with: pytest tests/test_validation_errors.py -v
"""

import pytest

from gift_exchange.domain.shared import (
    BadRequestError,
    Failure,
    FieldFailure,
    NotAuthorizedError,
    NotFoundError,
    Success,
    ValidationError,
)


class TestValidationError:
    def test_single_builds_one_field_failure(self):
        error = NotFoundError.single("userId", "missing")

        assert error.errors == (FieldFailure("userId", "missing"),)
        assert error.fields == ["userId"]
        assert error.has_field("userId")
        assert not error.has_field("id")

    def test_keeps_field_order(self):
        error = BadRequestError(
            errors=[FieldFailure("b", "second"), FieldFailure("a", "first")]
        )

        assert error.fields == ["b", "a"]
        assert error.message == "second; first"

    def test_empty_errors_rejected(self):
        with pytest.raises(ValueError):
            NotAuthorizedError(errors=())

    def test_base_class_is_abstract(self):
        with pytest.raises(TypeError):
            ValidationError(errors=(FieldFailure("x", "y"),))

    def test_kinds_with_same_failures_are_not_equal(self):
        failures = (FieldFailure("id", "x"),)

        assert NotFoundError(failures) != BadRequestError(failures)
        assert NotFoundError(failures) == NotFoundError(failures)


class TestResult:
    def test_success_exposes_value(self):
        result = Success([1, 2])

        assert result.is_success
        assert not result.is_failure
        assert result.value == [1, 2]
        with pytest.raises(ValueError):
            _ = result.error

    def test_failure_exposes_error(self):
        error = BadRequestError.single("", "boom")
        result = Failure(error)

        assert result.is_failure
        assert not result.is_success
        assert result.error is error
        with pytest.raises(ValueError):
            _ = result.value

    def test_failure_requires_taxonomy_error(self):
        with pytest.raises(TypeError):
            Failure(RuntimeError("boom"))
