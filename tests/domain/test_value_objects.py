"""
Tests for domain value objects and errors.
"""

import pytest
from dataclasses import FrozenInstanceError
from datetime import date

from app.domain.entities import Book
from app.domain.errors import ConstraintError
from app.domain.value_objects import ValidationFailure, WriteResult


class TestValidationFailure:
    """Tests for ValidationFailure value object."""

    def test_create_failure(self):
        failure = ValidationFailure("isbn", "Value was not a valid ISBN-13")

        assert failure.property_name == "isbn"
        assert failure.error_message == "Value was not a valid ISBN-13"

    def test_failures_are_compared_by_value(self):
        assert ValidationFailure("title", "x") == ValidationFailure("title", "x")
        assert ValidationFailure("title", "x") != ValidationFailure("author", "x")

    def test_failure_is_immutable(self):
        failure = ValidationFailure("isbn", "bad")

        with pytest.raises(FrozenInstanceError):
            failure.property_name = "title"

    def test_empty_property_name_raises(self):
        with pytest.raises(ValueError, match="property_name cannot be empty"):
            ValidationFailure("", "bad")

    def test_empty_message_raises(self):
        with pytest.raises(ValueError, match="error_message cannot be empty"):
            ValidationFailure("isbn", "")


class TestWriteResult:
    """Tests for WriteResult value object."""

    def test_written_result(self):
        book = Book(
            isbn="9780137081073",
            title="The Clean Coder",
            author="Robert C. Martin",
            page_count=256,
            release_date=date(2011, 5, 13),
        )

        result = WriteResult.written(book)

        assert result.succeeded is True
        assert result.is_valid is True
        assert result.found is True
        assert result.book is book

    def test_rejected_result_carries_all_failures(self):
        failures = [ValidationFailure("isbn", "bad"), ValidationFailure("title", "empty")]

        result = WriteResult.rejected(failures)

        assert result.succeeded is False
        assert result.is_valid is False
        assert result.failures == tuple(failures)
        assert result.book is None

    def test_rejected_requires_at_least_one_failure(self):
        with pytest.raises(ValueError, match="at least one failure"):
            WriteResult.rejected([])

    def test_not_found_result(self):
        result = WriteResult.not_found()

        assert result.succeeded is False
        assert result.is_valid is True
        assert result.found is False


class TestConstraintError:
    """Tests for the ConstraintError exception."""

    def test_keeps_isbn(self):
        error = ConstraintError("9780137081073")

        assert error.isbn == "9780137081073"
        assert "9780137081073" in str(error)
