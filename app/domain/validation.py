"""
Validation rules for candidate books.

Rules are evaluated in a fixed order and every violation is collected, so a
single call reports everything that is wrong with a candidate. Uniqueness of
the ISBN is NOT checked here: it needs the store and lives in the catalog
service.
"""

import re
from datetime import date, datetime
from typing import Any, List, Optional

from .entities import Book
from .value_objects import ValidationFailure

INVALID_ISBN_MESSAGE = "Value was not a valid ISBN-13"
DUPLICATE_ISBN_MESSAGE = "A book with this ISBN-13 already exists!"

# ASCII digit groups joined by single hyphens; the digit count is checked separately
_ISBN13_PATTERN = re.compile(r"[0-9]+(?:-[0-9]+)*")


def is_isbn13(value: Any) -> bool:
    """Check whether a value has the ISBN-13 shape."""
    if not isinstance(value, str):
        return False
    if _ISBN13_PATTERN.fullmatch(value) is None:
        return False
    return sum(ch != "-" for ch in value) == 13


def parse_release_date(value: Any) -> Optional[date]:
    """
    Parse a release date leniently.

    Accepts date objects, 'YYYY-MM-DD' strings and full ISO datetimes (the
    time of day is dropped). Returns None when the value cannot be parsed.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass

    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def validate_book(candidate: Book) -> List[ValidationFailure]:
    """
    Check a candidate book against the format and required-field rules.

    Args:
        candidate: The book to check. Fields may hold values of the wrong
            type when the candidate was built from untrusted input.

    Returns:
        List of failures, empty when the candidate is valid
    """
    failures: List[ValidationFailure] = []

    if not is_isbn13(candidate.isbn):
        failures.append(ValidationFailure("isbn", INVALID_ISBN_MESSAGE))

    if _is_blank(candidate.title):
        failures.append(ValidationFailure("title", "Title must not be empty"))

    if _is_blank(candidate.author):
        failures.append(ValidationFailure("author", "Author must not be empty"))

    page_count = candidate.page_count
    if isinstance(page_count, bool) or not isinstance(page_count, int) or page_count < 0:
        failures.append(
            ValidationFailure("pageCount", "Page count must be greater than or equal to 0")
        )

    if not isinstance(candidate.release_date, date):
        failures.append(ValidationFailure("releaseDate", "Value was not a valid date"))

    return failures
