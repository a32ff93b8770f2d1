"""
Tests for the book validation rules.
"""

import pytest
from datetime import date, datetime

from app.domain.entities import Book
from app.domain.validation import (
    INVALID_ISBN_MESSAGE,
    is_isbn13,
    parse_release_date,
    validate_book,
)
from app.domain.value_objects import ValidationFailure


def make_book(**overrides) -> Book:
    fields = dict(
        isbn="978-0137081073",
        title="The Clean Coder",
        author="Robert C. Martin",
        short_description="A code of conduct for professional programmers",
        page_count=242,
        release_date=date(2011, 5, 13),
    )
    fields.update(overrides)
    return Book(**fields)


class TestIsIsbn13:
    """Tests for the ISBN-13 shape check."""

    @pytest.mark.parametrize("isbn", [
        "9780137081073",
        "978-0137081073",
        "978-0-13-708107-3",
    ])
    def test_accepts_isbn13_shapes(self, isbn):
        assert is_isbn13(isbn) is True

    @pytest.mark.parametrize("isbn", [
        "",
        "978013708107",       # 12 digits
        "97801370810733",     # 14 digits
        "0137081073",         # ISBN-10
        "978-0137081073-",
        "-9780137081073",
        "978--0137081073",
        "978 0137081073",
        "978013708107X",
        "not an isbn",
        "9780137081073\n",   # trailing newline
        "\u0669\u0667\u06680137081073",  # Arabic-Indic digits
        "\uff19780137081073",  # fullwidth digit
    ])
    def test_rejects_other_shapes(self, isbn):
        assert is_isbn13(isbn) is False

    def test_rejects_non_strings(self):
        assert is_isbn13(9780137081073) is False
        assert is_isbn13(None) is False


class TestParseReleaseDate:
    """Tests for lenient release date parsing."""

    def test_parses_iso_date(self):
        assert parse_release_date("2011-05-13") == date(2011, 5, 13)

    def test_drops_time_of_day(self):
        assert parse_release_date("2011-05-13T10:30:00") == date(2011, 5, 13)

    def test_passes_dates_through(self):
        assert parse_release_date(date(2011, 5, 13)) == date(2011, 5, 13)
        assert parse_release_date(datetime(2011, 5, 13, 8, 0)) == date(2011, 5, 13)

    @pytest.mark.parametrize("value", [None, "", "   ", "13/05/2011", "yesterday", "2011-13-45", 20110513])
    def test_returns_none_for_unparseable_values(self, value):
        assert parse_release_date(value) is None


class TestValidateBook:
    """Tests for validate_book()."""

    def test_valid_book_has_no_failures(self):
        assert validate_book(make_book()) == []

    def test_empty_description_is_allowed(self):
        assert validate_book(make_book(short_description="")) == []

    def test_zero_pages_is_allowed(self):
        assert validate_book(make_book(page_count=0)) == []

    def test_invalid_isbn_gives_exactly_one_isbn_failure(self):
        failures = validate_book(make_book(isbn="123"))

        assert failures == [ValidationFailure("isbn", INVALID_ISBN_MESSAGE)]
        assert failures[0].error_message == "Value was not a valid ISBN-13"

    @pytest.mark.parametrize("title", ["", "   ", "\t\n"])
    def test_blank_title_is_rejected(self, title):
        failures = validate_book(make_book(title=title))

        assert [f.property_name for f in failures] == ["title"]

    def test_blank_author_is_rejected(self):
        failures = validate_book(make_book(author="  "))

        assert [f.property_name for f in failures] == ["author"]

    def test_negative_page_count_is_rejected(self):
        failures = validate_book(make_book(page_count=-1))

        assert [f.property_name for f in failures] == ["pageCount"]

    def test_missing_release_date_is_rejected(self):
        failures = validate_book(make_book(release_date=None))

        assert [f.property_name for f in failures] == ["releaseDate"]

    def test_collects_every_failure_in_order(self):
        """All violations are reported, in the fixed evaluation order."""
        candidate = Book(
            isbn="bad",
            title="",
            author="",
            page_count=-5,
            release_date=None,
        )

        failures = validate_book(candidate)

        assert [f.property_name for f in failures] == [
            "isbn",
            "title",
            "author",
            "pageCount",
            "releaseDate",
        ]

    def test_does_not_modify_candidate(self):
        candidate = make_book(title="  padded  ")

        validate_book(candidate)

        assert candidate.title == "  padded  "
