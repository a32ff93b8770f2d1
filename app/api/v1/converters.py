"""
Converters between domain entities/value objects and API schemas.

This module centralizes all conversion logic between the domain layer
and the API layer, maintaining clean separation of concerns.
"""

from typing import Iterable, List

from app.domain import entities as domain
from app.domain import value_objects as domain_vo
from app.domain.validation import parse_release_date
from app.api.v1 import schemas as api


def api_payload_to_domain(payload: api.BookPayload) -> domain.Book:
    """
    Convert an API BookPayload to a domain Book candidate.

    An unparseable release date becomes None and is reported by the domain
    validator.

    Args:
        payload: API request body

    Returns:
        Domain Book candidate (not validated yet)
    """
    return domain.Book(
        isbn=payload.isbn,
        title=payload.title,
        author=payload.author,
        short_description=payload.short_description,
        page_count=payload.page_count,
        release_date=parse_release_date(payload.release_date),
    )


def domain_book_to_api(book: domain.Book) -> api.Book:
    """
    Convert a domain Book entity to an API Book model.

    Args:
        book: Domain Book entity

    Returns:
        API Book model
    """
    return api.Book(
        isbn=book.isbn,
        title=book.title,
        author=book.author,
        short_description=book.short_description,
        page_count=book.page_count,
        release_date=book.release_date,
    )


def domain_failures_to_api(
    failures: Iterable[domain_vo.ValidationFailure],
) -> List[dict]:
    """
    Convert domain ValidationFailures to the JSON body of a 400 response.

    Args:
        failures: Domain failures, in evaluation order

    Returns:
        List of {"propertyName", "errorMessage"} dicts
    """
    return [
        api.ValidationFailure(
            property_name=f.property_name,
            error_message=f.error_message,
        ).model_dump(by_alias=True)
        for f in failures
    ]


def request_errors_to_failures(errors: Iterable[dict]) -> List[domain_vo.ValidationFailure]:
    """
    Convert FastAPI request validation errors to domain ValidationFailures.

    The property name is the last string segment of the error location
    (e.g. ('body', 'pageCount') -> 'pageCount'); errors about the body as a
    whole are reported under 'body'.
    """
    failures = []
    for error in errors:
        names = [part for part in error.get("loc", ()) if isinstance(part, str)]
        property_name = names[-1] if names else "body"
        failures.append(
            domain_vo.ValidationFailure(
                property_name=property_name,
                error_message=error.get("msg") or "Invalid value",
            )
        )
    return failures
