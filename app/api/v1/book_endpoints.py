"""
API endpoints for the book catalog.

This module defines the FastAPI routes for creating, reading, searching,
updating and deleting books. It handles HTTP concerns and delegates to the
catalog service.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from fastapi.responses import JSONResponse

from app.domain.services import CatalogService
from app.domain.value_objects import WriteResult
from app.api.v1 import schemas as api
from app.api.v1.auth import require_api_key
from app.api.v1.converters import (
    api_payload_to_domain,
    domain_book_to_api,
    domain_failures_to_api,
)
from app.api.v1.dependencies import get_catalog_service

router = APIRouter()

VALIDATION_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": List[api.ValidationFailure]},
}


def _bad_request(result: WriteResult) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=domain_failures_to_api(result.failures),
    )


def _not_found(isbn: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Book with isbn '{isbn}' not found",
    )


@router.post(
    "/books",
    response_model=api.Book,
    status_code=status.HTTP_201_CREATED,
    responses=VALIDATION_RESPONSES,
    dependencies=[Depends(require_api_key)],
    name="CreateBook",
)
def create_book(
    payload: api.BookPayload,
    response: Response,
    service: CatalogService = Depends(get_catalog_service),
):
    """
    Add a book to the catalog.

    Returns:
        201 with the created book and a Location header

    Raises:
        400: Validation failure or an ISBN that is already taken
    """
    result = service.create(api_payload_to_domain(payload))
    if not result.is_valid:
        return _bad_request(result)

    response.headers["Location"] = f"/books/{result.book.isbn}"
    return domain_book_to_api(result.book)


@router.get("/books", response_model=List[api.Book], name="GetBooks")
def get_books(
    search_term: Optional[str] = Query(default=None, alias="searchTerm"),
    service: CatalogService = Depends(get_catalog_service),
) -> List[api.Book]:
    """
    List books, optionally filtered by a case-insensitive title substring.

    A missing or blank searchTerm returns the whole catalog.
    """
    if search_term is not None and search_term.strip():
        books = service.search_by_title(search_term)
    else:
        books = service.get_all()

    return [domain_book_to_api(book) for book in books]


@router.get("/books/{isbn}", response_model=api.Book, name="GetBook")
def get_book(
    isbn: str,
    service: CatalogService = Depends(get_catalog_service),
) -> api.Book:
    """
    Get a book by its ISBN-13.

    Raises:
        404: Book not found
    """
    book = service.get_by_isbn(isbn)
    if book is None:
        raise _not_found(isbn)

    return domain_book_to_api(book)


@router.put(
    "/books/{isbn}",
    response_model=api.Book,
    responses=VALIDATION_RESPONSES,
    dependencies=[Depends(require_api_key)],
    name="UpdateBook",
)
def update_book(
    isbn: str,
    payload: api.BookPayload,
    service: CatalogService = Depends(get_catalog_service),
):
    """
    Overwrite a book.

    The isbn in the body identifies the book to overwrite.

    Raises:
        400: Validation failure
        404: Book not found
    """
    book = api_payload_to_domain(payload)
    result = service.update(book)
    if not result.is_valid:
        return _bad_request(result)

    if not result.found:
        raise _not_found(book.isbn)

    return domain_book_to_api(result.book)


@router.delete(
    "/books/{isbn}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    dependencies=[Depends(require_api_key)],
    name="DeleteBook",
)
def delete_book(
    isbn: str,
    service: CatalogService = Depends(get_catalog_service),
) -> Response:
    """
    Delete a book.

    Raises:
        404: Book not found
    """
    if not service.delete(isbn):
        raise _not_found(isbn)

    return Response(status_code=status.HTTP_204_NO_CONTENT)

