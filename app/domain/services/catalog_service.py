"""
Domain service for the book catalog.

Orchestrates the validation rules and the catalog repository port into the
catalog use cases: create, read, search, update and delete.

The service depends ONLY on the BookCatalogRepository port. It holds no
state besides that dependency, so a single instance can serve concurrent
requests without locking.
"""

import logging
from typing import List, Optional

from app.domain.entities import Book
from app.domain.errors import ConstraintError
from app.domain.ports import BookCatalogRepository
from app.domain.validation import DUPLICATE_ISBN_MESSAGE, validate_book
from app.domain.value_objects import ValidationFailure, WriteResult

logger = logging.getLogger(__name__)


def _duplicate_isbn() -> WriteResult:
    return WriteResult.rejected([ValidationFailure("isbn", DUPLICATE_ISBN_MESSAGE)])


class CatalogService:
    """
    Use cases of the book catalog.

    Rejected candidates and missing books are expected outcomes: writes
    return a WriteResult, reads return None. Only storage failures
    (RuntimeError from the repository) propagate as exceptions.

    Usage:
        service = CatalogService(catalog_repo=sqlite_repo)
        result = service.create(book)
        if not result.succeeded:
            print(result.failures)
    """

    def __init__(self, catalog_repo: BookCatalogRepository) -> None:
        """
        Initialize the catalog service.

        Args:
            catalog_repo: Repository for persisting books
        """
        self._catalog_repo = catalog_repo

    def create(self, book: Book) -> WriteResult:
        """
        Add a new book to the catalog.

        The existence pre-check gives a fast answer for the common case, but
        it is not atomic with the insert. The repository's unique constraint
        decides concurrent creates for the same isbn; the loser gets the same
        duplicate failure as a pre-check hit.

        Args:
            book: Candidate book

        Returns:
            WriteResult holding the created book unchanged, or the failures
            if the book is invalid or its isbn is taken
        """
        failures = validate_book(book)
        if failures:
            logger.info(f"Rejected book isbn='{book.isbn}': {len(failures)} validation failure(s)")
            return WriteResult.rejected(failures)

        if self._catalog_repo.get_by_isbn(book.isbn) is not None:
            logger.info(f"Rejected duplicate isbn='{book.isbn}'")
            return _duplicate_isbn()

        try:
            self._catalog_repo.insert(book)
        except ConstraintError:
            logger.info(f"Lost concurrent create for isbn='{book.isbn}'")
            return _duplicate_isbn()

        logger.info(f"Created book isbn='{book.isbn}'")
        return WriteResult.written(book)

    def get_by_isbn(self, isbn: str) -> Optional[Book]:
        """Retrieve a book by isbn, None if it does not exist."""
        return self._catalog_repo.get_by_isbn(isbn)

    def get_all(self) -> List[Book]:
        """Retrieve every book in the catalog."""
        return self._catalog_repo.get_all()

    def search_by_title(self, term: str) -> List[Book]:
        """
        Retrieve books whose title contains term, ignoring case.

        The term is always applied as a filter; treating a blank term as
        "list everything" is up to the caller.
        """
        return self._catalog_repo.search_by_title(term)

    def update(self, book: Book) -> WriteResult:
        """
        Overwrite an existing book.

        The book's isbn identifies the record to overwrite.

        Args:
            book: New state of the book

        Returns:
            WriteResult that succeeded if the book was updated, carries the
            failures if the book is invalid, or has found=False if no book
            has that isbn
        """
        failures = validate_book(book)
        if failures:
            logger.info(f"Rejected update for isbn='{book.isbn}': {len(failures)} validation failure(s)")
            return WriteResult.rejected(failures)

        if self._catalog_repo.get_by_isbn(book.isbn) is None:
            logger.debug(f"Update skipped, no book with isbn='{book.isbn}'")
            return WriteResult.not_found()

        if not self._catalog_repo.update(book):
            # deleted between the lookup and the write
            logger.debug(f"Update skipped, isbn='{book.isbn}' disappeared")
            return WriteResult.not_found()

        logger.info(f"Updated book isbn='{book.isbn}'")
        return WriteResult.written(book)

    def delete(self, isbn: str) -> bool:
        """Delete a book. Returns True if it existed."""
        deleted = self._catalog_repo.delete(isbn)
        if deleted:
            logger.info(f"Deleted book isbn='{isbn}'")
        else:
            logger.debug(f"Delete skipped, no book with isbn='{isbn}'")
        return deleted
