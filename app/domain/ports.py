"""
Port interfaces (protocols) for the domain layer.

Ports define the contracts between the domain and infrastructure layers.
They are implemented by adapters in the infrastructure layer, allowing
the domain to remain independent of technical details.

Following Hexagonal Architecture principles, the domain layer depends only
on these abstract protocols, never on concrete implementations.
"""

from typing import List, Optional, Protocol

from .entities import Book


class BookCatalogRepository(Protocol):
    """
    Port for persisting and retrieving books from the catalog.

    The catalog is a single table keyed by ISBN-13. Implementations should
    handle:
    - The unique constraint on isbn, enforced atomically by the store
    - One connection per operation, released on every exit path
    - Reporting storage failures as RuntimeError
    """

    def insert(self, book: Book) -> None:
        """
        Insert a new book.

        Args:
            book: The book entity to persist

        Raises:
            ConstraintError: If a book with the same isbn already exists
            RuntimeError: If a database error occurs
        """
        ...

    def get_by_isbn(self, isbn: str) -> Optional[Book]:
        """
        Retrieve a book by its ISBN-13.

        Args:
            isbn: The exact isbn the book was stored under

        Returns:
            The Book entity if found, None otherwise
        """
        ...

    def get_all(self) -> List[Book]:
        """
        Retrieve all books from the catalog.

        Returns:
            List of all books, empty if the catalog is empty
        """
        ...

    def search_by_title(self, term: str) -> List[Book]:
        """
        Retrieve books whose title contains a term, ignoring case.

        Args:
            term: Substring to look for. Matched literally, no wildcards.

        Returns:
            List of matching books, possibly empty
        """
        ...

    def update(self, book: Book) -> bool:
        """
        Overwrite every non-key field of the book stored under book.isbn.

        Args:
            book: The new state of the book

        Returns:
            True if a row was matched, False otherwise
        """
        ...

    def delete(self, isbn: str) -> bool:
        """
        Delete a book from the catalog.

        Args:
            isbn: ISBN-13 of the book to delete

        Returns:
            True if the book was deleted, False if not found
        """
        ...

    def count(self) -> int:
        """
        Get the total number of books in the catalog.

        Returns:
            Total book count
        """
        ...
