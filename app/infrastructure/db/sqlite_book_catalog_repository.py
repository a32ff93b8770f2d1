"""
SQLite implementation of the BookCatalogRepository port.

This adapter persists Book entities to a SQLite database, handling
serialization/deserialization and enforcing the unique constraint on isbn
through the table's primary key.
"""

import logging
import sqlite3
from contextlib import closing, contextmanager
from datetime import date
from pathlib import Path
from typing import Iterator, List, Optional

from app.domain.entities import Book
from app.domain.errors import ConstraintError
from app.domain.ports import BookCatalogRepository

logger = logging.getLogger(__name__)


def _casefold(value: Optional[str]) -> Optional[str]:
    return value.casefold() if value is not None else None


class SqliteBookCatalogRepository(BookCatalogRepository):
    """
    Every operation opens its own connection and closes it before returning,
    so an instance can be shared between threads.

    The books table must exist already (see database_initializer).
    """

    def __init__(self, db_path: Path) -> None:
        """
        Initialize the repository with a database path
        """
        self._db_path = Path(db_path)

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        """
        Open a connection for one operation.

        Commits on success, rolls back on error, and always closes.
        sqlite3.Error other than integrity violations is reported as
        RuntimeError.
        """
        try:
            with closing(sqlite3.connect(str(self._db_path))) as conn:
                conn.row_factory = sqlite3.Row # Needed to access by name column and not a number
                # SQLite's LIKE and lower() only fold ASCII
                conn.create_function("casefold", 1, _casefold, deterministic=True)
                with conn:
                    yield conn
        except sqlite3.IntegrityError:
            raise
        except sqlite3.Error as e:
            logger.error(f"Database error on {self._db_path}: {e}")
            raise RuntimeError(f"Database error: {e}") from e

    def _book_to_row(self, book: Book) -> dict:
        """Convert a Book entity to a database row dict."""
        return {
            "isbn": book.isbn,
            "title": book.title,
            "author": book.author,
            "short_description": book.short_description or "",
            "page_count": book.page_count,
            "release_date": book.release_date.isoformat(),
        }

    def _row_to_book(self, row: sqlite3.Row) -> Book:
        """Convert a database row to a Book entity."""
        return Book(
            isbn=row["isbn"],
            title=row["title"],
            author=row["author"],
            short_description=row["short_description"],
            page_count=row["page_count"],
            release_date=date.fromisoformat(row["release_date"]),
        )

    def count(self) -> int:
        """Get the total number of books in the catalog."""
        with self._connect() as conn:
            result = conn.execute("SELECT COUNT(*) as cnt FROM books").fetchone()
            return result["cnt"]

    def get_by_isbn(self, isbn: str) -> Optional[Book]:
        """Retrieve a book by its ISBN-13."""
        with self._connect() as conn:
            row = conn.execute(
                "SELECT * FROM books WHERE isbn = ? LIMIT 1",
                (isbn,)
            ).fetchone()

            if row is None:
                return None

            return self._row_to_book(row)

    def get_all(self) -> List[Book]:
        """Retrieve all books from the catalog."""
        with self._connect() as conn:
            rows = conn.execute("SELECT * FROM books ORDER BY isbn").fetchall()
            return [self._row_to_book(row) for row in rows]

    def search_by_title(self, term: str) -> List[Book]:
        """Retrieve books whose title contains term, ignoring case."""
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT * FROM books WHERE instr(casefold(title), casefold(?)) > 0 ORDER BY isbn",
                (term,)
            ).fetchall()
            return [self._row_to_book(row) for row in rows]

    def insert(self, book: Book) -> None:
        """Insert a new book, failing if the isbn is taken."""
        row = self._book_to_row(book)

        try:
            with self._connect() as conn:
                conn.execute("""
                    INSERT INTO books
                    (isbn, title, author, short_description, page_count, release_date)
                    VALUES
                    (:isbn, :title, :author, :short_description, :page_count, :release_date)
                """, row)
        except sqlite3.IntegrityError as e:
            raise ConstraintError(book.isbn) from e

    def update(self, book: Book) -> bool:
        """Overwrite the non-key fields of a book. Returns True if matched."""
        row = self._book_to_row(book)

        try:
            with self._connect() as conn:
                cursor = conn.execute("""
                    UPDATE books SET
                        title = :title,
                        author = :author,
                        short_description = :short_description,
                        page_count = :page_count,
                        release_date = :release_date
                    WHERE isbn = :isbn
                """, row)
                return cursor.rowcount > 0
        except sqlite3.IntegrityError as e:
            raise RuntimeError(f"Book violates catalog constraints: {e}") from e

    def delete(self, isbn: str) -> bool:
        """Delete a book from the catalog. Returns True if deleted."""
        with self._connect() as conn:
            cursor = conn.execute(
                "DELETE FROM books WHERE isbn = ?",
                (isbn,)
            )
            return cursor.rowcount > 0
