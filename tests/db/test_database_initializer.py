"""
Tests for the database bootstrap and the init_db script.
"""
import sqlite3
from datetime import date

from app.domain.entities import Book
from app.infrastructure.db.database_initializer import initialize_database
from app.infrastructure.db.sqlite_book_catalog_repository import SqliteBookCatalogRepository
from scripts.init_db import main as init_db_main


class TestInitializeDatabase:
    """Tests for initialize_database()."""

    def test_creates_file_and_parent_directories(self, tmp_path):
        db_path = tmp_path / "nested" / "dir" / "library.db"

        initialize_database(db_path)

        assert db_path.exists()

    def test_creates_books_table(self, tmp_path):
        db_path = tmp_path / "library.db"

        initialize_database(db_path)

        conn = sqlite3.connect(str(db_path))
        try:
            columns = [row[1] for row in conn.execute("PRAGMA table_info(books)")]
        finally:
            conn.close()
        assert columns == [
            "isbn",
            "title",
            "author",
            "short_description",
            "page_count",
            "release_date",
        ]

    def test_is_idempotent_and_keeps_data(self, tmp_path):
        # Arrange
        db_path = tmp_path / "library.db"
        initialize_database(db_path)
        repo = SqliteBookCatalogRepository(db_path)
        repo.insert(Book(
            isbn="9780137081073",
            title="The Clean Coder",
            author="Robert C. Martin",
            page_count=256,
            release_date=date(2011, 5, 13),
        ))

        # Act
        initialize_database(db_path)

        # Assert
        assert repo.count() == 1


class TestInitDbScript:
    """Tests for scripts/init_db.py."""

    def test_main_returns_book_count(self, tmp_path):
        db_path = tmp_path / "data" / "library.db"

        assert init_db_main(db_path) == 0
        assert db_path.exists()
