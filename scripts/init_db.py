#!/usr/bin/env python3
"""
Database Bootstrap Script.

Creates the catalog database and its books table if they don't exist yet,
then reports how many books the catalog holds.

Usage:
    python -m scripts.init_db --db-path data/library.db
"""

import argparse
import logging
import sys
from pathlib import Path

from app.infrastructure.db.database_initializer import initialize_database
from app.infrastructure.db.sqlite_book_catalog_repository import SqliteBookCatalogRepository

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = Path("data/library.db")


def main(db_path: Path = DEFAULT_DB_PATH) -> int:
    """
    Main entry point for the bootstrap script.

    Args:
        db_path: Path to the SQLite database file

    Returns:
        Number of books in the catalog
    """
    logger.info(f"Initializing catalog database: {db_path}")

    try:
        initialize_database(db_path)
        catalog_repo = SqliteBookCatalogRepository(db_path)
        n_books = catalog_repo.count()
    except RuntimeError as e:
        logger.error(f"Initialization failed: {e}")
        sys.exit(1)

    logger.info(f"Catalog holds {n_books} books")
    return n_books


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create the library catalog database")
    parser.add_argument(
        "--db-path", "-d",
        type=Path,
        default=DEFAULT_DB_PATH,
        help=f"Path to the SQLite database (default: {DEFAULT_DB_PATH})"
    )

    args = parser.parse_args()
    main(args.db_path)
