"""
Database bootstrap for the SQLite catalog.

Creates the books table when it does not exist yet. Safe to run on every
startup; the repository assumes the table is there.
"""

import logging
import sqlite3
from contextlib import closing
from pathlib import Path

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS books (
    isbn TEXT PRIMARY KEY,
    title TEXT NOT NULL,
    author TEXT NOT NULL,
    short_description TEXT NOT NULL DEFAULT '',
    page_count INTEGER NOT NULL,
    release_date TEXT NOT NULL
)
"""


def initialize_database(db_path: Path) -> None:
    """
    Create the database file and the books table if they don't exist.

    Args:
        db_path: Path to the SQLite database file

    Raises:
        RuntimeError: If the schema cannot be created
    """
    db_path = Path(db_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    try:
        with closing(sqlite3.connect(str(db_path))) as conn:
            with conn:
                conn.execute(SCHEMA)
    except sqlite3.Error as e:
        raise RuntimeError(f"Database error while creating schema: {e}") from e

    logger.info(f"Catalog database ready at {db_path}")
