"""
Domain entities for the library catalog.

Entities are objects with a unique identity that runs through time and
different representations. A book's identity is its ISBN-13.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class Book:
    """
    Represents a book in the catalog.

    This is the only entity of the domain. Its ISBN-13 is the natural key:
    it identifies the record for its whole lifetime and never changes once
    the book has been created.

    The entity does not validate itself. Candidate books coming from the
    outside world may be invalid and are checked by
    ``app.domain.validation.validate_book`` before any write.
    """

    isbn: str
    """ISBN-13, optionally hyphenated (e.g. '978-0137081073')"""

    title: str
    """Book title"""

    author: str
    """Author name"""

    short_description: str = ""
    """Optional short summary"""

    page_count: int = 0
    """Number of pages"""

    release_date: Optional[date] = None
    """Release date, None when missing or unparseable"""
