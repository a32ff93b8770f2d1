"""
Value objects for the domain layer.

Value objects are immutable objects that represent descriptive aspects
of the domain with no conceptual identity.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .entities import Book


@dataclass(frozen=True)
class ValidationFailure:
    """
    A single field-scoped rejection of a candidate book.

    property_name uses the public (JSON) name of the field so the failure
    can be handed to API clients verbatim.
    """

    property_name: str
    """Field the failure refers to (e.g. 'isbn', 'pageCount')"""

    error_message: str
    """Human-readable reason"""

    def __post_init__(self) -> None:
        """Validate failure data."""
        if not self.property_name:
            raise ValueError("property_name cannot be empty")

        if not self.error_message:
            raise ValueError("error_message cannot be empty")


@dataclass(frozen=True)
class WriteResult:
    """
    Outcome of a create or update.

    Rejections and missing books are expected outcomes, so they are values
    rather than exceptions. Exactly one of these holds:
    - succeeded: the book was written and is returned unchanged
    - failures is non-empty: the candidate was rejected, nothing was written
    - found is False: no book has that isbn, nothing was written
    """

    book: Optional[Book] = None
    """The written book, None unless the write succeeded"""

    failures: Tuple[ValidationFailure, ...] = ()
    """Every reason the candidate was rejected, in evaluation order"""

    found: bool = True
    """False when the target book does not exist"""

    @property
    def is_valid(self) -> bool:
        return not self.failures

    @property
    def succeeded(self) -> bool:
        return self.book is not None

    @classmethod
    def written(cls, book: Book) -> "WriteResult":
        return cls(book=book)

    @classmethod
    def rejected(cls, failures: Iterable[ValidationFailure]) -> "WriteResult":
        failures = tuple(failures)
        if not failures:
            raise ValueError("A rejected write requires at least one failure")
        return cls(failures=failures)

    @classmethod
    def not_found(cls) -> "WriteResult":
        return cls(found=False)
