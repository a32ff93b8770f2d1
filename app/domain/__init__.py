"""
Domain layer - Core business logic and entities.

This layer contains the business entities, value objects, validation rules,
and defines the ports (interfaces) that the infrastructure layer must
implement.

It has NO dependencies on external frameworks, databases, or APIs.
"""

from .entities import Book
from .errors import ConstraintError
from .value_objects import ValidationFailure, WriteResult

__all__ = [
    # Entities
    "Book",
    # Value Objects
    "ValidationFailure",
    "WriteResult",
    # Errors
    "ConstraintError",
]
