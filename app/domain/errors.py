"""
Domain errors.

ConstraintError subclasses ValueError: it describes a violated catalog
constraint, never an infrastructure fault. Storage failures are reported by
adapters as RuntimeError.
"""


class ConstraintError(ValueError):
    """Raised by a repository when a write violates the unique ISBN constraint."""

    def __init__(self, isbn: str) -> None:
        self.isbn = isbn
        super().__init__(f"Book with isbn='{isbn}' already exists")
