"""
API schemas for the book endpoints.

Request bodies are deliberately lenient (plain strings for the date, no
format rules): format checks belong to the domain validator so that every
rejection comes back in the same 400 failure-list shape.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model exposing camelCase JSON while keeping snake_case attributes."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# request body of post/put /books
class BookPayload(CamelModel):
    """
    Request body for POST /books and PUT /books/{isbn}.
    """
    isbn: str = Field(default="", description="ISBN-13, optionally hyphenated")
    title: str = Field(default="", description="Book title")
    author: str = Field(default="", description="Author name")
    short_description: str = Field(default="", description="Optional short summary")
    page_count: int = Field(default=0, description="Number of pages")
    release_date: str | None = Field(default=None, description="Release date (YYYY-MM-DD)")


class Book(CamelModel):
    """
    API representation of a Book entity.

    Maps from the domain Book entity for API responses.
    """

    isbn: str = Field(description="ISBN-13, the book's unique identifier")
    title: str = Field(description="Book title")
    author: str = Field(description="Author name")
    short_description: str = Field(default="", description="Optional short summary")
    page_count: int = Field(description="Number of pages")
    release_date: date = Field(description="Release date")


class ValidationFailure(CamelModel):
    """
    A single entry of a 400 response body.
    """
    property_name: str = Field(description="Field the failure refers to")
    error_message: str = Field(description="Why the value was rejected")
