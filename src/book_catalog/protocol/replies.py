"""Successful reply definitions.

Errors are not replies; they travel as CatalogError exceptions and are
encoded separately.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..models import Book

BOOK_ADDED = "Book added"
BOOK_UPDATED = "Book updated"
BOOK_DELETED = "Book deleted"


@dataclass(frozen=True)
class BookList:
    """Reply to get_books, encoded as a JSON array."""

    books: list[Book] = field(default_factory=list)


@dataclass(frozen=True)
class SingleBook:
    """Reply to get_book, encoded as a JSON object."""

    book: Book


@dataclass(frozen=True)
class Status:
    """Plain-text status reply for mutations."""

    message: str


Reply = BookList | SingleBook | Status
