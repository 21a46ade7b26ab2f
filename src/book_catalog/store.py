"""Shared in-memory catalog.

One CatalogStore exists per process. Every connection session holds a
reference to it and goes through the async methods below, which are
serialized by a single asyncio.Lock.

Id allocation uses the current maximum live id plus one, so deleting the
highest-numbered book frees its id for the next insert.
"""

from __future__ import annotations

import asyncio
import logging

from .models import Book, BookFields

logger = logging.getLogger(__name__)


class CatalogStore:
    """Mapping of id -> Book behind an exclusive lock.

    Returned books are copies; callers never see the stored instances.
    """

    def __init__(self) -> None:
        self._books: dict[int, Book] = {}
        self._lock = asyncio.Lock()

    async def list(self) -> list[Book]:
        """Snapshot of all books."""
        async with self._lock:
            return [book.model_copy() for book in self._books.values()]

    async def get(self, book_id: int) -> Book | None:
        """Return the book with this id, or None."""
        async with self._lock:
            book = self._books.get(book_id)
            return book.model_copy() if book is not None else None

    async def insert(self, fields: BookFields) -> Book:
        """Store a new book under the next id and return it."""
        async with self._lock:
            book_id = max(self._books, default=0) + 1
            book = Book.from_fields(book_id, fields)
            self._books[book_id] = book
            logger.debug(f"Inserted book {book_id}")
            return book.model_copy()

    async def update(self, book_id: int, fields: BookFields) -> Book | None:
        """Replace the fields of an existing book.

        Returns the updated book, or None if no book has this id. A miss
        never creates an entry.
        """
        async with self._lock:
            if book_id not in self._books:
                return None
            book = Book.from_fields(book_id, fields)
            self._books[book_id] = book
            logger.debug(f"Updated book {book_id}")
            return book.model_copy()

    async def delete(self, book_id: int) -> bool:
        """Remove a book. Returns False if it was not present."""
        async with self._lock:
            if self._books.pop(book_id, None) is None:
                return False
            logger.debug(f"Deleted book {book_id}")
            return True

    async def count(self) -> int:
        """Number of live books."""
        async with self._lock:
            return len(self._books)

    async def clear(self) -> None:
        """Drop every book."""
        async with self._lock:
            self._books.clear()
