"""Action Dispatcher - executes one decoded request against the catalog.

Transport-agnostic: the WebSocket session decodes, hands the request
here, and encodes whatever comes back. Each request maps to exactly one
store call; the store's lock is held only for that call.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .errors import BookNotFound
from .replies import BOOK_ADDED, BOOK_DELETED, BOOK_UPDATED, BookList, Reply, SingleBook, Status
from .requests import AddBook, DeleteBook, GetBook, GetBooks, Request, UpdateBook

if TYPE_CHECKING:
    from ..store import CatalogStore

logger = logging.getLogger(__name__)


class ActionDispatcher:
    """Maps requests to catalog operations.

    Usage:
        dispatcher = ActionDispatcher(store)
        reply = await dispatcher.dispatch(GetBook(book_id=1))

    Raises BookNotFound when a request references a missing id.
    """

    def __init__(self, store: CatalogStore) -> None:
        self._store = store

    async def dispatch(self, request: Request) -> Reply:
        """Execute a request and return its reply."""
        logger.debug(f"Dispatching {type(request).__name__}")

        match request:
            case GetBooks():
                return BookList(books=await self._store.list())

            case GetBook(book_id=book_id):
                book = await self._store.get(book_id)
                if book is None:
                    raise BookNotFound(f"No book with id {book_id}")
                return SingleBook(book=book)

            case AddBook(fields=fields):
                book = await self._store.insert(fields)
                logger.info(f"Book {book.id} added")
                return Status(BOOK_ADDED)

            case UpdateBook(book_id=book_id, fields=fields):
                if await self._store.update(book_id, fields) is None:
                    raise BookNotFound(f"No book with id {book_id}")
                logger.info(f"Book {book_id} updated")
                return Status(BOOK_UPDATED)

            case DeleteBook(book_id=book_id):
                if not await self._store.delete(book_id):
                    raise BookNotFound(f"No book with id {book_id}")
                logger.info(f"Book {book_id} deleted")
                return Status(BOOK_DELETED)

            case _:
                raise TypeError(f"Unsupported request: {type(request).__name__}")
