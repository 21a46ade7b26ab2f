"""Async client for the book catalog WebSocket protocol.

Replies on the wire carry no correlation id, so the client keeps at most
one request in flight per connection. A request that is cancelled or fails
before its reply arrives closes the connection, so a late reply can never
be read as the answer to a later request.

Usage:
    async with CatalogClient("ws://127.0.0.1:8080/ws") as client:
        await client.add_book("Dune", "Herbert", 1965)
        books = await client.get_books()
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import websockets
from websockets.exceptions import ConnectionClosed
from websockets.protocol import State

from .models import Book, BookFields
from .protocol.errors import BookNotFound, InvalidJson, InvalidRequest, UnknownAction
from .protocol.requests import Action

logger = logging.getLogger(__name__)

DEFAULT_URL = "ws://127.0.0.1:8080/ws"

ERROR_MESSAGES = frozenset(
    error.message for error in (InvalidJson, UnknownAction, InvalidRequest, BookNotFound)
)


class CatalogRequestError(Exception):
    """The server answered a request with an error message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CatalogClient:
    """Client-side connection to a catalog server."""

    def __init__(self, url: str = DEFAULT_URL):
        self.url = url
        self._websocket: Any = None  # websockets ClientConnection
        self._request_lock = asyncio.Lock()

    @property
    def is_connected(self) -> bool:
        return self._websocket is not None and self._websocket.state is State.OPEN

    async def connect(self) -> None:
        """Open the WebSocket connection."""
        self._websocket = await websockets.connect(self.url)
        logger.debug(f"Connected to {self.url}")

    async def disconnect(self) -> None:
        """Close the WebSocket connection."""
        if self._websocket is not None:
            await self._websocket.close()
            self._websocket = None

    async def __aenter__(self) -> CatalogClient:
        await self.connect()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.disconnect()

    async def request(
        self,
        action: Action | str,
        book_id: int | None = None,
        book: BookFields | None = None,
    ) -> str:
        """Send one request and return the raw reply text.

        Raises:
            ConnectionError: Not connected, or the connection closed mid-request
            CatalogRequestError: Server replied with an error message
        """
        payload: dict[str, Any] = {
            "action": action.value if isinstance(action, Action) else action,
        }
        if book_id is not None:
            payload["id"] = book_id
        if book is not None:
            payload["book"] = book.model_dump()

        async with self._request_lock:
            if not self.is_connected:
                self._websocket = None
                raise ConnectionError("Not connected")

            try:
                await self._websocket.send(json.dumps(payload, ensure_ascii=False))
                reply = await self._websocket.recv()
            except ConnectionClosed as e:
                self._websocket = None
                raise ConnectionError(f"Connection closed: {e}") from e
            except BaseException:
                # An unanswered request would pair its reply with the next one
                await self.disconnect()
                raise

        if isinstance(reply, bytes):
            reply = reply.decode("utf-8")
        if reply in ERROR_MESSAGES:
            raise CatalogRequestError(reply)
        return reply

    async def get_books(self) -> list[Book]:
        reply = await self.request(Action.GET_BOOKS)
        return [Book.model_validate(item) for item in json.loads(reply)]

    async def get_book(self, book_id: int) -> Book:
        reply = await self.request(Action.GET_BOOK, book_id=book_id)
        return Book.model_validate(json.loads(reply))

    async def add_book(self, title: str, author: str, year: int) -> str:
        fields = BookFields(title=title, author=author, year=year)
        return await self.request(Action.ADD_BOOK, book=fields)

    async def update_book(self, book_id: int, title: str, author: str, year: int) -> str:
        fields = BookFields(title=title, author=author, year=year)
        return await self.request(Action.UPDATE_BOOK, book_id=book_id, book=fields)

    async def delete_book(self, book_id: int) -> str:
        return await self.request(Action.DELETE_BOOK, book_id=book_id)
