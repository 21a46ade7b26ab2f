"""WebSocket endpoint for the book catalog.

Each connection gets its own CatalogSessionHandler. Handlers share the
process-wide CatalogStore held on the application state and keep no
other per-client state: every message is decoded, dispatched and
answered on its own.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from starlette.routing import WebSocketRoute
from starlette.websockets import WebSocket, WebSocketDisconnect

from ..protocol import ActionDispatcher, CatalogError, decode_request, encode_error, encode_reply
from ..transport.websocket import WebSocketServerTransport

if TYPE_CHECKING:
    from ..store import CatalogStore

logger = logging.getLogger(__name__)


class CatalogSessionHandler:
    """Handles one client connection.

    Lifecycle:
    - Accepts the connection
    - For each inbound text message: decode, dispatch, encode, reply
    - Replies with error text for bad requests and keeps the connection open
    - Closes the socket on disconnect or transport failure
    """

    def __init__(self, websocket: WebSocket, store: CatalogStore):
        self.websocket = websocket
        self.transport = WebSocketServerTransport(websocket)
        self.dispatcher = ActionDispatcher(store)

    @property
    def peer(self) -> str:
        client = self.websocket.client
        return f"{client.host}:{client.port}" if client else "unknown"

    async def handle(self) -> None:
        """Main handler for the WebSocket connection."""
        try:
            await self.transport.connect()
            logger.info(f"Catalog client connected: {self.peer}")

            async for text in self.transport.receive_texts():
                reply = await self.handle_text(text)
                await self.transport.send_text(reply)

        except WebSocketDisconnect:
            logger.info(f"Catalog client disconnected: {self.peer}")
        except Exception as e:
            logger.exception(f"WebSocket error for {self.peer}: {e}")
        finally:
            await self.transport.disconnect()

    async def handle_text(self, text: str) -> str:
        """Produce the reply text for one inbound message."""
        logger.debug(f"Received message: {text}")

        try:
            request = decode_request(text)
        except CatalogError as e:
            logger.warning(f"Rejected message from {self.peer}: {e.detail or e.message}")
            return encode_error(e)

        try:
            reply = await self.dispatcher.dispatch(request)
        except CatalogError as e:
            logger.info(f"{type(request).__name__} failed: {e.detail or e.message}")
            return encode_error(e)

        return encode_reply(reply)


async def websocket_catalog_endpoint(websocket: WebSocket) -> None:
    """WebSocket endpoint for catalog requests.

    URL: /ws

    Protocol:
    1. Client connects; no greeting is sent
    2. Client sends JSON text such as {"action": "get_book", "id": 1}
    3. Server replies once per message with JSON book data, a status
       string ("Book added") or an error string ("Book not found")
    4. Binary frames are ignored
    """
    handler = CatalogSessionHandler(websocket, websocket.app.state.catalog)
    await handler.handle()


# Route definitions
websocket_routes = [
    WebSocketRoute("/ws", websocket_catalog_endpoint),
]
