"""WebSocket transport implementation.

Server side of a single WebSocket connection. Inbound text frames are
yielded to the caller; binary frames are dropped without a reply.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator

from starlette.websockets import WebSocket, WebSocketState

logger = logging.getLogger(__name__)


class WebSocketServerTransport:
    """Server-side WebSocket transport.

    Handles a single WebSocket connection for request/reply traffic.
    Sends are serialized so that concurrent writers never interleave
    frames.
    """

    def __init__(self, websocket: WebSocket):
        self._websocket = websocket
        self._connected = False
        self._send_lock = asyncio.Lock()

    @property
    def is_connected(self) -> bool:
        """Check if the WebSocket is connected."""
        return self._connected and self._websocket.client_state == WebSocketState.CONNECTED

    async def connect(self) -> None:
        """Accept the WebSocket connection."""
        await self._websocket.accept()
        self._connected = True

    async def disconnect(self) -> None:
        """Close the WebSocket connection."""
        self._connected = False
        if self._websocket.client_state == WebSocketState.CONNECTED:
            await self._websocket.close()

    async def send_text(self, text: str) -> None:
        """Send a text frame."""
        async with self._send_lock:
            if self.is_connected:
                await self._websocket.send_text(text)

    async def receive_texts(self) -> AsyncIterator[str]:
        """Receive text frames from the client until it disconnects."""
        while self.is_connected:
            message = await self._websocket.receive()

            if message["type"] == "websocket.disconnect":
                logger.debug(f"Client closed connection (code={message.get('code')})")
                self._connected = False
                return

            text = message.get("text")
            if text is None:
                logger.debug("Ignoring non-text WebSocket frame")
                continue

            yield text
