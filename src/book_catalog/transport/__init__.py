"""Transport layer.

The catalog protocol is text-in, text-out per message. The WebSocket
transport owns the connection handle and frame filtering so that the
session only ever sees inbound text and sends outbound text.
"""

from .websocket import WebSocketServerTransport

__all__ = [
    "WebSocketServerTransport",
]
