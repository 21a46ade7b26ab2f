"""WebSocket routes."""

from .websocket import websocket_routes

__all__ = [
    "websocket_routes",
]
