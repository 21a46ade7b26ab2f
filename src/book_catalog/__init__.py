"""Book Catalog - in-memory book catalog served over WebSocket.

Clients hold one long-lived WebSocket connection at /ws and send JSON
requests such as {"action": "get_book", "id": 1}. Each request gets
exactly one text reply on the same connection.
"""

__version__ = "0.1.0"
