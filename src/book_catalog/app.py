"""Book Catalog Server Application.

Creates the Starlette ASGI application. The single CatalogStore for the
process lives on ``app.state.catalog`` and is shared by every
WebSocket session.

Routes:
- /ws - WebSocket catalog protocol
"""

from __future__ import annotations

from starlette.applications import Starlette

from .routes import websocket_routes
from .store import CatalogStore


def create_app(store: CatalogStore | None = None) -> Starlette:
    """Create the catalog application.

    Args:
        store: Catalog to serve. A new empty store is created if omitted.

    Returns:
        Configured Starlette application
    """
    app = Starlette(routes=list(websocket_routes))
    app.state.catalog = store or CatalogStore()
    return app
