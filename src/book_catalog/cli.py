"""Book Catalog CLI.

Usage:
    book-catalog                         # Serve on 127.0.0.1:8080
    book-catalog --host 0.0.0.0          # Bind all interfaces
    book-catalog --port 9000             # Custom port
    book-catalog --reload                # Auto-reload for development
"""

from __future__ import annotations

import click

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080


@click.command()
@click.option("--host", default=DEFAULT_HOST, show_default=True, help="Host to bind to")
@click.option("--port", default=DEFAULT_PORT, show_default=True, type=int, help="Port to bind to")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
def main(host: str, port: int, reload: bool) -> None:
    """Book Catalog - in-memory book catalog over WebSocket.

    Clients connect to ws://HOST:PORT/ws and exchange JSON requests.
    """
    import uvicorn

    click.echo(f"Starting book catalog on ws://{host}:{port}/ws", err=True)
    click.echo("Press Ctrl+C to stop", err=True)

    uvicorn.run(
        "book_catalog.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


if __name__ == "__main__":
    main()
