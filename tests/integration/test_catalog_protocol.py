"""Integration tests for the catalog WebSocket protocol.

Drives the real Starlette application through TestClient WebSocket
connections, covering request/reply behavior end to end:
- Replies for every action
- Error replies and connection survival
- Catalog sharing across connections
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from typing import Any

import pytest
from starlette.testclient import TestClient

from book_catalog.app import create_app
from book_catalog.store import CatalogStore

DUNE = {"title": "Dune", "author": "Herbert", "year": 1965}
EMMA = {"title": "Emma", "author": "Austen", "year": 1815}


@pytest.fixture
def client(store: CatalogStore) -> Iterator[TestClient]:
    """Create test client sharing the given store.

    Used as a context manager so every connection runs on one event loop.
    """
    with TestClient(create_app(store)) as test_client:
        yield test_client


def send(ws: Any, payload: dict | str) -> str:
    """Send one request and return the reply text."""
    ws.send_text(payload if isinstance(payload, str) else json.dumps(payload))
    return ws.receive_text()


# =============================================================================
# Tests: Application
# =============================================================================


class TestApplication:
    """Application factory."""

    def test_default_store_is_created(self):
        app = create_app()

        assert isinstance(app.state.catalog, CatalogStore)

    def test_given_store_is_shared(self, store: CatalogStore):
        assert create_app(store).state.catalog is store


# =============================================================================
# Tests: Scenarios
# =============================================================================


class TestScenarios:
    """Request/reply scenarios on a fresh catalog."""

    def test_empty_catalog_lists_nothing(self, client: TestClient):
        with client.websocket_connect("/ws") as ws:
            assert json.loads(send(ws, {"action": "get_books"})) == []

    def test_add_then_list(self, client: TestClient):
        with client.websocket_connect("/ws") as ws:
            assert send(ws, {"action": "add_book", "book": DUNE}) == "Book added"

            books = json.loads(send(ws, {"action": "get_books"}))

        assert books == [{"id": 1, **DUNE}]

    def test_get_missing_book(self, client: TestClient):
        with client.websocket_connect("/ws") as ws:
            assert send(ws, {"action": "get_book", "id": 99}) == "Book not found"

    def test_malformed_text(self, client: TestClient):
        with client.websocket_connect("/ws") as ws:
            assert send(ws, "{not json") == "Invalid JSON request"

    def test_update_missing_book(self, client: TestClient):
        with client.websocket_connect("/ws") as ws:
            reply = send(ws, {"action": "update_book", "id": 1, "book": DUNE})

            assert reply == "Book not found"
            assert json.loads(send(ws, {"action": "get_books"})) == []

    def test_id_reused_after_delete(self, client: TestClient):
        with client.websocket_connect("/ws") as ws:
            send(ws, {"action": "add_book", "book": DUNE})
            assert send(ws, {"action": "delete_book", "id": 1}) == "Book deleted"
            send(ws, {"action": "add_book", "book": EMMA})

            books = json.loads(send(ws, {"action": "get_books"}))

        assert books == [{"id": 1, **EMMA}]


# =============================================================================
# Tests: Operations
# =============================================================================


class TestOperations:
    """Each action against a populated catalog."""

    def test_get_book_round_trip(self, client: TestClient):
        with client.websocket_connect("/ws") as ws:
            send(ws, {"action": "add_book", "book": DUNE})
            send(ws, {"action": "add_book", "book": EMMA})

            book = json.loads(send(ws, {"action": "get_book", "id": 2}))

        assert book == {"id": 2, **EMMA}

    def test_update_in_place(self, client: TestClient):
        with client.websocket_connect("/ws") as ws:
            send(ws, {"action": "add_book", "book": DUNE})

            reply = send(
                ws,
                {"action": "update_book", "id": 1, "book": {**EMMA, "id": 7}},
            )
            assert reply == "Book updated"

            books = json.loads(send(ws, {"action": "get_books"}))

        assert books == [{"id": 1, **EMMA}]

    def test_delete_is_final(self, client: TestClient):
        with client.websocket_connect("/ws") as ws:
            send(ws, {"action": "add_book", "book": DUNE})
            send(ws, {"action": "delete_book", "id": 1})

            assert send(ws, {"action": "get_book", "id": 1}) == "Book not found"
            assert send(ws, {"action": "update_book", "id": 1, "book": DUNE}) == "Book not found"
            assert send(ws, {"action": "delete_book", "id": 1}) == "Book not found"

    def test_non_ascii_titles(self, client: TestClient):
        book = {"title": "Война и мир", "author": "Толстой", "year": 1869}

        with client.websocket_connect("/ws") as ws:
            send(ws, {"action": "add_book", "book": book})
            reply = send(ws, {"action": "get_book", "id": 1})

        assert "Война и мир" in reply
        assert json.loads(reply) == {"id": 1, **book}


# =============================================================================
# Tests: Errors
# =============================================================================


class TestErrors:
    """Error replies never close the connection."""

    @pytest.mark.parametrize(
        ("payload", "expected"),
        [
            ({"action": "get_book"}, "Invalid request"),
            ({"action": "delete_book"}, "Invalid request"),
            ({"action": "add_book"}, "Invalid request"),
            ({"action": "update_book", "id": 1}, "Invalid request"),
            ({"action": "update_book", "book": DUNE}, "Invalid request"),
            ({"action": "lend_book", "id": 1}, "Unknown action"),
            ({"action": "get_book", "id": "one"}, "Invalid JSON request"),
            ({"action": "add_book", "book": {"title": "Dune"}}, "Invalid JSON request"),
            ({"book": DUNE}, "Invalid JSON request"),
        ],
    )
    def test_error_reply(self, client: TestClient, payload: dict, expected: str):
        with client.websocket_connect("/ws") as ws:
            assert send(ws, payload) == expected
            assert send(ws, {"action": "get_books"}) == "[]"

    def test_binary_frames_are_ignored(self, client: TestClient):
        with client.websocket_connect("/ws") as ws:
            ws.send_bytes(json.dumps({"action": "add_book", "book": DUNE}).encode())

            # The next reply belongs to this request, not the binary frame
            assert send(ws, {"action": "get_books"}) == "[]"


# =============================================================================
# Tests: Shared catalog
# =============================================================================


class TestSharedCatalog:
    """All connections see one catalog."""

    def test_changes_visible_across_connections(self, client: TestClient):
        with client.websocket_connect("/ws") as writer, client.websocket_connect("/ws") as reader:
            send(writer, {"action": "add_book", "book": DUNE})

            assert json.loads(send(reader, {"action": "get_book", "id": 1})) == {"id": 1, **DUNE}

            send(reader, {"action": "delete_book", "id": 1})

            assert send(writer, {"action": "get_book", "id": 1}) == "Book not found"

    def test_catalog_survives_reconnect(self, client: TestClient):
        with client.websocket_connect("/ws") as ws:
            send(ws, {"action": "add_book", "book": DUNE})

        with client.websocket_connect("/ws") as ws:
            books = json.loads(send(ws, {"action": "get_books"}))

        assert books == [{"id": 1, **DUNE}]

    def test_interleaved_adds_get_distinct_ids(self, client: TestClient):
        with client.websocket_connect("/ws") as first, client.websocket_connect("/ws") as second:
            for _ in range(5):
                send(first, {"action": "add_book", "book": DUNE})
                send(second, {"action": "add_book", "book": EMMA})

            books = json.loads(send(first, {"action": "get_books"}))

        ids = [book["id"] for book in books]
        assert sorted(ids) == list(range(1, 11))
