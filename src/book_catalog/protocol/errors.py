"""Error taxonomy for the catalog protocol.

Every error is recovered per message: the session replies with the
error's ``message`` text and the connection stays open.
"""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for errors reported to the client."""

    message = "Catalog error"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.message)
        self.detail = detail

    def __str__(self) -> str:
        return self.message


class InvalidJson(CatalogError):
    """Inbound text is not a well-formed request."""

    message = "Invalid JSON request"


class UnknownAction(InvalidJson):
    """Well-formed request whose action tag is not recognized."""

    message = "Unknown action"


class InvalidRequest(CatalogError):
    """Request is missing a field its action requires."""

    message = "Invalid request"


class BookNotFound(CatalogError):
    """Referenced book id is not in the catalog."""

    message = "Book not found"
